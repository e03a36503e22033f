"""Matplotlib drawing for the car schematic and the position-vs-time plot."""

from __future__ import annotations

from collections.abc import Sequence

import matplotlib.pyplot as plt
import numpy as np
from matplotlib.patches import Circle, FancyBboxPatch

from shock_absorber.simulation.session import ShockAbsorberSession
from shock_absorber.types.simulation import DampingRegime, SimulationConfig
from shock_absorber.viz.labels import REGIME_COLORS, REGIME_LABELS

# Schematic geometry in canvas units (y grows downward, like a screen)
CANVAS_WIDTH = 400.0
CANVAS_HEIGHT = 150.0
CAR_WIDTH = 120.0
CAR_HEIGHT = 40.0
WHEEL_RADIUS = 15.0
GROUND_MARGIN = 20.0
SUSPENSION_LENGTH = 50.0
SPRING_AMPLITUDE = 10.0


def setup_paper_style() -> None:
    """Configure matplotlib for clean figures."""
    plt.rcParams.update({
        "font.family": "serif",
        "font.size": 11,
        "axes.titlesize": 13,
        "axes.labelsize": 12,
        "xtick.labelsize": 10,
        "ytick.labelsize": 10,
        "legend.fontsize": 10,
        "figure.figsize": (8, 5),
        "figure.dpi": 150,
        "savefig.dpi": 300,
        "savefig.bbox": "tight",
        "axes.grid": True,
        "grid.alpha": 0.3,
        "axes.spines.top": False,
        "axes.spines.right": False,
    })


def equilibrium_y(height: float = CANVAS_HEIGHT) -> float:
    """Canvas y of the car body's top edge at rest."""
    ground_y = height - GROUND_MARGIN
    return ground_y - WHEEL_RADIUS * 2 - SUSPENSION_LENGTH


def spring_points(
    top_y: float, bottom_y: float, center_x: float, segments: int = 8
) -> tuple[np.ndarray, np.ndarray]:
    """Zigzag polyline from the car body down to the wheel hub."""
    span = bottom_y - top_y
    xs = [center_x]
    ys = [top_y]
    for i in range(1, segments + 1):
        ys.append(top_y + i * span / (segments + 1))
        xs.append(center_x + (-SPRING_AMPLITUDE if i % 2 == 0 else SPRING_AMPLITUDE))
    xs.append(center_x)
    ys.append(bottom_y)
    return np.array(xs), np.array(ys)


def draw_schematic(
    ax: plt.Axes,
    position: float,
    width: float = CANVAS_WIDTH,
    height: float = CANVAS_HEIGHT,
    segments: int = 8,
) -> FancyBboxPatch:
    """Draw ground, wheel, spring and car body displaced by `position`.

    Returns the car body patch.
    """
    center_x = width / 2
    ground_y = height - GROUND_MARGIN
    car_y = equilibrium_y(height) + position
    hub_y = ground_y - WHEEL_RADIUS

    ax.plot([0, width], [ground_y, ground_y], color="gray", linewidth=2)
    ax.add_patch(Circle((center_x, hub_y), WHEEL_RADIUS, color="black"))

    xs, ys = spring_points(car_y + CAR_HEIGHT, hub_y, center_x, segments)
    ax.plot(xs, ys, color="gray", linewidth=3)

    car = FancyBboxPatch(
        (center_x - CAR_WIDTH / 2, car_y), CAR_WIDTH, CAR_HEIGHT,
        boxstyle="round,pad=0,rounding_size=5", color="red",
    )
    ax.add_patch(car)

    ax.set_xlim(0, width)
    ax.set_ylim(height, min(0.0, car_y) - 10)
    ax.set_aspect("equal")
    ax.axis("off")
    return car


def plot_history(
    ax: plt.Axes,
    history: Sequence[float],
    scale: float = 100.0,
    color: str = "blue",
    label: str | None = None,
) -> plt.Line2D | None:
    """Plot displacement samples oldest-first, scaled so `scale` fills half the height."""
    ax.axhline(0.0, color="gray", alpha=0.5, linewidth=1, linestyle="--")
    ax.set_ylim(-1.05, 1.05)
    ax.set_xlabel("Sample")
    ax.set_ylabel(f"Displacement / {scale:g}")
    if len(history) == 0:
        return None
    values = np.fromiter(history, dtype=np.float64, count=len(history)) / scale
    (line,) = ax.plot(np.arange(len(values)), values, color=color, linewidth=2, label=label)
    return line


def plot_regime_comparison(
    config: SimulationConfig | None = None,
    n_ticks: int | None = None,
    scale: float = 100.0,
    ax: plt.Axes | None = None,
) -> plt.Figure:
    """Overlay the bump response of every damping regime."""
    if config is None:
        config = SimulationConfig()
    if n_ticks is None:
        n_ticks = config.history_capacity

    if ax is None:
        fig, ax = plt.subplots(figsize=(10, 5))
    else:
        fig = ax.figure

    for regime in DampingRegime:
        session = ShockAbsorberSession(config.model_copy(update={"regime": regime}))
        session.trigger_bump()
        session.run(n_ticks)
        plot_history(
            ax, session.history_snapshot(), scale=scale,
            color=REGIME_COLORS[regime], label=REGIME_LABELS[regime],
        )

    ax.set_title("Position vs. Time After a Bump")
    ax.legend(loc="upper right")
    fig.tight_layout()
    return fig
