"""Interactive shock absorber window.

The matplotlib timer behind FuncAnimation is the periodic tick source: every
frame advances the session by one tick, then redraws the schematic and the
plot from the session's read-only outputs.
"""
from __future__ import annotations

import logging

import matplotlib.pyplot as plt
from matplotlib.animation import FuncAnimation
from matplotlib.widgets import Button, RadioButtons

from shock_absorber.simulation.session import ShockAbsorberSession
from shock_absorber.types.simulation import DampingRegime
from shock_absorber.viz.figures import draw_schematic, plot_history
from shock_absorber.viz.labels import REGIME_DESCRIPTIONS, REGIME_LABELS, regime_from_label

logger = logging.getLogger(__name__)


class ShockAbsorberAnimation:
    """Schematic, plot, regime selector and bump button bound to one session."""

    def __init__(
        self,
        session: ShockAbsorberSession,
        scale: float = 100.0,
        spring_segments: int = 8,
    ) -> None:
        self.session = session
        self.scale = scale
        self.spring_segments = spring_segments
        self.animation: FuncAnimation | None = None

        self.fig = plt.figure(figsize=(8, 8))
        self.fig.suptitle("Automotive Shock Absorber: Damped Harmonic Motion", fontweight="bold")
        self.ax_schematic = self.fig.add_axes([0.05, 0.58, 0.9, 0.32])
        self.ax_plot = self.fig.add_axes([0.1, 0.3, 0.85, 0.22])
        self.ax_plot.set_title("Position vs. Time Graph", fontsize=11)

        labels = [REGIME_LABELS[r] for r in DampingRegime]
        active = list(DampingRegime).index(session.regime)
        self.selector = RadioButtons(
            self.fig.add_axes([0.05, 0.04, 0.35, 0.16]), labels, active=active
        )
        self.selector.on_clicked(self._on_select)

        self.bump_button = Button(self.fig.add_axes([0.55, 0.08, 0.4, 0.08]), "Hit a Bump!")
        self.bump_button.on_clicked(self._on_bump)

        self.description = self.fig.text(
            0.5, 0.22, REGIME_DESCRIPTIONS[session.regime],
            ha="center", fontsize=9, wrap=True,
        )
        self.draw()

    def _on_select(self, label: str) -> None:
        regime = regime_from_label(label)
        logger.info(f"Regime selected: {regime.value}")
        self.session.select_regime(regime)
        self.description.set_text(REGIME_DESCRIPTIONS[regime])

    def _on_bump(self, event) -> None:
        self.session.trigger_bump()

    def draw(self) -> None:
        """Redraw both panels from the session's current outputs."""
        self.ax_schematic.clear()
        draw_schematic(
            self.ax_schematic, self.session.current_position(), segments=self.spring_segments,
        )
        self.ax_plot.clear()
        plot_history(self.ax_plot, self.session.history_snapshot(), scale=self.scale)
        self.ax_plot.set_xlim(0, self.session.history.capacity)

    def update(self, frame: int) -> list:
        """One tick followed by a redraw; FuncAnimation's frame callback."""
        self.session.tick()
        self.draw()
        return []

    def start(self) -> FuncAnimation:
        interval_ms = self.session.config.dt * 1000.0
        self.animation = FuncAnimation(
            self.fig, self.update, interval=interval_ms, blit=False, cache_frame_data=False,
        )
        return self.animation

    def show(self) -> None:
        self.start()
        plt.show()
