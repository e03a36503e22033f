"""Configuration loading and validation."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field

from shock_absorber.types.simulation import DampingRegime, PhysicalConstants, SimulationConfig

# Default config directory relative to package root
_PACKAGE_ROOT = Path(__file__).resolve().parent.parent.parent.parent
_CONFIGS_DIR = _PACKAGE_ROOT / "configs"


class SimulationSection(BaseModel):
    """Physics and session defaults."""

    mass: float = Field(default=1.0, gt=0.0)
    spring_constant: float = Field(default=20.0, gt=0.0)
    time_step: float = Field(default=0.016, gt=0.0)
    regime: DampingRegime = DampingRegime.CRITICALLY_DAMPED
    initial_displacement: float = -80.0
    history_capacity: int = Field(default=300, gt=0)
    n_steps: int = Field(default=500, ge=0)


class DisplaySection(BaseModel):
    """Renderer defaults."""

    plot_scale: float = Field(default=100.0, gt=0.0)
    spring_segments: int = Field(default=8, gt=0)
    figure_dpi: int = 150


class ShockAbsorberConfig(BaseModel):
    """Top-level configuration."""

    output_dir: str = "output"
    log_level: str = "INFO"
    simulation: SimulationSection = Field(default_factory=SimulationSection)
    display: DisplaySection = Field(default_factory=DisplaySection)


def load_config(path: str | Path | None = None) -> ShockAbsorberConfig:
    """Load config from a YAML file.

    Falls back to configs/default.yaml if no path is given.
    """
    if path is None:
        path = _CONFIGS_DIR / "default.yaml"
    path = Path(path)

    if not path.exists():
        return ShockAbsorberConfig()

    with open(path) as f:
        raw: dict[str, Any] = yaml.safe_load(f) or {}

    return ShockAbsorberConfig(**raw)


def build_simulation_config(
    config: ShockAbsorberConfig | None = None, **overrides: Any
) -> SimulationConfig:
    """Turn the simulation section into a SimulationConfig.

    Keyword overrides replace individual simulation fields (e.g. regime).
    """
    if config is None:
        config = ShockAbsorberConfig()
    sim = SimulationSection(**{**config.simulation.model_dump(), **overrides})

    return SimulationConfig(
        constants=PhysicalConstants(
            mass=sim.mass,
            spring_constant=sim.spring_constant,
            time_step=sim.time_step,
        ),
        regime=sim.regime,
        initial_displacement=sim.initial_displacement,
        history_capacity=sim.history_capacity,
        n_steps=sim.n_steps,
    )
