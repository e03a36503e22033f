"""Physical constants, damping regimes, oscillator state and run configuration."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class DampingRegime(str, Enum):
    UNDERDAMPED = "underdamped"
    CRITICALLY_DAMPED = "critically_damped"
    OVERDAMPED = "overdamped"


class PhysicalConstants(BaseModel):
    """Mass, spring stiffness and integration step. Fixed for a session."""

    model_config = ConfigDict(frozen=True)

    mass: float = Field(default=1.0, gt=0.0)
    spring_constant: float = Field(default=20.0, gt=0.0)
    time_step: float = Field(default=0.016, gt=0.0)


class OscillatorState(BaseModel):
    """Mutable physical state of the car body.

    position is displacement from equilibrium; negative values are above
    equilibrium in the rendering convention (a bump of -80 lifts the body).
    """

    position: float = 0.0
    velocity: float = 0.0
    damping_coefficient: float = 0.0


class SimulationConfig(BaseModel):
    """Configuration for instantiating and running a shock absorber session."""

    constants: PhysicalConstants = Field(default_factory=PhysicalConstants)
    regime: DampingRegime = DampingRegime.CRITICALLY_DAMPED
    initial_displacement: float = -80.0
    history_capacity: int = Field(default=300, gt=0)
    n_steps: int = Field(default=500, ge=0)

    @property
    def dt(self) -> float:
        return self.constants.time_step
