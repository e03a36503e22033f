"""Core data types for the shock absorber simulator."""

from shock_absorber.types.simulation import (
    DampingRegime,
    OscillatorState,
    PhysicalConstants,
    SimulationConfig,
)
from shock_absorber.types.trajectory import TrajectoryData
from shock_absorber.types.validation import CheckResult, ValidationReport

__all__ = [
    # simulation
    "DampingRegime",
    "PhysicalConstants",
    "OscillatorState",
    "SimulationConfig",
    # trajectory
    "TrajectoryData",
    # validation
    "CheckResult",
    "ValidationReport",
]
