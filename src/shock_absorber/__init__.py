"""Shock absorber: an educational damped harmonic oscillator simulator."""

__version__ = "0.1.0"

from shock_absorber.simulation.session import ShockAbsorberSession
from shock_absorber.types.simulation import DampingRegime, PhysicalConstants, SimulationConfig

__all__ = [
    "ShockAbsorberSession",
    "DampingRegime",
    "PhysicalConstants",
    "SimulationConfig",
    "__version__",
]
