"""Damping regime parameterization.

The damping coefficient b is a fixed multiple of the critical value
b_c = 2*sqrt(m*k), the threshold between oscillatory and non-oscillatory decay:
- Underdamped:       b = 0.3 * b_c
- Critically damped: b = 1.0 * b_c
- Overdamped:        b = 2.0 * b_c
"""
from __future__ import annotations

import numpy as np

from shock_absorber.types.simulation import DampingRegime, PhysicalConstants

REGIME_MULTIPLIERS: dict[DampingRegime, float] = {
    DampingRegime.UNDERDAMPED: 0.3,
    DampingRegime.CRITICALLY_DAMPED: 1.0,
    DampingRegime.OVERDAMPED: 2.0,
}


def critical_damping(mass: float, spring_constant: float) -> float:
    """Critical damping coefficient 2*sqrt(m*k)."""
    return float(2.0 * np.sqrt(mass * spring_constant))


def damping_coefficient(regime: DampingRegime, constants: PhysicalConstants) -> float:
    """Damping coefficient for a regime under the given constants."""
    return critical_damping(constants.mass, constants.spring_constant) * REGIME_MULTIPLIERS[regime]
