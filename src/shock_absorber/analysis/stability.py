"""Linear stability of the fixed-step update.

One step maps [x, v] to M @ [x, v] with

    M = [[1 - dt^2*k/m,  dt*(1 - dt*b/m)],
         [-dt*k/m,       1 - dt*b/m     ]]

The scheme is stable when the spectral radius of M is at most 1. That holds
for the default constants in every regime but not for arbitrary combinations
of damping and time step.
"""
from __future__ import annotations

import logging

import numpy as np

from shock_absorber.types.simulation import PhysicalConstants

logger = logging.getLogger(__name__)

_RADIUS_TOLERANCE = 1e-9


def update_matrix(
    constants: PhysicalConstants, damping: float, time_step: float | None = None
) -> np.ndarray:
    """Matrix of one integration step acting on [x, v]."""
    dt = constants.time_step if time_step is None else time_step
    m = constants.mass
    k = constants.spring_constant
    keep_v = 1.0 - dt * damping / m
    return np.array([
        [1.0 - dt**2 * k / m, dt * keep_v],
        [-dt * k / m, keep_v],
    ])


def spectral_radius(matrix: np.ndarray) -> float:
    return float(np.max(np.abs(np.linalg.eigvals(matrix))))


def is_stable(
    constants: PhysicalConstants, damping: float, time_step: float | None = None
) -> bool:
    """Whether repeated steps stay bounded for any initial condition."""
    radius = spectral_radius(update_matrix(constants, damping, time_step))
    return radius <= 1.0 + _RADIUS_TOLERANCE


def is_oscillatory(
    constants: PhysicalConstants, damping: float, time_step: float | None = None
) -> bool:
    """Whether the discrete update has complex eigenvalues (ringing around equilibrium)."""
    eig = np.linalg.eigvals(update_matrix(constants, damping, time_step))
    return bool(np.any(np.abs(eig.imag) > 1e-12))


def max_stable_time_step(
    constants: PhysicalConstants,
    damping: float,
    upper: float = 1.0,
    tol: float = 1e-6,
) -> float:
    """Largest time step in (0, upper] for which the update stays stable.

    Bisection on the spectral radius; returns upper if the whole interval is stable.
    """
    if upper <= 0:
        raise ValueError(f"upper must be positive, got {upper}")
    if is_stable(constants, damping, upper):
        return upper

    lo, hi = 0.0, upper
    while hi - lo > tol:
        mid = 0.5 * (lo + hi)
        if is_stable(constants, damping, mid):
            lo = mid
        else:
            hi = mid
    logger.debug(f"Stability limit for b={damping:.4f}: dt <= {lo:.6f}")
    return lo
