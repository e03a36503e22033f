"""Step-response metrics for displacement sequences.

All functions take a 1-D sequence of positions sampled at a fixed time step
and return plain Python values so they can be printed or asserted on directly.
"""
from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Any

import numpy as np

from shock_absorber.types.trajectory import TrajectoryData

logger = logging.getLogger(__name__)


def find_local_extrema(positions: Sequence[float] | np.ndarray) -> np.ndarray:
    """Indices of interior samples where the slope changes sign (peaks and troughs)."""
    x = np.asarray(positions, dtype=np.float64)
    if len(x) < 3:
        return np.array([], dtype=int)
    d = np.diff(x)
    turning = d[:-1] * d[1:] < 0
    return np.nonzero(turning)[0] + 1


def extrema_magnitudes(
    positions: Sequence[float] | np.ndarray, floor: float = 0.0
) -> np.ndarray:
    """|x| at each local extremum, skipping extrema at or below floor."""
    x = np.asarray(positions, dtype=np.float64)
    mags = np.abs(x[find_local_extrema(x)])
    return mags[mags > floor]


def count_sign_changes(positions: Sequence[float] | np.ndarray) -> int:
    """Number of strict sign changes, ignoring exact zeros."""
    signs = np.sign(np.asarray(positions, dtype=np.float64))
    signs = signs[signs != 0]
    if len(signs) < 2:
        return 0
    return int(np.count_nonzero(signs[1:] != signs[:-1]))


def settling_step(
    positions: Sequence[float] | np.ndarray, tolerance: float = 1.0
) -> int | None:
    """First index from which |x| stays below tolerance, or None if it never settles."""
    x = np.abs(np.asarray(positions, dtype=np.float64))
    outside = np.nonzero(x >= tolerance)[0]
    if len(outside) == 0:
        return 0
    last = int(outside[-1])
    if last == len(x) - 1:
        return None
    return last + 1


def overshoot(positions: Sequence[float] | np.ndarray, initial: float) -> float:
    """Largest excursion past equilibrium on the far side, as a fraction of |initial|."""
    if initial == 0:
        return 0.0
    x = np.asarray(positions, dtype=np.float64)
    far_side = -np.sign(initial) * x
    peak = float(np.max(far_side, initial=0.0))
    return peak / abs(initial)


def summarize_response(traj: TrajectoryData, tolerance: float = 1.0) -> dict[str, Any]:
    """Collect the response metrics of a recorded run."""
    if traj.positions is None:
        raise ValueError("Trajectory has no recorded positions")

    x = traj.positions
    dt = traj.constants.time_step
    critical = 2.0 * np.sqrt(traj.constants.mass * traj.constants.spring_constant)
    settle = settling_step(x, tolerance)

    summary = {
        "regime": traj.regime.value,
        "damping_coefficient": traj.damping_coefficient,
        "zeta": float(traj.damping_coefficient / critical),
        "n_steps": traj.n_steps,
        "final_position": float(x[-1]),
        "n_extrema": int(len(find_local_extrema(x))),
        "sign_changes": count_sign_changes(x),
        "overshoot": overshoot(x, traj.initial_displacement),
        "settling_step": settle,
        "settling_time": None if settle is None else settle * dt,
    }
    logger.info(
        f"{summary['regime']}: zeta={summary['zeta']:.2f}, "
        f"sign changes={summary['sign_changes']}, settling step={settle}"
    )
    return summary
