"""Physical plausibility checks for damped trajectories."""

from __future__ import annotations

import numpy as np

from shock_absorber.analysis.response import count_sign_changes, extrema_magnitudes
from shock_absorber.types.simulation import DampingRegime
from shock_absorber.types.trajectory import TrajectoryData
from shock_absorber.types.validation import CheckResult, ValidationReport


def check_amplitude_decay(positions: np.ndarray, floor: float = 1e-9) -> CheckResult:
    """Check that successive extrema shrink in magnitude (damped, not growing).

    Args:
        positions: 1-D displacement sequence.
        floor: Extrema at or below this magnitude are ignored.
    """
    mags = extrema_magnitudes(positions, floor=floor)
    if len(mags) < 2:
        return CheckResult(
            name="amplitude_decay",
            passed=True,
            value=float(len(mags)),
            message="Fewer than two extrema; nothing to compare.",
        )

    ratios = mags[1:] / mags[:-1]
    worst = float(np.max(ratios))
    return CheckResult(
        name="amplitude_decay",
        passed=bool(worst < 1.0),
        value=worst,
        threshold=1.0,
        message=f"{len(mags)} extrema, max successive ratio {worst:.4f}",
    )


def check_no_oscillation(positions: np.ndarray, max_crossings: int = 1) -> CheckResult:
    """Check that the trajectory crosses equilibrium at most max_crossings times."""
    crossings = count_sign_changes(positions)
    return CheckResult(
        name="no_oscillation",
        passed=crossings <= max_crossings,
        value=float(crossings),
        threshold=float(max_crossings),
        message=f"{crossings} zero crossings",
    )


def check_convergence(
    positions: np.ndarray, tolerance: float = 1.0, within: int | None = None
) -> CheckResult:
    """Check that |x| is below tolerance by sample index `within` (default: last sample)."""
    x = np.asarray(positions, dtype=np.float64)
    if within is None:
        within = len(x) - 1
    within = min(within, len(x) - 1)
    value = float(abs(x[within]))
    return CheckResult(
        name="convergence",
        passed=value < tolerance,
        value=value,
        threshold=tolerance,
        message=f"|x| = {value:.4e} at sample {within}",
    )


def check_energy_dissipation(
    kinetic: np.ndarray, potential: np.ndarray, tolerance: float = 1e-9
) -> CheckResult:
    """Check that total energy (KE + PE) ends no higher than it started.

    Args:
        kinetic: Kinetic energy at each timestep.
        potential: Potential energy at each timestep.
        tolerance: Allowed relative growth.
    """
    total = kinetic + potential
    if total[0] == 0:
        growth = float(np.abs(total[-1]))
    else:
        growth = float((total[-1] - total[0]) / abs(total[0]))

    return CheckResult(
        name="energy_dissipation",
        passed=bool(growth <= tolerance),
        value=growth,
        threshold=tolerance,
        message=f"Relative energy change: {growth:.2e}",
    )


def check_displacement_bound(positions: np.ndarray, initial_displacement: float) -> CheckResult:
    """Check that the body never travels farther from equilibrium than the bump put it.

    A passive spring/damper only dissipates, so |x| after a bump from rest can
    never exceed |initial_displacement|.
    """
    bound = abs(initial_displacement)
    peak = float(np.max(np.abs(positions)))

    return CheckResult(
        name="displacement_bound",
        passed=peak <= bound,
        value=peak,
        threshold=bound,
        message=f"Peak |x| = {peak:.4f}, bump displacement {bound:.4f}",
    )


def validate_trajectory(traj: TrajectoryData, tolerance: float = 1.0) -> ValidationReport:
    """Run the checks that apply to the trajectory's damping regime."""
    if traj.positions is None or traj.velocities is None:
        raise ValueError("Trajectory has no recorded states")

    x = traj.positions
    v = traj.velocities
    m = traj.constants.mass
    k = traj.constants.spring_constant
    checks = [
        check_displacement_bound(x, traj.initial_displacement),
        check_energy_dissipation(0.5 * m * v**2, 0.5 * k * x**2),
    ]
    if traj.regime == DampingRegime.UNDERDAMPED:
        checks.append(check_amplitude_decay(x))
    else:
        checks.append(check_no_oscillation(x))
        checks.append(check_convergence(x, tolerance=tolerance))

    return ValidationReport(regime=traj.regime.value, checks=checks)
