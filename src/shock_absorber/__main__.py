"""CLI entry point for shock-absorber.

Usage:
    shock-absorber run [regime] [n_steps]   Headless bump response with checks
    shock-absorber regimes                  List damping regimes and coefficients
    shock-absorber stability                Largest stable time step per regime
    shock-absorber plot [output]            Save a regime comparison figure
    shock-absorber animate [regime]         Open the interactive window
    shock-absorber version                  Show version

Regimes: underdamped, critically_damped, overdamped
"""
from __future__ import annotations

import logging
import sys

from shock_absorber.utils.config import build_simulation_config, load_config


def main() -> None:
    """Main CLI entry point."""
    if len(sys.argv) < 2:
        print(__doc__)
        sys.exit(0)

    command = sys.argv[1].lower()
    args = sys.argv[2:]

    try:
        if command == "run":
            _run_simulation(args)
        elif command == "regimes":
            _list_regimes()
        elif command == "stability":
            _run_stability()
        elif command == "plot":
            _run_plot(args)
        elif command == "animate":
            _run_animation(args)
        elif command in ("version", "--version", "-v"):
            from shock_absorber import __version__
            print(f"shock-absorber {__version__}")
        elif command in ("help", "--help", "-h"):
            print(__doc__)
        else:
            print(f"Unknown command: {command}")
            print(__doc__)
            sys.exit(1)
    except ValueError as e:
        print(f"Error: {e}")
        sys.exit(1)


def _setup_logging(level: str) -> None:
    logging.basicConfig(level=level, format="%(asctime)s [%(levelname)s] %(message)s")


def _run_simulation(args: list[str]) -> None:
    """Bump once, run headless, print response metrics and checks."""
    from shock_absorber.analysis.response import summarize_response
    from shock_absorber.simulation.engine import OscillatorEngine
    from shock_absorber.verification.dissipation import validate_trajectory

    config = load_config()
    _setup_logging(config.log_level)

    overrides = {}
    if len(args) > 0:
        overrides["regime"] = args[0]
    if len(args) > 1:
        overrides["n_steps"] = int(args[1])
    sim_config = build_simulation_config(config, **overrides)

    traj = OscillatorEngine(sim_config).run()
    summary = summarize_response(traj)
    report = validate_trajectory(traj)

    print(f"\nRegime: {summary['regime']} (zeta={summary['zeta']:.2f}, "
          f"b={summary['damping_coefficient']:.4f})")
    print(f"Steps: {summary['n_steps'] - 1}, final position: {summary['final_position']:.6f}")
    print(f"Zero crossings: {summary['sign_changes']}, overshoot: {summary['overshoot']:.1%}")
    if summary["settling_time"] is None:
        print("Did not settle within |x| < 1.0")
    else:
        print(f"Settling time (|x| < 1.0): {summary['settling_time']:.3f} s")

    print("\nChecks:")
    for check in report.checks:
        status = "PASS" if check.passed else "FAIL"
        print(f"  [{status}] {check.name}: {check.message}")


def _list_regimes() -> None:
    """Print each regime with its coefficient and description."""
    from shock_absorber.simulation.damping import REGIME_MULTIPLIERS, damping_coefficient
    from shock_absorber.viz.labels import REGIME_DESCRIPTIONS, REGIME_LABELS

    sim_config = build_simulation_config(load_config())
    constants = sim_config.constants
    print(f"mass={constants.mass}, spring_constant={constants.spring_constant}")
    for regime, multiplier in REGIME_MULTIPLIERS.items():
        b = damping_coefficient(regime, constants)
        print(f"\n{REGIME_LABELS[regime]} ({regime.value}): b = {multiplier} x critical = {b:.4f}")
        print(f"  {REGIME_DESCRIPTIONS[regime]}")


def _run_stability() -> None:
    """Print the largest stable time step for each regime."""
    from shock_absorber.analysis.stability import is_stable, max_stable_time_step
    from shock_absorber.simulation.damping import damping_coefficient
    from shock_absorber.types.simulation import DampingRegime

    constants = build_simulation_config(load_config()).constants
    print(f"Configured time step: {constants.time_step}")
    for regime in DampingRegime:
        b = damping_coefficient(regime, constants)
        limit = max_stable_time_step(constants, b)
        status = "stable" if is_stable(constants, b) else "UNSTABLE"
        print(f"  {regime.value}: dt <= {limit:.5f} ({status} at configured step)")


def _run_plot(args: list[str]) -> None:
    """Save the regime comparison figure."""
    from pathlib import Path

    import matplotlib
    matplotlib.use("Agg")

    from shock_absorber.viz.figures import plot_regime_comparison, setup_paper_style

    config = load_config()
    _setup_logging(config.log_level)
    output = Path(args[0]) if args else Path(config.output_dir) / "regime_comparison.png"
    output.parent.mkdir(parents=True, exist_ok=True)

    setup_paper_style()
    fig = plot_regime_comparison(build_simulation_config(config), scale=config.display.plot_scale)
    fig.savefig(output, dpi=config.display.figure_dpi)
    logging.getLogger(__name__).info(f"Saved {output}")
    print(f"Figure saved to: {output}")


def _run_animation(args: list[str]) -> None:
    """Open the interactive window."""
    from shock_absorber.simulation.session import ShockAbsorberSession
    from shock_absorber.viz.animation import ShockAbsorberAnimation

    config = load_config()
    _setup_logging(config.log_level)
    overrides = {"regime": args[0]} if args else {}
    session = ShockAbsorberSession(build_simulation_config(config, **overrides))
    session.trigger_bump()
    ShockAbsorberAnimation(
        session,
        scale=config.display.plot_scale,
        spring_segments=config.display.spring_segments,
    ).show()


if __name__ == "__main__":
    main()
