"""Human-readable regime text for the presentation layer."""

from __future__ import annotations

from shock_absorber.types.simulation import DampingRegime

REGIME_LABELS: dict[DampingRegime, str] = {
    DampingRegime.UNDERDAMPED: "Underdamped",
    DampingRegime.CRITICALLY_DAMPED: "Critically Damped",
    DampingRegime.OVERDAMPED: "Overdamped",
}

REGIME_DESCRIPTIONS: dict[DampingRegime, str] = {
    DampingRegime.UNDERDAMPED: (
        "Bouncy: The system oscillates with decreasing amplitude before settling. "
        "Common in worn-out shocks."
    ),
    DampingRegime.CRITICALLY_DAMPED: (
        "Ideal: Returns to equilibrium as quickly as possible without oscillation. "
        "The goal for automotive shocks."
    ),
    DampingRegime.OVERDAMPED: (
        "Slow: Returns to equilibrium very slowly without oscillating. "
        "Can feel stiff and unresponsive."
    ),
}

REGIME_COLORS: dict[DampingRegime, str] = {
    DampingRegime.UNDERDAMPED: "#d62728",
    DampingRegime.CRITICALLY_DAMPED: "#1f77b4",
    DampingRegime.OVERDAMPED: "#2ca02c",
}


def regime_from_label(label: str) -> DampingRegime:
    """Inverse of REGIME_LABELS, also accepting enum values like 'overdamped'."""
    for regime, text in REGIME_LABELS.items():
        if label == text:
            return regime
    return DampingRegime(label)
