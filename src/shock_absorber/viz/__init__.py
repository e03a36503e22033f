"""Presentation layer: schematic drawing, plots and the interactive window."""

from __future__ import annotations

from shock_absorber.viz.figures import (
    draw_schematic,
    plot_history,
    plot_regime_comparison,
    setup_paper_style,
)
from shock_absorber.viz.labels import REGIME_DESCRIPTIONS, REGIME_LABELS

__all__ = [
    "setup_paper_style",
    "draw_schematic",
    "plot_history",
    "plot_regime_comparison",
    "REGIME_LABELS",
    "REGIME_DESCRIPTIONS",
]
