"""Host-facing session wiring the oscillator engine to its history buffer."""

from __future__ import annotations

import logging

from shock_absorber.simulation.engine import OscillatorEngine
from shock_absorber.simulation.history import HistoryBuffer, HistoryView
from shock_absorber.types.simulation import DampingRegime, SimulationConfig

logger = logging.getLogger(__name__)


class ShockAbsorberSession:
    """One simulation session: the single writer of engine state and history.

    Inbound: select_regime, trigger_bump, tick.
    Outbound: current_position, history_snapshot.
    A session starts at rest with an empty history; nothing moves until the
    first bump.
    """

    def __init__(self, config: SimulationConfig | None = None) -> None:
        self.config = config or SimulationConfig()
        self.history = HistoryBuffer(self.config.history_capacity)
        self.engine = OscillatorEngine(self.config, history=self.history)

    @property
    def regime(self) -> DampingRegime:
        return self.engine.regime

    def select_regime(self, regime: DampingRegime) -> None:
        """Switch regime and restart the run from a fresh bump."""
        self.engine.set_regime(regime)
        self.trigger_bump()

    def trigger_bump(self) -> None:
        self.engine.bump(self.config.initial_displacement)
        logger.debug(f"Session restarted in {self.engine.regime.value} regime")

    def tick(self) -> float:
        """Advance one step and record the new position."""
        position = self.engine.step()
        self.history.push(position)
        return position

    def run(self, n_ticks: int) -> float:
        """Drive n_ticks ticks back to back and return the final position."""
        for _ in range(n_ticks):
            self.tick()
        return self.engine.position

    def current_position(self) -> float:
        return self.engine.position

    def history_snapshot(self) -> HistoryView:
        return self.history.snapshot()
