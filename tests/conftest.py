"""Shared test fixtures for the shock absorber simulator."""

import pytest

from shock_absorber.simulation.session import ShockAbsorberSession
from shock_absorber.types.simulation import DampingRegime, SimulationConfig


@pytest.fixture
def tmp_output_dir(tmp_path):
    """Temporary directory for test outputs."""
    out = tmp_path / "output"
    out.mkdir()
    return out


@pytest.fixture
def make_session():
    """Factory for a bumped session in a given regime."""

    def _make(regime: DampingRegime = DampingRegime.CRITICALLY_DAMPED, **kwargs):
        session = ShockAbsorberSession(SimulationConfig(regime=regime, **kwargs))
        session.trigger_bump()
        return session

    return _make
