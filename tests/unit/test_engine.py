"""Tests for the oscillator engine."""
from __future__ import annotations

import numpy as np
import pytest

from shock_absorber.analysis.response import count_sign_changes, extrema_magnitudes
from shock_absorber.simulation.engine import OscillatorEngine
from shock_absorber.simulation.history import HistoryBuffer
from shock_absorber.types.simulation import DampingRegime, PhysicalConstants, SimulationConfig


class TestOscillatorEngine:
    """State handling and the integration step."""

    def _make_engine(self, regime=DampingRegime.CRITICALLY_DAMPED, **kwargs) -> OscillatorEngine:
        return OscillatorEngine(SimulationConfig(regime=regime, **kwargs))

    def _positions(self, engine: OscillatorEngine, n_steps: int) -> np.ndarray:
        return np.array([engine.step() for _ in range(n_steps)])

    def test_starts_at_rest(self):
        engine = self._make_engine()
        assert engine.position == 0.0
        assert engine.velocity == 0.0
        assert np.isclose(engine.damping_coefficient, 2 * np.sqrt(20.0))

    def test_step_at_rest_stays_at_rest(self):
        engine = self._make_engine()
        for _ in range(10):
            assert engine.step() == 0.0

    def test_bump_resets_state(self):
        engine = self._make_engine()
        engine.bump(-80.0)
        for _ in range(25):
            engine.step()
        engine.bump(-80.0)
        assert engine.position == -80.0
        assert engine.velocity == 0.0

    def test_bump_is_idempotent(self):
        engine = self._make_engine()
        engine.bump(-80.0)
        first = self._positions(engine, 50)
        engine.bump(-80.0)
        engine.bump(-80.0)
        second = self._positions(engine, 50)
        np.testing.assert_array_equal(first, second)

    def test_bump_clears_attached_history(self):
        history = HistoryBuffer()
        engine = OscillatorEngine(SimulationConfig(), history=history)
        for value in range(10):
            history.push(value)
        engine.bump(-80.0)
        assert len(history) == 0

    def test_set_regime_keeps_motion(self):
        engine = self._make_engine(DampingRegime.UNDERDAMPED)
        engine.bump(-80.0)
        for _ in range(10):
            engine.step()
        x, v = engine.position, engine.velocity
        engine.set_regime(DampingRegime.OVERDAMPED)
        assert engine.position == x
        assert engine.velocity == v
        assert np.isclose(engine.damping_coefficient, 4 * np.sqrt(20.0))

    def test_bump_recomputes_coefficient(self):
        engine = self._make_engine(DampingRegime.UNDERDAMPED)
        engine.state.damping_coefficient = 123.0
        engine.bump(-80.0)
        assert np.isclose(engine.damping_coefficient, 0.3 * 2 * np.sqrt(20.0))

    def test_first_step_matches_hand_computation(self):
        """k=20, m=1, dt=0.016 from x=-80 at rest: v=25.6, x=-79.5904."""
        engine = self._make_engine(DampingRegime.CRITICALLY_DAMPED)
        engine.bump(-80.0)
        x = engine.step()
        assert engine.velocity == pytest.approx(25.6)
        assert x == pytest.approx(-79.5904)
        assert engine.position == x

    def test_velocity_updated_before_position(self):
        """Position moves with the new velocity, not the old one (which was zero)."""
        engine = self._make_engine()
        engine.bump(-80.0)
        engine.step()
        assert engine.position != -80.0

    def test_observe(self):
        engine = self._make_engine()
        engine.bump(-80.0)
        obs = engine.observe()
        assert obs.shape == (2,)
        np.testing.assert_allclose(obs, [-80.0, 0.0])

    def test_step_count(self):
        engine = self._make_engine()
        engine.bump(-80.0)
        self._positions(engine, 7)
        assert engine.step_count == 7
        engine.bump(-80.0)
        assert engine.step_count == 0


class TestDampingBehaviour:
    """Qualitative response of each regime after a bump."""

    def _run(self, regime: DampingRegime, n_steps: int) -> np.ndarray:
        engine = OscillatorEngine(SimulationConfig(regime=regime))
        engine.bump(-80.0)
        return np.array([engine.step() for _ in range(n_steps)])

    def test_underdamped_extrema_shrink(self):
        positions = self._run(DampingRegime.UNDERDAMPED, 600)
        mags = extrema_magnitudes(positions, floor=1e-9)
        assert len(mags) >= 4
        assert np.all(np.diff(mags) < 0)

    def test_underdamped_oscillates(self):
        positions = self._run(DampingRegime.UNDERDAMPED, 600)
        assert count_sign_changes(positions) >= 3

    @pytest.mark.parametrize(
        "regime", [DampingRegime.CRITICALLY_DAMPED, DampingRegime.OVERDAMPED]
    )
    def test_no_oscillation(self, regime):
        positions = self._run(regime, 500)
        assert count_sign_changes(positions) <= 1

    @pytest.mark.parametrize(
        "regime", [DampingRegime.CRITICALLY_DAMPED, DampingRegime.OVERDAMPED]
    )
    def test_converges_within_500_steps(self, regime):
        positions = self._run(regime, 500)
        assert abs(positions[-1]) < 1.0

    def test_critical_settles_faster_than_overdamped(self):
        critical = np.abs(self._run(DampingRegime.CRITICALLY_DAMPED, 150))
        over = np.abs(self._run(DampingRegime.OVERDAMPED, 150))
        assert critical[-1] < over[-1]

    def test_deterministic(self):
        a = self._run(DampingRegime.UNDERDAMPED, 300)
        b = self._run(DampingRegime.UNDERDAMPED, 300)
        np.testing.assert_array_equal(a, b)

    def test_energy_dissipates(self):
        engine = OscillatorEngine(SimulationConfig(regime=DampingRegime.UNDERDAMPED))
        engine.bump(-80.0)
        e0 = engine.total_energy()
        for _ in range(300):
            engine.step()
        assert engine.total_energy() < 0.01 * e0


class TestDerivedQuantities:
    def test_frequencies(self):
        engine = OscillatorEngine(SimulationConfig(regime=DampingRegime.UNDERDAMPED))
        assert np.isclose(engine.omega_0, np.sqrt(20.0))
        assert np.isclose(engine.zeta, 0.3)
        assert np.isclose(engine.omega_d, np.sqrt(20.0) * np.sqrt(1 - 0.09))
        assert np.isfinite(engine.period)

    @pytest.mark.parametrize(
        "regime,zeta",
        [(DampingRegime.CRITICALLY_DAMPED, 1.0), (DampingRegime.OVERDAMPED, 2.0)],
    )
    def test_non_oscillatory_period(self, regime, zeta):
        engine = OscillatorEngine(SimulationConfig(regime=regime))
        assert np.isclose(engine.zeta, zeta)
        assert engine.omega_d == 0.0
        assert engine.period == float("inf")

    def test_total_energy_of_state(self):
        engine = OscillatorEngine(SimulationConfig())
        assert engine.total_energy(np.array([-80.0, 0.0])) == pytest.approx(64000.0)

    @pytest.mark.parametrize("regime", list(DampingRegime))
    def test_analytical_initial_condition(self, regime):
        engine = OscillatorEngine(SimulationConfig(regime=regime))
        engine.bump(-80.0)
        x, v = engine.analytical_solution(0.0)
        assert x == pytest.approx(-80.0)
        assert v == pytest.approx(0.0, abs=1e-9)

    @pytest.mark.parametrize("regime", list(DampingRegime))
    def test_small_step_tracks_analytical(self, regime):
        """With a fine time step the Euler trajectory follows the exact solution."""
        dt = 1e-4
        config = SimulationConfig(
            regime=regime, constants=PhysicalConstants(time_step=dt)
        )
        engine = OscillatorEngine(config)
        engine.bump(-80.0)
        for n in range(1, 5001):
            x = engine.step()
            if n % 1000 == 0:
                x_exact, _ = engine.analytical_solution(n * dt)
                assert abs(x - x_exact) < 0.5, f"t={n * dt}: {x} vs {x_exact}"


class TestRun:
    def test_trajectory_shapes(self):
        engine = OscillatorEngine(SimulationConfig(n_steps=120))
        traj = engine.run()
        assert traj.n_steps == 121
        assert traj.positions.shape == (121,)
        assert traj.velocities.shape == (121,)
        assert traj.timestamps[0] == 0.0
        assert traj.timestamps[-1] == pytest.approx(120 * 0.016)

    def test_trajectory_starts_from_bump(self):
        engine = OscillatorEngine(SimulationConfig(initial_displacement=-40.0))
        traj = engine.run(10)
        assert traj.positions[0] == -40.0
        assert traj.velocities[0] == 0.0
        assert traj.initial_displacement == -40.0

    def test_trajectory_records_regime(self):
        engine = OscillatorEngine(SimulationConfig(regime=DampingRegime.OVERDAMPED))
        traj = engine.run(5)
        assert traj.regime == DampingRegime.OVERDAMPED
        assert np.isclose(traj.damping_coefficient, 4 * np.sqrt(20.0))

    def test_run_matches_stepping(self):
        engine = OscillatorEngine(SimulationConfig(regime=DampingRegime.UNDERDAMPED))
        traj = engine.run(50)
        engine.bump(-80.0)
        stepped = [engine.step() for _ in range(50)]
        np.testing.assert_array_equal(traj.positions[1:], stepped)
