"""Shock absorber oscillator engine.

Governing equation: m*a + b*v + k*x = 0, advanced with explicit Euler at a
fixed time step. The velocity is updated first and the position then moves
with the new velocity; reordering these changes every trajectory.

Derived quantities:
- Natural frequency: omega_0 = sqrt(k/m)
- Damping ratio: zeta = b / (2*sqrt(k*m))
- Damped frequency: omega_d = omega_0 * sqrt(1 - zeta^2) for zeta < 1
"""
from __future__ import annotations

import logging

import numpy as np

from shock_absorber.simulation.base import SimulationEnvironment
from shock_absorber.simulation.damping import critical_damping, damping_coefficient
from shock_absorber.simulation.history import HistoryBuffer
from shock_absorber.types.simulation import DampingRegime, OscillatorState, SimulationConfig
from shock_absorber.types.trajectory import TrajectoryData

logger = logging.getLogger(__name__)


class OscillatorEngine(SimulationEnvironment):
    """Car body on a spring/damper: state [x, v] plus damping coefficient b.

    The engine starts at rest at equilibrium. A bump is the only way to
    re-initialize the motion; changing the regime only swaps the coefficient.
    If a history buffer is attached, bump() clears it.
    """

    def __init__(
        self,
        config: SimulationConfig | None = None,
        history: HistoryBuffer | None = None,
    ) -> None:
        super().__init__(config or SimulationConfig())
        self.constants = self.config.constants
        self.regime = self.config.regime
        self.history = history
        self.state = OscillatorState(
            damping_coefficient=damping_coefficient(self.regime, self.constants),
        )
        self._initial_displacement = 0.0

    @property
    def position(self) -> float:
        return self.state.position

    @property
    def velocity(self) -> float:
        return self.state.velocity

    @property
    def damping_coefficient(self) -> float:
        return self.state.damping_coefficient

    @property
    def critical_damping(self) -> float:
        return critical_damping(self.constants.mass, self.constants.spring_constant)

    @property
    def omega_0(self) -> float:
        """Natural frequency."""
        return float(np.sqrt(self.constants.spring_constant / self.constants.mass))

    @property
    def zeta(self) -> float:
        """Damping ratio."""
        return self.state.damping_coefficient / self.critical_damping

    @property
    def omega_d(self) -> float:
        """Damped natural frequency."""
        z = self.zeta
        if z >= 1.0:
            return 0.0  # No oscillation
        return float(self.omega_0 * np.sqrt(1 - z**2))

    @property
    def period(self) -> float:
        """Period of damped oscillation."""
        wd = self.omega_d
        if wd == 0:
            return float("inf")
        return float(2 * np.pi / wd)

    def set_regime(self, regime: DampingRegime) -> None:
        """Select a damping regime and recompute b. Position and velocity are untouched."""
        self.regime = DampingRegime(regime)
        self.state.damping_coefficient = damping_coefficient(self.regime, self.constants)
        logger.debug(
            f"Regime set to {self.regime.value}: b={self.state.damping_coefficient:.4f}"
        )

    def bump(self, initial_displacement: float) -> None:
        """Restart the motion from rest at the given displacement."""
        self.state.position = float(initial_displacement)
        self.state.velocity = 0.0
        self.set_regime(self.regime)
        self._initial_displacement = float(initial_displacement)
        self._step_count = 0
        if self.history is not None:
            self.history.clear()
        logger.debug(f"Bump: x={initial_displacement}, regime={self.regime.value}")

    def step(self) -> float:
        """Advance one fixed timestep with explicit Euler and return the new position."""
        m = self.constants.mass
        k = self.constants.spring_constant
        dt = self.constants.time_step
        s = self.state

        spring_force = -k * s.position
        damping_force = -s.damping_coefficient * s.velocity
        acceleration = (spring_force + damping_force) / m

        s.velocity += acceleration * dt
        s.position += s.velocity * dt
        self._step_count += 1
        return s.position

    def reset(self) -> np.ndarray:
        """Bump from the configured initial displacement."""
        self.bump(self.config.initial_displacement)
        return self.observe()

    def observe(self) -> np.ndarray:
        """Return current state [x, v]."""
        return np.array([self.state.position, self.state.velocity], dtype=np.float64)

    def _record_step(self, value: float) -> None:
        # Keep an attached history in step with run(), one push per step
        if self.history is not None:
            self.history.push(value)

    def _trajectory_record(self) -> TrajectoryData:
        return TrajectoryData(
            regime=self.regime,
            damping_coefficient=self.state.damping_coefficient,
            initial_displacement=self._initial_displacement,
            constants=self.constants,
        )

    def kinetic_energy(self) -> float:
        return 0.5 * self.constants.mass * self.state.velocity**2

    def potential_energy(self) -> float:
        return 0.5 * self.constants.spring_constant * self.state.position**2

    def total_energy(self, state: np.ndarray | None = None) -> float:
        """Compute total mechanical energy: E = 0.5*k*x^2 + 0.5*m*v^2."""
        if state is None:
            return self.kinetic_energy() + self.potential_energy()
        x, v = state
        return float(0.5 * self.constants.spring_constant * x**2 + 0.5 * self.constants.mass * v**2)

    def analytical_solution(self, t: float) -> tuple[float, float]:
        """Exact continuous-time (x(t), v(t)) since the last bump.

        Covers all three regimes; the Euler trajectory approximates this
        curve with an error that shrinks with the time step.
        """
        x0 = self._initial_displacement
        v0 = 0.0
        z = self.zeta
        w0 = self.omega_0

        if np.isclose(z, 1.0):
            # x(t) = [x0 + (v0 + w0*x0)*t] * exp(-w0*t)
            a = v0 + w0 * x0
            e = np.exp(-w0 * t)
            x = (x0 + a * t) * e
            v = a * e - w0 * (x0 + a * t) * e
        elif z < 1.0:
            # x(t) = exp(-z*w0*t) * [x0*cos(wd*t) + (v0 + z*w0*x0)/wd * sin(wd*t)]
            wd = self.omega_d
            b = (v0 + z * w0 * x0) / wd
            e = np.exp(-z * w0 * t)
            c, s = np.cos(wd * t), np.sin(wd * t)
            x = e * (x0 * c + b * s)
            v = -z * w0 * x + e * (-x0 * wd * s + b * wd * c)
        else:
            root = np.sqrt(z**2 - 1)
            r1 = -w0 * (z - root)
            r2 = -w0 * (z + root)
            a = (v0 - r2 * x0) / (r1 - r2)
            b = x0 - a
            x = a * np.exp(r1 * t) + b * np.exp(r2 * t)
            v = r1 * a * np.exp(r1 * t) + r2 * b * np.exp(r2 * t)
        return float(x), float(v)
