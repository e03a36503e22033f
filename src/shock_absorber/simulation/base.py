"""Abstract base class for fixed-step simulation environments."""

from __future__ import annotations

from abc import ABC, abstractmethod

import numpy as np

from shock_absorber.types.simulation import SimulationConfig
from shock_absorber.types.trajectory import TrajectoryData


class SimulationEnvironment(ABC):
    """Base class for fixed-step simulations.

    Subclasses implement the physics via reset/step/observe.
    The base class provides trajectory collection.
    """

    def __init__(self, config: SimulationConfig) -> None:
        self.config = config
        self._step_count = 0
        self._trajectory_states: list[np.ndarray] = []
        self._trajectory_timestamps: list[float] = []

    @property
    def step_count(self) -> int:
        return self._step_count

    @abstractmethod
    def reset(self) -> np.ndarray:
        """Reset simulation to initial conditions.

        Returns the initial state as a numpy array.
        """

    @abstractmethod
    def step(self) -> float:
        """Advance simulation by one timestep.

        Returns the new observable scalar (displacement).
        """

    @abstractmethod
    def observe(self) -> np.ndarray:
        """Return the current state as a numpy array."""

    def run(self, n_steps: int | None = None) -> TrajectoryData:
        """Reset, run for n_steps and collect a trajectory."""
        if n_steps is None:
            n_steps = self.config.n_steps

        state = self.reset()
        self._trajectory_states = [state.copy()]
        self._trajectory_timestamps = [0.0]

        for i in range(1, n_steps + 1):
            self._record_step(self.step())
            self._trajectory_states.append(self.observe())
            self._trajectory_timestamps.append(i * self.config.dt)

        return self.get_trajectory()

    def _record_step(self, value: float) -> None:
        """Hook called with each new observable during run()."""

    def get_trajectory(self) -> TrajectoryData:
        """Package collected states into a TrajectoryData object."""
        traj = self._trajectory_record()
        states = np.array(self._trajectory_states).reshape(-1, 2)
        traj.positions = states[:, 0]
        traj.velocities = states[:, 1]
        traj.timestamps = np.array(self._trajectory_timestamps)
        return traj

    def _trajectory_record(self) -> TrajectoryData:
        return TrajectoryData(constants=self.config.constants)
