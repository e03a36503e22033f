"""Trajectory record produced by a headless run."""

from __future__ import annotations

import numpy as np
from pydantic import BaseModel, Field

from shock_absorber.types.simulation import DampingRegime, PhysicalConstants


class TrajectoryData(BaseModel):
    """A timestamped position/velocity sequence with the parameters that produced it."""

    model_config = {"arbitrary_types_allowed": True}

    regime: DampingRegime = DampingRegime.CRITICALLY_DAMPED
    damping_coefficient: float = 0.0
    initial_displacement: float = 0.0
    constants: PhysicalConstants = Field(default_factory=PhysicalConstants)

    # These hold the actual numerical data (not serialized via Pydantic)
    _positions: np.ndarray | None = None
    _velocities: np.ndarray | None = None
    _timestamps: np.ndarray | None = None

    @property
    def positions(self) -> np.ndarray | None:
        return self._positions

    @positions.setter
    def positions(self, value: np.ndarray) -> None:
        self._positions = value

    @property
    def velocities(self) -> np.ndarray | None:
        return self._velocities

    @velocities.setter
    def velocities(self, value: np.ndarray) -> None:
        self._velocities = value

    @property
    def timestamps(self) -> np.ndarray | None:
        return self._timestamps

    @timestamps.setter
    def timestamps(self, value: np.ndarray) -> None:
        self._timestamps = value

    @property
    def n_steps(self) -> int:
        if self._positions is not None:
            return len(self._positions)
        return 0
