"""Bounded displacement history feeding the position-vs-time plot."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator, Sequence
from itertools import islice

import numpy as np

DEFAULT_CAPACITY = 300


class HistoryView(Sequence):
    """Read-only, oldest-first view over a HistoryBuffer.

    The view holds no copy: it reflects the buffer at the moment it is read,
    and can be iterated any number of times.
    """

    def __init__(self, samples: deque[float]) -> None:
        self._samples = samples

    def __len__(self) -> int:
        return len(self._samples)

    def __getitem__(self, index: int | slice) -> float | list[float]:
        if isinstance(index, slice):
            start, stop, step = index.indices(len(self._samples))
            if step > 0:
                return list(islice(self._samples, start, stop, step))
            return [self._samples[i] for i in range(start, stop, step)]
        return self._samples[index]

    def __iter__(self) -> Iterator[float]:
        return iter(self._samples)

    def __repr__(self) -> str:
        return f"HistoryView(len={len(self)})"


class HistoryBuffer:
    """FIFO of the most recent displacement samples.

    Length never exceeds capacity; pushing onto a full buffer evicts the
    oldest sample.
    """

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        if capacity <= 0:
            raise ValueError(f"History capacity must be positive, got {capacity}")
        self._samples: deque[float] = deque(maxlen=capacity)

    @property
    def capacity(self) -> int:
        return self._samples.maxlen

    def __len__(self) -> int:
        return len(self._samples)

    def clear(self) -> None:
        self._samples.clear()

    def push(self, value: float) -> None:
        self._samples.append(float(value))

    def snapshot(self) -> HistoryView:
        return HistoryView(self._samples)

    def to_array(self) -> np.ndarray:
        """Copy of the current contents for plotting."""
        return np.fromiter(self._samples, dtype=np.float64, count=len(self._samples))
