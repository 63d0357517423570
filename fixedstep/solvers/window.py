"""Sliding window of past derivative evaluations."""

import numpy as np
from numpy.typing import NDArray


class EvaluationWindow:
    """
    Fixed-capacity FIFO of the m most recent derivative evaluations.

    Evaluations live in an (m, p) arena. `_front` indexes the oldest row,
    which `push` overwrites, so sliding the window never reallocates.
    """

    def __init__(self, m: int, p: int, dtype=np.float64) -> None:
        if m < 1:
            raise ValueError(f"Window capacity must be positive, got {m}")
        self._data = np.zeros((m, p), dtype=dtype)
        self._front = 0
        self._count = 0

    @property
    def capacity(self) -> int:
        """Maximum number of evaluations held (m)."""
        return self._data.shape[0]

    def __len__(self) -> int:
        return self._count

    def push(self, value: NDArray) -> None:
        """Append the newest evaluation, discarding the oldest when full."""
        self._data[self._front] = value
        self._front = (self._front + 1) % self.capacity
        self._count = min(self._count + 1, self.capacity)

    def newest_first(self) -> NDArray:
        """Held evaluations (len, p), newest in row 0."""
        idx = (self._front - 1 - np.arange(self._count)) % self.capacity
        return self._data[idx]

    def ordered(self) -> NDArray:
        """Held evaluations (len, p), oldest in row 0."""
        return self.newest_first()[::-1]
