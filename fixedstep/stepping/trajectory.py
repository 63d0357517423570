"""Trajectory storage."""

import logging
from dataclasses import dataclass
import numpy as np
from numpy.typing import NDArray

logger = logging.getLogger(__name__)


@dataclass
class Trajectory:
    """Discretized solution returned by the drivers."""

    t: NDArray  # (K,) sample times
    y: NDArray  # (K, p) state at each sample time, one row per sample

    @property
    def N(self) -> int:
        """Number of steps (samples minus one)."""
        return len(self.t) - 1

    @property
    def p(self) -> int:
        """State dimension."""
        return self.y.shape[1]

    def __iter__(self):
        # Allows `t, y = solve(...)`
        yield self.t
        yield self.y


class TrajectoryBuffer:
    """
    Preallocated, growable storage for sample times and states.

    Rows beyond the last written sample are zero. Growth doubles the time
    and state storage together and keeps every written row at its index.
    """

    def __init__(self, capacity: int, p: int, dtype=np.float64) -> None:
        if capacity < 1:
            raise ValueError(f"Capacity must be positive, got {capacity}")
        # Times stay float64 whatever the state dtype
        self.t = np.zeros(capacity)
        self.y = np.zeros((capacity, p), dtype=dtype)

    @property
    def capacity(self) -> int:
        return len(self.t)

    def grow(self) -> None:
        """Double the capacity, zero-filling the new rows."""
        old = self.capacity
        self.t = np.concatenate([self.t, np.zeros_like(self.t)])
        self.y = np.concatenate([self.y, np.zeros_like(self.y)])
        logger.debug("Grew trajectory storage from %d to %d samples", old, self.capacity)

    def ensure(self, index: int) -> None:
        """Grow until `index` is a valid row."""
        while index >= self.capacity:
            self.grow()

    def trim(self, length: int) -> Trajectory:
        """Copy out the first `length` samples."""
        if not 0 < length <= self.capacity:
            raise ValueError(
                f"Cannot trim {self.capacity} stored samples to {length}"
            )
        return Trajectory(t=self.t[:length].copy(), y=self.y[:length].copy())
