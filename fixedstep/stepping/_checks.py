"""Input checks shared by the drivers."""

import numpy as np
from numpy.typing import ArrayLike, NDArray


def check_step(h: float) -> None:
    if not np.isfinite(h) or h == 0:
        raise ValueError(f"Step size must be finite and nonzero, got {h}")


def check_time(value: float, name: str) -> None:
    if not np.isfinite(value):
        raise ValueError(f"{name} must be finite, got {value}")


def as_state(y0: ArrayLike, dtype) -> NDArray:
    """Initial condition as a 1-D array (scalars become length 1)."""
    y0 = np.array(y0, dtype=dtype)
    if y0.ndim > 1:
        raise ValueError(
            f"Initial condition must be a scalar or 1-D vector, got shape {y0.shape}"
        )
    y0 = np.atleast_1d(y0)
    if y0.size == 0:
        raise ValueError("Initial condition must not be empty")
    return y0
