"""Module-wide solver configuration.

Provides getter/setter pairs for the settings shared by every driver call:

- ``set_dtype`` / ``get_dtype``: float dtype of the state storage
  (``np.float64`` by default).
- ``set_initial_capacity`` / ``get_initial_capacity``: number of samples
  preallocated by the event-driven driver before it starts doubling.
- ``set_progress_increment`` / ``get_progress_increment``: completion
  fraction between two progress notifications.

Settings are read when a driver starts, so changing them never affects an
integration that is already running.
"""

from __future__ import annotations

import numpy as np

_VALID_DTYPES = (np.float32, np.float64)

_DEFAULT_DTYPE = np.float64
_DEFAULT_INITIAL_CAPACITY = 10000
_DEFAULT_PROGRESS_INCREMENT = 0.1

_dtype = _DEFAULT_DTYPE
_initial_capacity = _DEFAULT_INITIAL_CAPACITY
_progress_increment = _DEFAULT_PROGRESS_INCREMENT


def set_dtype(dtype) -> None:
    """Set the float dtype used for state storage.

    Args:
        dtype: ``np.float32`` or ``np.float64``.

    Raises:
        ValueError: If *dtype* is not a supported float type.
    """
    global _dtype
    if dtype not in _VALID_DTYPES:
        raise ValueError(
            f"Unsupported dtype {dtype}. Must be one of: np.float32, np.float64"
        )
    _dtype = dtype


def get_dtype():
    """Return the current state storage dtype (default ``np.float64``)."""
    return _dtype


def set_initial_capacity(capacity: int) -> None:
    """Set the event-driven preallocation size.

    Args:
        capacity: Number of samples allocated before the first doubling.

    Raises:
        ValueError: If *capacity* is not a positive integer.
    """
    global _initial_capacity
    if isinstance(capacity, bool) or not isinstance(capacity, (int, np.integer)):
        raise ValueError(f"Initial capacity must be an integer, got {capacity!r}")
    if capacity < 1:
        raise ValueError(f"Initial capacity must be positive, got {capacity}")
    _initial_capacity = int(capacity)


def get_initial_capacity() -> int:
    """Return the event-driven preallocation size (default 10000)."""
    return _initial_capacity


def set_progress_increment(increment: float) -> None:
    """Set the completion fraction between progress notifications.

    Args:
        increment: Fraction in ``(0, 1]``.

    Raises:
        ValueError: If *increment* is outside ``(0, 1]``.
    """
    global _progress_increment
    if not 0.0 < increment <= 1.0:
        raise ValueError(
            f"Progress increment must lie in (0, 1], got {increment}"
        )
    _progress_increment = float(increment)


def get_progress_increment() -> float:
    """Return the completion fraction between progress notifications."""
    return _progress_increment


def reset_config() -> None:
    """Restore every setting to its default."""
    global _dtype, _initial_capacity, _progress_increment
    _dtype = _DEFAULT_DTYPE
    _initial_capacity = _DEFAULT_INITIAL_CAPACITY
    _progress_increment = _DEFAULT_PROGRESS_INCREMENT
