"""Problem specification protocols and integration intervals."""

from dataclasses import dataclass
from typing import Protocol, Union
from numpy.typing import NDArray


class ODEFunction(Protocol):
    """Right-hand side of dy/dt = f(t, y)."""

    def __call__(self, t: float, y: NDArray) -> NDArray:
        """Derivative of the state at (t, y), same shape as y."""
        ...


class ConditionFunction(Protocol):
    """Continuation predicate for event-driven integration."""

    def __call__(self, t: float, y: NDArray) -> bool:
        """True while integration should continue past (t, y)."""
        ...


class ProgressCallback(Protocol):
    """Observer notified with the completed fraction of a fixed interval."""

    def __call__(self, fraction: float) -> None:
        ...


@dataclass(frozen=True)
class TimeSpan:
    """Integrate from t0 until exactly tf."""

    t0: float
    tf: float


@dataclass(frozen=True)
class EventSpan:
    """Integrate from t0 while condition(t, y) holds."""

    t0: float
    condition: ConditionFunction


Interval = Union[TimeSpan, EventSpan]
