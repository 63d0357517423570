"""Core abstractions for fixed-step integration."""

from fixedstep.core.method import ABMethod, RKMethod
from fixedstep.core.problem import (
    ODEFunction,
    ConditionFunction,
    ProgressCallback,
    TimeSpan,
    EventSpan,
    Interval,
)

__all__ = [
    "ABMethod",
    "RKMethod",
    "ODEFunction",
    "ConditionFunction",
    "ProgressCallback",
    "TimeSpan",
    "EventSpan",
    "Interval",
]
