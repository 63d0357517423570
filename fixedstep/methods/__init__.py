"""Method coefficient tables."""

from fixedstep.methods.adams import (
    abm2,
    abm3,
    abm4,
    abm5,
    abm6,
    abm7,
    abm8,
    adams_bashforth_moulton,
    is_consistent,
)
from fixedstep.methods.runge_kutta import explicit_euler, rk4

__all__ = [
    "abm2",
    "abm3",
    "abm4",
    "abm5",
    "abm6",
    "abm7",
    "abm8",
    "adams_bashforth_moulton",
    "is_consistent",
    "explicit_euler",
    "rk4",
]
