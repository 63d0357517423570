"""
Fixedstep: fixed-step ODE integration.

Integrates dy/dt = f(t, y) with uniform steps using an Adams-Bashforth-Moulton
predictor-corrector started by RK4, either:
- up to an exact final time (TimeSpan), or
- while a condition on (t, y) holds (EventSpan)
"""

import logging

__version__ = "0.1.0"

from fixedstep.core.method import ABMethod, RKMethod
from fixedstep.core.problem import TimeSpan, EventSpan
from fixedstep.methods.adams import abm7, adams_bashforth_moulton
from fixedstep.stepping.trajectory import Trajectory
from fixedstep.interface import ODESolver, solve

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "ABMethod",
    "RKMethod",
    "TimeSpan",
    "EventSpan",
    "abm7",
    "adams_bashforth_moulton",
    "Trajectory",
    "ODESolver",
    "solve",
]
