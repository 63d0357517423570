"""Explicit Runge-Kutta method tableaux."""

import numpy as np
from fixedstep.core.method import RKMethod


def explicit_euler() -> RKMethod:
    """Forward Euler method (1st order)."""
    A = np.array([[0.0]])
    b = np.array([1.0])
    c = np.array([0.0])
    return RKMethod(A=A, b=b, c=c)


def rk4() -> RKMethod:
    """Classic 4th-order Runge-Kutta method."""
    A = np.array([
        [0.0, 0.0, 0.0, 0.0],
        [0.5, 0.0, 0.0, 0.0],
        [0.0, 0.5, 0.0, 0.0],
        [0.0, 0.0, 1.0, 0.0],
    ])
    b = np.array([1.0/6.0, 1.0/3.0, 1.0/3.0, 1.0/6.0])
    c = np.array([0.0, 0.5, 0.5, 1.0])
    return RKMethod(A=A, b=b, c=c)
