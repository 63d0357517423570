"""RK4 start-up procedure for multistep methods."""

from typing import Callable, Optional
from numpy.typing import NDArray

from fixedstep.core.problem import ODEFunction
from fixedstep.solvers.base import evaluate
from fixedstep.solvers.window import EvaluationWindow


def rk4_step(
    f: ODEFunction, t: float, y: NDArray, h: float
) -> tuple[NDArray, NDArray]:
    """
    One classical RK4 step.

    Returns:
        y_next: State at t + h
        k1: f(t, y), reusable as the evaluation at the current sample
    """
    k1 = evaluate(f, t, y)
    k2 = evaluate(f, t + h/2, y + h*k1/2)
    k3 = evaluate(f, t + h/2, y + h*k2/2)
    k4 = evaluate(f, t + h, y + h*k3)

    y_next = y + (h/6)*(k1 + 2*k2 + 2*k3 + k4)
    return y_next, k1


def rk4_start(
    f: ODEFunction,
    t: NDArray,
    y: NDArray,
    h: float,
    steps: int,
    window: EvaluationWindow,
    on_step: Optional[Callable[[int], None]] = None,
) -> None:
    """
    Fill y[1..steps] from y[0] with RK4 and load the evaluation window.

    After the call the window holds f(t[n], y[n]) for n = 0..steps-1,
    oldest first.
    """
    for n in range(steps):
        y[n + 1], k1 = rk4_step(f, t[n], y[n], h)
        window.push(k1)

        if on_step is not None:
            on_step(n + 1)
