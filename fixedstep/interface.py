"""Public solving interface."""

from typing import Optional, Union
from numpy.typing import ArrayLike

from fixedstep.core.method import ABMethod, RKMethod
from fixedstep.core.problem import (
    ODEFunction,
    ProgressCallback,
    TimeSpan,
    EventSpan,
    Interval,
)
from fixedstep.methods.adams import abm7
from fixedstep.stepping.trajectory import Trajectory
from fixedstep.stepping.fixed import fixed_interval_solve
from fixedstep.stepping.event import event_solve


class ODESolver:
    """
    Fixed-step solver bound to a method and step size.
    """

    def __init__(
        self,
        method: Optional[Union[ABMethod, RKMethod]] = None,
        h: float = 0.01,
    ):
        """
        Initialize solver.

        Args:
            method: Integration method (defaults to 7th-order ABM)
            h: Step size; its sign is ignored for a TimeSpan
        """
        self.method = abm7() if method is None else method
        self.h = h

    def solve(
        self,
        f: ODEFunction,
        interval: Interval,
        y0: ArrayLike,
        progress: Optional[ProgressCallback] = None,
    ) -> Trajectory:
        """
        Integrate dy/dt = f(t, y) over an interval.

        Args:
            f: ODE right-hand side f(t, y)
            interval: TimeSpan(t0, tf) to stop at a final time, or
                EventSpan(t0, condition) to run while a condition holds
            y0: Initial state, scalar or (p,)
            progress: Optional completion callback (TimeSpan only)

        Returns:
            Trajectory of sample times and states
        """
        if isinstance(interval, TimeSpan):
            return fixed_interval_solve(
                f, interval.t0, interval.tf, y0, self.h, self.method, progress
            )

        if isinstance(interval, EventSpan):
            if progress is not None:
                raise ValueError(
                    "Progress reporting needs a final time; use a TimeSpan"
                )
            return event_solve(
                f, interval.t0, interval.condition, y0, self.h, self.method
            )

        raise TypeError(
            f"interval must be a TimeSpan or EventSpan, got {type(interval).__name__}"
        )


def solve(
    f: ODEFunction,
    interval: Interval,
    y0: ArrayLike,
    h: float,
    method: Optional[Union[ABMethod, RKMethod]] = None,
    progress: Optional[ProgressCallback] = None,
) -> Trajectory:
    """Integrate dy/dt = f(t, y); see ODESolver.solve."""
    return ODESolver(method=method, h=h).solve(f, interval, y0, progress)
