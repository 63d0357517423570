"""Base integrator interface."""

from abc import ABC, abstractmethod
from typing import Callable, Optional
import numpy as np
from numpy.typing import NDArray

from fixedstep.core.problem import ODEFunction


def evaluate(f: ODEFunction, t: float, y: NDArray) -> NDArray:
    """Evaluate f(t, y) as an array with the shape and dtype of y."""
    dy = np.asarray(f(t, y), dtype=y.dtype)
    if dy.shape != y.shape:
        # Scalar problems may return a bare float
        if dy.size != y.size:
            raise ValueError(
                f"ODE function returned {dy.size} values for a state of "
                f"dimension {y.size}"
            )
        dy = dy.reshape(y.shape)
    return dy


class Integrator(ABC):
    """Advances a preallocated trajectory one sample at a time."""

    @property
    @abstractmethod
    def startup_steps(self) -> int:
        """Number of samples `start` must produce before `step` can run."""
        ...

    @abstractmethod
    def start(
        self,
        f: ODEFunction,
        t: NDArray,             # (K,) sample times, t[0..steps] filled
        y: NDArray,             # (K, p) states, y[0] is the initial condition
        h: float,
        steps: int,
        on_step: Optional[Callable[[int], None]] = None,
    ) -> None:
        """
        Produce samples 1..steps in place.

        Args:
            f: ODE right-hand side
            t: Sample times
            y: State storage, written in place
            h: Step size
            steps: Number of start-up steps to take (at most startup_steps)
            on_step: Called with n after sample n has been written
        """
        ...

    @abstractmethod
    def step(
        self,
        f: ODEFunction,
        t_n: float,
        y_n: NDArray,
        t_next: float,
        h: float,
    ) -> NDArray:
        """
        Advance the current sample by one step.

        Args:
            f: ODE right-hand side
            t_n: Current sample time
            y_n: Current state (p,)
            t_next: Time of the sample being produced
            h: Step size

        Returns:
            State at t_next (p,)
        """
        ...
