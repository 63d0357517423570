"""Explicit Runge-Kutta integrator."""

from typing import Callable, Optional
from numpy.typing import NDArray

from fixedstep.core.method import RKMethod
from fixedstep.core.problem import ODEFunction
from fixedstep.solvers.base import Integrator, evaluate


class RungeKuttaIntegrator(Integrator):
    """Forward substitution for strictly lower triangular A."""

    def __init__(self, method: RKMethod) -> None:
        if not method.is_explicit:
            raise ValueError("Method is not explicit")
        self.method = method

    @property
    def startup_steps(self) -> int:
        return 0

    def start(
        self,
        f: ODEFunction,
        t: NDArray,
        y: NDArray,
        h: float,
        steps: int,
        on_step: Optional[Callable[[int], None]] = None,
    ) -> None:
        """Single-step methods start from the initial condition alone."""

    def step(
        self,
        f: ODEFunction,
        t_n: float,
        y_n: NDArray,
        t_next: float,
        h: float,
    ) -> NDArray:
        """Evaluate the stages in order, then combine them with b."""
        A, b, c = self.method.A, self.method.b, self.method.c
        k: list[NDArray] = []

        for i in range(self.method.s):
            # Z_i = y_n + h Σ_{j<i} A[i,j] k_j
            z = y_n.copy()
            for j in range(i):
                z += h * A[i, j] * k[j]
            k.append(evaluate(f, t_n + c[i] * h, z))

        increment = sum(b[i] * k_i for i, k_i in enumerate(k))
        return y_n + h * increment
