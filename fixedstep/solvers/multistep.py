"""Adams-Bashforth-Moulton predictor-corrector integrator."""

from typing import Callable, Optional
from numpy.typing import NDArray

from fixedstep.core.method import ABMethod
from fixedstep.core.problem import ODEFunction
from fixedstep.solvers.base import Integrator, evaluate
from fixedstep.solvers.starter import rk4_start
from fixedstep.solvers.window import EvaluationWindow


class AdamsIntegrator(Integrator):
    """
    Single-pass predictor-corrector (PECE) stepping.

    Each step slides the window, predicts with Adams-Bashforth and applies
    the Adams-Moulton corrector once at the predicted state. The corrector
    is not iterated, so a step costs two evaluations of f.
    """

    def __init__(self, method: ABMethod) -> None:
        self.method = method
        self._window: Optional[EvaluationWindow] = None

    @property
    def startup_steps(self) -> int:
        return self.method.order

    @property
    def window(self) -> Optional[EvaluationWindow]:
        """Evaluation window of the current run (None before start)."""
        return self._window

    def start(
        self,
        f: ODEFunction,
        t: NDArray,
        y: NDArray,
        h: float,
        steps: int,
        on_step: Optional[Callable[[int], None]] = None,
    ) -> None:
        """Run the RK4 start-up and load the window with its evaluations."""
        self._window = EvaluationWindow(self.method.order, y.shape[1], y.dtype)
        rk4_start(f, t, y, h, steps, self._window, on_step)

    def step(
        self,
        f: ODEFunction,
        t_n: float,
        y_n: NDArray,
        t_next: float,
        h: float,
    ) -> NDArray:
        """Predict, evaluate, correct once."""
        window = self._window
        if window is None or len(window) < window.capacity:
            raise RuntimeError(
                f"Predictor-corrector needs {self.method.order} start-up "
                f"evaluations; call start() first"
            )

        m = self.method.order
        D = self.method.denominator
        P = self.method.predictor_weights
        C = self.method.corrector_weights

        # Window now ends at the current sample n
        window.push(evaluate(f, t_n, y_n))
        w = window.newest_first()

        y_p = y_n + (h/D) * (P @ w)

        f_p = evaluate(f, t_next, y_p)
        return y_n + (h/D) * (C[0]*f_p + C[1:] @ w[:m - 1])
