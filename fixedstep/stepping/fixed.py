"""Fixed-interval driver."""

import logging
from typing import Optional, Union
import numpy as np
from numpy.typing import ArrayLike

from fixedstep.config import get_dtype
from fixedstep.core.method import ABMethod, RKMethod
from fixedstep.core.problem import ODEFunction, ProgressCallback
from fixedstep.solvers.factory import create_integrator
from fixedstep.stepping.trajectory import Trajectory, TrajectoryBuffer
from fixedstep.stepping.progress import ProgressReporter
from fixedstep.stepping._checks import as_state, check_step, check_time

logger = logging.getLogger(__name__)


def fixed_interval_solve(
    f: ODEFunction,
    t0: float,
    tf: float,
    y0: ArrayLike,
    h: float,
    method: Union[ABMethod, RKMethod],
    progress: Optional[ProgressCallback] = None,
) -> Trajectory:
    """
    Integrate from t0 to exactly tf with uniform steps.

    1. Point h from t0 towards tf and take N = ceil((tf - t0)/h) steps,
       which may overshoot tf by less than one step
    2. Start-up steps (RK4 for multistep methods), then the method's step
       for the remaining samples, reporting progress after each
    3. Replace the last sample by the linear interpolant between samples
       N-1 and N evaluated at tf, and set t[N] = tf

    If N is smaller than the start-up length only N start-up steps are
    taken. The final interval is corrected, not re-integrated.

    Args:
        f: ODE right-hand side f(t, y)
        t0: Initial time
        tf: Final time
        y0: Initial state, scalar or (p,)
        h: Step size; only its magnitude is used
        method: ABM coefficient table or explicit Butcher tableau
        progress: Optional callback receiving the completed fraction

    Returns:
        Trajectory with t[0] == t0 and t[-1] == tf
    """
    check_time(t0, "t0")
    check_time(tf, "tf")
    check_step(h)
    y0 = as_state(y0, get_dtype())

    h = abs(h) if tf >= t0 else -abs(h)
    N = int(np.ceil((tf - t0) / h))

    buffer = TrajectoryBuffer(N + 1, y0.shape[0], y0.dtype)
    buffer.y[0] = y0
    if N == 0:
        buffer.t[0] = t0
        return buffer.trim(1)

    t, y = buffer.t, buffer.y
    t[:] = t0 + h * np.arange(N + 1)

    integrator = create_integrator(method)
    reporter = ProgressReporter(N, progress)
    n_start = min(integrator.startup_steps, N)
    logger.debug(
        "Fixed-interval solve on [%g, %g]: %d steps of %g (%d start-up)",
        t0, tf, N, h, n_start,
    )

    integrator.start(f, t, y, h, n_start, reporter.update)

    for n in range(n_start, N):
        y[n + 1] = integrator.step(f, t[n], y[n], t[n + 1], h)
        reporter.update(n + 1)

    # Land exactly on tf
    y[N] = y[N - 1] + ((y[N] - y[N - 1]) / (t[N] - t[N - 1])) * (tf - t[N - 1])
    t[N] = tf

    return buffer.trim(N + 1)
