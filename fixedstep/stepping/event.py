"""Event-driven driver."""

import logging
from typing import Optional, Union
import numpy as np
from numpy.typing import ArrayLike

from fixedstep.config import get_dtype, get_initial_capacity
from fixedstep.core.method import ABMethod, RKMethod
from fixedstep.core.problem import ODEFunction, ConditionFunction
from fixedstep.solvers.factory import create_integrator
from fixedstep.stepping.trajectory import Trajectory, TrajectoryBuffer
from fixedstep.stepping._checks import as_state, check_step, check_time

logger = logging.getLogger(__name__)


def event_solve(
    f: ODEFunction,
    t0: float,
    condition: ConditionFunction,
    y0: ArrayLike,
    h: float,
    method: Union[ABMethod, RKMethod],
    capacity: Optional[int] = None,
) -> Trajectory:
    """
    Integrate from t0 while condition(t, y) holds.

    The condition is first checked on the last start-up sample and then
    once per new sample. The sample on which it fails is kept, so at
    least the start-up samples are always returned. Storage doubles
    whenever it fills up and is trimmed to the samples produced.

    Args:
        f: ODE right-hand side f(t, y)
        t0: Initial time
        condition: Continuation predicate C(t, y)
        y0: Initial state, scalar or (p,)
        h: Signed step size
        method: ABM coefficient table or explicit Butcher tableau
        capacity: Initial preallocation (defaults to the configured value)

    Returns:
        Trajectory ending on the first sample where the condition failed
    """
    check_time(t0, "t0")
    check_step(h)
    if not callable(condition):
        raise TypeError("condition must be callable as condition(t, y)")
    y0 = as_state(y0, get_dtype())

    if capacity is None:
        capacity = get_initial_capacity()

    integrator = create_integrator(method)
    m = integrator.startup_steps

    buffer = TrajectoryBuffer(capacity, y0.shape[0], y0.dtype)
    buffer.ensure(m)
    buffer.y[0] = y0
    buffer.t[:m + 1] = t0 + h * np.arange(m + 1)
    logger.debug(
        "Event-driven solve from %g with step %g (%d start-up, capacity %d)",
        t0, h, m, buffer.capacity,
    )

    integrator.start(f, buffer.t, buffer.y, h, m)

    n = m
    while condition(buffer.t[n], buffer.y[n]):
        buffer.ensure(n + 1)

        # t0 + k*h for every sample, as in the start-up
        t_next = t0 + (n + 1) * h
        buffer.y[n + 1] = integrator.step(f, buffer.t[n], buffer.y[n], t_next, h)
        buffer.t[n + 1] = t_next
        n += 1

    logger.debug("Condition failed at t=%g after %d samples", buffer.t[n], n + 1)
    return buffer.trim(n + 1)
