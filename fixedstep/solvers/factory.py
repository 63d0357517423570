"""Integrator factory."""

from typing import Union

from fixedstep.core.method import ABMethod, RKMethod
from fixedstep.solvers.base import Integrator
from fixedstep.solvers.explicit import RungeKuttaIntegrator
from fixedstep.solvers.multistep import AdamsIntegrator


def create_integrator(method: Union[ABMethod, RKMethod]) -> Integrator:
    """
    Build a fresh integrator for one driver run.

    Args:
        method: ABM coefficient table or explicit Butcher tableau

    Returns:
        Integrator owning its own evaluation history
    """
    if isinstance(method, ABMethod):
        return AdamsIntegrator(method)

    if isinstance(method, RKMethod):
        return RungeKuttaIntegrator(method)

    raise TypeError(
        f"Unsupported method {type(method).__name__}; expected ABMethod or RKMethod"
    )
