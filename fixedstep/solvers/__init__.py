"""Integrators advancing a trajectory sample by sample."""

from fixedstep.solvers.base import Integrator, evaluate
from fixedstep.solvers.window import EvaluationWindow
from fixedstep.solvers.starter import rk4_step, rk4_start
from fixedstep.solvers.multistep import AdamsIntegrator
from fixedstep.solvers.explicit import RungeKuttaIntegrator
from fixedstep.solvers.factory import create_integrator

__all__ = [
    "Integrator",
    "evaluate",
    "EvaluationWindow",
    "rk4_step",
    "rk4_start",
    "AdamsIntegrator",
    "RungeKuttaIntegrator",
    "create_integrator",
]
