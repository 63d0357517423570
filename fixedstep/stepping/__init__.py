"""Driver loops and trajectory storage."""

from fixedstep.stepping.trajectory import Trajectory, TrajectoryBuffer
from fixedstep.stepping.progress import ProgressReporter
from fixedstep.stepping.fixed import fixed_interval_solve
from fixedstep.stepping.event import event_solve

__all__ = [
    "Trajectory",
    "TrajectoryBuffer",
    "ProgressReporter",
    "fixed_interval_solve",
    "event_solve",
]
