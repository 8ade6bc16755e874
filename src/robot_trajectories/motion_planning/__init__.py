"""Import classes and definitions representing planned or recorded joint motion."""

from .joints_trajectory import InvalidTimeStep as InvalidTimeStep
from .joints_trajectory import JointSeries as JointSeries
from .joints_trajectory import JointsTrajectory as JointsTrajectory
