"""Import classes and definitions used for input/output or user interfaces."""

from .display import TrajectoryDisplayConfig as TrajectoryDisplayConfig
from .display import display_trajectory as display_trajectory
from .logging import console as console
from .logging import log_trajectory_issues as log_trajectory_issues
from .pydantic_schemata import trajectory_from_data as trajectory_from_data
from .pydantic_schemata import trajectory_to_data as trajectory_to_data
