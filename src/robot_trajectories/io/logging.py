"""Define utility functions to simplify logging to the CLI."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from rich.console import Console

if TYPE_CHECKING:
    from robot_trajectories.motion_planning import JointsTrajectory

logger = logging.getLogger(__name__)
console = Console()


def log_info(message: str) -> None:
    """Log the given string at the INFO level."""
    logger.info(message)


def log_warning(message: str) -> None:
    """Log the given string at the WARNING level."""
    logger.warning(message)


def log_trajectory_issues(trajectory: JointsTrajectory, label: str = "trajectory") -> bool:
    """Log a warning for each way in which the given trajectory is invalid.

    :param trajectory: Trajectory to be checked
    :param label: Description of the trajectory used in the logged messages
    :return: True if the trajectory is valid, else False
    """
    reasons = trajectory.invalid_reasons()
    for reason in reasons:
        log_warning(f"Invalid {label}: {reason}")

    if not reasons:
        log_info(
            f"Valid {label} with {trajectory.get_number_of_joints()} joints "
            f"and {trajectory.get_time_steps()} time steps.",
        )

    return not reasons
