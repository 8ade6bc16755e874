"""Define functions to display joint trajectories on the console."""

from __future__ import annotations

from dataclasses import dataclass

from rich.table import Table

from robot_trajectories.io.logging import console
from robot_trajectories.kinematics import JointState, JointStateField
from robot_trajectories.motion_planning import JointsTrajectory


@dataclass(frozen=True)
class TrajectoryDisplayConfig:
    """Configures how a trajectory is rendered as a table."""

    field: JointStateField = JointStateField.POSITION
    """Joint state field shown in each cell."""

    max_steps: int = 20
    """Maximum number of time steps shown (later steps are elided)."""

    precision: int = 4
    """Number of decimal places shown for joint values and times."""

    title: str = "Joints Trajectory"


def format_joint_value(state: JointState, config: TrajectoryDisplayConfig) -> str:
    """Format the configured field of a joint state ("-" if unset)."""
    value = getattr(state, config.field.value)
    return "-" if value is None else f"{value:.{config.precision}f}"


def trajectory_table(
    trajectory: JointsTrajectory,
    config: TrajectoryDisplayConfig | None = None,
) -> Table:
    """Build a table showing one row per time step and one column per joint.

    Joints whose series are shorter than the first joint's show blank cells for missing samples.
    """
    if config is None:
        config = TrajectoryDisplayConfig()

    style = "cyan" if trajectory.is_valid() else "red"
    table = Table(title=config.title, border_style=style, title_style=f"bold {style}")
    table.add_column("Step", style="bold")
    if trajectory.is_timed():
        table.add_column("Time (s)")

    for j in range(trajectory.get_number_of_joints()):
        name = trajectory.names[j] if j < len(trajectory.names) else ""
        table.add_column(name or f"joint {j}", justify="right")

    num_steps = trajectory.get_time_steps()
    for step in range(min(num_steps, config.max_steps)):
        row = [str(step)]
        if trajectory.is_timed():
            t = trajectory.times[step] if step < len(trajectory.times) else None
            row.append("" if t is None else f"{t.to_seconds():.{config.precision}f}")
        for series in trajectory.elements:
            row.append(format_joint_value(series[step], config) if step < len(series) else "")
        table.add_row(*row)

    if num_steps > config.max_steps:
        table.caption = f"... {num_steps - config.max_steps} more time steps"

    return table


def display_trajectory(
    trajectory: JointsTrajectory,
    config: TrajectoryDisplayConfig | None = None,
) -> None:
    """Print the given trajectory as a table on the console."""
    console.print(trajectory_table(trajectory, config))
