"""Unit tests for displaying and logging joint trajectories."""

import logging

import pytest

from robot_trajectories.io import TrajectoryDisplayConfig, display_trajectory, log_trajectory_issues
from robot_trajectories.io.display import trajectory_table
from robot_trajectories.kinematics import JointState
from robot_trajectories.motion_planning import JointsTrajectory
from robot_trajectories.timing import Time


@pytest.fixture
def long_trajectory() -> JointsTrajectory:
    """Create a timed trajectory with one named and one unnamed joint over 30 steps."""
    trajectory = JointsTrajectory()
    trajectory.resize(2, 30)
    trajectory.names[0] = "hip"
    for step in range(30):
        trajectory.elements[0][step] = JointState.from_position(step / 10)
    trajectory.times = [Time.from_milliseconds(10 * step) for step in range(30)]
    return trajectory


def test_trajectory_table_layout(long_trajectory: JointsTrajectory) -> None:
    """Verify that the table has step, time, and joint columns and elides extra rows."""
    config = TrajectoryDisplayConfig(max_steps=5)

    table = trajectory_table(long_trajectory, config)

    assert [c.header for c in table.columns] == ["Step", "Time (s)", "hip", "joint 1"]
    assert table.row_count == 5
    assert table.caption == "... 25 more time steps"


def test_trajectory_table_of_invalid_trajectory(long_trajectory: JointsTrajectory) -> None:
    """Verify that a table can be built for a trajectory with a short joint series."""
    long_trajectory.elements[1] = long_trajectory.elements[1][:2]

    table = trajectory_table(long_trajectory)

    assert table.row_count == 20
    assert table.caption == "... 10 more time steps"


def test_display_trajectory_prints(
    long_trajectory: JointsTrajectory,
    capsys: pytest.CaptureFixture[str],
) -> None:
    """Verify that displaying a trajectory prints its joint names."""
    display_trajectory(long_trajectory, TrajectoryDisplayConfig(max_steps=2, title="Gait"))

    output = capsys.readouterr().out
    assert "Gait" in output
    assert "hip" in output


def test_log_trajectory_issues(
    long_trajectory: JointsTrajectory,
    caplog: pytest.LogCaptureFixture,
) -> None:
    """Verify that each violated invariant is logged as a warning."""
    with caplog.at_level(logging.INFO, logger="robot_trajectories.io.logging"):
        assert log_trajectory_issues(long_trajectory)

        long_trajectory.times.pop()
        long_trajectory.elements[1].pop()
        assert not log_trajectory_issues(long_trajectory, label="gait")

    warnings = [r for r in caplog.records if r.levelno == logging.WARNING]
    assert len(warnings) == 2
    assert all(r.getMessage().startswith("Invalid gait:") for r in warnings)
