"""Unit tests for converting joint trajectories to and from plain Python data."""

import pytest
from hypothesis import given
from pydantic import ValidationError

from robot_trajectories.io import trajectory_from_data, trajectory_to_data
from robot_trajectories.kinematics import JointState
from robot_trajectories.motion_planning import JointsTrajectory

from ..strategies.trajectory_strategies import valid_trajectories


def test_trajectory_from_data() -> None:
    """Verify that a trajectory is constructed from a dictionary of plain data."""
    data = {
        "names": ["shoulder", "elbow"],
        "times_s": [0.0, 0.1],
        "elements": [
            [{"position": 0.0}, {"position": 0.5, "speed": 1.0}],
            [{"effort": 2.0}, {}],
        ],
    }

    trajectory = trajectory_from_data(data)

    assert trajectory.is_valid()
    assert trajectory.is_timed()
    assert trajectory.names == ["shoulder", "elbow"]
    assert trajectory.elements[0][1] == JointState(position=0.5, speed=1.0)
    assert trajectory.elements[1][1] == JointState()
    assert trajectory.times[1].microseconds == 100_000


def test_trajectory_data_omits_unset_fields() -> None:
    """Verify that exported data only includes the joint state fields that are set."""
    trajectory = JointsTrajectory(names=["a"], elements=[[JointState.from_position(1.0)]])

    data = trajectory_to_data(trajectory)

    assert data == {"names": ["a"], "times_s": [], "elements": [[{"position": 1.0}]]}


@given(valid_trajectories())
def test_trajectory_to_data_and_back(trajectory: JointsTrajectory) -> None:
    """Verify that any valid trajectory is unchanged after converting to data and back."""
    result = trajectory_from_data(trajectory_to_data(trajectory))

    assert result == trajectory


def test_invalid_trajectory_data_is_accepted_but_invalid() -> None:
    """Verify that well-formed data with mismatched series lengths yields an invalid trajectory."""
    trajectory = trajectory_from_data({"elements": [[{"raw": 1.0}], []]})

    assert not trajectory.is_valid()


def test_malformed_trajectory_data_is_rejected() -> None:
    """Verify that data with unknown keys or wrongly typed values fails validation."""
    with pytest.raises(ValidationError):
        trajectory_from_data({"elements": [[{"angle": 1.0}]]})

    with pytest.raises(ValidationError):
        trajectory_from_data({"names": "not-a-list"})
