"""Define Pydantic models for converting joint trajectories to and from plain Python data."""

from __future__ import annotations

from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field

from robot_trajectories.kinematics import JointState
from robot_trajectories.motion_planning import JointsTrajectory
from robot_trajectories.timing import Time


class JointStateSchema(BaseModel):
    """Schema for a single joint state; omitted fields are unset."""

    position: Optional[float] = None
    speed: Optional[float] = None
    effort: Optional[float] = None
    raw: Optional[float] = None
    acceleration: Optional[float] = None

    model_config = ConfigDict(extra="forbid")


class JointsTrajectorySchema(BaseModel):
    """Schema for a joint trajectory.

    Shapes are not cross-checked here; a trajectory built from this data may be invalid.
    """

    names: List[str] = Field(default_factory=list, description="Joint names")
    times_s: List[float] = Field(default_factory=list, description="Timestamps (seconds)")
    elements: List[List[JointStateSchema]] = Field(
        default_factory=list,
        description="One list of joint states per joint",
    )

    model_config = ConfigDict(extra="forbid")


def trajectory_to_data(trajectory: JointsTrajectory) -> dict[str, Any]:
    """Convert a trajectory into a dictionary of plain Python data (unset fields omitted)."""
    schema = JointsTrajectorySchema(
        names=list(trajectory.names),
        times_s=[t.to_seconds() for t in trajectory.times],
        elements=[
            [JointStateSchema(**vars(state)) for state in series] for series in trajectory.elements
        ],
    )
    return schema.model_dump(exclude_none=True)


def trajectory_from_data(data: dict[str, Any]) -> JointsTrajectory:
    """Construct a trajectory from a dictionary of plain Python data.

    :param data: Dictionary matching the JointsTrajectorySchema
    :return: Constructed trajectory (possibly invalid; check `is_valid()`)
    :raises pydantic.ValidationError: If the data does not match the schema
    """
    schema = JointsTrajectorySchema.model_validate(data)
    return JointsTrajectory(
        names=schema.names,
        elements=[[JointState(**s.model_dump()) for s in series] for series in schema.elements],
        times=[Time.from_seconds(t) for t in schema.times_s],
    )
