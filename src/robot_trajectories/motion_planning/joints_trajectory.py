"""Define a class to represent time series of joint states for multiple joints.

Each joint's time series is a list of JointState, one per time step. The state of a joint at a
given sample is accessed as `elements[joint_index][time_step]`, where the first index matches the
indices of the `names` list and the second index is the time step.

A trajectory is valid only when every joint's series has the same length, and its `times` list is
either empty (untimed trajectory) or has one timestamp per time step.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field, replace

import numpy as np
from numpy.typing import ArrayLike, NDArray

from robot_trajectories.kinematics.joint_names import find_joint_index, has_names, resize_names
from robot_trajectories.kinematics.joint_state import JointState, JointStateField
from robot_trajectories.kinematics.joints import Joints
from robot_trajectories.timing import Time

JointSeries = list[JointState]
"""A time series of states for one joint, indexed by time step."""


class InvalidTimeStep(RuntimeError):
    """An error raised when accessing a trajectory at a non-existent time step."""

    def __init__(self, time_step: int) -> None:
        """Initialize the error with the offending time step."""
        super().__init__(f"Trying to access time step {time_step}, which is out of range.")
        self.time_step = time_step


@dataclass
class JointsTrajectory:
    """A time series of joint states for multiple, optionally named joints."""

    names: list[str] = field(default_factory=list)
    """Joint names, index-aligned with `elements` (empty strings for unnamed joints)."""

    elements: list[JointSeries] = field(default_factory=list)
    """One time series of joint states per joint."""

    times: list[Time] = field(default_factory=list)
    """Optional timestamps, one per time step, shared by all joints (empty if untimed)."""

    def __post_init__(self) -> None:
        """Take ownership of the given collections by copying them."""
        self.names = list(self.names)
        self.elements = [list(series) for series in self.elements]
        self.times = list(self.times)

    @classmethod
    def from_arrays(
        cls,
        positions: ArrayLike | None = None,
        speeds: ArrayLike | None = None,
        efforts: ArrayLike | None = None,
        names: Sequence[str] | None = None,
        times: Sequence[Time] | None = None,
    ) -> JointsTrajectory:
        """Construct a trajectory from (num_joints, num_steps) arrays of joint values.

        NaN entries leave the corresponding field unset.

        :param positions: Optional array of joint positions
        :param speeds: Optional array of joint speeds
        :param efforts: Optional array of joint efforts
        :param names: Optional joint names (one per row of the arrays)
        :param times: Optional timestamps (one per column of the arrays)
        :return: Constructed trajectory
        :raises ValueError: If the arrays, names, and times have inconsistent shapes
        """
        given = {
            f: np.asarray(a, dtype=float)
            for f, a in (
                (JointStateField.POSITION, positions),
                (JointStateField.SPEED, speeds),
                (JointStateField.EFFORT, efforts),
            )
            if a is not None
        }
        if not given:
            raise ValueError("At least one array of joint values is required.")

        shapes = {arr.shape for arr in given.values()}
        if len(shapes) != 1:
            raise ValueError(f"Joint value arrays have mismatched shapes: {sorted(shapes)}.")
        shape = shapes.pop()
        if len(shape) != 2:
            raise ValueError(f"Expected arrays of shape (num_joints, num_steps), got {shape}.")
        num_joints, num_steps = shape

        if names is not None and len(names) != num_joints:
            raise ValueError(f"Got {len(names)} names for {num_joints} joints.")
        if times and len(times) != num_steps:
            raise ValueError(f"Got {len(times)} timestamps for {num_steps} time steps.")

        trajectory = cls(names=list(names) if names is not None else [], times=list(times or []))
        trajectory.resize(num_joints, num_steps)
        for joint_field, arr in given.items():
            for j in range(num_joints):
                for s in range(num_steps):
                    if not np.isnan(arr[j, s]):
                        trajectory.elements[j][s].set(joint_field, float(arr[j, s]))

        return trajectory

    def resize(self, num_joints: int, num_samples: int | None = None) -> None:
        """Set the number of joints and, optionally, the number of samples for every joint.

        New joints start with an empty series and an empty name; new samples are default joint
        states. The `times` list is never modified; keeping it consistent is the caller's job.

        :param num_joints: Number of joint series (and names) after resizing
        :param num_samples: If given, the number of samples in every joint series after resizing
        :raises ValueError: If either count is negative
        """
        if num_joints < 0 or (num_samples is not None and num_samples < 0):
            raise ValueError(f"Cannot resize to {num_joints} joints and {num_samples} samples.")

        del self.elements[num_joints:]
        self.elements.extend([] for _ in range(num_joints - len(self.elements)))
        resize_names(self.names, num_joints)

        if num_samples is None:
            return

        for series in self.elements:
            del series[num_samples:]
            series.extend(JointState() for _ in range(num_samples - len(series)))

    def is_valid(self) -> bool:
        """Check that all joint series have equal length and `times` is empty or matches it."""
        samples = self.get_time_steps()
        if any(len(series) != samples for series in self.elements):
            return False
        return not self.times or len(self.times) == samples

    def invalid_reasons(self) -> list[str]:
        """Describe every way in which the trajectory is invalid (empty list if it's valid)."""
        samples = self.get_time_steps()
        reasons = [
            f"Joint {j} ('{self.names[j] if j < len(self.names) else ''}') has {len(series)} "
            f"samples; expected {samples}."
            for j, series in enumerate(self.elements)
            if len(series) != samples
        ]
        if self.times and len(self.times) != samples:
            reasons.append(f"Trajectory has {len(self.times)} timestamps for {samples} time steps.")
        return reasons

    def is_timed(self) -> bool:
        """Check whether the joint state series has timing information."""
        return bool(self.times)

    def get_time_steps(self) -> int:
        """Retrieve the number of time steps in the trajectory (length of the first series)."""
        return len(self.elements[0]) if self.elements else 0

    def get_number_of_joints(self) -> int:
        """Retrieve the number of joints in the trajectory."""
        return len(self.elements)

    def get_duration(self) -> Time:
        """Compute the sum of all timestamps in the trajectory (zero if untimed).

        Note: This is the cumulative sum of the sample timestamps, not the span between the first
        and last timestamps, so it only equals the elapsed time when `times` holds per-sample
        durations.
        """
        summed = Time()
        for t in self.times:
            summed = summed + t
        return summed

    def get_joints_at_time_step(self, time_step: int, joints: Joints | None = None) -> Joints:
        """Extract the states of all joints at the given time step.

        The bound check accepts `time_step == get_time_steps()`, one past the last sample; for a
        trajectory with joints, indexing there raises an IndexError from the underlying series.

        :param time_step: Index of the time step to be extracted
        :param joints: Optional Joints instance to be filled (a new one is created if None)
        :return: Joints instance holding the extracted states
        :raises InvalidTimeStep: If the time step exceeds the number of time steps
        """
        if time_step < 0 or time_step > self.get_time_steps():
            raise InvalidTimeStep(time_step)

        if joints is None:
            joints = Joints()

        # A failed lookup must leave the caller's output untouched
        states = [replace(series[time_step]) for series in self.elements]

        joints.names = list(self.names)
        joints.elements = states
        joints.time = self.times[time_step] if time_step < len(self.times) else Time()

        return joints

    def has_names(self) -> bool:
        """Check whether any joint in the trajectory is named."""
        return has_names(self.names)

    def get_element_by_name(self, name: str) -> JointSeries:
        """Retrieve the time series of the named joint (raises InvalidJointName if absent)."""
        return self.elements[find_joint_index(self.names, name)]

    def set_element_by_name(self, name: str, series: Sequence[JointState]) -> None:
        """Replace the time series of the named joint (raises InvalidJointName if absent)."""
        self.elements[find_joint_index(self.names, name)] = list(series)

    def to_array(self, joint_field: JointStateField) -> NDArray[np.float64]:
        """Collect one field of every joint state into a (num_joints, num_steps) array.

        :param joint_field: Field of the joint states to be collected (NaN where unset)
        :return: Array of joint values, indexed by joint and then time step
        :raises ValueError: If the trajectory is invalid
        """
        if not self.is_valid():
            raise ValueError(f"Cannot convert invalid trajectory: {self.invalid_reasons()}")

        arr = np.full((self.get_number_of_joints(), self.get_time_steps()), np.nan)
        for j, series in enumerate(self.elements):
            for s, state in enumerate(series):
                value = getattr(state, joint_field.value)
                if value is not None:
                    arr[j, s] = value
        return arr
