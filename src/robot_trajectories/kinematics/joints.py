"""Define a class representing the states of several joints at a single time step."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field

import numpy as np
from numpy.typing import NDArray

from robot_trajectories.kinematics.joint_names import find_joint_index, has_names, resize_names
from robot_trajectories.kinematics.joint_state import JointState, JointStateField
from robot_trajectories.timing import Time


@dataclass
class Joints:
    """The states of a set of optionally named joints at one instant.

    Names and elements are index-aligned: `names[i]` is the name of the joint in `elements[i]`.
    """

    time: Time = field(default_factory=Time)
    """Timestamp of the sample (zero if unknown)."""

    names: list[str] = field(default_factory=list)
    elements: list[JointState] = field(default_factory=list)

    @classmethod
    def from_field_values(
        cls,
        joint_field: JointStateField,
        values: Sequence[float],
        names: Sequence[str] | None = None,
    ) -> Joints:
        """Construct a Joints sample in which every joint specifies only the given field.

        :param joint_field: Field set on every joint state
        :param values: One value per joint
        :param names: Optional joint names (must match the number of values)
        :return: Constructed Joints instance
        """
        if names is not None and len(names) != len(values):
            raise ValueError(f"Got {len(names)} names for {len(values)} joint values.")

        elements = []
        for value in values:
            state = JointState()
            state.set(joint_field, float(value))
            elements.append(state)

        names_list = list(names) if names is not None else [""] * len(elements)
        return cls(names=names_list, elements=elements)

    @classmethod
    def from_positions(cls, values: Sequence[float], names: Sequence[str] | None = None) -> Joints:
        """Construct a Joints sample specifying only joint positions."""
        return cls.from_field_values(JointStateField.POSITION, values, names)

    @classmethod
    def from_speeds(cls, values: Sequence[float], names: Sequence[str] | None = None) -> Joints:
        """Construct a Joints sample specifying only joint speeds."""
        return cls.from_field_values(JointStateField.SPEED, values, names)

    @classmethod
    def from_efforts(cls, values: Sequence[float], names: Sequence[str] | None = None) -> Joints:
        """Construct a Joints sample specifying only joint efforts."""
        return cls.from_field_values(JointStateField.EFFORT, values, names)

    @property
    def size(self) -> int:
        """Retrieve the number of joints in the sample."""
        return len(self.elements)

    def is_empty(self) -> bool:
        """Check whether the sample contains no joints."""
        return not self.elements

    def has_names(self) -> bool:
        """Check whether any joint in the sample is named."""
        return has_names(self.names)

    def resize(self, size: int) -> None:
        """Truncate or pad (with default joint states and empty names) to the given size.

        :raises ValueError: If the size is negative
        """
        if size < 0:
            raise ValueError(f"Cannot resize Joints to negative size {size}.")
        del self.elements[size:]
        self.elements.extend(JointState() for _ in range(size - len(self.elements)))
        resize_names(self.names, size)

    def clear(self) -> None:
        """Remove all joints from the sample."""
        self.names.clear()
        self.elements.clear()

    def index_of(self, name: str) -> int:
        """Find the index of the named joint (raises InvalidJointName if absent)."""
        return find_joint_index(self.names, name)

    def get_element_by_name(self, name: str) -> JointState:
        """Retrieve the state of the named joint."""
        return self.elements[self.index_of(name)]

    def set_element_by_name(self, name: str, state: JointState) -> None:
        """Replace the state of the named joint."""
        self.elements[self.index_of(name)] = state

    def to_array(self, joint_field: JointStateField) -> NDArray[np.float64]:
        """Collect the given field of every joint into an array (NaN where unset)."""
        values = [getattr(s, joint_field.value) for s in self.elements]
        return np.array([np.nan if v is None else v for v in values], dtype=float)
