"""Define a dataclass to represent the state of a single joint at one instant."""

from __future__ import annotations

from dataclasses import dataclass, fields
from enum import StrEnum


class JointStateField(StrEnum):
    """Enumeration of the quantities that a joint state may specify."""

    POSITION = "position"
    """Joint position (rad or m)."""

    SPEED = "speed"
    """Joint speed (rad/s or m/s)."""

    EFFORT = "effort"
    """Joint effort (Nm or N)."""

    RAW = "raw"
    """Raw command or measurement (e.g., PWM or motor current)."""

    ACCELERATION = "acceleration"
    """Joint acceleration (rad/s^2 or m/s^2)."""


@dataclass
class JointState:
    """The state of one joint at one instant; any field may be left unset (None)."""

    position: float | None = None
    speed: float | None = None
    effort: float | None = None
    raw: float | None = None
    acceleration: float | None = None

    @classmethod
    def from_position(cls, value: float) -> JointState:
        """Construct a joint state specifying only a position."""
        return cls(position=value)

    @classmethod
    def from_speed(cls, value: float) -> JointState:
        """Construct a joint state specifying only a speed."""
        return cls(speed=value)

    @classmethod
    def from_effort(cls, value: float) -> JointState:
        """Construct a joint state specifying only an effort."""
        return cls(effort=value)

    @classmethod
    def from_raw(cls, value: float) -> JointState:
        """Construct a joint state specifying only a raw value."""
        return cls(raw=value)

    @classmethod
    def from_acceleration(cls, value: float) -> JointState:
        """Construct a joint state specifying only an acceleration."""
        return cls(acceleration=value)

    def has(self, field: JointStateField) -> bool:
        """Check whether the given field is set."""
        return getattr(self, field.value) is not None

    def get(self, field: JointStateField) -> float:
        """Retrieve the value of the given field.

        :param field: Field of the joint state to be retrieved
        :return: Value of the field
        :raises ValueError: If the field is unset
        """
        value = getattr(self, field.value)
        if value is None:
            raise ValueError(f"Joint state field '{field}' is unset.")
        return value

    def set(self, field: JointStateField, value: float | None) -> None:
        """Set (or clear, if given None) the value of the given field."""
        setattr(self, field.value, value)

    @property
    def set_fields(self) -> list[JointStateField]:
        """Retrieve the fields that are set, in declaration order."""
        return [JointStateField(f.name) for f in fields(self) if getattr(self, f.name) is not None]

    def is_only(self, field: JointStateField) -> bool:
        """Check whether the given field is the only field set in the joint state."""
        return self.set_fields == [field]

    @property
    def mode(self) -> JointStateField:
        """Retrieve the single field set in the joint state.

        :raises ValueError: If no field or more than one field is set
        """
        set_fields = self.set_fields
        if len(set_fields) != 1:
            raise ValueError(f"Joint state has no single mode; fields set: {set_fields}.")
        return set_fields[0]
