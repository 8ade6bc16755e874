"""Define utility functions for looking up joints by name in index-aligned collections."""

from __future__ import annotations

from collections.abc import Sequence


class InvalidJointName(KeyError):
    """An error raised when a joint name is not found in a collection."""

    def __init__(self, name: str) -> None:
        """Initialize the error with the name that could not be found."""
        super().__init__(f"No joint named '{name}' in the collection.")
        self.name = name


def find_joint_index(names: Sequence[str], name: str) -> int:
    """Find the index of the first joint with the given name.

    :param names: Joint names, index-aligned with the collection's elements
    :param name: Name of the joint to be found
    :return: Index of the joint
    :raises InvalidJointName: If no joint has the given name
    """
    for index, joint_name in enumerate(names):
        if joint_name == name:
            return index
    raise InvalidJointName(name)


def has_names(names: Sequence[str]) -> bool:
    """Check whether at least one joint in the collection has a (non-empty) name."""
    return any(names)


def resize_names(names: list[str], size: int) -> None:
    """Truncate or pad (with empty names) the given list of names in place.

    :raises ValueError: If the size is negative
    """
    if size < 0:
        raise ValueError(f"Cannot resize names to negative size {size}.")
    del names[size:]
    names.extend("" for _ in range(size - len(names)))
