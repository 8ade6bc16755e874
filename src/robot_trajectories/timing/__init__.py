"""Import classes and definitions for representing time."""

from .time import Time as Time
