"""
Header and Time Definitions.

This module defines the standard `Header` structure that gives stamped messages
their temporal and spatial context. Its `Time` class keeps ROS-style whole
seconds and nanoseconds apart and converts losslessly to and from the integer
nanosecond count used as the canonical time point.
"""

from typing import Optional
from pydantic import Field, field_validator

from .base_model import BaseModel


TimePoint = int
"""
Canonical time representation returned by timestamp accessors:
integer nanoseconds since the epoch.
"""


class Time(BaseModel):
    """
    A high-precision time representation designed to prevent precision loss.

    The `Time` class splits a timestamp into an integer count of seconds and an
    unsigned integer count of nanoseconds, following `builtin_interfaces/Time`.

    Attributes:
        sec: Seconds since the epoch (Unix time).
        nanosec: Nanoseconds component within the current second, ranging from 0 to 999,999,999.
    """

    sec: int = 0
    """Seconds since the epoch (Unix time)."""

    nanosec: int = 0
    """Nanoseconds component within the current second, ranging from 0 to 999,999,999."""

    @field_validator("nanosec")
    @classmethod
    def validate_nanosec(cls, v: int) -> int:
        """Ensures nanoseconds are within the valid [0, 1e9) range."""
        if not (0 <= v < 1_000_000_000):
            raise ValueError(f"Nanoseconds must be in [0, 1e9). Got {v}")
        return v

    @classmethod
    def from_nanoseconds(cls, total_nanoseconds: TimePoint) -> "Time":
        """
        Factory method to create a Time object from a total count of nanoseconds.

        This is the inverse of [`to_nanoseconds`][framebridge.models.header.Time.to_nanoseconds]
        and is lossless.
        """
        sec = total_nanoseconds // 1_000_000_000
        nanosec = total_nanoseconds % 1_000_000_000
        return cls(sec=sec, nanosec=nanosec)

    def to_nanoseconds(self) -> TimePoint:
        """Converts the time to a total integer of nanoseconds, preserving full precision."""
        return (self.sec * 1_000_000_000) + self.nanosec


class Header(BaseModel):
    """
    Standard metadata header carried by every stamped message.

    Attributes:
        stamp: The high-precision [`Time`][framebridge.models.header.Time] the data refers to.
        frame_id: Identifier of the coordinate frame the data is expressed in.
        seq: An optional sequence ID, kept for ROS 1 style headers.
    """

    stamp: Time = Field(default_factory=Time)
    """The time the data refers to."""

    frame_id: str = ""
    """Identifier of the coordinate frame the data is expressed in."""

    seq: Optional[int] = None
    """An optional sequence ID, primarily used for legacy tracking."""
