"""
Stamped Message Envelopes.

Every class in this module pairs a geometry payload with a
[`Header`][framebridge.models.header.Header] carrying the time and the frame
the payload is expressed in. These are the types the transform adapters
accept and return.
"""

from pydantic import Field

from .base_model import BaseModel
from .header import Header
from .geometry import (
    Point,
    Pose,
    PoseWithCovariance,
    Quaternion,
    Transform,
    Vector3,
    Wrench,
)


class StampedMixin(BaseModel):
    """
    A mixin that injects the standard `header` field into a stamped message.
    """

    header: Header = Field(default_factory=Header)
    """Time and coordinate frame of the payload."""


class Vector3Stamped(StampedMixin):
    """A free vector with a header."""

    vector: Vector3 = Field(default_factory=Vector3)


class PointStamped(StampedMixin):
    """A point with a header."""

    point: Point = Field(default_factory=Point)


class QuaternionStamped(StampedMixin):
    """An orientation with a header."""

    quaternion: Quaternion = Field(default_factory=Quaternion)


class PoseStamped(StampedMixin):
    """A pose with a header."""

    pose: Pose = Field(default_factory=Pose)


class PoseWithCovarianceStamped(StampedMixin):
    """A pose with covariance and a header."""

    pose: PoseWithCovariance = Field(default_factory=PoseWithCovariance)


class WrenchStamped(StampedMixin):
    """A wrench with a header."""

    wrench: Wrench = Field(default_factory=Wrench)


class TransformStamped(StampedMixin):
    """
    A rigid transform between two named frames.

    The transform maps quantities FROM `child_frame_id` TO the parent frame
    named in `header.frame_id`. When used to transform a message, its header
    becomes the header of the result.

    Example:
        ```python
        # base_link expressed in map: 1 meter ahead, no rotation
        t = TransformStamped(
            header=Header(stamp=Time(sec=17000, nanosec=0), frame_id="map"),
            child_frame_id="base_link",
            transform=Transform(translation=Vector3(x=1.0)),
        )
        ```
    """

    child_frame_id: str = ""
    """Frame the transform maps from."""

    transform: Transform = Field(default_factory=Transform)
    """Translation and rotation of the child frame in the parent frame."""
