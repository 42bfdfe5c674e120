"""
Geometry Data Structures.

This module defines the unstamped `geometry_msgs` shapes: vectors, points,
quaternions, poses, transforms and wrenches.

* **_Struct classes**: Pure data containers holding the (x, y, z[, w]) fields and the
    list helpers. They are shared by the semantically different public classes
    (e.g. `Vector3` and `Point`) that happen to have the same layout.
* **Public classes**: The message shapes consumed and produced by the transform
    adapters. Stamped envelopes live in [`stamped`][framebridge.models.stamped].
"""

from typing import List
from pydantic import Field

from .base_model import BaseModel


COVARIANCE_SIZE = 36
"""Number of elements of a flattened 6x6 pose covariance matrix."""


# ---------------------------------------------------------------------------
# STRUCT classes
# ---------------------------------------------------------------------------


class _XYZStruct(BaseModel):
    """
    Internal structure for 3-component shapes.
    Contains only data fields, no semantics.
    """

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    @classmethod
    def from_list(cls, data: List[float]):
        """
        Helper to create instance from a list.

        Args:
            data (list[float]): A list containing exactly [x, y, z].

        Raises:
            ValueError: If list length is not 3.
        """
        if len(data) != 3:
            raise ValueError(f"expected 3 values, got {len(data)}")
        return cls(x=data[0], y=data[1], z=data[2])

    def to_list(self) -> List[float]:
        """Returns the components as `[x, y, z]`."""
        return [self.x, self.y, self.z]


class _XYZWStruct(BaseModel):
    """
    Internal structure for 4-component shapes (Quaternions).
    Contains only data fields, no semantics.
    """

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    w: float = 1.0

    @classmethod
    def from_list(cls, data: List[float]):
        """
        Helper to create instance from a list.

        Args:
            data (list[float]): A list containing exactly [x, y, z, w].

        Raises:
            ValueError: If list length is not 4.
        """
        if len(data) != 4:
            raise ValueError(f"expected 4 values, got {len(data)}")
        return cls(x=data[0], y=data[1], z=data[2], w=data[3])

    def to_list(self) -> List[float]:
        """Returns the components as `[x, y, z, w]`."""
        return [self.x, self.y, self.z, self.w]


# ---------------------------------------------------------------------------
# Public classes
# ---------------------------------------------------------------------------


class Vector3(_XYZStruct):
    """
    A free vector (direction, velocity, force, torque).

    Free vectors have no origin: a change of frame rotates them but never
    translates them.
    """

    pass


class Point(_XYZStruct):
    """
    Semantically represents a position in 3D space.
    Structurally identical to `Vector3`, but affected by the translation of a transform.
    """

    pass


class Quaternion(_XYZWStruct):
    """
    Rotation quaternion in (x, y, z, w) order. Defaults to the identity rotation.

    Note: Unit Norm
        Quaternions are expected to be unit length. They are neither validated nor
        renormalized: a non-unit quaternion yields a scaled, non-rigid rotation
        matrix once turned into a [`RigidTransform`][framebridge.kinematics.RigidTransform].
    """

    pass


class Pose(BaseModel):
    """Position and orientation of an object in space."""

    position: Point = Field(default_factory=Point)
    """Position of the origin of the object."""

    orientation: Quaternion = Field(default_factory=Quaternion)
    """Orientation of the object."""


class PoseWithCovariance(BaseModel):
    """
    A pose together with its uncertainty.

    The covariance is a flattened 6x6 matrix in row-major order, over the
    parameters (x, y, z, rotation about X, rotation about Y, rotation about Z).
    """

    pose: Pose = Field(default_factory=Pose)
    """The estimated pose."""

    covariance: List[float] = Field(
        default_factory=lambda: [0.0] * COVARIANCE_SIZE
    )
    """Row-major 6x6 covariance matrix. Length is not enforced."""


class Transform(BaseModel):
    """
    A spatial transformation between two coordinate frames (Translation + Rotation).
    """

    translation: Vector3 = Field(default_factory=Vector3)
    """3D translation vector."""

    rotation: Quaternion = Field(default_factory=Quaternion)
    """Quaternion representing rotation."""


class Wrench(BaseModel):
    """
    Force and torque applied to a rigid body.

    Both components are free vectors: changing frame rotates them, translation
    never applies.
    """

    force: Vector3 = Field(default_factory=Vector3)
    """Linear force, in Newtons."""

    torque: Vector3 = Field(default_factory=Vector3)
    """Rotational moment, in Newton-meters."""
