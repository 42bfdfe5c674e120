"""
Rigid-Body Kinematics.

This module turns transform messages into a [`RigidTransform`][framebridge.kinematics.RigidTransform],
the single primitive every transform adapter is built on. A rigid transform is a
rotation quaternion `q` (with its 3x3 matrix `R`) and a translation vector `t`:

* positions are mapped as `p' = R @ p + t`;
* free vectors (directions, forces, torques) are mapped as `v' = R @ v`;
* orientations are mapped as `q' = q ⊗ q_in` (Hamilton product).

Quaternions are never normalized. The matrix of a quaternion of norm `n` is a
rotation scaled by `n**2`, and products of quaternions are plain arithmetic, so
a zero or non-unit quaternion flows through every operation without raising.
"""

from typing import Sequence, Tuple, Union

import numpy as np

from .models import Quaternion, Transform, TransformStamped, Vector3


QuaternionLike = Union[Quaternion, Sequence[float]]


def _as_xyzw(q: QuaternionLike) -> Tuple[float, float, float, float]:
    if isinstance(q, Quaternion):
        return q.x, q.y, q.z, q.w
    x, y, z, w = q
    return float(x), float(y), float(z), float(w)


def quaternion_to_matrix(q: QuaternionLike) -> np.ndarray:
    """
    Builds the 3x3 rotation matrix of a quaternion.

    The homogeneous form of the conversion is used and the quaternion is NOT
    normalized first: for a unit quaternion the result is a proper rotation,
    for a non-unit quaternion of norm `n` it is a rotation scaled by `n**2`.

    Args:
        q: A [`Quaternion`][framebridge.models.Quaternion] or an `(x, y, z, w)` sequence.

    Returns:
        np.ndarray: A (3, 3) float64 matrix.
    """
    x, y, z, w = _as_xyzw(q)

    return np.array(
        [
            [w * w + x * x - y * y - z * z, 2 * (x * y - w * z), 2 * (x * z + w * y)],
            [2 * (x * y + w * z), w * w - x * x + y * y - z * z, 2 * (y * z - w * x)],
            [2 * (x * z - w * y), 2 * (y * z + w * x), w * w - x * x - y * y + z * z],
        ],
        dtype=np.float64,
    )


def quaternion_multiply(
    lhs: QuaternionLike, rhs: QuaternionLike
) -> Tuple[float, float, float, float]:
    """
    Hamilton product `lhs ⊗ rhs` of two `(x, y, z, w)` quaternions.

    The result rotates by `rhs` first, then by `lhs`. Norms multiply, so the
    product of non-unit inputs stays non-unit.
    """
    x1, y1, z1, w1 = _as_xyzw(lhs)
    x2, y2, z2, w2 = _as_xyzw(rhs)
    return (
        w1 * x2 + x1 * w2 + y1 * z2 - z1 * y2,
        w1 * y2 - x1 * z2 + y1 * w2 + z1 * x2,
        w1 * z2 + x1 * y2 - y1 * x2 + z1 * w2,
        w1 * w2 - x1 * x2 - y1 * y2 - z1 * z2,
    )


class RigidTransform:
    """
    A rotation composed with a translation.

    Instances are value objects: every operation returns new arrays or a new
    `RigidTransform`, the stored values are never modified in place. The
    rotation is kept as the quaternion it was built from, so orientations and
    chained transforms come back out exactly as the arithmetic gives them.

    Example:
        ```python
        # 90 degrees about Z, then 5 meters up
        tf = RigidTransform(
            quaternion=(0.0, 0.0, math.sqrt(0.5), math.sqrt(0.5)),
            translation=[0.0, 0.0, 5.0],
        )
        tf.apply([1.0, 0.0, 0.0])   # -> array([0., 1., 5.])
        tf.rotate([1.0, 0.0, 0.0])  # -> array([0., 1., 0.])
        ```

    Attributes:
        quaternion: `(x, y, z, w)` rotation quaternion `q`.
        rotation: (3, 3) rotation matrix `R` of `quaternion`.
        translation: (3,) translation vector `t`.
    """

    __slots__ = ("quaternion", "rotation", "translation")

    def __init__(self, quaternion: QuaternionLike, translation):
        self.quaternion = _as_xyzw(quaternion)
        self.rotation = quaternion_to_matrix(self.quaternion)
        self.translation = np.asarray(translation, dtype=np.float64).reshape(3)

    @classmethod
    def identity(cls) -> "RigidTransform":
        """The transform that maps every quantity onto itself."""
        return cls((0.0, 0.0, 0.0, 1.0), np.zeros(3))

    @classmethod
    def from_pose(cls, position: Sequence[float], orientation: QuaternionLike) -> "RigidTransform":
        """
        Builds the transform whose origin sits at `position` with the given `orientation`.

        Args:
            position: `(x, y, z)` of the origin.
            orientation: A [`Quaternion`][framebridge.models.Quaternion] or an `(x, y, z, w)` sequence.
        """
        return cls(orientation, position)

    def apply(self, point) -> np.ndarray:
        """Maps a position: `R @ p + t`."""
        return self.rotation @ np.asarray(point, dtype=np.float64) + self.translation

    def rotate(self, vector) -> np.ndarray:
        """Maps a free vector: `R @ v`. The translation is ignored."""
        return self.rotation @ np.asarray(vector, dtype=np.float64)

    def rotate_quaternion(self, orientation: QuaternionLike) -> Tuple[float, float, float, float]:
        """Maps an orientation: `q ⊗ q_in`. The translation is ignored."""
        return quaternion_multiply(self.quaternion, orientation)

    def compose(self, other: "RigidTransform") -> "RigidTransform":
        """
        Returns `self * other`: the transform applying `other` first, then `self`.
        """
        return RigidTransform(
            self.rotate_quaternion(other.quaternion),
            self.rotation @ other.translation + self.translation,
        )

    def __mul__(self, other: "RigidTransform") -> "RigidTransform":
        if not isinstance(other, RigidTransform):
            return NotImplemented
        return self.compose(other)

    def to_quaternion(self) -> Tuple[float, float, float, float]:
        """The rotation as an `(x, y, z, w)` quaternion, exactly as stored."""
        return self.quaternion

    def as_matrix(self) -> np.ndarray:
        """The transform as a 4x4 homogeneous matrix."""
        out = np.eye(4)
        out[:3, :3] = self.rotation
        out[:3, 3] = self.translation
        return out

    def to_transform_msg(self) -> Transform:
        """Converts the transform back into a [`Transform`][framebridge.models.Transform] message."""
        return Transform(
            translation=Vector3.from_list(self.translation.tolist()),
            rotation=Quaternion.from_list(list(self.quaternion)),
        )

    def __repr__(self) -> str:
        return (
            f"RigidTransform(quaternion={list(self.quaternion)}, "
            f"translation={self.translation.tolist()})"
        )


def build_rigid_transform(
    transform_msg: Union[TransformStamped, Transform],
) -> RigidTransform:
    """
    Builds the [`RigidTransform`][framebridge.kinematics.RigidTransform] described by a transform message.

    This is the shared primitive of every `do_transform_*` function. No validation
    is performed: a non-unit rotation quaternion silently produces a non-rigid result.

    Args:
        transform_msg: A `TransformStamped` or a bare `Transform` message.

    Returns:
        RigidTransform: rotation from `transform.rotation`, translation from `transform.translation`.
    """
    if isinstance(transform_msg, TransformStamped):
        transform_msg = transform_msg.transform

    return RigidTransform(transform_msg.rotation, transform_msg.translation.to_list())
