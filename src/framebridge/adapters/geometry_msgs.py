"""
Geometry Messages Adapters.

This module registers one adapter per `geometry_msgs` shape, wiring each shape to
its transform rule in [`transforms`][framebridge.transforms]. Unstamped shapes only
know how to be transformed; stamped shapes additionally expose their time, their
frame and the identity `to_msg` / `from_msg` conversions.
"""

from typing import Type

from framebridge.models import (
    Point,
    PointStamped,
    Pose,
    PoseStamped,
    PoseWithCovarianceStamped,
    Quaternion,
    QuaternionStamped,
    TransformStamped,
    Vector3,
    Vector3Stamped,
    Wrench,
    WrenchStamped,
)

from .. import transforms
from ..adapter_base import (
    CovarianceAdapterMixin,
    StampedAdapterBase,
    TransformAdapterBase,
)
from ..registry import register_adapter


# ---------------------------------------------------------------------------
# Unstamped shapes
# ---------------------------------------------------------------------------


@register_adapter
class Vector3Adapter(TransformAdapterBase[Vector3]):
    """Free vector: rotation only."""

    msg_type: Type[Vector3] = Vector3

    @classmethod
    def do_transform(cls, msg: Vector3, transform: TransformStamped) -> Vector3:
        return transforms.do_transform_vector3(msg, transform)


@register_adapter
class PointAdapter(TransformAdapterBase[Point]):
    """Position: full rigid transform."""

    msg_type: Type[Point] = Point

    @classmethod
    def do_transform(cls, msg: Point, transform: TransformStamped) -> Point:
        return transforms.do_transform_point(msg, transform)


@register_adapter
class QuaternionAdapter(TransformAdapterBase[Quaternion]):
    """Orientation: rotation composition."""

    msg_type: Type[Quaternion] = Quaternion

    @classmethod
    def do_transform(cls, msg: Quaternion, transform: TransformStamped) -> Quaternion:
        return transforms.do_transform_quaternion(msg, transform)


@register_adapter
class PoseAdapter(TransformAdapterBase[Pose]):
    """Pose: rigid transform on the position, rotation composition on the orientation."""

    msg_type: Type[Pose] = Pose

    @classmethod
    def do_transform(cls, msg: Pose, transform: TransformStamped) -> Pose:
        return transforms.do_transform_pose(msg, transform)


@register_adapter
class WrenchAdapter(TransformAdapterBase[Wrench]):
    """Wrench: rotation only, on force and torque independently."""

    msg_type: Type[Wrench] = Wrench

    @classmethod
    def do_transform(cls, msg: Wrench, transform: TransformStamped) -> Wrench:
        return transforms.do_transform_wrench(msg, transform)


# ---------------------------------------------------------------------------
# Stamped shapes
# ---------------------------------------------------------------------------


@register_adapter
class Vector3StampedAdapter(StampedAdapterBase[Vector3Stamped]):
    """
    Adapter for `Vector3Stamped`.

    Example:
        ```python
        out = Vector3StampedAdapter.do_transform(vector_in_a, transform_a_to_b)
        Vector3StampedAdapter.get_frame_id(out)  # -> transform_a_to_b.header.frame_id
        ```
    """

    msg_type: Type[Vector3Stamped] = Vector3Stamped

    @classmethod
    def do_transform(
        cls, msg: Vector3Stamped, transform: TransformStamped
    ) -> Vector3Stamped:
        return transforms.do_transform_vector3_stamped(msg, transform)


@register_adapter
class PointStampedAdapter(StampedAdapterBase[PointStamped]):
    """Adapter for `PointStamped`."""

    msg_type: Type[PointStamped] = PointStamped

    @classmethod
    def do_transform(
        cls, msg: PointStamped, transform: TransformStamped
    ) -> PointStamped:
        return transforms.do_transform_point_stamped(msg, transform)


@register_adapter
class QuaternionStampedAdapter(StampedAdapterBase[QuaternionStamped]):
    """Adapter for `QuaternionStamped`."""

    msg_type: Type[QuaternionStamped] = QuaternionStamped

    @classmethod
    def do_transform(
        cls, msg: QuaternionStamped, transform: TransformStamped
    ) -> QuaternionStamped:
        return transforms.do_transform_quaternion_stamped(msg, transform)


@register_adapter
class PoseStampedAdapter(StampedAdapterBase[PoseStamped]):
    """Adapter for `PoseStamped`."""

    msg_type: Type[PoseStamped] = PoseStamped

    @classmethod
    def do_transform(cls, msg: PoseStamped, transform: TransformStamped) -> PoseStamped:
        return transforms.do_transform_pose_stamped(msg, transform)


@register_adapter
class PoseWithCovarianceStampedAdapter(
    CovarianceAdapterMixin, StampedAdapterBase[PoseWithCovarianceStamped]
):
    """
    Adapter for `PoseWithCovarianceStamped`.

    Besides the stamped operations, exposes the covariance as a nested 6x6 matrix
    through `get_covariance_matrix`.
    """

    msg_type: Type[PoseWithCovarianceStamped] = PoseWithCovarianceStamped

    @classmethod
    def do_transform(
        cls, msg: PoseWithCovarianceStamped, transform: TransformStamped
    ) -> PoseWithCovarianceStamped:
        return transforms.do_transform_pose_with_covariance_stamped(msg, transform)


@register_adapter
class WrenchStampedAdapter(StampedAdapterBase[WrenchStamped]):
    """Adapter for `WrenchStamped`."""

    msg_type: Type[WrenchStamped] = WrenchStamped

    @classmethod
    def do_transform(
        cls, msg: WrenchStamped, transform: TransformStamped
    ) -> WrenchStamped:
        return transforms.do_transform_wrench_stamped(msg, transform)


@register_adapter
class TransformStampedAdapter(StampedAdapterBase[TransformStamped]):
    """Adapter for `TransformStamped`: chains the input after `transform`."""

    msg_type: Type[TransformStamped] = TransformStamped

    @classmethod
    def do_transform(
        cls, msg: TransformStamped, transform: TransformStamped
    ) -> TransformStamped:
        return transforms.do_transform_transform_stamped(msg, transform)
