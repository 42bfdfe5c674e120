"""
Transform Application.

One function per message shape, each mapping its input through the rigid transform
described by a [`TransformStamped`][framebridge.models.TransformStamped]:

| Shape | Rule |
| :--- | :--- |
| `Vector3`, `Wrench` components | `v' = R @ v` (free vectors, translation never applies) |
| `Point`, `Pose.position` | `p' = R @ p + t` |
| `Quaternion`, `Pose.orientation` | `q' = q_t ⊗ q` (Hamilton product, never renormalized) |
| covariance | `B @ C @ B.T`, `B = blockdiag(R, R)` |

Stamped variants apply the rule to their payload and replace the whole header
(stamp AND frame_id) with `transform.header`. The source header is discarded,
and no check is made that the source frame matches `transform.child_frame_id`:
frame bookkeeping belongs to whoever looked the transform up.

All functions are pure: the arguments are never modified.
"""

from .covariance import transform_covariance
from .kinematics import RigidTransform, build_rigid_transform
from .models import (
    Header,
    Point,
    PointStamped,
    Pose,
    PoseStamped,
    PoseWithCovariance,
    PoseWithCovarianceStamped,
    Quaternion,
    QuaternionStamped,
    TransformStamped,
    Vector3,
    Vector3Stamped,
    Wrench,
    WrenchStamped,
)


def _stamp_from(transform: TransformStamped) -> Header:
    # The result header is a copy: callers may mutate the output freely
    return transform.header.model_copy(deep=True)


def _rotate_vector(vector: Vector3, tf: RigidTransform) -> Vector3:
    return Vector3.from_list(tf.rotate(vector.to_list()).tolist())


def _transform_pose(pose: Pose, tf: RigidTransform) -> Pose:
    return Pose(
        position=Point.from_list(tf.apply(pose.position.to_list()).tolist()),
        orientation=Quaternion.from_list(list(tf.rotate_quaternion(pose.orientation))),
    )


# ---------------------------------------------------------------------------
# Vector3
# ---------------------------------------------------------------------------


def do_transform_vector3(vector: Vector3, transform: TransformStamped) -> Vector3:
    """
    Rotates a free vector into the target frame of `transform`.

    Only the rotation is applied; a vector has no header, so none is set.
    """
    return _rotate_vector(vector, build_rigid_transform(transform))


def do_transform_vector3_stamped(
    vector: Vector3Stamped, transform: TransformStamped
) -> Vector3Stamped:
    """Rotates the inner vector and takes the header of `transform`."""
    return Vector3Stamped(
        header=_stamp_from(transform),
        vector=do_transform_vector3(vector.vector, transform),
    )


# ---------------------------------------------------------------------------
# Point
# ---------------------------------------------------------------------------


def do_transform_point(point: Point, transform: TransformStamped) -> Point:
    """Applies the full rigid transform to a position: `R @ p + t`."""
    tf = build_rigid_transform(transform)
    return Point.from_list(tf.apply(point.to_list()).tolist())


def do_transform_point_stamped(
    point: PointStamped, transform: TransformStamped
) -> PointStamped:
    """
    Applies the full rigid transform to the inner point and takes the header of `transform`.

    Example:
        ```python
        # Rotate 90 degrees about Z, lift by 5 meters, express in frame "b"
        transform = TransformStamped(
            header=Header(frame_id="b"),
            child_frame_id="a",
            transform=Transform(
                translation=Vector3(z=5.0),
                rotation=Quaternion(z=math.sqrt(0.5), w=math.sqrt(0.5)),
            ),
        )
        src = PointStamped(header=Header(frame_id="a"), point=Point(x=1.0))
        do_transform_point_stamped(src, transform).point  # ~ Point(x=0, y=1, z=5)
        ```
    """
    return PointStamped(
        header=_stamp_from(transform),
        point=do_transform_point(point.point, transform),
    )


# ---------------------------------------------------------------------------
# Quaternion
# ---------------------------------------------------------------------------


def do_transform_quaternion(
    quaternion: Quaternion, transform: TransformStamped
) -> Quaternion:
    """Composes the rotation of `transform` with an orientation. Translation has no effect."""
    tf = build_rigid_transform(transform)
    return Quaternion.from_list(list(tf.rotate_quaternion(quaternion)))


def do_transform_quaternion_stamped(
    quaternion: QuaternionStamped, transform: TransformStamped
) -> QuaternionStamped:
    """Rotates the inner orientation and takes the header of `transform`."""
    return QuaternionStamped(
        header=_stamp_from(transform),
        quaternion=do_transform_quaternion(quaternion.quaternion, transform),
    )


# ---------------------------------------------------------------------------
# Pose
# ---------------------------------------------------------------------------


def do_transform_pose(pose: Pose, transform: TransformStamped) -> Pose:
    """
    Transforms a pose.

    The position goes through the full rigid transform, the orientation is
    composed with the rotation of `transform`.
    """
    return _transform_pose(pose, build_rigid_transform(transform))


def do_transform_pose_stamped(
    pose: PoseStamped, transform: TransformStamped
) -> PoseStamped:
    """Transforms the inner pose and takes the header of `transform`."""
    return PoseStamped(
        header=_stamp_from(transform),
        pose=do_transform_pose(pose.pose, transform),
    )


def do_transform_pose_with_covariance_stamped(
    pose: PoseWithCovarianceStamped, transform: TransformStamped
) -> PoseWithCovarianceStamped:
    """
    Transforms the inner pose, rotates its covariance and takes the header of `transform`.

    See [`transform_covariance`][framebridge.covariance.transform_covariance] for the
    covariance rule.
    """
    tf = build_rigid_transform(transform)
    return PoseWithCovarianceStamped(
        header=_stamp_from(transform),
        pose=PoseWithCovariance(
            pose=_transform_pose(pose.pose.pose, tf),
            covariance=transform_covariance(pose.pose.covariance, tf),
        ),
    )


# ---------------------------------------------------------------------------
# Wrench
# ---------------------------------------------------------------------------


def do_transform_wrench(wrench: Wrench, transform: TransformStamped) -> Wrench:
    """
    Rotates force and torque independently.

    A wrench's components are free vectors, so the translation of `transform`
    is applied to neither.
    """
    tf = build_rigid_transform(transform)
    return Wrench(
        force=_rotate_vector(wrench.force, tf),
        torque=_rotate_vector(wrench.torque, tf),
    )


def do_transform_wrench_stamped(
    wrench: WrenchStamped, transform: TransformStamped
) -> WrenchStamped:
    """Rotates the inner wrench and takes the header of `transform`."""
    return WrenchStamped(
        header=_stamp_from(transform),
        wrench=do_transform_wrench(wrench.wrench, transform),
    )


# ---------------------------------------------------------------------------
# TransformStamped
# ---------------------------------------------------------------------------


def do_transform_transform_stamped(
    transform_in: TransformStamped, transform: TransformStamped
) -> TransformStamped:
    """
    Chains two transforms: the result maps from `transform_in.child_frame_id`
    to `transform.header.frame_id`.
    """
    out = build_rigid_transform(transform) * build_rigid_transform(transform_in)
    return TransformStamped(
        header=_stamp_from(transform),
        child_frame_id=transform_in.child_frame_id,
        transform=out.to_transform_msg(),
    )
