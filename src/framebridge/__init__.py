"""
framebridge - frame-transform adapters for geometry messages.

This package moves stamped geometry messages (vectors, points, quaternions, poses,
poses with covariance, wrenches, transforms) between coordinate frames:

- **Models**: pydantic shapes mirroring `geometry_msgs`.
- **Kinematics**: `RigidTransform`, built from a `TransformStamped`.
- **Adapters**: one per message shape, registered in the `TransformRegistry`.
- **convert**: generic `do_transform`, `get_timestamp`, `get_frame_id`,
  `to_msg`, `from_msg` dispatching on the message type.

Example:
    >>> from framebridge import convert, PointStamped, TransformStamped
    >>> out = convert.do_transform(PointStamped(), TransformStamped())
"""

# --- Models ---
from .models import (
    Time as Time,
    TimePoint as TimePoint,
    Header as Header,
    Vector3 as Vector3,
    Point as Point,
    Quaternion as Quaternion,
    Pose as Pose,
    PoseWithCovariance as PoseWithCovariance,
    Transform as Transform,
    Wrench as Wrench,
    Vector3Stamped as Vector3Stamped,
    PointStamped as PointStamped,
    QuaternionStamped as QuaternionStamped,
    PoseStamped as PoseStamped,
    PoseWithCovarianceStamped as PoseWithCovarianceStamped,
    WrenchStamped as WrenchStamped,
    TransformStamped as TransformStamped,
)

# --- Kinematics ---
from .kinematics import (
    RigidTransform as RigidTransform,
    build_rigid_transform as build_rigid_transform,
)

# --- Registry ---
from .adapter_base import (
    TransformAdapterBase as TransformAdapterBase,
    StampedAdapterBase as StampedAdapterBase,
)
from .registry import (
    TransformRegistry as TransformRegistry,
    register_adapter as register_adapter,
)

# This will register the adapters in the registry
from . import adapters as adapters

from . import convert as convert

from .logging_config import (
    get_logger as get_logger,
    setup_logging as setup_logging,
)

__all__ = [
    # Models
    "Time",
    "TimePoint",
    "Header",
    "Vector3",
    "Point",
    "Quaternion",
    "Pose",
    "PoseWithCovariance",
    "Transform",
    "Wrench",
    "Vector3Stamped",
    "PointStamped",
    "QuaternionStamped",
    "PoseStamped",
    "PoseWithCovarianceStamped",
    "WrenchStamped",
    "TransformStamped",
    # Kinematics
    "RigidTransform",
    "build_rigid_transform",
    # Registry
    "TransformAdapterBase",
    "StampedAdapterBase",
    "TransformRegistry",
    "register_adapter",
    "adapters",
    "convert",
    # Logging
    "get_logger",
    "setup_logging",
]


# --- Set up the top-level logger for the package ---

from logging import NullHandler

_root_logger = get_logger()
_root_logger.addHandler(NullHandler())
