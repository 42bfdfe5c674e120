from .base_model import BaseModel as BaseModel
from .header import Header as Header, Time as Time, TimePoint as TimePoint
from .geometry import (
    COVARIANCE_SIZE as COVARIANCE_SIZE,
    Point as Point,
    Pose as Pose,
    PoseWithCovariance as PoseWithCovariance,
    Quaternion as Quaternion,
    Transform as Transform,
    Vector3 as Vector3,
    Wrench as Wrench,
)
from .stamped import (
    StampedMixin as StampedMixin,
    PointStamped as PointStamped,
    PoseStamped as PoseStamped,
    PoseWithCovarianceStamped as PoseWithCovarianceStamped,
    QuaternionStamped as QuaternionStamped,
    TransformStamped as TransformStamped,
    Vector3Stamped as Vector3Stamped,
    WrenchStamped as WrenchStamped,
)
