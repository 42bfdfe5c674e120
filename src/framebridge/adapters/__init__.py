from .geometry_msgs import (
    Vector3Adapter as Vector3Adapter,
    PointAdapter as PointAdapter,
    QuaternionAdapter as QuaternionAdapter,
    PoseAdapter as PoseAdapter,
    WrenchAdapter as WrenchAdapter,
    Vector3StampedAdapter as Vector3StampedAdapter,
    PointStampedAdapter as PointStampedAdapter,
    QuaternionStampedAdapter as QuaternionStampedAdapter,
    PoseStampedAdapter as PoseStampedAdapter,
    PoseWithCovarianceStampedAdapter as PoseWithCovarianceStampedAdapter,
    WrenchStampedAdapter as WrenchStampedAdapter,
    TransformStampedAdapter as TransformStampedAdapter,
)
