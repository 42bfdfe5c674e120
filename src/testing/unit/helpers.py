import math
from typing import Optional, Sequence

from framebridge import (
    Header,
    Quaternion,
    Time,
    Transform,
    TransformStamped,
    Vector3,
)

SQRT_HALF = math.sqrt(0.5)

# Rotation of 90 degrees about Z
ROT_Z_90 = (0.0, 0.0, SQRT_HALF, SQRT_HALF)
IDENTITY_ROT = (0.0, 0.0, 0.0, 1.0)


def make_transform(
    translation: Sequence[float] = (0.0, 0.0, 0.0),
    rotation: Sequence[float] = IDENTITY_ROT,
    frame_id: str = "b",
    child_frame_id: str = "a",
    stamp: Optional[Time] = None,
) -> TransformStamped:
    return TransformStamped(
        header=Header(stamp=stamp if stamp is not None else Time(), frame_id=frame_id),
        child_frame_id=child_frame_id,
        transform=Transform(
            translation=Vector3.from_list(list(translation)),
            rotation=Quaternion.from_list(list(rotation)),
        ),
    )


def same_rotation(q1: Quaternion, q2: Quaternion, tol: float = 1e-9) -> bool:
    """Quaternions q and -q encode the same rotation."""
    dot = abs(q1.x * q2.x + q1.y * q2.y + q1.z * q2.z + q1.w * q2.w)
    return abs(dot - 1.0) < tol
