import pytest

from framebridge import (
    Header,
    Point,
    PointStamped,
    Pose,
    PoseStamped,
    PoseWithCovariance,
    PoseWithCovarianceStamped,
    Quaternion,
    QuaternionStamped,
    Time,
    TransformStamped,
    Vector3,
    Vector3Stamped,
    Wrench,
    WrenchStamped,
)

from .helpers import ROT_Z_90, make_transform


@pytest.fixture
def rot_z_90_lift_5() -> TransformStamped:
    """90 degrees about Z, then 5 meters along Z, from frame 'a' to frame 'b'."""
    return make_transform(
        translation=(0.0, 0.0, 5.0),
        rotation=ROT_Z_90,
        frame_id="b",
        child_frame_id="a",
        stamp=Time(sec=42, nanosec=500),
    )


@pytest.fixture
def identity_transform() -> TransformStamped:
    return make_transform(frame_id="b", stamp=Time(sec=7, nanosec=0))


@pytest.fixture
def translation_only() -> TransformStamped:
    return make_transform(translation=(3.0, -2.0, 1.0), stamp=Time(sec=3, nanosec=1))


@pytest.fixture
def source_header() -> Header:
    return Header(stamp=Time(sec=1, nanosec=2), frame_id="a")


@pytest.fixture
def stamped_messages(source_header):
    """One instance of every stamped shape, expressed in frame 'a'."""
    return [
        Vector3Stamped(header=source_header, vector=Vector3(x=1.0, y=2.0, z=3.0)),
        PointStamped(header=source_header, point=Point(x=1.0, y=2.0, z=3.0)),
        QuaternionStamped(header=source_header, quaternion=Quaternion()),
        PoseStamped(
            header=source_header,
            pose=Pose(position=Point(x=1.0), orientation=Quaternion()),
        ),
        PoseWithCovarianceStamped(
            header=source_header,
            pose=PoseWithCovariance(
                pose=Pose(position=Point(y=1.0)),
                covariance=[float(i) for i in range(36)],
            ),
        ),
        WrenchStamped(
            header=source_header,
            wrench=Wrench(force=Vector3(x=1.0), torque=Vector3(z=1.0)),
        ),
        make_transform(
            translation=(1.0, 0.0, 0.0),
            frame_id=source_header.frame_id,
            child_frame_id="c",
            stamp=source_header.stamp,
        ),
    ]
