import pydantic
import pytest

from framebridge import (
    Header,
    Point,
    PointStamped,
    Pose,
    Quaternion,
    Time,
    TransformStamped,
    Vector3,
)


def test_time_nanoseconds_round_trip():
    ns = 1_700_000_000_123_456_789
    assert Time.from_nanoseconds(ns).to_nanoseconds() == ns


def test_time_from_nanoseconds_splits_seconds():
    assert Time.from_nanoseconds(1_500_000_000) == Time(sec=1, nanosec=500_000_000)
    # nanosec stays unsigned: negative counts borrow from the seconds
    assert Time.from_nanoseconds(-1) == Time(sec=-1, nanosec=999_999_999)
    assert Time(sec=-1, nanosec=999_999_999).to_nanoseconds() == -1


def test_time_invalid_nanosec():
    with pytest.raises(pydantic.ValidationError, match="Nanoseconds must be in"):
        Time(sec=0, nanosec=1_000_000_000)


def test_header_defaults():
    header = Header()
    assert header.stamp == Time(sec=0, nanosec=0)
    assert header.frame_id == ""
    assert header.seq is None


def test_defaults_are_identity():
    assert Quaternion().to_list() == [0.0, 0.0, 0.0, 1.0]
    assert Pose().position == Point()
    tf = TransformStamped()
    assert tf.transform.rotation == Quaternion()
    assert tf.child_frame_id == ""


def test_from_list():
    assert Vector3.from_list([1.0, 2.0, 3.0]) == Vector3(x=1.0, y=2.0, z=3.0)
    assert Quaternion.from_list([0.0, 0.0, 1.0, 0.0]).z == 1.0

    with pytest.raises(ValueError, match="expected 3 values"):
        Point.from_list([1.0, 2.0])
    with pytest.raises(ValueError, match="expected 4 values"):
        Quaternion.from_list([1.0, 2.0, 3.0])


def test_vector_and_point_are_distinct_types():
    assert Vector3(x=1.0) != Point(x=1.0)


def test_unknown_fields_are_rejected():
    with pytest.raises(pydantic.ValidationError):
        Point(x=1.0, w=2.0)


def test_stamped_from_dict():
    msg = PointStamped.model_validate(
        {
            "header": {"frame_id": "map", "stamp": {"sec": 17000, "nanosec": 0}},
            "point": {"x": 1.0, "y": 2.0, "z": 0.0},
        }
    )
    assert msg.header.frame_id == "map"
    assert msg.header.stamp.sec == 17000
    assert msg.point == Point(x=1.0, y=2.0, z=0.0)
