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
    TransformRegistry,
    Vector3,
    Vector3Stamped,
    Wrench,
    WrenchStamped,
    convert,
    register_adapter,
)
from framebridge.adapter_base import StampedAdapterBase, TransformAdapterBase
from framebridge.adapters import PointStampedAdapter, PoseWithCovarianceStampedAdapter
from framebridge.models import BaseModel


BUILTIN_TYPES = [
    Vector3,
    Point,
    Quaternion,
    Pose,
    Wrench,
    Vector3Stamped,
    PointStamped,
    QuaternionStamped,
    PoseStamped,
    PoseWithCovarianceStamped,
    WrenchStamped,
    TransformStamped,
]


class Scalar(BaseModel):
    value: float = 0.0


@pytest.mark.parametrize("msg_type", BUILTIN_TYPES)
def test_builtin_types_are_registered(msg_type):
    assert TransformRegistry.is_supported(msg_type)
    assert msg_type in TransformRegistry.get_adapter(msg_type).message_types()


def test_unsupported_type():
    assert not TransformRegistry.is_supported(Scalar)
    assert TransformRegistry.get_adapter(Scalar) is None

    with pytest.raises(TypeError, match="Unsupported message type 'Scalar'"):
        convert.do_transform(Scalar(), TransformStamped())


def test_duplicate_registration_fails():
    with pytest.raises(ValueError, match="already registered"):

        @register_adapter
        class AnotherPointStampedAdapter(StampedAdapterBase[PointStamped]):
            msg_type = PointStamped

            @classmethod
            def do_transform(cls, msg, transform):
                return msg

    # The original registration survives
    assert TransformRegistry.get_adapter(PointStamped) is PointStampedAdapter


def test_custom_adapter_registration():
    @register_adapter
    class ScalarAdapter(TransformAdapterBase[Scalar]):
        msg_type = Scalar

        @classmethod
        def do_transform(cls, msg, transform):
            return Scalar(value=msg.value + transform.transform.translation.x)

    try:
        assert TransformRegistry.is_supported(Scalar)
        t = TransformStamped()
        t.transform.translation.x = 2.0
        assert convert.do_transform(Scalar(value=1.0), t) == Scalar(value=3.0)
    finally:
        TransformRegistry.unregister_adapter(ScalarAdapter)

    assert not TransformRegistry.is_supported(Scalar)


def test_get_adapters_returns_a_copy():
    adapters = TransformRegistry.get_adapters()
    adapters.clear()
    assert TransformRegistry.is_supported(PointStamped)


def test_dispatch_matches_specific_adapter(rot_z_90_lift_5):
    src = PointStamped(header=Header(frame_id="a"), point=Point(x=1.0))
    assert convert.do_transform(src, rot_z_90_lift_5) == PointStampedAdapter.do_transform(
        src, rot_z_90_lift_5
    )


def test_dispatch_unstamped_wrench(rot_z_90_lift_5):
    out = convert.do_transform(Wrench(force=Vector3(x=1.0), torque=Vector3(z=1.0)), rot_z_90_lift_5)
    assert isinstance(out, Wrench)
    assert out.force.to_list() == pytest.approx([0.0, 1.0, 0.0], abs=1e-12)
    assert out.torque.to_list() == pytest.approx([0.0, 0.0, 1.0], abs=1e-12)


def test_timestamp_and_frame_id(stamped_messages):
    for msg in stamped_messages:
        assert convert.get_timestamp(msg) == 1_000_000_002
        assert convert.get_frame_id(msg) == "a"


def test_timestamp_is_nanoseconds():
    msg = Vector3Stamped(header=Header(stamp=Time(sec=12, nanosec=345), frame_id="imu"))
    assert convert.get_timestamp(msg) == 12_000_000_345
    assert Time.from_nanoseconds(convert.get_timestamp(msg)) == msg.header.stamp


def test_header_accessors_reject_unstamped():
    with pytest.raises(TypeError, match="carries no header"):
        convert.get_timestamp(Vector3())
    with pytest.raises(TypeError, match="carries no header"):
        convert.get_frame_id(Wrench())
    with pytest.raises(TypeError, match="carries no header"):
        convert.to_msg(Point())


def test_identity_conversions(stamped_messages):
    for msg in stamped_messages:
        converted = convert.to_msg(msg)
        assert converted == msg
        assert converted is not msg
        assert convert.from_msg(converted) == msg
        assert convert.from_msg(convert.to_msg(msg)) == msg


def test_identity_conversion_is_independent():
    msg = PointStamped(header=Header(frame_id="a"), point=Point(x=1.0))
    copy = convert.to_msg(msg)
    copy.point.x = 99.0
    copy.header.frame_id = "z"
    assert msg.point.x == 1.0
    assert msg.header.frame_id == "a"


def test_get_covariance_matrix():
    flat = [float(i) for i in range(36)]
    msg = PoseWithCovarianceStamped(pose=PoseWithCovariance(covariance=flat))

    nested = convert.get_covariance_matrix(msg)

    assert nested == PoseWithCovarianceStampedAdapter.get_covariance_matrix(msg)
    assert [v for row in nested for v in row] == flat


def test_get_covariance_matrix_rejects_other_types():
    with pytest.raises(TypeError, match="carries no covariance"):
        convert.get_covariance_matrix(PoseStamped())
