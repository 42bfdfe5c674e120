from abc import ABC, abstractmethod
from typing import Generic, List, Tuple, Type, TypeVar, Union

from .covariance import covariance_row_major_to_nested
from .models import BaseModel, PoseWithCovarianceStamped, TimePoint, TransformStamped

T = TypeVar("T", bound=BaseModel)


class TransformAdapterBase(ABC, Generic[T]):
    """
    Abstract Base Class for the frame-transform adapter of a message shape.

    An adapter bundles the operations a generic algorithm (such as a transform
    buffer) needs in order to move a message of a given shape between frames,
    without knowing anything about that shape.

    Attributes:
        msg_type: The message class (or tuple of classes) handled by this adapter.
    """

    msg_type: Union[Type[T], Tuple[Type[T], ...]]

    @classmethod
    def message_types(cls) -> Tuple[Type[T], ...]:
        """Returns the message classes handled by this adapter, as a tuple."""
        if isinstance(cls.msg_type, tuple):
            return cls.msg_type
        return (cls.msg_type,)

    @classmethod
    @abstractmethod
    def do_transform(cls, msg: T, transform: TransformStamped) -> T:
        """
        Maps `msg` through `transform`.

        Args:
            msg: The message to transform. It is not modified.
            transform: The rigid transform to apply.

        Returns:
            A new message of the same shape, expressed in the target frame of `transform`.
        """
        pass


class StampedAdapterBase(TransformAdapterBase[T]):
    """
    Adapter for message shapes carrying a `header`.

    On top of the transform operation, stamped shapes expose their time and
    frame, and the trivial `to_msg` / `from_msg` conversions required by the
    generic "native type <-> message" calling convention. For geometry messages
    the native type IS the message type, so both conversions are identities.
    """

    @classmethod
    def get_timestamp(cls, msg: T) -> TimePoint:
        """Returns `msg.header.stamp` as integer nanoseconds since the epoch."""
        return msg.header.stamp.to_nanoseconds()

    @classmethod
    def get_frame_id(cls, msg: T) -> str:
        """Returns `msg.header.frame_id` verbatim."""
        return msg.header.frame_id

    @classmethod
    def to_msg(cls, msg: T) -> T:
        """Identity conversion: returns an equal, independent copy of `msg`."""
        return msg.model_copy(deep=True)

    @classmethod
    def from_msg(cls, msg: T) -> T:
        """Identity conversion: returns an equal, independent copy of `msg`."""
        return msg.model_copy(deep=True)


class CovarianceAdapterMixin:
    """Marks adapters of shapes carrying a 6x6 pose covariance."""

    @classmethod
    def get_covariance_matrix(cls, msg: PoseWithCovarianceStamped) -> List[List[float]]:
        """Returns the covariance of `msg` as 6 rows of 6 columns."""
        return covariance_row_major_to_nested(msg.pose.covariance)
