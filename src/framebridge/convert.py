"""
Generic entry points.

These functions accept any registered message and dispatch on its exact class to
the matching adapter. They are what a generic algorithm (e.g. a transform buffer
resolving `transform(msg, target_frame)`) calls without knowing the message shape.

Example:
    ```python
    from framebridge import convert

    out = convert.do_transform(pose_in_camera, camera_to_base)
    convert.get_frame_id(out)   # -> "base_link"
    convert.get_timestamp(out)  # -> camera_to_base.header.stamp in nanoseconds
    ```
"""

from typing import List, Type, TypeVar

from .adapter_base import (
    CovarianceAdapterMixin,
    StampedAdapterBase,
    TransformAdapterBase,
)
from .logging_config import get_logger
from .models import TimePoint, TransformStamped
from .registry import TransformRegistry

logger = get_logger(__name__)

T = TypeVar("T")


def _adapter_for(msg) -> Type[TransformAdapterBase]:
    adapter = TransformRegistry.get_adapter(type(msg))
    if adapter is None:
        logger.error(f"No transform adapter registered for '{type(msg).__name__}'")
        raise TypeError(
            f"Unsupported message type '{type(msg).__name__}': no transform adapter registered."
        )
    return adapter


def _stamped_adapter_for(msg) -> Type[StampedAdapterBase]:
    adapter = _adapter_for(msg)
    if not issubclass(adapter, StampedAdapterBase):
        logger.error(f"'{type(msg).__name__}' is not a stamped message")
        raise TypeError(
            f"Message type '{type(msg).__name__}' carries no header."
        )
    return adapter


def do_transform(msg: T, transform: TransformStamped) -> T:
    """
    Maps `msg` through `transform`, using the adapter registered for its type.

    Raises:
        TypeError: If no adapter is registered for `type(msg)`.
    """
    return _adapter_for(msg).do_transform(msg, transform)


def get_timestamp(msg) -> TimePoint:
    """
    Returns the header stamp of a stamped message, in nanoseconds since the epoch.

    Raises:
        TypeError: If `msg` is not a registered stamped message.
    """
    return _stamped_adapter_for(msg).get_timestamp(msg)


def get_frame_id(msg) -> str:
    """
    Returns the header frame of a stamped message.

    Raises:
        TypeError: If `msg` is not a registered stamped message.
    """
    return _stamped_adapter_for(msg).get_frame_id(msg)


def to_msg(msg: T) -> T:
    """Identity conversion of a stamped message."""
    return _stamped_adapter_for(msg).to_msg(msg)


def from_msg(msg: T) -> T:
    """Identity conversion of a stamped message."""
    return _stamped_adapter_for(msg).from_msg(msg)


def get_covariance_matrix(msg) -> List[List[float]]:
    """
    Returns the covariance of `msg` as 6 rows of 6 columns.

    Raises:
        TypeError: If the shape of `msg` carries no covariance.
    """
    adapter = _adapter_for(msg)
    if not issubclass(adapter, CovarianceAdapterMixin):
        logger.error(f"'{type(msg).__name__}' carries no covariance")
        raise TypeError(f"Message type '{type(msg).__name__}' carries no covariance.")
    return adapter.get_covariance_matrix(msg)
