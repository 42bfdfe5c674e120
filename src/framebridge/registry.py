"""
Transform Adapter Registry.

This module maps message classes to the adapter implementing their frame-transform
operations. Adapters register themselves at definition time through the
[`register_adapter`][framebridge.registry.register_adapter] decorator, so importing
`framebridge` is enough to make every built-in geometry message transformable.

Lookups use the exact class of the message (`type(msg)`): a subclass of a
supported message is not implicitly supported and needs its own adapter.
"""

from typing import Dict, Optional, Type

from .adapter_base import TransformAdapterBase
from .logging_config import get_logger

# Set the hierarchical logger
logger = get_logger(__name__)


class TransformRegistry:
    """
    A central registry of frame-transform adapters, keyed by message class.

    Attributes:
        _adapters (Dict[type, Type[TransformAdapterBase]]): A private class-level
            dictionary mapping message classes to their adapter classes.
    """

    # Maps message class (e.g. PointStamped) to its Adapter Class
    _adapters: Dict[type, Type[TransformAdapterBase]] = {}

    @classmethod
    def get_adapters(cls) -> Dict[type, Type[TransformAdapterBase]]:
        """Returns a copy of the current message class -> adapter mapping."""
        return dict(cls._adapters)

    @classmethod
    def _register_adapter(cls, adapter_class: Type[TransformAdapterBase]):
        """
        Internal helper registering an adapter for each message class it declares.

        Users must use the @register_adapter decorator instead.

        Raises:
            ValueError: If an adapter is already registered for any of the message
                classes declared by `adapter_class`. Nothing is registered in that case.
        """
        msg_types = adapter_class.message_types()

        for msg_type in msg_types:
            if msg_type in cls._adapters:
                logger.error(
                    f"Cannot register '{adapter_class.__name__}': "
                    f"'{msg_type.__name__}' is already handled by "
                    f"'{cls._adapters[msg_type].__name__}'"
                )
                raise ValueError(
                    f"Adapter for message type '{msg_type.__name__}' is already registered."
                )

        for msg_type in msg_types:
            cls._adapters[msg_type] = adapter_class
            logger.debug(
                f"Registered adapter '{adapter_class.__name__}' for '{msg_type.__name__}'"
            )

    @classmethod
    def unregister_adapter(cls, adapter_class: Type[TransformAdapterBase]):
        """
        Removes every registration of `adapter_class`.

        Mainly used by tests that register throw-away adapters.
        """
        for msg_type in adapter_class.message_types():
            if cls._adapters.get(msg_type) is adapter_class:
                del cls._adapters[msg_type]
                logger.debug(
                    f"Unregistered adapter '{adapter_class.__name__}' for '{msg_type.__name__}'"
                )

    @classmethod
    def get_adapter(cls, msg_type: type) -> Optional[Type[TransformAdapterBase]]:
        """
        Retrieves the adapter registered for a message class.

        Returns:
            The corresponding adapter class if found, otherwise `None`.
        """
        return cls._adapters.get(msg_type)

    @classmethod
    def is_supported(cls, msg_type: type) -> bool:
        """Checks if a message class has a registered adapter."""
        return msg_type in cls._adapters


def register_adapter(cls: Type[TransformAdapterBase]) -> Type[TransformAdapterBase]:
    """
    A class decorator for adapter registration.

    Example:
        ```python
        from framebridge import TransformRegistry, register_adapter
        from framebridge.adapter_base import TransformAdapterBase

        @register_adapter
        class Point2dAdapter(TransformAdapterBase[Point2d]):
            msg_type = Point2d

            @classmethod
            def do_transform(cls, msg, transform):
                ...
        ```

    Args:
        cls: The adapter class to register.

    Returns:
        The same class, unmodified, after successful registration.
    """
    TransformRegistry._register_adapter(cls)
    return cls
