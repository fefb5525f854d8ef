"""Device class registry for kind-to-class mapping.

Every `BaseDevice` subclass that sets a `kind` registers itself here when the
class is created, so devices can be built by name:

    ```python
    from homedevices import create_device

    lock = create_device("smart_lock")
    lock.activate()
    ```

A custom device only needs a new `kind`:

    ```python
    class Fan(BaseDevice):
        kind: ClassVar[str | None] = "fan"
        ...
    ```
"""

import typing
from logging import getLogger
from typing import Any

import homedevices.exceptions as exc

if typing.TYPE_CHECKING:
    from homedevices.models.devices import BaseDevice

LOGGER = getLogger(__name__)

DeviceT = typing.TypeVar("DeviceT", bound="BaseDevice")


class DeviceRegistry:
    """Registry for mapping device kinds to their classes.

    The registry is a singleton - all access goes through the global instance.
    """

    def __init__(self) -> None:
        self._kind_to_class: dict[str, type["BaseDevice"]] = {}
        self._class_to_kind: dict[type["BaseDevice"], str] = {}

    def register(self, device_class: type["BaseDevice"]) -> None:
        """Register a device class for its kind.

        Args:
            device_class: The BaseDevice subclass to register.

        Raises:
            DuplicateKindError: If the kind is already registered to a different class.
        """
        kind = device_class.kind
        if kind is None:
            LOGGER.debug("Skipping registration for %s, no kind defined", device_class.__name__)
            return

        if kind in self._kind_to_class:
            existing_class = self._kind_to_class[kind]
            if existing_class is not device_class:
                raise exc.DuplicateKindError(kind, existing_class, device_class)
            return

        LOGGER.debug("Registering device class %s for kind '%s'", device_class.__name__, kind)
        self._kind_to_class[kind] = device_class
        self._class_to_kind[device_class] = kind

    def get_class_for_kind(self, kind: str) -> type["BaseDevice"] | None:
        """Get the device class registered for a kind, or None."""
        return self._kind_to_class.get(kind)

    def get_kind_for_class(self, device_class: type["BaseDevice"]) -> str | None:
        """Get the kind for a registered device class, or None."""
        return self._class_to_kind.get(device_class)

    def all_kinds(self) -> list[str]:
        """Get all registered kinds, sorted."""
        return sorted(self._kind_to_class.keys())

    def all_classes(self) -> list[type["BaseDevice"]]:
        """Get all registered device classes, sorted by kind."""
        return [self._kind_to_class[kind] for kind in self.all_kinds()]

    def create(self, kind: str, **fields: Any) -> "BaseDevice":
        """Build a new device of the given kind.

        Args:
            kind: The registered kind, e.g. 'thermostat'.
            **fields: Field overrides passed to the device constructor.

        Returns:
            A fresh device in its initial state.

        Raises:
            UnknownDeviceKindError: If no class is registered for `kind`.
        """
        device_class = self.get_class_for_kind(kind)
        if device_class is None:
            raise exc.UnknownDeviceKindError(kind, self.all_kinds())
        return device_class(**fields)

    @property
    def count(self) -> int:
        return len(self._kind_to_class)

    def clear(self) -> None:
        """Clear all registered device classes.

        Warning:
            This is meant for tests. Built-in classes do not re-register after a clear.
        """
        self._kind_to_class.clear()
        self._class_to_kind.clear()


# Global registry instance
_registry = DeviceRegistry()


def get_registry() -> DeviceRegistry:
    """Get the global device registry instance."""
    return _registry


def register_device_class(device_class: type[DeviceT]) -> type[DeviceT]:
    """Decorator to explicitly register a device class.

    Registration already happens when a subclass with a `kind` is defined; use this
    to re-register a class, e.g. after `DeviceRegistry.clear`.
    """
    _registry.register(device_class)
    return device_class


def create_device(kind: str, **fields: Any) -> "BaseDevice":
    """Build a device by kind using the global registry."""
    return _registry.create(kind, **fields)
