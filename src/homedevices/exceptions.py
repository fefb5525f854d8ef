import typing

if typing.TYPE_CHECKING:
    from homedevices.models.devices import BaseDevice


class HomeDevicesError(Exception):
    """Base exception for all homedevices errors."""


class DeviceRegistryError(HomeDevicesError):
    """Base exception for device registry errors."""


class DuplicateKindError(DeviceRegistryError):
    """Raised when attempting to register a kind that's already registered."""

    def __init__(self, kind: str, existing_class: type["BaseDevice"], new_class: type["BaseDevice"]) -> None:
        """Initialize the error with kind and conflicting classes.

        Args:
            kind: The kind that's already registered.
            existing_class: The class that's currently registered for this kind.
            new_class: The class that attempted to register for this kind.
        """
        super().__init__(
            f"Kind '{kind}' is already registered to {existing_class.__name__}, "
            f"cannot register {new_class.__name__}"
        )
        self.kind = kind
        self.existing_class = existing_class
        self.new_class = new_class


class UnknownDeviceKindError(KeyError, DeviceRegistryError):
    """Raised when asking the registry for a kind nobody registered."""

    def __init__(self, kind: str, known: list[str]) -> None:
        super().__init__(f"Unknown device kind '{kind}', expected one of: {', '.join(known) or '<none>'}")
        self.kind = kind

    def __str__(self) -> str:
        # KeyError would repr() the message
        return str(self.args[0])


class InvariantViolationError(HomeDevicesError):
    """Raised by the self-check scenario when a device does not behave as documented."""

    def __init__(self, device: str, expectation: str) -> None:
        super().__init__(f"{device}: expected {expectation}")
        self.device = device
        self.expectation = expectation
