"""The activate/deactivate contract shared by every device.

`turn_on` and `turn_off` are the uniform entry points: they accept anything that
structurally provides `activate`/`deactivate` and hand back the same object with
its concrete type intact.
"""

from typing import Protocol, TypeVar, runtime_checkable


@runtime_checkable
class Switchable(Protocol):
    """Anything that can be switched into and out of its active state."""

    def activate(self) -> None: ...

    def deactivate(self) -> None: ...


SwitchableT = TypeVar("SwitchableT", bound=Switchable)


def turn_on(device: SwitchableT) -> SwitchableT:
    """Activate `device` and return it."""
    device.activate()
    return device


def turn_off(device: SwitchableT) -> SwitchableT:
    """Deactivate `device` and return it."""
    device.deactivate()
    return device
