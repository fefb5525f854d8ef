from typing import ClassVar

from pydantic import Field

from .base import LOGGER, BaseDevice


class GarageDoor(BaseDevice):
    """A garage door, opened by `activate` and closed by `deactivate`. Starts closed."""

    kind: ClassVar[str | None] = "garage_door"

    open: bool = Field(default=False, strict=True)
    """Whether the door is open."""

    def activate(self) -> None:
        self._set_state(open=True)
        LOGGER.debug("Garage door activated")
        self._notify("Garage Door is OPEN")

    def deactivate(self) -> None:
        self._set_state(open=False)
        LOGGER.debug("Garage door deactivated")
        self._notify("Garage Door is CLOSED")

    def is_open(self) -> bool:
        return self.open

    def is_active(self) -> bool:
        return self.open
