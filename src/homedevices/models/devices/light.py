from typing import ClassVar

from pydantic import Field

from .base import LOGGER, BaseDevice


class Light(BaseDevice):
    """A light that is either on or off. Starts off."""

    kind: ClassVar[str | None] = "light"

    on: bool = Field(default=False, strict=True)
    """Whether the light is on."""

    def activate(self) -> None:
        self._set_state(on=True)
        LOGGER.debug("Light activated")
        self._notify("Light is ON")

    def deactivate(self) -> None:
        self._set_state(on=False)
        LOGGER.debug("Light deactivated")
        self._notify("Light is OFF")

    def is_on(self) -> bool:
        return self.on

    def is_active(self) -> bool:
        return self.on
