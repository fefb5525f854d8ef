from typing import ClassVar

from pydantic import Field

from .base import LOGGER, BaseDevice


class SmartLock(BaseDevice):
    """A smart lock.

    Activating the lock unlocks it, deactivating locks it again. Unlike the other
    devices the resting state is the secure one: a new lock is locked.
    """

    kind: ClassVar[str | None] = "smart_lock"

    locked: bool = Field(default=True, strict=True)
    """Whether the lock is engaged."""

    def activate(self) -> None:
        self._set_state(locked=False)
        LOGGER.debug("Smart lock activated")
        self._notify("Smart Lock is UNLOCKED")

    def deactivate(self) -> None:
        self._set_state(locked=True)
        LOGGER.debug("Smart lock deactivated")
        self._notify("Smart Lock is LOCKED")

    def is_locked(self) -> bool:
        return self.locked

    def is_active(self) -> bool:
        return not self.locked
