from abc import abstractmethod
from logging import getLogger
from typing import Any, ClassVar

from pydantic import BaseModel, ConfigDict

from homedevices.const import STATUS_LOGGER_NAME

LOGGER = getLogger(__name__)
STATUS_LOGGER = getLogger(STATUS_LOGGER_NAME)


class BaseDevice(BaseModel):
    """Common plumbing for the toy devices.

    Holds no state of its own: each subclass declares its fields and implements
    `activate`/`deactivate`. Subclasses that set `kind` are registered with the
    device registry when the class is created.

    Devices are frozen from the outside. State only changes through the device's
    own methods, which write it with `_set_state`.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    kind: ClassVar[str | None] = None
    """Registry key for this device class, e.g. 'light'."""

    @classmethod
    def __pydantic_init_subclass__(cls, **kwargs: Any) -> None:
        super().__pydantic_init_subclass__(**kwargs)

        if cls.kind is None:
            return

        # imported here, the registry imports this module for type hints
        from homedevices.device_registry import get_registry

        get_registry().register(cls)

    @abstractmethod
    def activate(self) -> None: ...

    @abstractmethod
    def deactivate(self) -> None: ...

    @abstractmethod
    def is_active(self) -> bool:
        """Whether the device is in its activated polarity (on, unlocked, open)."""

    def _set_state(self, **changes: Any) -> None:
        """Write state fields, bypassing the frozen model check."""
        for name, value in changes.items():
            if name not in type(self).model_fields:
                raise AttributeError(f"{type(self).__name__} has no field {name!r}")
            object.__setattr__(self, name, value)

    def _notify(self, message: str) -> None:
        """Emit a one-line status notification."""
        STATUS_LOGGER.info(message)
