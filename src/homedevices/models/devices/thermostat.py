from typing import ClassVar, Self

from pydantic import Field, model_validator

from homedevices.const import DEFAULT_TEMPERATURE, MAX_TEMPERATURE, MIN_TEMPERATURE
from homedevices.models.results import TemperatureChange

from .base import LOGGER, BaseDevice


class Thermostat(BaseDevice):
    """A thermostat with an on/off switch and a target temperature.

    The temperature can only be changed while the thermostat is on, and only to a
    value inside `[min_temperature, max_temperature]` (inclusive).
    """

    kind: ClassVar[str | None] = "thermostat"

    on: bool = Field(default=False, strict=True)
    """Whether the thermostat is on."""

    temperature: int = Field(default=DEFAULT_TEMPERATURE, strict=True)
    """The target temperature."""

    min_temperature: int = Field(default=MIN_TEMPERATURE, strict=True)
    """Lowest temperature `set_temperature` accepts."""

    max_temperature: int = Field(default=MAX_TEMPERATURE, strict=True)
    """Highest temperature `set_temperature` accepts."""

    @model_validator(mode="after")
    def _check_temperature_range(self) -> Self:
        if self.min_temperature > self.max_temperature:
            raise ValueError(
                f"min_temperature ({self.min_temperature}) must not exceed max_temperature ({self.max_temperature})"
            )
        if not self.in_range(self.temperature):
            raise ValueError(
                f"temperature {self.temperature} is outside [{self.min_temperature}, {self.max_temperature}]"
            )
        return self

    def activate(self) -> None:
        self._set_state(on=True)
        LOGGER.debug("Thermostat activated")
        self._notify("Thermostat is ON")

    def deactivate(self) -> None:
        self._set_state(on=False)
        LOGGER.debug("Thermostat deactivated")
        self._notify("Thermostat is OFF")

    def in_range(self, value: int) -> bool:
        return self.min_temperature <= value <= self.max_temperature

    def set_temperature(self, value: int) -> TemperatureChange:
        """Set the target temperature.

        Args:
            value: The requested temperature.

        Returns:
            Which guard, if any, rejected the request. On rejection the stored
            temperature is left untouched.
        """
        if not self.on:
            LOGGER.debug("Rejected temperature %s, thermostat is off", value)
            self._notify("Cannot set temperature, thermostat is off.")
            return TemperatureChange.REJECTED_OFF

        if not self.in_range(value):
            LOGGER.debug("Rejected temperature %s, outside [%s, %s]", value, self.min_temperature, self.max_temperature)
            self._notify(
                "Invalid temperature. "
                f"Temperature must be between {self.min_temperature} and {self.max_temperature}."
            )
            return TemperatureChange.REJECTED_OUT_OF_RANGE

        self._set_state(temperature=value)
        self._notify(f"Thermostat temperature set to: {value}")
        return TemperatureChange.APPLIED

    def get_temperature(self) -> int:
        return self.temperature

    def is_on(self) -> bool:
        return self.on

    def is_active(self) -> bool:
        return self.on
