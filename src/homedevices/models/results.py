from enum import StrEnum


class TemperatureChange(StrEnum):
    """Outcome of `Thermostat.set_temperature`.

    The guards are evaluated in order: a thermostat that is off rejects the request
    before the range is looked at.
    """

    APPLIED = "applied"
    """The temperature was stored."""

    REJECTED_OFF = "rejected_off"
    """The thermostat is off, nothing changed."""

    REJECTED_OUT_OF_RANGE = "rejected_out_of_range"
    """The requested value is outside the allowed range, nothing changed."""

    @property
    def applied(self) -> bool:
        return self is TemperatureChange.APPLIED
