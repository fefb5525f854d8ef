"""End-to-end self check that walks every device through its documented transitions."""

import typing
from logging import getLogger

from pydantic import BaseModel, Field

from homedevices.device_registry import create_device
from homedevices.exceptions import InvariantViolationError
from homedevices.models.results import TemperatureChange
from homedevices.switching import turn_off, turn_on

if typing.TYPE_CHECKING:
    from homedevices.config import HomeDevicesConfig
    from homedevices.models.devices import GarageDoor, Light, SmartLock, Thermostat

LOGGER = getLogger(__name__)

PREFERRED_TEMPERATURE = 25


class ScenarioCheck(BaseModel):
    """A single expectation that held during the scenario."""

    device: str
    expectation: str


class ScenarioReport(BaseModel):
    """Everything the scenario verified, in order."""

    checks: list[ScenarioCheck] = Field(default_factory=list)

    @property
    def count(self) -> int:
        return len(self.checks)

    def expect(self, condition: bool, device: str, expectation: str) -> None:
        """Record `expectation` for `device`, raising if `condition` does not hold.

        Raises:
            InvariantViolationError: If `condition` is false.
        """
        if not condition:
            LOGGER.error("%s: expected %s", device, expectation)
            raise InvariantViolationError(device, expectation)

        LOGGER.debug("%s: %s", device, expectation)
        self.checks.append(ScenarioCheck(device=device, expectation=expectation))


def run_scenario(config: "HomeDevicesConfig") -> ScenarioReport:
    """Run every device through its scenario.

    Raises:
        InvariantViolationError: On the first expectation that does not hold.
    """
    report = ScenarioReport()

    _check_light(report)
    _check_thermostat(report, config)
    _check_smart_lock(report)
    _check_garage_door(report)

    LOGGER.info("Scenario passed, %d checks", report.count)
    return report


def _check_light(report: ScenarioReport) -> None:
    light = typing.cast("Light", create_device("light"))
    report.expect(not light.is_on(), "Light", "to start off")

    turn_on(light)
    report.expect(light.is_on(), "Light", "to be on after activate")

    turn_off(light)
    report.expect(not light.is_on(), "Light", "to be off after deactivate")


def _check_thermostat(report: ScenarioReport, config: "HomeDevicesConfig") -> None:
    low = config.thermostat_min_temperature
    high = config.thermostat_max_temperature
    target = min(PREFERRED_TEMPERATURE, high)

    thermostat = typing.cast(
        "Thermostat", create_device("thermostat", min_temperature=low, max_temperature=high)
    )
    initial = thermostat.get_temperature()
    report.expect(not thermostat.is_on(), "Thermostat", "to start off")

    outcome = thermostat.set_temperature(target)
    report.expect(outcome is TemperatureChange.REJECTED_OFF, "Thermostat", "to reject a temperature while off")
    report.expect(thermostat.get_temperature() == initial, "Thermostat", f"to keep {initial} while off")

    turn_on(thermostat)
    report.expect(thermostat.is_on(), "Thermostat", "to be on after activate")

    for value in (target, low, high):
        outcome = thermostat.set_temperature(value)
        report.expect(outcome.applied, "Thermostat", f"to accept {value}")
        report.expect(thermostat.get_temperature() == value, "Thermostat", f"to report {value}")

    for value in (low - 5, high + 1):
        outcome = thermostat.set_temperature(value)
        report.expect(
            outcome is TemperatureChange.REJECTED_OUT_OF_RANGE, "Thermostat", f"to reject out of range {value}"
        )
        report.expect(thermostat.get_temperature() == high, "Thermostat", f"to keep {high} after rejecting {value}")

    thermostat.set_temperature(target)
    turn_off(thermostat)
    outcome = thermostat.set_temperature(high)
    report.expect(outcome is TemperatureChange.REJECTED_OFF, "Thermostat", "to reject a temperature once off")
    report.expect(thermostat.get_temperature() == target, "Thermostat", f"to keep {target} once off")


def _check_smart_lock(report: ScenarioReport) -> None:
    lock = typing.cast("SmartLock", create_device("smart_lock"))
    report.expect(lock.is_locked(), "Smart Lock", "to start locked")

    turn_on(lock)
    report.expect(not lock.is_locked(), "Smart Lock", "to be unlocked after activate")

    turn_off(lock)
    report.expect(lock.is_locked(), "Smart Lock", "to be locked after deactivate")


def _check_garage_door(report: ScenarioReport) -> None:
    door = typing.cast("GarageDoor", create_device("garage_door"))
    report.expect(not door.is_open(), "Garage Door", "to start closed")

    turn_on(door)
    report.expect(door.is_open(), "Garage Door", "to be open after activate")

    turn_off(door)
    report.expect(not door.is_open(), "Garage Door", "to be closed after deactivate")
