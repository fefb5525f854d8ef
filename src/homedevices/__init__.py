import logging

from .config import HomeDevicesConfig
from .device_registry import DeviceRegistry, create_device, get_registry, register_device_class
from .models.devices import BaseDevice, GarageDoor, Light, SmartLock, Thermostat
from .models.results import TemperatureChange
from .scenario import ScenarioReport, run_scenario
from .switching import Switchable, turn_off, turn_on

logging.getLogger("homedevices").addHandler(logging.NullHandler())

__all__ = [
    "BaseDevice",
    "DeviceRegistry",
    "GarageDoor",
    "HomeDevicesConfig",
    "Light",
    "ScenarioReport",
    "SmartLock",
    "Switchable",
    "TemperatureChange",
    "Thermostat",
    "create_device",
    "get_registry",
    "register_device_class",
    "run_scenario",
    "turn_off",
    "turn_on",
]
