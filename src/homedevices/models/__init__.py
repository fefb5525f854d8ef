from .devices import BaseDevice, GarageDoor, Light, SmartLock, Thermostat
from .results import TemperatureChange

__all__ = [
    "BaseDevice",
    "GarageDoor",
    "Light",
    "SmartLock",
    "TemperatureChange",
    "Thermostat",
]
