from .base import BaseDevice
from .garage_door import GarageDoor
from .light import Light
from .lock import SmartLock
from .thermostat import Thermostat

__all__ = [
    "BaseDevice",
    "GarageDoor",
    "Light",
    "SmartLock",
    "Thermostat",
]
