from typing import Literal

LOG_LEVELS = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
"""Log levels accepted by the configuration and `enable_logging`."""

STATUS_OUTPUTS = Literal["stdout", "stderr"]

PACKAGE_LOGGER_NAME = "homedevices"
STATUS_LOGGER_NAME = "homedevices.status"
"""Logger that carries the one-line device status notifications."""

DEFAULT_TEMPERATURE = 20
MIN_TEMPERATURE = 10
MAX_TEMPERATURE = 30
