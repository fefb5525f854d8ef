import logging
import sys

import coloredlogs

from homedevices.const import LOG_LEVELS, PACKAGE_LOGGER_NAME, STATUS_LOGGER_NAME, STATUS_OUTPUTS

FORMAT_DATE = "%Y-%m-%d"
FORMAT_TIME = "%H:%M:%S"
FORMAT_DATETIME = f"{FORMAT_DATE} {FORMAT_TIME}"
FMT = "%(asctime)s.%(msecs)03d %(levelname)s %(name)s.%(funcName)s:%(lineno)d ─ %(message)s"
STATUS_FMT = "%(message)s"


def enable_logging(log_level: LOG_LEVELS, status_output: STATUS_OUTPUTS = "stdout") -> None:
    """Set up the logging"""

    logger = logging.getLogger(PACKAGE_LOGGER_NAME)

    logger.setLevel(log_level)

    # don't propagate to root - if someone wants to do a basicConfig on root we don't want
    # our logs going there too.
    logger.propagate = False

    # Clear any old handlers
    logger.handlers.clear()

    root_handlers = list(logging.getLogger().handlers)

    # NOTSET on the handler, the logger itself does the clamping
    coloredlogs.install(level=logging.NOTSET, logger=logger, fmt=FMT, datefmt=FORMAT_DATETIME)

    # coloredlogs.install resets the logger level
    logger.setLevel(log_level)

    # drop anything coloredlogs left on the root logger, keep what was already there
    root = logging.getLogger()
    for handler in list(root.handlers):
        if handler not in root_handlers:
            root.removeHandler(handler)

    _enable_status_output(status_output)

    # Capture warnings.warn(...) and friends messages in logs.
    logging.captureWarnings(True)


def _enable_status_output(status_output: STATUS_OUTPUTS) -> None:
    """Route device status lines to the console verbatim, whatever the package log level."""

    status_logger = logging.getLogger(STATUS_LOGGER_NAME)
    status_logger.propagate = False
    status_logger.handlers.clear()
    status_logger.setLevel(logging.INFO)

    handler = logging.StreamHandler(sys.stdout if status_output == "stdout" else sys.stderr)
    handler.setFormatter(logging.Formatter(STATUS_FMT))
    status_logger.addHandler(handler)
