import logging
import sys
from collections.abc import Sequence

from homedevices.config import HomeDevicesConfig
from homedevices.exceptions import InvariantViolationError
from homedevices.logging_ import enable_logging
from homedevices.scenario import run_scenario

LOGGER_NAME = "homedevices.__main__" if __name__ == "__main__" else __name__
LOGGER = logging.getLogger(LOGGER_NAME)


def main(argv: Sequence[str] | None = None) -> int:
    """Run the device self-check.

    Args:
        argv: Command line arguments, defaults to `sys.argv[1:]`.

    Returns:
        The process exit code: 0 when every check held, 1 otherwise.
    """
    config = HomeDevicesConfig(_cli_parse_args=list(argv) if argv is not None else True)  # pyright: ignore[reportCallIssue]
    enable_logging(config.log_level, config.status_output)

    try:
        report = run_scenario(config)
    except InvariantViolationError:
        LOGGER.exception("Device self-check failed")
        return 1

    LOGGER.debug("Completed %d checks", report.count)
    return 0


if __name__ == "__main__":
    sys.exit(main())
