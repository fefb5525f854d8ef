import logging

import pytest

from homedevices.const import PACKAGE_LOGGER_NAME, STATUS_LOGGER_NAME
from homedevices.logging_ import enable_logging
from homedevices.models.devices import Light

pytestmark = pytest.mark.usefixtures("isolated_logging")


def test_package_logger_level_and_propagation() -> None:
    enable_logging("WARNING")

    logger = logging.getLogger(PACKAGE_LOGGER_NAME)
    assert logger.level == logging.WARNING
    assert logger.propagate is False
    assert logger.handlers


def test_status_lines_are_written_verbatim(capsys: pytest.CaptureFixture[str]) -> None:
    enable_logging("ERROR")

    light = Light()
    light.activate()
    light.deactivate()

    assert capsys.readouterr().out.splitlines() == ["Light is ON", "Light is OFF"]


def test_status_lines_to_stderr(capsys: pytest.CaptureFixture[str]) -> None:
    enable_logging("ERROR", status_output="stderr")

    Light().activate()

    captured = capsys.readouterr()
    assert captured.out == ""
    assert "Light is ON" in captured.err.splitlines()


def test_repeated_setup_does_not_duplicate_handlers() -> None:
    enable_logging("INFO")
    enable_logging("INFO")

    assert len(logging.getLogger(STATUS_LOGGER_NAME).handlers) == 1


def test_root_handlers_are_left_as_found() -> None:
    root = logging.getLogger()
    before = list(root.handlers)

    enable_logging("INFO")

    assert root.handlers == before
