import logging
from collections.abc import Callable, Iterator

import pytest

from homedevices.const import PACKAGE_LOGGER_NAME, STATUS_LOGGER_NAME


@pytest.fixture
def status_lines(caplog: pytest.LogCaptureFixture) -> Callable[[], list[str]]:
    """Return a callable that yields the status lines emitted so far, in order."""

    caplog.set_level(logging.INFO, logger=STATUS_LOGGER_NAME)

    def _lines() -> list[str]:
        return [record.getMessage() for record in caplog.records if record.name == STATUS_LOGGER_NAME]

    return _lines


@pytest.fixture
def isolated_logging() -> Iterator[None]:
    """Restore the package loggers after a test that calls `enable_logging`."""

    saved = {}
    for name in (PACKAGE_LOGGER_NAME, STATUS_LOGGER_NAME):
        logger = logging.getLogger(name)
        saved[name] = (logger.level, logger.propagate, list(logger.handlers))

    yield

    for name, (level, propagate, handlers) in saved.items():
        logger = logging.getLogger(name)
        logger.setLevel(level)
        logger.propagate = propagate
        logger.handlers[:] = handlers
    logging.captureWarnings(False)


@pytest.fixture
def clean_config_env(tmp_path, monkeypatch: pytest.MonkeyPatch):
    """Run in an empty directory with no homedevices environment variables."""

    monkeypatch.chdir(tmp_path)
    for key in ("HOMEDEVICES__LOG_LEVEL", "HOMEDEVICES__STATUS_OUTPUT"):
        monkeypatch.delenv(key, raising=False)
        monkeypatch.delenv(key.lower(), raising=False)
    return tmp_path
