"""Test fixtures."""
import logging
from pathlib import Path

import coloredlogs
import pytest

from chainid.chain import Chain


@pytest.fixture(scope="session")
def logger(request) -> logging.Logger:
    """Initialize stdout logger using colored output."""

    logger = logging.getLogger()

    # pytest --log-level option
    log_level = request.config.getoption("--log-level") or logging.INFO

    # Set log format to dislay the logger name to hunt down verbose logging modules
    fmt = "%(name)-25s %(levelname)-8s %(message)s"

    coloredlogs.install(level=log_level, fmt=fmt, logger=logger)

    return logger


@pytest.fixture()
def settings_path(tmp_path: Path) -> Path:
    """Settings folder that does not exist yet."""
    return tmp_path / "settings"


@pytest.fixture()
def unknown_chain() -> Chain:
    """Chain id that is not in the registry."""
    return Chain.from_id(999_999_999)
