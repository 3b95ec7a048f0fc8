"""The main entry point for pytest fixtures.

This will run before any tests are executed when `import pytest` is called.
"""

from __future__ import annotations

import os
import textwrap
from datetime import datetime
from pathlib import Path
from typing import Callable, Iterator
from unittest import mock

import pytest
from loguru import logger

from tests.helpers import TEST_VARIABLES

LOG_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level:^7} | {file.name}:{line} | {message}"


def _add_log_file_sink() -> None:
    """Send envbind debug logs to logs/pytest_YYYYMMDD.log."""
    logs_dir = Path(__file__).resolve().parent.parent / "logs"
    logs_dir.mkdir(exist_ok=True)
    logfile = logs_dir / f"pytest_{datetime.now():%Y%m%d}.log"

    logger.add(
        logfile,
        level="DEBUG",
        format=LOG_FORMAT,
        rotation="00:00",
        retention="7 days",
        compression="zip",
    )


def pytest_configure(config: pytest.Config) -> None:
    """Route loguru output to a file for the test session."""
    _add_log_file_sink()


@pytest.fixture(autouse=True)
def _isolate_environ(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> Iterator[None]:
    """Automatically isolate process environment state for each test.

    - Restores os.environ after the test, so .env loads cannot leak.
    - Clears every variable the test records read.
    - Runs the test from tmp_path so a real ./.env is never picked up.
    """
    with mock.patch.dict(os.environ):
        for name in TEST_VARIABLES:
            os.environ.pop(name, None)
        monkeypatch.chdir(tmp_path)
        yield


def _write_env(path: Path, body: str) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(textwrap.dedent(body).strip() + "\n", encoding="utf-8")


@pytest.fixture
def write_env(tmp_path: Path) -> Callable[[str, str], Path]:
    """Create a .env-style file inside tmp_path and gives you a path to it.

    Returns:
      a function you can call with (filename, body)
    """

    def _write(filename: str, body: str) -> Path:
        file_path = tmp_path / filename
        _write_env(file_path, body)
        return file_path

    return _write
