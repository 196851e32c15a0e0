"""Fixtures for end-to-end CLI tests.

Every test runs in an isolated filesystem with the flight recorder pointed at
``./latest.log`` so nothing is written to the user's log directory.
"""

import logging
from pathlib import Path

import pytest
from click.testing import CliRunner

E2E_ROOT = Path(__file__).parent.parent.resolve()
MARKER_NAME = "e2e"

LOG_FILE = "latest.log"

# pylint: disable=redefined-outer-name, unused-argument


@pytest.hookimpl(tryfirst=True)
def pytest_collection_modifyitems(
    config: pytest.Config, items: list[pytest.Item]
) -> None:
    """Add default `e2e` marks to items in `tests/e2e/`."""
    for item in items:
        if E2E_ROOT in item.path.resolve().parents:
            if not any(marker.name == MARKER_NAME for marker in item.iter_markers()):
                item.add_marker(pytest.mark.e2e)


@pytest.fixture(autouse=True)
def reset_logger_levels():
    """Undo per-logger levels set through -L so they do not leak between tests."""
    yield
    for name in list(logging.root.manager.loggerDict):
        if name.startswith("datamount"):
            logging.getLogger(name).setLevel(logging.NOTSET)


@pytest.fixture
def runner(monkeypatch):
    """Return a Click CliRunner with DATAMOUNT_* settings cleared."""
    for name in ("DATAMOUNT_LOG_LEVEL", "DATAMOUNT_LOGGER_LEVELS"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("DATAMOUNT_LOG_PATH", LOG_FILE)
    return CliRunner()


@pytest.fixture
def fs(runner):
    """Provide an isolated filesystem for the duration of a test."""
    with runner.isolated_filesystem():
        yield
