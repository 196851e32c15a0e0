"""Unit tests for datamount.logging helpers."""

import logging
from logging.handlers import MemoryHandler

import pytest
from rich.logging import RichHandler

from datamount.logging import (
    ThirdPartyPrefixFilter,
    config_console_handler,
    close_handlers,
    config_flight_recorder,
    log_startup,
)


def make_record(name: str) -> logging.LogRecord:
    """Build a bare INFO record for logger ``name``."""
    return logging.LogRecord(name, logging.INFO, __file__, 1, "msg", None, None)


@pytest.mark.parametrize(
    ("logger_name", "prefix"),
    [
        ("datamount.entrypoints.cli.sizes", ""),
        ("click_extra.colorize", "[click_extra]"),
        ("urllib3", "[urllib3]"),
    ],
)
def test_third_party_prefix(logger_name, prefix):
    """Only records from outside the project get a prefix; none are dropped."""
    record = make_record(logger_name)
    assert ThirdPartyPrefixFilter().filter(record) is True
    assert record.prefix == prefix  # type: ignore[attr-defined]


def test_console_handler_defaults():
    """Normal mode keeps the requested level and adds the prefix filter."""
    handler = config_console_handler(level=logging.INFO)
    assert isinstance(handler, RichHandler)
    assert handler.level == logging.INFO
    assert any(isinstance(f, ThirdPartyPrefixFilter) for f in handler.filters)


def test_console_handler_debug_mode():
    """Debug mode forces DEBUG and drops the prefix filter."""
    handler = config_console_handler(level=logging.ERROR, debug_mode=True)
    assert handler.level == logging.DEBUG
    assert not handler.filters


def test_flight_recorder_flushes_on_warning(tmp_path):
    """Buffered records reach the file once a WARNING arrives."""
    path = tmp_path / "fr.log"
    handler = config_flight_recorder(path, capacity=10)
    assert isinstance(handler, MemoryHandler)

    handler.handle(make_record("datamount.test"))
    assert not path.exists()

    warning = make_record("datamount.test")
    warning.levelno = logging.WARNING
    warning.levelname = "WARNING"
    handler.handle(warning)
    handler.close()

    lines = path.read_text(encoding="utf-8").splitlines()
    assert len(lines) == 2
    assert "WARNING datamount.test" in lines[1]


def test_flight_recorder_flush_on_close(tmp_path):
    """With flush_on_close, quiet runs are still written when closed."""
    path = tmp_path / "fr.log"
    handler = config_flight_recorder(path, flush_on_close=True)
    handler.handle(make_record("datamount.test"))
    handler.close()
    assert "INFO datamount.test" in path.read_text(encoding="utf-8")


@pytest.mark.parametrize(("flush_on_close", "written"), [(False, False), (True, True)])
def test_close_handlers_honours_flush_on_close(tmp_path, flush_on_close, written):
    """Closing a quiet recorder writes nothing unless flush_on_close is set."""
    path = tmp_path / "fr.log"
    recorder = config_flight_recorder(path, flush_on_close=flush_on_close)
    target = recorder.target
    root = logging.getLogger()
    root.addHandler(recorder)

    recorder.handle(make_record("datamount.test"))
    close_handlers([recorder])

    assert recorder not in root.handlers
    assert path.exists() is written
    assert recorder.target is None
    assert target.stream is None  # type: ignore[union-attr]


def test_log_startup(caplog):
    """Startup emits one INFO summary and DEBUG diagnostics."""
    logger = logging.getLogger("datamount.test.startup")
    with caplog.at_level(logging.DEBUG, logger="datamount.test.startup"):
        log_startup(
            logger,
            app_version="9.9.9",
            level=logging.INFO,
            handlers=[logging.NullHandler()],
            log_path=None,
            flight_recorder=False,
            logger_levels={"click_extra": logging.WARNING},
        )
    infos = [r.getMessage() for r in caplog.records if r.levelno == logging.INFO]
    assert infos == ["DATAMOUNT 9.9.9 - console=INFO, flight-recorder=OFF"]
    debug_text = "\n".join(r.getMessage() for r in caplog.records)
    assert "Handlers: ['NullHandler']" in debug_text
    assert "'click_extra': 'WARNING'" in debug_text
