"""Unit tests for :mod:`datamount.entrypoints.cli.helpers.messages`.

1) Emoji/ASCII glyph selection follows the stderr encoding reported by
   ``click.get_text_stream("stderr")``, re-queried on every call.
2) ``warn``/``success`` emit styled (color + bold + reset) lines to stderr only.
"""

import io
import sys

import click
import pytest

from datamount.entrypoints.cli.helpers.messages import (
    _supports_character,
    caution_glyph,
    success,
    success_glyph,
    warn,
)

SET_YELLOW = "\x1b[33m"
SET_GREEN = "\x1b[32m"
SET_BOLD = "\x1b[1m"
RESET = "\x1b[0m"


class FakeTTY(io.StringIO):
    """A TTY-like text stream with a controllable encoding."""

    def __init__(self, encoding: str):
        super().__init__()
        self._encoding = encoding

    @property
    def encoding(self) -> str:
        """Declared character encoding (e.g., ``'ascii'`` or ``'utf-8'``)."""
        return self._encoding

    @encoding.setter
    def encoding(self, value: str) -> None:
        self._encoding = value

    def isatty(self) -> bool:
        """Report a TTY so Click keeps ANSI styling."""
        return True


@pytest.mark.parametrize(
    ("encoding", "expected_caution", "expected_success"),
    [("ascii", "[!]", "[OK]"), ("utf-8", "⚠️", "✅")],
)
def test_glyphs_respect_stream_encoding(
    monkeypatch, encoding, expected_caution, expected_success
):
    """Glyphs fall back to ASCII when stderr cannot encode the emoji."""
    stream = FakeTTY(encoding)
    monkeypatch.setattr(click, "get_text_stream", lambda name: stream)

    assert caution_glyph() == expected_caution
    assert success_glyph() == expected_success


def test_supports_character_requeries_stream_each_call(monkeypatch):
    """The stream is looked up again on each probe (no caching)."""
    encodings = iter(["ascii", "utf-8"])
    monkeypatch.setattr(click, "get_text_stream", lambda name: FakeTTY(next(encodings)))

    assert _supports_character("⚠️") is False
    assert _supports_character("⚠️") is True


@pytest.mark.parametrize(
    ("encoding", "glyph", "color_code", "func"),
    [
        ("ascii", "[!]", SET_YELLOW, warn),
        ("utf-8", "⚠️", SET_YELLOW, warn),
        ("ascii", "[OK]", SET_GREEN, success),
        ("utf-8", "✅", SET_GREEN, success),
    ],
)
def test_messages_emit_styled_stderr(monkeypatch, encoding, glyph, color_code, func):
    """warn/success write bold, colored lines with the matching glyph."""
    stream = FakeTTY(encoding)
    monkeypatch.setattr(click, "get_text_stream", lambda name: stream)
    monkeypatch.setattr(sys, "stderr", stream, raising=False)
    monkeypatch.delenv("NO_COLOR", raising=False)
    monkeypatch.setenv("CLICOLOR", "1")

    func("3 fits in 2 bits.")

    out = stream.getvalue()
    assert glyph in out
    assert "3 fits in 2 bits." in out
    assert SET_BOLD in out
    assert color_code in out
    assert RESET in out


@pytest.mark.parametrize("func", [warn, success])
def test_messages_write_to_stderr_only(monkeypatch, capsys, func):
    """Messages leave stdout untouched for command results."""
    monkeypatch.setattr(click, "get_text_stream", lambda name: FakeTTY("utf-8"))
    func("notice")
    captured = capsys.readouterr()
    assert "notice" in captured.err
    assert captured.out == ""
