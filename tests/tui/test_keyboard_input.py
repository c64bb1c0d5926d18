"""Tests for keyboard input decoding."""

from __future__ import annotations

import os
from unittest.mock import Mock, patch

import pytest

from task_timer_tui.tui.app import TUIApp
from task_timer_tui.utils import Config


@pytest.fixture
def tui_app(tmp_path):
    """Create TUI app instance."""
    return TUIApp(Config(log_dir=tmp_path))


def poll_keys(tui_app: TUIApp, data: bytes, polls: int = 1) -> list[str | None]:
    """Write data to a pipe standing in for stdin in one go, then poll."""
    read_fd, write_fd = os.pipe()
    try:
        if data:
            os.write(write_fd, data)
        with patch("sys.stdin", Mock(fileno=Mock(return_value=read_fd))):
            return [tui_app._poll_keyboard(timeout=0.01) for _ in range(polls)]
    finally:
        os.close(read_fd)
        os.close(write_fd)


def poll_once(tui_app: TUIApp, data: bytes) -> str | None:
    return poll_keys(tui_app, data)[0]


class TestArrowKeyHandling:
    """Arrow key escape sequence handling."""

    @pytest.mark.parametrize(
        ("final", "expected"),
        [(b"A", "up"), (b"B", "down"), (b"C", "right"), (b"D", "left"), (b"Z", "backtab")],
    )
    def test_csi_sequences(self, tui_app: TUIApp, final: bytes, expected: str) -> None:
        assert poll_once(tui_app, b"\x1b[" + final) == expected

    def test_ss3_arrow(self, tui_app: TUIApp) -> None:
        """Application-mode arrows (ESC O A) are recognized too."""
        assert poll_once(tui_app, b"\x1bOA") == "up"

    def test_whole_sequence_decodes_to_one_key(self, tui_app: TUIApp) -> None:
        """A terminal delivers an arrow as one burst; nothing is left behind."""
        assert poll_keys(tui_app, b"\x1b[A", polls=3) == ["up", None, None]

    def test_arrow_followed_by_typed_char(self, tui_app: TUIApp) -> None:
        assert poll_keys(tui_app, b"\x1b[Bx", polls=3) == ["down", "x", None]

    def test_lone_escape(self, tui_app: TUIApp) -> None:
        assert poll_once(tui_app, b"\x1b") == "esc"

    def test_sequence_with_parameters_ignored(self, tui_app: TUIApp) -> None:
        """Delete key (ESC [ 3 ~) is not bound."""
        assert poll_keys(tui_app, b"\x1b[3~", polls=2) == [None, None]

    def test_alt_key_ignored(self, tui_app: TUIApp) -> None:
        assert poll_once(tui_app, b"\x1bx") is None


class TestControlKeys:
    """Single-byte control characters."""

    @pytest.mark.parametrize(
        ("data", "expected"),
        [(b"\r", "enter"), (b"\n", "enter"), (b"\t", "tab"), (b"\x7f", "backspace"), (b"\x08", "backspace")],
    )
    def test_control_chars(self, tui_app: TUIApp, data: bytes, expected: str) -> None:
        assert poll_once(tui_app, data) == expected

    def test_unknown_control_char_dropped(self, tui_app: TUIApp) -> None:
        assert poll_once(tui_app, b"\x01") is None


class TestPrintableKeys:
    """Printable characters pass through unchanged."""

    @pytest.mark.parametrize("char", ["a", "Q", "1", " ", "?", "é", "€"])
    def test_printable(self, tui_app: TUIApp, char: str) -> None:
        assert poll_once(tui_app, char.encode("utf-8")) == char

    def test_multibyte_chars_in_sequence(self, tui_app: TUIApp) -> None:
        assert poll_keys(tui_app, "éa".encode("utf-8"), polls=2) == ["é", "a"]

    def test_timeout_returns_none(self, tui_app: TUIApp) -> None:
        assert poll_once(tui_app, b"") is None

    def test_read_error_returns_none(self, tui_app: TUIApp) -> None:
        with patch("select.select", side_effect=OSError("bad fd")):
            assert tui_app._poll_keyboard(timeout=0.1) is None
