"""Tests for the logger module."""

import logging

import pytest

from desktop_entry import parse
from desktop_entry.logger import (
    ColoredConsoleFormatter,
    HybridConsoleFormatter,
    SimpleConsoleFormatter,
    clear_logger_state,
    get_logger,
    get_state,
    setup_logging,
    temporary_console_level,
)


@pytest.fixture
def fresh_logging(monkeypatch: pytest.MonkeyPatch):
    """Start each test from an uninitialized console-only logger."""
    monkeypatch.delenv("DESKTOP_ENTRY_LOG_DIR", raising=False)
    monkeypatch.delenv("LOG_LEVEL", raising=False)
    clear_logger_state()
    yield
    clear_logger_state()


def _record(level: int, message: str) -> logging.LogRecord:
    return logging.LogRecord(
        "desktop_entry.test", level, __file__, 1, message, None, None
    )


def test_setup_logging_initializes_root_once(fresh_logging) -> None:
    first = setup_logging("desktop_entry.core.lexer")
    listener = get_state().queue_listener
    second = setup_logging("desktop_entry.core.groups")

    assert first.name == "desktop_entry.core.lexer"
    assert second.parent.name == "desktop_entry"
    assert get_state().queue_listener is listener
    assert len(logging.getLogger("desktop_entry").handlers) == 1


def test_console_only_without_log_dir(fresh_logging) -> None:
    setup_logging()

    handlers = get_state().queue_listener.handlers

    assert len(handlers) == 1
    assert isinstance(handlers[0].formatter, HybridConsoleFormatter)


def test_temporary_console_level_restores(fresh_logging) -> None:
    setup_logging()
    (console,) = get_state().queue_listener.handlers

    with temporary_console_level("INFO"):
        assert console.level == logging.INFO

    assert console.level == logging.WARNING


def test_temporary_console_level_rejects_unknown_level() -> None:
    with (
        pytest.raises(ValueError, match="Invalid log level"),
        temporary_console_level("LOUD"),
    ):
        pass


def test_clear_logger_state(fresh_logging) -> None:
    setup_logging()

    clear_logger_state()

    state = get_state()
    root = logging.getLogger("desktop_entry")
    assert state.queue_listener is None
    assert state.root_initialized is False
    assert [type(h) for h in root.handlers] == [logging.NullHandler]
    assert root.propagate is True


def test_get_logger_does_not_configure_output(fresh_logging) -> None:
    logger = get_logger("desktop_entry.core.builder")

    assert logger.name == "desktop_entry.core.builder"
    assert get_state().queue_listener is None
    assert get_state().root_initialized is False


def test_parse_writes_nothing_to_stderr_before_setup(
    fresh_logging,
    capsys: pytest.CaptureFixture,
    caplog: pytest.LogCaptureFixture,
) -> None:
    text = (
        "[Desktop Entry]\nType=Application\nName=a\n"
        "[Desktop Action x]\nName=b\n"
    )

    with caplog.at_level(logging.WARNING, logger="desktop_entry"):
        parse(text)

    assert capsys.readouterr().err == ""
    assert "not listed in Actions" in caplog.text
    assert get_state().queue_listener is None


class TestFormatters:
    """Tests for console formatters."""

    def test_simple_formatter(self) -> None:
        record = _record(logging.WARNING, "plain")

        assert SimpleConsoleFormatter().format(record) == "plain"

    def test_colored_formatter_restores_levelname(self) -> None:
        record = _record(logging.ERROR, "oops")
        formatter = ColoredConsoleFormatter("%(levelname)s %(message)s")

        output = formatter.format(record)

        assert output == "\033[31mERROR\033[0m oops"
        assert record.levelname == "ERROR"

    def test_hybrid_formatter(self) -> None:
        formatter = HybridConsoleFormatter("%(levelname)s: %(message)s")

        info = formatter.format(_record(logging.INFO, "Name: Firefox"))
        warning = formatter.format(_record(logging.WARNING, "careful"))

        assert info == "Name: Firefox"
        assert warning.endswith(": careful")
        assert "WARNING" in warning
