"""Main logger module providing public API functions.

- setup_logging(): Configure logging with the QueueHandler architecture
- get_logger(): Get a module logger under the desktop_entry root
  (no handlers are configured until setup_logging() runs)
- flush_all_handlers(): Ensure pending log records are written
- temporary_console_level(): Raise console verbosity for CLI output
- clear_logger_state(): Clear global logger state for testing
"""

import atexit
import contextlib
import logging
import time
from collections.abc import Generator
from contextlib import contextmanager
from logging.handlers import RotatingFileHandler
from pathlib import Path

from desktop_entry.constants import LOG_ROOT_NAME
from desktop_entry.logger.config import load_log_settings
from desktop_entry.logger.handlers import setup_root_logger
from desktop_entry.logger.state import get_state


def flush_all_handlers() -> None:
    """Flush all handlers in the QueueListener to ensure writes complete.

    Waits for the queue to drain, then flushes each handler's buffer.
    Safe to call from any thread.
    """
    state = get_state()
    if state.queue_listener is not None and state.log_queue is not None:
        # QueueListener doesn't use task_done(), so poll the queue
        timeout = 5.0
        start_time = time.time()
        while not state.log_queue.empty():
            if time.time() - start_time > timeout:
                break
            time.sleep(0.01)

        time.sleep(0.05)

        for handler in state.queue_listener.handlers:
            with contextlib.suppress(OSError, ValueError):
                handler.flush()


def _cleanup_logging() -> None:
    """Stop the QueueListener on interpreter exit."""
    state = get_state()
    if state.queue_listener is not None:
        flush_all_handlers()
        state.queue_listener.stop()
        state.queue_listener = None


atexit.register(_cleanup_logging)


def _install_null_handler() -> None:
    """Keep library records off stderr until an application sets up logging."""
    root_logger = logging.getLogger(LOG_ROOT_NAME)
    root_logger.propagate = True
    root_logger.addHandler(logging.NullHandler())


_install_null_handler()


def setup_logging(
    name: str = LOG_ROOT_NAME,
    console_level: str | None = None,
    file_level: str | None = None,
    log_file: Path | None = None,
) -> logging.Logger:
    """Configure logging and return the requested logger.

    The root "desktop_entry" logger is initialized exactly once with a
    QueueHandler; child loggers propagate to it.

    Args:
        name: Logger name, typically __name__ for module-level loggers
        console_level: Console log level ("DEBUG", "INFO", "WARNING")
        file_level: File log level ("DEBUG", "INFO")
        log_file: Path to log file (default: from DESKTOP_ENTRY_LOG_DIR,
            console only when unset)

    Returns:
        Logger instance (singleton per name via logging.getLogger)

    Raises:
        ConfigurationError: If file logging setup fails

    """
    state = get_state()
    with state.lock:
        if not state.root_initialized:
            cfg_console, cfg_file, cfg_path = load_log_settings()
            setup_root_logger(
                state,
                console_level or cfg_console,
                file_level or cfg_file,
                log_file or cfg_path,
            )

    return logging.getLogger(name)


def get_logger(name: str = LOG_ROOT_NAME) -> logging.Logger:
    """Get a logger under the desktop_entry root.

    Only returns the logger; output is configured by setup_logging(),
    which the CLI calls. Until then records reach a NullHandler and
    propagate to whatever handlers the host application installed.

    Use __name__ as the logger name for proper hierarchical logging:
        >>> logger = get_logger(__name__)
        >>> logger.debug("Parsed %d groups", count)

    Args:
        name: Logger name, typically __name__ for module loggers

    Returns:
        Logger instance

    """
    return logging.getLogger(name)


@contextmanager
def temporary_console_level(
    level: str = "INFO", logger_name: str = LOG_ROOT_NAME
) -> Generator[None, None, None]:
    """Temporarily set console handler log level for user-facing output.

    The CLI prints through INFO records; this lowers the console threshold
    while a command runs and restores it afterwards.

    Args:
        level: Log level to set
        logger_name: Root logger whose console handlers are adjusted

    Raises:
        ValueError: If level is not a valid logging level name

    """
    if not isinstance(getattr(logging, level, None), int):
        msg = f"Invalid log level: {level}"
        raise ValueError(msg)

    setup_logging(logger_name)
    state = get_state()
    handlers: list[logging.Handler] = []
    if state.queue_listener is not None:
        handlers.extend(state.queue_listener.handlers)
    handlers.extend(logging.getLogger(logger_name).handlers)

    console_handlers = [
        h
        for h in handlers
        if isinstance(h, logging.StreamHandler)
        and not isinstance(h, RotatingFileHandler)
    ]
    original_levels = [h.level for h in console_handlers]
    for handler in console_handlers:
        handler.setLevel(getattr(logging, level))

    try:
        yield
    finally:
        flush_all_handlers()
        for handler, original in zip(
            console_handlers, original_levels, strict=True
        ):
            handler.setLevel(original)


def clear_logger_state() -> None:
    """Clear global logger state for testing purposes.

    Stops the QueueListener, closes handlers and resets state flags so the
    next setup_logging() call starts from a clean slate. The root logger
    is left as on import, with only a NullHandler.

    Warning:
        Intended for tests only.

    """
    state = get_state()
    with state.lock:
        if state.queue_listener is not None:
            flush_all_handlers()
            state.queue_listener.stop()
            for handler in state.queue_listener.handlers:
                handler.close()
            state.queue_listener = None

        state.log_queue = None
        state.root_initialized = False
        state.config_applied = False

        root_logger = logging.getLogger(LOG_ROOT_NAME)
        for handler in root_logger.handlers[:]:
            handler.close()
            root_logger.removeHandler(handler)
        _install_null_handler()
