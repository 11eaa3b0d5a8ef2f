"""Tests for the logger state container."""

import logging
import queue
from logging.handlers import QueueListener, RotatingFileHandler
from pathlib import Path

from desktop_entry_parser.logger.state import LoggerState, get_state


def _running_state(*handlers: logging.Handler) -> LoggerState:
    state = LoggerState(log_queue=queue.Queue(-1))
    state.queue_listener = QueueListener(state.log_queue, *handlers)
    state.queue_listener.start()
    state.root_initialized = True
    return state


class TestLoggerState:
    """Tests for LoggerState."""

    def test_defaults(self) -> None:
        """Test a new state has no listener and no handlers."""
        state = LoggerState()
        assert state.queue_listener is None
        assert state.handlers == ()
        assert state.file_handler is None

    def test_file_handler(self, tmp_path: Path) -> None:
        """Test the rotating file handler is found among the handlers."""
        console = logging.StreamHandler()
        log_file = RotatingFileHandler(tmp_path / "test.log")
        state = _running_state(console, log_file)
        try:
            assert state.handlers == (console, log_file)
            assert state.file_handler is log_file
        finally:
            state.reset()

    def test_stop_listener_keeps_handlers_open(self, tmp_path: Path) -> None:
        """Test stopping without closing leaves handlers usable."""
        log_file = RotatingFileHandler(tmp_path / "test.log")
        state = _running_state(log_file)

        state.stop_listener()

        assert state.queue_listener is None
        assert log_file.stream is not None
        log_file.close()

    def test_reset(self, tmp_path: Path) -> None:
        """Test reset closes handlers and clears the flags."""
        log_file = RotatingFileHandler(tmp_path / "test.log")
        state = _running_state(log_file)
        state.config_applied = True

        state.reset()

        assert state.queue_listener is None
        assert state.log_queue is None
        assert state.root_initialized is False
        assert state.config_applied is False
        assert log_file.stream is None

    def test_get_state_is_shared(self) -> None:
        """Test every caller gets the same state object."""
        assert get_state() is get_state()
