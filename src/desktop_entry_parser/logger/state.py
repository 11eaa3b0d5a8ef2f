"""Process-wide logging state.

One LoggerState instance tracks whether the ``desktop_entry_parser`` root
logger has handlers and which QueueListener feeds them.
"""

import queue
import threading
from dataclasses import dataclass, field
from logging import Handler
from logging.handlers import QueueListener, RotatingFileHandler


@dataclass(slots=True)
class LoggerState:
    """Queue listener and setup flags of the package root logger."""

    lock: threading.Lock = field(default_factory=threading.Lock)
    root_initialized: bool = False
    config_applied: bool = False
    queue_listener: QueueListener | None = None
    log_queue: queue.Queue | None = None

    @property
    def handlers(self) -> tuple[Handler, ...]:
        """Handlers behind the listener, empty when logging is not set up."""
        if self.queue_listener is None:
            return ()
        return tuple(self.queue_listener.handlers)

    @property
    def file_handler(self) -> RotatingFileHandler | None:
        """The log file handler, or None when file logging is off."""
        for handler in self.handlers:
            if isinstance(handler, RotatingFileHandler):
                return handler
        return None

    def stop_listener(self, *, close_handlers: bool = False) -> None:
        """Stop the listener thread, optionally closing its handlers."""
        if self.queue_listener is None:
            return
        self.queue_listener.stop()
        if close_handlers:
            for handler in self.queue_listener.handlers:
                handler.close()
        self.queue_listener = None

    def reset(self) -> None:
        """Stop everything and return to the unconfigured state."""
        self.stop_listener(close_handlers=True)
        self.log_queue = None
        self.root_initialized = False
        self.config_applied = False


_state = LoggerState()


def get_state() -> LoggerState:
    """Return the process-wide logger state."""
    return _state
