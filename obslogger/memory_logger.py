"""An output destination that keeps messages in a bounded in-memory buffer."""

import logging

from obslogger.interfaces import LogMessageObserver

_log = logging.getLogger(__name__)

MAX_BUFF_SIZE = 1024


class BasicMemoryLogger(LogMessageObserver):
    """Appends messages, UTF-8 encoded and without separators, to a fixed-size buffer.

    A message that would overflow the buffer is dropped whole.
    """

    def __init__(self, capacity: int = MAX_BUFF_SIZE) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self.capacity = capacity
        self._buffer = bytearray()

    def write_log_message(self, log_msg: str) -> None:
        """Store *log_msg* if it fits; otherwise drop it."""
        if not self.can_write(log_msg):
            _log.debug("message %r does not fit into the memory buffer", log_msg)
            return
        self._buffer += log_msg.encode("utf-8")

    def can_write(self, log_msg: str) -> bool:
        """Return whether *log_msg* fits in the remaining space."""
        return len(self._buffer) + len(log_msg.encode("utf-8")) <= self.capacity

    def flush(self) -> None:
        """Discard every message stored so far."""
        self._buffer.clear()

    def contents(self) -> str:
        """Return everything stored so far as one string."""
        return self._buffer.decode("utf-8")

    def __len__(self) -> int:
        return len(self._buffer)