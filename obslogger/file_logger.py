"""Output destinations that write messages to files and to standard output."""

import logging
import os
import sys
from typing import IO, Optional, Union

from obslogger.interfaces import LogMessageObserver

_log = logging.getLogger(__name__)


class BasicFileLogger:
    """Common behaviour of file-like destinations.

    ``should_rotate_file`` records whether rotation is wanted; rotation
    itself is left to external tools such as logrotate.
    """

    def __init__(self) -> None:
        self.should_rotate_file = False

    def rotate_file(self) -> None:
        """Hook for in-process rotation; the basic logger performs none."""


class FileLogger(BasicFileLogger, LogMessageObserver):
    """Writes each message as one line to a file.

    The file is created (or truncated) when the logger is constructed and
    closed by :meth:`close` or on leaving a ``with`` block.
    """

    def __init__(self, file_name: Union[str, "os.PathLike[str]"]) -> None:
        super().__init__()
        self.file_name = os.fspath(file_name)
        self._file: IO[str] = open(self.file_name, "w", encoding="utf-8")

    def write_log_message(self, log_msg: str) -> None:
        """Append *log_msg* and a newline to the file and flush it."""
        _log.debug("got log message: %s", log_msg)
        self._file.write(log_msg + "\n")
        self._file.flush()

    def close(self) -> None:
        """Close the file; closing twice is harmless."""
        self._file.close()

    @property
    def closed(self) -> bool:
        return self._file.closed

    def __enter__(self) -> "FileLogger":
        return self

    def __exit__(self, *args) -> None:
        self.close()


class StdoutFileLogger(BasicFileLogger, LogMessageObserver):
    """Writes each message as one line to standard output (or another stream)."""

    def __init__(self, stream: Optional[IO[str]] = None) -> None:
        super().__init__()
        self._stream = stream

    def write_log_message(self, log_msg: str) -> None:
        """Print *log_msg* followed by a newline and flush the stream."""
        print(log_msg, file=self._stream or sys.stdout, flush=True)