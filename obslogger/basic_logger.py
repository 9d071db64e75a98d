"""The logger that routes messages to its registered output destinations."""

import logging
import os
import threading
from dataclasses import dataclass
from typing import IO, Dict, Optional, Union

from obslogger.file_logger import FileLogger, StdoutFileLogger
from obslogger.interfaces import (
    LogControl,
    LogLevel,
    LogMessageObserver,
    LogMessageSubject,
    LogWriter,
    OutputDestination,
)
from obslogger.utils import replace_strings

_log = logging.getLogger(__name__)

_PLACEHOLDER = "{}"


@dataclass
class _Registration:
    observer: LogMessageObserver
    enabled: bool = True


class BasicLogger(LogWriter, LogControl, LogMessageSubject):
    """Sends log messages to at most one destination of each kind.

    A new logger writes to standard output at level ``INFO``; given a file
    name it also writes to that file. Further destinations are added with
    :meth:`attach`, and each can be paused and resumed without removing it.
    Destinations receive messages in the order of their
    :class:`OutputDestination` value.
    """

    def __init__(
        self,
        file_name: Optional[Union[str, "os.PathLike[str]"]] = None,
        *,
        stream: Optional[IO[str]] = None,
    ) -> None:
        self._lock = threading.RLock()
        self._level = LogLevel.INFO
        self._observers: Dict[OutputDestination, _Registration] = {}
        _log.debug("log level set to: %s", self._level.name)
        self.attach(StdoutFileLogger(stream), OutputDestination.STDOUT)
        if file_name is not None:
            self.attach(FileLogger(file_name), OutputDestination.FILE)

    # Control API

    def set_log_level(self, level: LogLevel) -> None:
        """Set the highest level that will be written."""
        with self._lock:
            self._level = LogLevel(level)

    def enable_output_destination(self, destination: OutputDestination) -> None:
        """Resume sending messages to *destination*.

        Raises KeyError if no destination of that kind is attached.
        """
        self._set_enabled(destination, True)

    def disable_output_destination(self, destination: OutputDestination) -> None:
        """Stop sending messages to *destination* without removing it.

        Raises KeyError if no destination of that kind is attached.
        """
        self._set_enabled(destination, False)

    # Subject API

    def attach(self, observer: LogMessageObserver, logger_type: OutputDestination) -> None:
        """Register *observer* as the enabled destination of kind *logger_type*.

        Raises TypeError for ``None`` and ValueError if that kind is taken.
        """
        if observer is None:
            raise TypeError("observer must not be None")
        logger_type = OutputDestination(logger_type)
        with self._lock:
            if logger_type in self._observers:
                raise ValueError(
                    f"a logger of type {logger_type.name} is already attached"
                )
            self._observers[logger_type] = _Registration(observer)
        _log.debug("added logger of type: %s", logger_type.name)

    def detach(self, logger_type: OutputDestination) -> None:
        """Remove and close the destination of kind *logger_type*.

        Raises KeyError if no destination of that kind is attached.
        """
        logger_type = OutputDestination(logger_type)
        with self._lock:
            try:
                registration = self._observers.pop(logger_type)
            except KeyError:
                raise KeyError(
                    f"no logger of type {logger_type.name} is attached"
                ) from None
        registration.observer.close()

    def send_to_all(self, log_msg: str) -> None:
        """Send *log_msg* to every enabled destination."""
        with self._lock:
            for destination in sorted(self._observers):
                registration = self._observers[destination]
                if registration.enabled:
                    registration.observer.write_log_message(log_msg)

    # Writer API

    def error(self, log_msg: str, text: str = "") -> None:
        """Write an error message; each ``{}`` is replaced by *text*."""
        self._write(LogLevel.ERROR, replace_strings(log_msg, _PLACEHOLDER, text))

    def warn(self, log_msg: str, text: str = "") -> None:
        """Write a warning message; each ``{}`` is replaced by *text*."""
        self._write(LogLevel.WARN, replace_strings(log_msg, _PLACEHOLDER, text))

    def debug(self, log_msg: str, text: str = "") -> None:
        """Write a debug message; each ``{}`` is replaced by *text*."""
        self._write(LogLevel.DEBUG, replace_strings(log_msg, _PLACEHOLDER, text))

    def info(self, log_msg: str, text: str = "") -> None:
        """Write an informational message.

        Each ``{}`` is replaced by *text* only when *text* is not empty.
        """
        if text:
            log_msg = replace_strings(log_msg, _PLACEHOLDER, text)
        self._write(LogLevel.INFO, log_msg)

    # Lifetime

    def close(self) -> None:
        """Close and remove every destination."""
        with self._lock:
            registrations = list(self._observers.values())
            self._observers.clear()
        for registration in registrations:
            registration.observer.close()

    def __enter__(self) -> "BasicLogger":
        return self

    def __exit__(self, *args) -> None:
        self.close()

    # Internals

    def _write(self, level: LogLevel, log_msg: str) -> None:
        with self._lock:
            if level <= self._level:
                self.send_to_all(log_msg)

    def _set_enabled(self, destination: OutputDestination, enabled: bool) -> None:
        destination = OutputDestination(destination)
        with self._lock:
            try:
                registration = self._observers[destination]
            except KeyError:
                raise KeyError(
                    f"output destination {destination.name} is not attached"
                ) from None
            registration.enabled = enabled
        _log.debug("logger of type %s enabled: %s", destination.name, enabled)