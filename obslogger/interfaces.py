"""Log levels, output destinations and the abstract logger interfaces."""

from abc import ABC, abstractmethod
from enum import IntEnum


class LogLevel(IntEnum):
    """Verbosity of a message; a message is written when its level <= the logger's."""

    ERROR = 0
    WARN = 1
    DEBUG = 2
    INFO = 3


class OutputDestination(IntEnum):
    """Kinds of output a logger can send messages to."""

    STDOUT = 0
    FILE = 1
    MEMORY = 2


class LogWriter(ABC):
    """Minimal API for writing messages at the different verbosities.

    ``text``, when given, replaces each ``{}`` in ``log_msg``.
    """

    @abstractmethod
    def error(self, log_msg: str, text: str = "") -> None:
        """Write an error message."""

    @abstractmethod
    def warn(self, log_msg: str, text: str = "") -> None:
        """Write a warning message."""

    @abstractmethod
    def debug(self, log_msg: str, text: str = "") -> None:
        """Write a debug message."""

    @abstractmethod
    def info(self, log_msg: str, text: str = "") -> None:
        """Write an informational message."""


class LogControl(ABC):
    """API for configuring a logger at run time."""

    @abstractmethod
    def set_log_level(self, level: LogLevel) -> None:
        """Set the highest level that will be written."""

    @abstractmethod
    def enable_output_destination(self, destination: OutputDestination) -> None:
        """Resume sending messages to *destination*."""

    @abstractmethod
    def disable_output_destination(self, destination: OutputDestination) -> None:
        """Stop sending messages to *destination* without removing it."""


class LogMessageObserver(ABC):
    """An output destination that accepts finished log messages."""

    @abstractmethod
    def write_log_message(self, log_msg: str) -> None:
        """Write one message to this destination."""

    def close(self) -> None:
        """Release any resources held by this destination."""


class LogMessageSubject(ABC):
    """A logger that distributes messages to registered observers."""

    @abstractmethod
    def attach(self, observer: LogMessageObserver, logger_type: OutputDestination) -> None:
        """Register *observer* as the destination of kind *logger_type*."""

    @abstractmethod
    def detach(self, logger_type: OutputDestination) -> None:
        """Remove and close the destination of kind *logger_type*."""

    @abstractmethod
    def send_to_all(self, log_msg: str) -> None:
        """Send *log_msg* to every enabled destination."""