"""Sample uses of the loggers, and the command that runs one of them."""

import logging
import os
from pathlib import Path
from typing import Optional, Tuple, Union

from obslogger.basic_logger import BasicLogger
from obslogger.file_logger import FileLogger
from obslogger.interfaces import LogLevel, LogWriter, OutputDestination
from obslogger.memory_logger import BasicMemoryLogger

_log = logging.getLogger(__name__)

EXAMPLE_FILE_NAME = "exampleFile.txt"

PathArg = Optional[Union[str, "os.PathLike[str]"]]


class SampleClassWithBasicLog(LogWriter):
    """A class that tags every message it logs with its own prefix."""

    PREFIX = "SampleClassWithBasicLog:"

    def __init__(self) -> None:
        self._logger: Optional[LogWriter] = None

    def init_log(self, logger: LogWriter) -> None:
        """Use *logger* for every message this object writes."""
        self._logger = logger

    def some_func(self) -> None:
        self.info("some message")

    def some_func_with_text(self) -> None:
        self.info("hello {}", "world")

    def error(self, log_msg: str, text: str = "") -> None:
        self._target().error(self.PREFIX + log_msg, text)

    def warn(self, log_msg: str, text: str = "") -> None:
        self._target().warn(self.PREFIX + log_msg, text)

    def debug(self, log_msg: str, text: str = "") -> None:
        self._target().debug(self.PREFIX + log_msg, text)

    def info(self, log_msg: str, text: str = "") -> None:
        self._target().info(self.PREFIX + log_msg, text)

    def _target(self) -> LogWriter:
        if self._logger is None:
            raise RuntimeError("init_log() must be called before logging")
        return self._logger


def _fresh_log_path(func_name: str, directory: PathArg) -> Path:
    base = Path.cwd() if directory is None else Path(directory)
    print(f"{func_name}current working directory is:{base}")
    path = base / EXAMPLE_FILE_NAME
    print(f"{func_name}creating logger for both stdout and file:{path}")
    if path.exists():
        print(f"removing file:{path} from prev runs")
        path.unlink()
    return path


def stdout_only_example() -> None:
    """Log to standard output only, then raise the threshold and log again."""
    func_name = "createLoggerForStdoutOnlyExample - "
    print(func_name + "START")
    with BasicLogger() as logger:
        logger.info("this is the first log message")
        logger.set_log_level(LogLevel.DEBUG)
        logger.info("this message should NOT be printed")
        logger.error("this message would be printed")
    print(func_name + "END")


def stdout_and_file_example(directory: PathArg = None) -> Path:
    """Log to standard output and a file, pausing the file for one message.

    Returns the path of the log file.
    """
    func_name = "createLoggerForStdoutAndFileExample - "
    print(func_name + "START")
    path = _fresh_log_path(func_name, directory)
    with BasicLogger(path) as logger:
        logger.info(
            "this is the first log message, it will be printed to console and to file:"
            + str(path)
        )
        logger.disable_output_destination(OutputDestination.FILE)
        logger.info("this message will NOT be printed to file:" + str(path))
        logger.enable_output_destination(OutputDestination.FILE)
        logger.info(
            "enabled back the file logger, so this line will be printed to file:"
            + str(path)
        )
    print(func_name + "END")
    return path


def class_with_own_tag_example(directory: PathArg = None) -> Path:
    """Log through a class that prefixes its messages with its own tag.

    Returns the path of the log file.
    """
    func_name = "createLoggerForStdoutOnlyWithClassThatSetItsOwnTagExample - "
    print(func_name + "START")
    path = _fresh_log_path(func_name, directory)
    with BasicLogger(path) as logger:
        logger.info(
            "this is the first log message for the class with its own tag sample"
        )
        sample = SampleClassWithBasicLog()
        sample.init_log(logger)
        sample.some_func()
        sample.some_func_with_text()
    print(func_name + "END")
    return path


def stdout_file_and_memory_example(
    directory: PathArg = None,
) -> Tuple[Path, BasicMemoryLogger]:
    """Add a memory destination, detach the file and attach a new one.

    Re-attaching a file logger with the same name truncates the file.
    Returns the path of the log file and the memory destination.
    """
    func_name = "createLoggerForStdoutAndFileAndMemory - "
    print(func_name + "START")
    path = _fresh_log_path(func_name, directory)
    memory = BasicMemoryLogger()
    with BasicLogger(path) as logger:
        logger.info("first line will NOT go to memory")
        logger.attach(memory, OutputDestination.MEMORY)
        logger.info("this line will appear also in memory log")
        print(func_name + "detaching the log file:")
        logger.detach(OutputDestination.FILE)
        logger.info("this line will NOT appear in the file")
        logger.attach(FileLogger(path), OutputDestination.FILE)
        logger.info("now this line will {} be also in the (new) log file!", "again")
    print(func_name + "END")
    return path, memory


def main(argv=None) -> int:
    """Run the file-and-memory example in the current directory."""
    print("main - start")
    stdout_file_and_memory_example()
    print("main - end")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())