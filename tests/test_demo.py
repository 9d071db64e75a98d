import io

import pytest

from obslogger.basic_logger import BasicLogger
from obslogger.demo import (
    EXAMPLE_FILE_NAME,
    SampleClassWithBasicLog,
    class_with_own_tag_example,
    main,
    stdout_and_file_example,
    stdout_file_and_memory_example,
    stdout_only_example,
)
from obslogger.interfaces import LogLevel, OutputDestination
from obslogger.memory_logger import BasicMemoryLogger


def _lines(path):
    return path.read_text(encoding="utf-8").splitlines()


def test_stdout_only_example_filters_by_level(capsys):
    stdout_only_example()
    out = capsys.readouterr().out
    assert "this is the first log message" in out
    assert "this message would be printed" in out
    assert "this message should NOT be printed" not in out


def test_stdout_and_file_example_skips_paused_message(tmp_path):
    path = stdout_and_file_example(tmp_path)
    assert path == tmp_path / EXAMPLE_FILE_NAME
    assert _lines(path) == [
        "this is the first log message, it will be printed to console and to file:"
        + str(path),
        "enabled back the file logger, so this line will be printed to file:"
        + str(path),
    ]


def test_stdout_and_file_example_prints_paused_message(tmp_path, capsys):
    path = stdout_and_file_example(tmp_path)
    out = capsys.readouterr().out
    assert "this message will NOT be printed to file:" + str(path) in out


def test_previous_file_is_removed(tmp_path):
    (tmp_path / EXAMPLE_FILE_NAME).write_text("stale\n", encoding="utf-8")
    path = stdout_and_file_example(tmp_path)
    assert "stale" not in _lines(path)


def test_class_with_own_tag_example_prefixes_messages(tmp_path):
    path = class_with_own_tag_example(tmp_path)
    assert _lines(path) == [
        "this is the first log message for the class with its own tag sample",
        "SampleClassWithBasicLog:some message",
        "SampleClassWithBasicLog:hello world",
    ]


def test_file_and_memory_example(tmp_path):
    path, memory = stdout_file_and_memory_example(tmp_path)
    assert _lines(path) == ["now this line will again be also in the (new) log file!"]
    assert memory.contents() == (
        "this line will appear also in memory log"
        "this line will NOT appear in the file"
        "now this line will again be also in the (new) log file!"
    )


def test_sample_class_requires_logger():
    sample = SampleClassWithBasicLog()
    with pytest.raises(RuntimeError):
        sample.some_func()


def test_sample_class_forwards_every_level():
    memory = BasicMemoryLogger()
    with BasicLogger(stream=io.StringIO()) as logger:
        logger.attach(memory, OutputDestination.MEMORY)
        logger.detach(OutputDestination.STDOUT)
        sample = SampleClassWithBasicLog()
        sample.init_log(logger)
        sample.error("e|")
        sample.warn("w|")
        sample.debug("d|")
        sample.info("i|")
    prefix = SampleClassWithBasicLog.PREFIX
    assert memory.contents() == prefix + "e|" + prefix + "w|" + prefix + "d|" + prefix + "i|"


def test_sample_class_respects_logger_level():
    memory = BasicMemoryLogger()
    with BasicLogger(stream=io.StringIO()) as logger:
        logger.attach(memory, OutputDestination.MEMORY)
        logger.set_log_level(LogLevel.ERROR)
        sample = SampleClassWithBasicLog()
        sample.init_log(logger)
        sample.some_func()
        sample.error("bad")
    assert memory.contents() == SampleClassWithBasicLog.PREFIX + "bad"


def test_main_runs_in_current_directory(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    assert main([]) == 0
    out = capsys.readouterr().out
    assert out.startswith("main - start")
    assert out.rstrip().endswith("main - end")
    assert _lines(tmp_path / EXAMPLE_FILE_NAME) == [
        "now this line will again be also in the (new) log file!"
    ]