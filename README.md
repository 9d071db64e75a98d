# obslogger

A small logger built around the observer pattern. A `BasicLogger` holds at
most one output destination per kind (stdout, file, memory). It sends every
accepted message to each enabled destination, in the order stdout, file,
memory.

## Installation

```
pip install obslogger
```

To run the tests:

```
pip install "obslogger[test]"
pytest
```

## Concepts

- **`LogLevel`** (`obslogger.interfaces`): `ERROR`, `WARN`, `DEBUG`, `INFO`,
  in that order. A message is written when its level is at or below the
  logger's current level. The default level is `INFO`, so every message is
  written. Setting the level to `DEBUG` suppresses `info` messages. Setting it
  to `ERROR` keeps only errors.
- **`OutputDestination`** (`obslogger.interfaces`): `STDOUT`, `FILE`,
  `MEMORY`.
- **Destinations:**
  - `obslogger.file_logger.StdoutFileLogger` prints each message as one line
    to standard output, or to a stream passed to it.
  - `obslogger.file_logger.FileLogger` writes each message as one line to a
    file. It creates the file when it is constructed, overwriting an existing
    file of the same name. It can be used as a context manager.
  - `obslogger.memory_logger.BasicMemoryLogger` appends messages, UTF-8
    encoded and with no separator, to a buffer of 1024 bytes. The size can be
    changed with `capacity`. A message that no longer fits is dropped whole.
    `can_write(msg)` tells whether a message would fit, `contents()` returns
    the stored text, `len()` gives the bytes used, and `flush()` empties the
    buffer.
- **Placeholders:** in `error`, `warn`, `debug` and `info`, each `{}` in the
  message is replaced by the optional `text` argument. `info` does the
  replacement only when `text` is not empty. The other three always do it, so
  an absent `text` removes the `{}`.

## Usage

```python
from obslogger.basic_logger import BasicLogger
from obslogger.interfaces import LogLevel, OutputDestination
from obslogger.memory_logger import BasicMemoryLogger

with BasicLogger("app.log") as logger:       # stdout and app.log
    logger.info("service started")
    logger.info("hello {}", "world")          # written as "hello world"

    memory = BasicMemoryLogger()
    logger.attach(memory, OutputDestination.MEMORY)
    logger.error("disk almost full")
    print(memory.contents())

    # Pause and resume a destination without removing it
    logger.disable_output_destination(OutputDestination.FILE)
    logger.warn("only on stdout and in memory")
    logger.enable_output_destination(OutputDestination.FILE)

    # Remove (and close) a destination
    logger.detach(OutputDestination.MEMORY)

    logger.set_log_level(LogLevel.ERROR)
    logger.info("not written")
```

`BasicLogger()` without a file name logs to stdout only. The keyword argument
`stream=` redirects the stdout destination to another text stream.

Leaving the `with` block, or calling `close()`, closes and removes every
destination.

Errors:

- `attach` raises `TypeError` for `None`, and `ValueError` if a destination of
  that kind is already attached.
- `detach`, `enable_output_destination` and `disable_output_destination`
  raise `KeyError` if no destination of that kind is attached.

### Tagging messages from your own classes

A class can implement `LogWriter` and forward to a logger with a prefix of its
own. `obslogger.demo.SampleClassWithBasicLog` shows how:

```python
from obslogger.basic_logger import BasicLogger
from obslogger.demo import SampleClassWithBasicLog

with BasicLogger() as logger:
    sample = SampleClassWithBasicLog()
    sample.init_log(logger)
    sample.some_func()            # "SampleClassWithBasicLog:some message"
```

## Demo

```
obslogger-demo
```

This runs the stdout, file and memory example and writes `exampleFile.txt` to
the current directory.

The other examples are functions in `obslogger.demo`:

- `stdout_only_example()`
- `stdout_and_file_example(directory)`
- `class_with_own_tag_example(directory)`
- `stdout_file_and_memory_example(directory)`

Each one that takes a directory writes `exampleFile.txt` there and returns its
path. `stdout_file_and_memory_example` also returns the memory destination.

## What it does not do

- Messages are written exactly as given. The logger adds no timestamps, level
  names or other formatting.
- File rotation is not performed. `BasicFileLogger.rotate_file()` is a hook
  that does nothing, and `should_rotate_file` only records a preference.
  Rotation is left to external tools.