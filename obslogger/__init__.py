"""Observer-based logger with stdout, file and in-memory destinations."""

__version__ = "0.1.0"

__all__ = ["basic_logger", "demo", "file_logger", "interfaces", "memory_logger", "utils"]