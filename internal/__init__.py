from internal.logging import LogLevel, StructuredLogger, get_logger
from utils.timestamp import format_timestamp

__all__ = [
    "LogLevel",
    "StructuredLogger",
    "get_logger",
    "format_timestamp",
]
