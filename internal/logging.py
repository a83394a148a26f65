import json
import sys
import threading
from enum import IntEnum

from utils.timestamp import format_timestamp


class LogLevel(IntEnum):
    DEBUG = 10
    INFO = 20
    WARN = 30
    ERROR = 40

    @classmethod
    def parse(cls, name, default=None):
        try:
            return cls[str(name).upper()]
        except KeyError:
            if default is None:
                raise
            return default


_logger = None
_logger_lock = threading.Lock()


class StructuredLogger:
    """One JSON object per line on stderr."""

    def __init__(self, level=LogLevel.INFO, stream=None):
        self.level = level
        self._stream = stream

    def _emit(self, level, message, error=None, **fields):
        if level < self.level:
            return
        try:
            record = {"timestamp": format_timestamp(), "level": level.name, "msg": message, **fields}
            if error is not None:
                record["err"] = str(error)
            print(json.dumps(record, default=str), file=self._stream or sys.stderr, flush=True)
        except Exception:
            pass

    def debug(self, message, **fields):
        self._emit(LogLevel.DEBUG, message, **fields)

    def info(self, message, **fields):
        self._emit(LogLevel.INFO, message, **fields)

    def warn(self, message, error=None, **fields):
        self._emit(LogLevel.WARN, message, error, **fields)

    def error(self, message, error=None, **fields):
        self._emit(LogLevel.ERROR, message, error, **fields)

    def is_enabled(self, level):
        return level >= self.level

    @classmethod
    def configure(cls, min_level=LogLevel.INFO, stream=None):
        global _logger
        with _logger_lock:
            _logger = cls(min_level, stream)
        return _logger


def get_logger():
    global _logger
    if _logger is None:
        with _logger_lock:
            if _logger is None:
                _logger = StructuredLogger()
    return _logger
