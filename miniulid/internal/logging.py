import json
import sys
import threading
from enum import IntEnum
from miniulid.core.errors import ConfigError
from miniulid.utils.timestamp import format_timestamp

class LogLevel(IntEnum):
    DEBUG = 10
    INFO = 20
    WARN = 30
    ERROR = 40

_logger = None
_logger_lock = threading.Lock()

class StructuredLogger:
    def __init__(self, level=LogLevel.INFO, stream=None):
        self.level = level
        self.stream = stream

    def _emit(self, level, message, error=None, **kwargs):
        if level < self.level:
            return
        try:
            record = {"timestamp": format_timestamp(), "level": level.name, "msg": message, **kwargs}
            if error:
                record["err"] = str(error)
            print(json.dumps(record, default=str), file=self.stream or sys.stderr, flush=True)
        except (OSError, TypeError, ValueError):
            # a broken log stream never fails an id generation
            pass

    def debug(self, message, **kwargs):
        self._emit(LogLevel.DEBUG, message, **kwargs)

    def info(self, message, **kwargs):
        self._emit(LogLevel.INFO, message, **kwargs)

    def warn(self, message, error=None, **kwargs):
        self._emit(LogLevel.WARN, message, error, **kwargs)

    def error(self, message, error=None, **kwargs):
        self._emit(LogLevel.ERROR, message, error, **kwargs)

    @classmethod
    def configure(cls, min_level=LogLevel.INFO, stream=None):
        global _logger
        with _logger_lock:
            _logger = cls(min_level, stream)

def get_logger():
    global _logger
    if _logger is None:
        with _logger_lock:
            if _logger is None:
                _logger = StructuredLogger()
    return _logger

def parse_level(name):
    """Map a config level name to a LogLevel; WARNING is accepted as WARN."""
    name = name.upper()
    if name == "WARNING":
        name = "WARN"
    try:
        return LogLevel[name]
    except KeyError:
        raise ConfigError(f"unknown log level {name!r}, expected one of {[level.name for level in LogLevel]}",
                          context={"level": name}) from None
