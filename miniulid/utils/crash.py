"""Crash logging for the fail-loudly helpers."""

import json
import os
import sys
import traceback

from miniulid.codec.crockford import encode
from miniulid.utils.timestamp import format_timestamp

# Default crash log path, can be overridden by configure()
_crash_log = "logs/crash.log"


def configure(crash_file):
    """Set crash log file path from config."""
    global _crash_log
    _crash_log = crash_file


def _crash_id():
    return encode(int.from_bytes(os.urandom(5), "big"))


def _write_crash(crash_id, timestamp, exc_name, exc_msg, tb, context=None):
    """Append the crash record as one JSON line. Never raises."""
    try:
        log_dir = os.path.dirname(_crash_log)
        if log_dir:
            os.makedirs(log_dir, exist_ok=True)
        record = {"id": crash_id, "timestamp": timestamp, "type": exc_name, "msg": exc_msg, "traceback": tb}
        if context:
            record["context"] = context
        with open(_crash_log, "a") as f:
            f.write(json.dumps(record, default=str) + "\n")
    except OSError:
        # stderr already carries the report
        pass


def log_crash(exc_type, exc_value, exc_tb):
    """Log crash to stderr and the crash file. Returns the crash id."""
    crash_id = _crash_id()
    timestamp = format_timestamp()
    exc_name = exc_type.__name__ if exc_type else "Unknown"
    exc_msg = str(exc_value) if exc_value else ""
    tb = "".join(traceback.format_exception(exc_type, exc_value, exc_tb))
    
    sys.stderr.write(f"\n{'=' * 60}\nCRASH [{crash_id}] {timestamp}\n{'=' * 60}\n")
    sys.stderr.write(f"{exc_name}: {exc_msg}\n{'-' * 60}\n{tb}{'=' * 60}\n\n")
    _write_crash(crash_id, timestamp, exc_name, exc_msg, tb, getattr(exc_value, "context", None))
    return crash_id
