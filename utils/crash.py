"""Crash reporting for uncaught exceptions."""

import json
import os
import sys
import traceback
import uuid

from utils.timestamp import format_timestamp

# Overridden from LoggingConfig.crash_file by configure()
_crash_log = "logs/crash.log"


def configure(crash_file):
    global _crash_log
    _crash_log = crash_file


def _write_crash(record):
    """Append one JSON line to the crash log. Never raises."""
    try:
        log_dir = os.path.dirname(_crash_log)
        if log_dir:
            os.makedirs(log_dir, exist_ok=True)
        with open(_crash_log, "a") as f:
            f.write(json.dumps(record) + "\n")
    except Exception:
        pass


def log_crash(exc_type, exc_value, exc_tb):
    """sys.excepthook replacement: banner on stderr plus a crash log record."""
    crash_id = getattr(exc_value, "error_id", None) or uuid.uuid4().hex[:12]
    timestamp = format_timestamp()
    exc_name = exc_type.__name__ if exc_type else "Unknown"
    exc_msg = str(exc_value) if exc_value else ""
    tb = "".join(traceback.format_exception(exc_type, exc_value, exc_tb))

    sys.stderr.write(f"\n{'=' * 60}\nCRASH [{crash_id}] {timestamp}\n{'=' * 60}\n")
    sys.stderr.write(f"{exc_name}: {exc_msg}\n{'-' * 60}\n{tb}{'=' * 60}\n\n")
    record = {"id": crash_id, "timestamp": timestamp, "type": exc_name, "msg": exc_msg, "traceback": tb}
    context = getattr(exc_value, "context", None)
    if context:
        record["context"] = context
    _write_crash(record)


def install_crash_handler():
    sys.excepthook = log_crash
