"""UTC timestamp helpers for log records and error reports."""

import time
from datetime import datetime, timezone


def format_timestamp(epoch_s=None):
    """ISO 8601 UTC timestamp with millisecond precision, e.g. 2024-05-01T12:00:00.123Z."""
    moment = datetime.now(timezone.utc) if epoch_s is None else datetime.fromtimestamp(epoch_s, tz=timezone.utc)
    return moment.strftime("%Y-%m-%dT%H:%M:%S.") + f"{moment.microsecond // 1000:03d}Z"


def uptime_since(start):
    """Seconds elapsed since a time.monotonic() reading."""
    return time.monotonic() - start
