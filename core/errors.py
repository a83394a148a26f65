"""Simulation errors with tracking IDs.

Every failure is fatal to the run that raised it; callers at the CLI and
HTTP boundaries report the error and its ``error_id``.
"""

import uuid

from utils.timestamp import format_timestamp


class MarsError(Exception):
    """Base error with a short unique ID and timestamp for tracking."""

    def __init__(self, message, context=None, cause=None):
        super().__init__(message)
        self.error_id = uuid.uuid4().hex[:12]
        self.timestamp = format_timestamp()
        self.context = context or {}
        self.cause = cause

    def __str__(self):
        return f"[{self.error_id}] {super().__str__()}"

    @property
    def message(self):
        return super().__str__()

    def to_dict(self):
        return {
            "error": type(self).__name__,
            "error_id": self.error_id,
            "timestamp": self.timestamp,
            "detail": self.message,
            "context": self.context,
        }


class InvalidDimensions(MarsError):
    """Grid width or height is negative."""

    def __init__(self, width, height, **kwargs):
        context = kwargs.pop("context", {})
        context.update(width=width, height=height)
        super().__init__(f"invalid grid dimensions {width}x{height}", context=context, **kwargs)


class MalformedInput(MarsError):
    """A line could not be parsed where integers or an orientation were expected."""

    kind = "input"

    def __init__(self, line, line_number=None, reason=None, **kwargs):
        context = kwargs.pop("context", {})
        context["line"] = line
        if line_number is not None:
            context["line_number"] = line_number
        message = f"malformed {self.kind} line {line!r}"
        if reason:
            message += f": {reason}"
        super().__init__(message, context=context, **kwargs)


class MalformedDimensionLine(MalformedInput):
    kind = "dimension"


class MalformedPositionLine(MalformedInput):
    kind = "position"
