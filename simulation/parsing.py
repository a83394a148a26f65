"""Line parsing for the instruction file format.

    <width> <height>
    <blank>
    <x> <y> <orientation>
    <instructions>
    ...
"""

import re

from core.errors import MalformedDimensionLine, MalformedPositionLine
from simulation.state import Orientation, RobotState

_INT = re.compile(r"[+-]?[0-9]+")


def split_lines(text):
    """Split on newlines only, dropping a trailing carriage return from each line."""
    return [line[:-1] if line.endswith("\r") else line for line in text.split("\n")]


def parse_int(token):
    if token is None or not _INT.fullmatch(token):
        return None
    return int(token)


def parse_dimensions(line, line_number=0):
    """Return (width, height) from the first line. Extra tokens are ignored."""
    tokens = line.split(" ")
    if len(tokens) < 2:
        raise MalformedDimensionLine(line, line_number, reason="expected '<width> <height>'")
    width, height = parse_int(tokens[0]), parse_int(tokens[1])
    if width is None or height is None:
        raise MalformedDimensionLine(line, line_number, reason="dimensions must be integers")
    return width, height


def parse_position(line, line_number=None):
    """Build a RobotState from '<x> <y> <orientation>'."""
    tokens = line.split(" ")
    if len(tokens) < 3:
        raise MalformedPositionLine(line, line_number, reason="expected '<x> <y> <orientation>'")
    x, y = parse_int(tokens[0]), parse_int(tokens[1])
    if x is None or y is None:
        raise MalformedPositionLine(line, line_number, reason="coordinates must be integers")
    try:
        orientation = Orientation(tokens[2])
    except ValueError:
        raise MalformedPositionLine(line, line_number, reason=f"unknown orientation {tokens[2]!r}") from None
    return RobotState(x, y, orientation)


def is_new_robot(line):
    return line == ""


def is_start_position(line):
    return " " in line
