"""Grid defines the bounds of Mars and remembers where robots fell off."""

from core.errors import InvalidDimensions
from internal.logging import get_logger


class Grid:
    """Rectangular grid with inclusive bounds [0, width] x [0, height].

    Forbidden positions are position signatures (see RobotState.signature)
    from which a robot has already stepped off the grid. The set only grows
    during a run and is shared by every robot created against this grid.
    """

    def __init__(self, width, height):
        if width < 0 or height < 0:
            raise InvalidDimensions(width, height)
        self.width = width
        self.height = height
        # dict keeps insertion order for reporting; only membership matters
        self._forbidden = {}

    def mark_forbidden(self, signature):
        if signature in self._forbidden:
            return
        self._forbidden[signature] = None
        get_logger().info("position forbidden", signature=signature, total=len(self._forbidden))

    def is_forbidden(self, signature):
        return signature in self._forbidden

    @property
    def forbidden_positions(self):
        return list(self._forbidden)

    def contains(self, x, y):
        return 0 <= x <= self.width and 0 <= y <= self.height

    def __repr__(self):
        return f"Grid({self.width}x{self.height}, forbidden={len(self._forbidden)})"
