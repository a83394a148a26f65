from enum import Enum


class Orientation(Enum):
    N = "N"
    E = "E"
    S = "S"
    W = "W"

    def right(self):
        """Clockwise: N -> E -> S -> W -> N."""
        return _CLOCKWISE[(_CLOCKWISE.index(self) + 1) % 4]

    def left(self):
        """Counter-clockwise: N -> W -> S -> E -> N."""
        return _CLOCKWISE[(_CLOCKWISE.index(self) - 1) % 4]

    @property
    def delta(self):
        return _DELTAS[self]

    def __str__(self):
        return self.value


_CLOCKWISE = (Orientation.N, Orientation.E, Orientation.S, Orientation.W)
_DELTAS = {
    Orientation.N: (0, 1),
    Orientation.E: (1, 0),
    Orientation.S: (0, -1),
    Orientation.W: (-1, 0),
}


class RobotState:
    """Coordinates, heading and lost flag of one robot."""

    __slots__ = ("x", "y", "orientation", "is_lost")

    def __init__(self, x=0, y=0, orientation=Orientation.N, is_lost=False):
        self.x = x
        self.y = y
        self.orientation = orientation
        self.is_lost = is_lost

    def check_out_of_bounds(self, grid):
        """Mark the robot lost if it stands outside the grid.

        Only the coordinate along the current heading is clamped back onto
        the boundary; the other axis keeps whatever value it has.
        """
        if self.x > grid.width or self.y > grid.height or self.y < 0 or self.x < 0:
            if self.orientation is Orientation.N:
                self.y = grid.height
            elif self.orientation is Orientation.E:
                self.x = grid.width
            elif self.orientation is Orientation.S:
                self.y = 0
            elif self.orientation is Orientation.W:
                self.x = 0
            self.is_lost = True
            return True
        return False

    def format(self):
        # "x y O " when on the grid: the trailing space is part of the output format
        return f"{self.x} {self.y} {self.orientation.value} {'LOST' if self.is_lost else ''}"

    @property
    def signature(self):
        """Key used in the grid's forbidden set, e.g. "3 3 N"."""
        return self.format().rstrip()

    def copy(self):
        return RobotState(self.x, self.y, self.orientation, self.is_lost)

    def __eq__(self, other):
        if not isinstance(other, RobotState):
            return NotImplemented
        return (self.x, self.y, self.orientation) == (other.x, other.y, other.orientation)

    def __hash__(self):
        return hash((self.x, self.y, self.orientation))

    def __str__(self):
        return self.format()

    def __repr__(self):
        return f"RobotState(x={self.x}, y={self.y}, orientation={self.orientation.value}, is_lost={self.is_lost})"
