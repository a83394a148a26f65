from internal.logging import get_logger
from simulation.parsing import parse_position
from simulation.state import RobotState

TURN_LEFT = "L"
TURN_RIGHT = "R"
FORWARD = "F"


class Robot:
    """A robot walking a shared Grid.

    The robot owns its RobotState and replaces it wholesale when given a new
    start position. The grid is shared with every other robot of the run.
    """

    def __init__(self, grid, state=None):
        self.grid = grid
        self.state = state or RobotState(0, 0)

    @property
    def is_lost(self):
        return self.state.is_lost

    def set_position(self, line, line_number=None):
        """Reset the robot from a '<x> <y> <orientation>' line."""
        self.state = parse_position(line, line_number)
        if not self.grid.contains(self.state.x, self.state.y):
            get_logger().warn("robot starts off the grid", position=self.state.signature)

    def move(self, instructions):
        """Run L/R/F instructions and return the formatted final state.

        Unknown characters are skipped. Nothing runs once the robot is lost.
        """
        for instruction in instructions:
            if self.is_lost:
                break
            if instruction == TURN_LEFT:
                self.turn_left()
            elif instruction == TURN_RIGHT:
                self.turn_right()
            elif instruction == FORWARD:
                self.move_forward()
        return self.state.format()

    def turn_left(self):
        self.state.orientation = self.state.orientation.left()

    def turn_right(self):
        self.state.orientation = self.state.orientation.right()

    def move_forward(self):
        """Step one cell along the heading unless a robot was lost from here before."""
        starting_signature = self.state.signature
        if self.is_lost or self.grid.is_forbidden(starting_signature):
            return

        dx, dy = self.state.orientation.delta
        self.state.x += dx
        self.state.y += dy

        if self.state.check_out_of_bounds(self.grid):
            get_logger().debug("robot lost", last_position=starting_signature, final=self.state.format())
            self.grid.mark_forbidden(starting_signature)
