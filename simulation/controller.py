import time

from internal.logging import get_logger
from simulation.grid import Grid
from simulation.parsing import is_new_robot, is_start_position, parse_dimensions, split_lines
from simulation.robot import Robot


class SimulationResult:
    __slots__ = ("lines", "forbidden", "robots", "elapsed")

    def __init__(self, lines, forbidden, robots, elapsed=0.0):
        self.lines = lines
        self.forbidden = forbidden
        self.robots = robots
        self.elapsed = elapsed

    @property
    def output(self):
        return "\n".join(self.lines)

    def to_dict(self):
        return {
            "output": self.output,
            "lines": list(self.lines),
            "forbidden": list(self.forbidden),
            "robots": self.robots,
        }


class MarsController:
    """Feeds an instruction file to robots on one shared grid.

    The first line sizes the grid. After that a blank line starts a new
    robot, a line containing a space sets the current robot's position and
    any other line is a movement string whose result becomes one output line.
    """

    def __init__(self, grid_factory=Grid):
        self._grid_factory = grid_factory

    def run(self, text):
        return self.simulate(text).output

    def simulate(self, text):
        started = time.perf_counter()
        log = get_logger()
        lines = split_lines(text)

        width, height = parse_dimensions(lines[0])
        grid = self._grid_factory(width, height)
        robot = Robot(grid)
        robots, counted = 0, None
        output = []

        for line_number, line in enumerate(lines[1:], start=1):
            if is_new_robot(line):
                robot = Robot(grid)
                continue
            if robot is not counted:
                robots, counted = robots + 1, robot
            if is_start_position(line):
                robot.set_position(line, line_number)
                log.debug("robot start", line_number=line_number, position=robot.state.signature)
            else:
                output.append(robot.move(line))

        result = SimulationResult(output, grid.forbidden_positions, robots, time.perf_counter() - started)
        log.info("simulation complete", grid=f"{width}x{height}", robots=robots,
                 outputs=len(output), forbidden=len(result.forbidden), elapsed_ms=round(result.elapsed * 1000, 3))
        return result
