from simulation.controller import MarsController, SimulationResult
from simulation.grid import Grid
from simulation.robot import Robot
from simulation.state import Orientation, RobotState

__all__ = [
    "Grid",
    "MarsController",
    "Orientation",
    "Robot",
    "RobotState",
    "SimulationResult",
]
