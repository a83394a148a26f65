"""Pytest fixtures for all tests."""

import pytest
from httpx import AsyncClient, ASGITransport

from config import Config
from simulation.controller import MarsController
from simulation.grid import Grid
from simulation.robot import Robot
from ui.app import create_app

CLASSIC_INPUT = "5 3\n\n1 1 E\nRFRFRFRF\n\n3 2 N\nFRRFLLFFRRFLL\n\n0 3 W\nLLFFFLFLFL\n"


@pytest.fixture
def grid():
    """Create a 5x3 test grid."""
    return Grid(width=5, height=3)


@pytest.fixture
def robot(grid):
    """Create a robot at the origin facing north."""
    return Robot(grid)


@pytest.fixture
def controller():
    return MarsController()


@pytest.fixture
def classic_input():
    return CLASSIC_INPUT


@pytest.fixture
async def app():
    """Create test FastAPI app."""
    return create_app(Config())


@pytest.fixture
async def client(app):
    """Create async test client."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
