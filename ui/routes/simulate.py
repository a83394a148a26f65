"""Run an instruction file posted as plain text."""

from fastapi import APIRouter, Request

from internal.logging import get_logger
from simulation.controller import MarsController

router = APIRouter(prefix="/api/v1", tags=["simulation"])

# Set by app.py
_controller = None


def init(controller):
    global _controller
    _controller = controller


@router.post("/simulate")
async def simulate(request: Request):
    """Body is the instruction text; the response carries one line per movement string."""
    body = await request.body()
    text = body.decode("utf-8", errors="replace")
    get_logger().debug("simulate request", size=len(body))
    result = (_controller or MarsController()).simulate(text)
    return result.to_dict()
