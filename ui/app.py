"""FastAPI application factory."""

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from config import load_config
from core.errors import MarsError
from internal.logging import LogLevel, StructuredLogger, get_logger
from simulation.controller import MarsController
from ui.routes import health, simulate


def create_app(config=None):
    """Create and configure the FastAPI application."""
    config = config or load_config()

    StructuredLogger.configure(min_level=LogLevel.parse(config.logging.level, LogLevel.INFO))
    logger_instance = get_logger()

    app = FastAPI(
        title="Mars Robots",
        version="1.0.0",
        description="robot grid-walk simulation",
    )

    simulate.init(MarsController())

    app.include_router(simulate.router)
    app.include_router(health.router)

    @app.exception_handler(MarsError)
    async def mars_error_handler(request: Request, exc: MarsError):
        logger_instance.error("simulation rejected", error=exc, error_id=exc.error_id,
                              kind=type(exc).__name__, path=request.url.path)
        return JSONResponse(status_code=422, content=exc.to_dict())

    return app
