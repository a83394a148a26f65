"""Liveness route."""

import time

from fastapi import APIRouter

from utils.timestamp import format_timestamp, uptime_since

router = APIRouter(prefix="/api/v1", tags=["health"])

_started = time.monotonic()


@router.get("/health")
async def health():
    return {
        "status": "healthy",
        "timestamp": format_timestamp(),
        "uptime": round(uptime_since(_started), 1),
    }
