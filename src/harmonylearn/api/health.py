"""
Health API Endpoints

Service info, liveness and readiness probes for container orchestration.
"""
# ruff: noqa: B008 - FastAPI Depends in function defaults is standard pattern

import logging
import time
from datetime import UTC, datetime
from typing import Any

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import JSONResponse

from harmonylearn import storage
from harmonylearn.config import Settings
from harmonylearn.core.database import Database, get_database

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/")
async def root(request: Request) -> dict[str, str]:
    """Root endpoint."""
    app_settings: Settings = request.app.state.settings
    return {
        "service": app_settings.APP_NAME,
        "status": "operational",
        "version": app_settings.APP_VERSION,
        "environment": app_settings.ENVIRONMENT,
    }


@router.get("/health")
async def health_check(request: Request) -> dict[str, Any]:
    """Liveness check. Never touches the database."""
    app_settings: Settings = request.app.state.settings
    started = getattr(request.app.state, "started_at", time.monotonic())
    return {
        "status": "healthy",
        "timestamp": datetime.now(UTC).isoformat(),
        "environment": app_settings.ENVIRONMENT,
        "version": app_settings.APP_VERSION,
        "uptime": round(time.monotonic() - started, 3),
    }


@router.get("/ready", response_model=None)
async def readiness_check(
    database: Database = Depends(get_database),
) -> dict[str, str] | JSONResponse:
    """Readiness check. 503 until the database answers a read."""
    try:
        await storage.ping(database)
    except Exception as e:
        logger.warning(f"Readiness check failed: {e}")
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={"status": "not ready"},
        )
    return {"status": "ready"}
