"""Health check endpoint for load balancers and monitoring."""

import logging

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.config import get_settings
from app.db.session import get_db

router = APIRouter()
logger = logging.getLogger(__name__)


@router.get("")
async def health(request: Request):
    """Simple liveness check, with the state of the live workout session."""
    settings = get_settings()
    payload: dict = {"status": "ok", "app": settings.app_name, "environment": settings.environment}
    registry = getattr(request.app.state, "session_registry", None)
    if registry is not None and registry.machine is not None:
        payload["session"] = registry.machine.state.value
    return payload


@router.get("/ready")
async def readiness(db: AsyncSession = Depends(get_db)):
    """Readiness: app + DB connectivity."""
    try:
        await db.execute(text("SELECT 1"))
        return {"status": "ok", "database": "connected"}
    except SQLAlchemyError as e:
        logger.warning("Readiness check failed: %s", e)
        return JSONResponse(
            status_code=503,
            content={"status": "error", "database": str(e)},
        )
