"""Health Probe — database connectivity check.

Invariants:
    - 200 {status: "ok", message, timestamp} when SELECT 1 succeeds
    - 500 {status: "error", message, error} otherwise
"""

import logging
from datetime import datetime, timezone

from fastapi import APIRouter, status
from fastapi.responses import JSONResponse

from agency.infrastructure import database

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/health", tags=["health"])


@router.get("")
async def health_check():
    """Database connectivity probe."""
    try:
        if database.db_manager is None:
            raise RuntimeError("Database not initialized")
        await database.db_manager.ping()
    except Exception as e:
        logger.error(f"Database connection failed: {e}")
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={
                "status": "error",
                "message": "Database connection failed",
                "error": str(e) or "Unknown error occurred",
            },
        )
    return {
        "status": "ok",
        "message": "Database connection successful",
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }
