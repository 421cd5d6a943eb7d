"""Health and database connectivity endpoints."""

import logging
from datetime import datetime, timezone

from fastapi import APIRouter
from fastapi.responses import JSONResponse

from app.database import execute_query

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["system"])


@router.get("/health")
def health_check():
    return {
        "status": "ok",
        "message": "Club site API is running",
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }


@router.get("/test-db")
def test_db():
    try:
        probe = execute_query("SELECT 1 AS test")
        info = execute_query("SELECT VERSION() AS version, DATABASE() AS current_database")
    except Exception as exc:
        logger.error("[db] connectivity check failed: %s", exc)
        return JSONResponse(
            status_code=500,
            content={"success": False, "error": f"Database connection failed: {exc}"},
        )
    return {
        "success": True,
        "message": "Database connection successful",
        "data": {
            "test": probe[0]["test"] if probe else None,
            "version": info[0]["version"] if info else None,
            "database": info[0]["current_database"] if info else None,
        },
    }
