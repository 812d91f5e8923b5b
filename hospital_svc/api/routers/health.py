"""
Health and readiness endpoints for operational visibility.

This module provides:
- /health: Liveness probe (is the app running?)
- /ready: Readiness probe (is the database reachable?)
- /: Root endpoint with service information
"""
import logging
import sqlite3
import time
from typing import Dict, Any, List

from fastapi import APIRouter, Depends, Response
from pydantic import BaseModel

from core.datetime_utils import utc_now, format_iso
from core.dependencies import get_database

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Health"])

SERVICE_NAME = "Hospital Records Service"
SERVICE_VERSION = "1.0.0"


# =============================================================================
# RESPONSE MODELS
# =============================================================================

class HealthResponse(BaseModel):
    """Response model for /health endpoint."""
    status: str  # "healthy"
    version: str
    timestamp: str  # ISO 8601 UTC


class DependencyStatus(BaseModel):
    """Status of a single dependency."""
    name: str
    status: str  # "ok", "unavailable"
    latency_ms: float | None = None
    message: str | None = None


class ReadyResponse(BaseModel):
    """Response model for /ready endpoint."""
    status: str  # "ready", "not_ready"
    dependencies: List[DependencyStatus]
    timestamp: str


# =============================================================================
# HEALTH ENDPOINT (LIVENESS)
# =============================================================================

@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Liveness probe",
    description="Check if the application is running. Returns immediately without checking dependencies."
)
async def health_check() -> HealthResponse:
    """
    Liveness probe - always 200 while the process is up. No I/O.
    """
    return HealthResponse(
        status="healthy",
        version=SERVICE_VERSION,
        timestamp=format_iso(utc_now())
    )


# =============================================================================
# READINESS ENDPOINT
# =============================================================================

def _check_database(db) -> DependencyStatus:
    """Run a trivial query to verify the SQLite file is reachable."""
    start = time.perf_counter()
    conn = None
    try:
        conn = db.get_connection()
        conn.execute("SELECT 1")
        latency_ms = (time.perf_counter() - start) * 1000
        return DependencyStatus(
            name="database",
            status="ok",
            latency_ms=round(latency_ms, 2),
            message="SQLite connection healthy"
        )
    except sqlite3.Error as e:
        latency_ms = (time.perf_counter() - start) * 1000
        logger.error("Database health check failed", extra={"error": str(e)})
        return DependencyStatus(
            name="database",
            status="unavailable",
            latency_ms=round(latency_ms, 2),
            message=f"Connection failed: {type(e).__name__}"
        )
    finally:
        if conn is not None:
            conn.close()


@router.get(
    "/ready",
    response_model=ReadyResponse,
    summary="Readiness probe",
    description="Check that the database is reachable. Returns 503 if not ready."
)
async def readiness_check(response: Response, db=Depends(get_database)) -> ReadyResponse:
    """
    Readiness probe - can the application handle requests?

    Returns:
    - 200 with status="ready" if the database answers
    - 503 with status="not_ready" otherwise
    """
    db_status = _check_database(db)

    if db_status.status == "ok":
        status = "ready"
    else:
        status = "not_ready"
        response.status_code = 503

    return ReadyResponse(
        status=status,
        dependencies=[db_status],
        timestamp=format_iso(utc_now())
    )


# =============================================================================
# ROOT ENDPOINT
# =============================================================================

@router.get(
    "/",
    summary="API root",
    description="Root endpoint with basic API information."
)
async def root() -> Dict[str, Any]:
    """Service name, version, and links to documentation."""
    return {
        "service": SERVICE_NAME,
        "version": SERVICE_VERSION,
        "docs": "/docs",
        "health": "/health",
        "ready": "/ready",
        "patients": "/api/v1/patients",
        "doctors": "/api/v1/doctors",
    }
