"""
Shared exception classes and error handling utilities for the Hospital Records Service.

Repositories never raise these: they log database failures and hand back
safe defaults. The service layer turns "not found" and "failed" results into
the exceptions below, and the FastAPI handlers render them as JSON.

Usage:
    from core.exceptions import PatientNotFoundError

    # In service layer - raise domain exceptions
    raise PatientNotFoundError(patient_id=42)

    # In FastAPI - register handlers via setup_exception_handlers(app)
"""
import logging
from typing import Any, Dict, Optional

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


# =============================================================================
# BASE EXCEPTION CLASS
# =============================================================================

class HospitalServiceError(Exception):
    """
    Base exception for all Hospital Records Service domain errors.

    Provides consistent error structure with status code and detail message.
    """

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    detail: str = "An unexpected error occurred"

    def __init__(
        self,
        detail: Optional[str] = None,
        status_code: Optional[int] = None,
        **kwargs: Any
    ):
        """
        Initialize the exception.

        Args:
            detail: Human-readable error message. Uses class default if not provided.
            status_code: HTTP status code. Uses class default if not provided.
            **kwargs: Additional context to include in error response.
        """
        self.detail = detail or self.__class__.detail
        self.status_code = status_code or self.__class__.status_code
        self.context = kwargs
        super().__init__(self.detail)

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for JSON response."""
        result = {"detail": self.detail}
        if self.context:
            result["context"] = self.context
        return result


# =============================================================================
# RECORD EXCEPTIONS
# =============================================================================

class PatientNotFoundError(HospitalServiceError):
    """Raised when a patient is not found in the database."""

    status_code = status.HTTP_404_NOT_FOUND
    detail = "Patient not found"

    def __init__(self, patient_id: Optional[int] = None, **kwargs: Any):
        detail = f"Patient {patient_id} not found" if patient_id is not None else self.detail
        super().__init__(detail=detail, patient_id=patient_id, **kwargs)


class DoctorNotFoundError(HospitalServiceError):
    """Raised when a doctor is not found in the database."""

    status_code = status.HTTP_404_NOT_FOUND
    detail = "Doctor not found"

    def __init__(self, doctor_id: Optional[int] = None, **kwargs: Any):
        detail = f"Doctor {doctor_id} not found" if doctor_id is not None else self.detail
        super().__init__(detail=detail, doctor_id=doctor_id, **kwargs)


class InvalidPaginationError(HospitalServiceError):
    """Raised when a page number or page size is out of range."""

    status_code = status.HTTP_400_BAD_REQUEST
    detail = "Invalid pagination parameters"


# =============================================================================
# DATABASE EXCEPTIONS
# =============================================================================

class DatabaseError(HospitalServiceError):
    """Raised when a repository reports that a write did not happen."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    detail = "Database operation failed"

    def __init__(self, operation: Optional[str] = None, **kwargs: Any):
        detail = f"Database error during {operation}" if operation else self.detail
        super().__init__(detail=detail, operation=operation, **kwargs)


# =============================================================================
# EXCEPTION HANDLERS
# =============================================================================

async def hospital_service_exception_handler(
    request: Request,
    exc: HospitalServiceError
) -> JSONResponse:
    """
    Handle HospitalServiceError exceptions and return consistent JSON responses.
    """
    logger.warning(
        f"HospitalServiceError: {exc.detail}",
        extra={
            "status_code": exc.status_code,
            "path": request.url.path,
            "method": request.method,
            "context": exc.context
        }
    )
    return JSONResponse(
        status_code=exc.status_code,
        content=exc.to_dict()
    )


def setup_exception_handlers(app: FastAPI) -> None:
    """
    Register exception handlers with the FastAPI application.

    Args:
        app: The FastAPI application instance.
    """
    app.add_exception_handler(HospitalServiceError, hospital_service_exception_handler)
