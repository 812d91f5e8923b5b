"""
Core module for application configuration, logging, and shared utilities.

This module provides:
- Settings: Application configuration via pydantic-settings
- Dependency injection: FastAPI Depends() functions for services and repositories
- Exceptions: Domain-specific exception classes with HTTP status codes
- Date utilities: admission date parsing and storage helpers
"""
from core.config import settings, Settings

# Dependency injection - import functions for FastAPI Depends()
from core.dependencies import (
    get_database,
    get_patient_repository,
    get_doctor_repository,
    get_patient_service,
    get_doctor_service,
    reset_database,
)

# Exception classes for consistent error handling
from core.exceptions import (
    HospitalServiceError,
    PatientNotFoundError,
    DoctorNotFoundError,
    InvalidPaginationError,
    DatabaseError,
    setup_exception_handlers,
)

from core.datetime_utils import (
    utc_now,
    today,
    format_iso,
    parse_date,
    to_db_date,
    from_db_date,
)

__all__ = [
    # Configuration
    "settings",
    "Settings",
    # Dependency injection
    "get_database",
    "get_patient_repository",
    "get_doctor_repository",
    "get_patient_service",
    "get_doctor_service",
    "reset_database",
    # Exceptions
    "HospitalServiceError",
    "PatientNotFoundError",
    "DoctorNotFoundError",
    "InvalidPaginationError",
    "DatabaseError",
    "setup_exception_handlers",
    # Date utilities
    "utc_now",
    "today",
    "format_iso",
    "parse_date",
    "to_db_date",
    "from_db_date",
]
