"""
FastAPI Dependency Injection configuration for the Hospital Records Service.

Architecture Flow:
    API Layer (Routers)
         ↓ Depends()
    Service Layer (Business Logic)
         ↓ Injected
    Repository Layer (Data Access)
         ↓ Injected
    Database (SQLite Connection)

Usage in Routers:
    from core.dependencies import get_patient_service

    @router.get("/patients")
    async def list_patients(
        patient_service: PatientService = Depends(get_patient_service)
    ):
        return patient_service.get_page()

Testing:
    # Override dependencies in tests
    app.dependency_overrides[get_database] = lambda: test_database
"""
import logging
from typing import Optional

from core.config import settings

logger = logging.getLogger(__name__)


# =============================================================================
# DATABASE DEPENDENCY
# =============================================================================

# Lazy import to avoid circular dependencies
_database_instance: Optional["Database"] = None


def get_database() -> "Database":
    """
    Get the database instance, creating it on first use.

    Returns:
        Database: The configured database instance.
    """
    global _database_instance

    if _database_instance is None:
        from repositories.base import Database

        logger.info(f"Initializing database: {settings.database_path}")
        _database_instance = Database(
            db_path=settings.database_path,
            busy_timeout=settings.hospital_svc_db_busy_timeout
        )
        logger.info("Database initialized successfully")

    return _database_instance


def reset_database() -> None:
    """
    Reset the database instance (for testing only).
    """
    global _database_instance
    _database_instance = None


# =============================================================================
# REPOSITORY DEPENDENCIES
# =============================================================================

def get_patient_repository() -> "PatientRepository":
    """
    Get a PatientRepository instance with database and logger injected.

    Returns:
        PatientRepository: Repository for patient data access.
    """
    from repositories import PatientRepository

    return PatientRepository(
        db=get_database(),
        logger=logging.getLogger("repositories.patient_repository")
    )


def get_doctor_repository() -> "DoctorRepository":
    """
    Get a DoctorRepository instance with database and logger injected.

    Returns:
        DoctorRepository: Repository for doctor data access.
    """
    from repositories import DoctorRepository

    return DoctorRepository(
        db=get_database(),
        logger=logging.getLogger("repositories.doctor_repository")
    )


# =============================================================================
# SERVICE DEPENDENCIES
# =============================================================================

def get_patient_service() -> "PatientService":
    """
    Get a PatientService instance with repository injected.

    Returns:
        PatientService: Service for patient operations.
    """
    from services.patient_service import PatientService

    return PatientService(
        patient_repository=get_patient_repository(),
        default_page_size=settings.default_page_size,
        max_page_size=settings.hospital_svc_max_page_size
    )


def get_doctor_service() -> "DoctorService":
    """
    Get a DoctorService instance with repository injected.

    Returns:
        DoctorService: Service for doctor operations.
    """
    from services.doctor_service import DoctorService

    return DoctorService(doctor_repository=get_doctor_repository())
