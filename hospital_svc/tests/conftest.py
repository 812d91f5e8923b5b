"""
Shared pytest fixtures for repository, service and API tests.

Key patterns:

1. Database Isolation: Each test gets a fresh temporary database
2. DI Override: Use app.dependency_overrides to inject test dependencies
3. Service Injection: Services are created with test repositories

Fixture Hierarchy:
    temp_db → repositories → services → test_app → client
"""
import os
import sqlite3
import tempfile
from datetime import date
from decimal import Decimal

import pytest

# Keep the settings' data directory out of the working tree.
# This must happen before any config imports
os.environ.setdefault("HOSPITAL_SVC_DB_DIR", os.path.join(tempfile.gettempdir(), "hospital_svc_tests"))

from fastapi import FastAPI
from fastapi.testclient import TestClient

from models import Doctor, Patient
from repositories import Database, PatientRepository, DoctorRepository
from services.patient_service import PatientService
from services.doctor_service import DoctorService
from core.exceptions import setup_exception_handlers
from core import dependencies as deps


class UnreachableDatabase:
    """Stands in for a Database whose file cannot be opened."""

    db_path = "/nonexistent/hospital.db"

    def get_connection(self):
        raise sqlite3.OperationalError("unable to open database file")


def make_patient(**overrides) -> Patient:
    """Build a Patient with every field filled in."""
    fields = {
        "name": "John Doe",
        "age": 45,
        "gender": "Male",
        "phone": "+14155550100",
        "email": "john.doe@example.com",
        "address": "12 Harbour Road",
        "disease": "Hypertension",
        "blood_group": "O+",
        "emergency_contact": "Jane Doe",
        "admission_date": date(2024, 1, 15),
    }
    fields.update(overrides)
    return Patient(**fields)


def make_doctor(**overrides) -> Doctor:
    """Build a Doctor with every field filled in."""
    fields = {
        "name": "Dr. Sarah Lee",
        "specialization": "Cardiology",
        "phone": "4155550199",
        "email": "sarah.lee@example.com",
        "experience_years": 12,
        "qualification": "MBBS, MD",
        "consultation_fee": Decimal("150.50"),
        "available_days": "Mon-Fri",
        "available_time": "09:00-17:00",
    }
    fields.update(overrides)
    return Doctor(**fields)


@pytest.fixture
def temp_db():
    """
    Create a temporary database for testing.

    This fixture creates a fresh SQLite database in a temp file,
    ensuring complete isolation between tests.
    """
    fd, db_path = tempfile.mkstemp(suffix='.db')
    os.close(fd)

    db = Database(db_path=db_path)
    yield db

    # Cleanup, including WAL side files
    for path in (db_path, db_path + "-wal", db_path + "-shm"):
        if os.path.exists(path):
            os.unlink(path)


@pytest.fixture
def patient_repo(temp_db):
    """Create a PatientRepository with the test database."""
    return PatientRepository(db=temp_db)


@pytest.fixture
def doctor_repo(temp_db):
    """Create a DoctorRepository with the test database."""
    return DoctorRepository(db=temp_db)


@pytest.fixture
def broken_patient_repo():
    """A PatientRepository whose every connection attempt fails."""
    return PatientRepository(db=UnreachableDatabase())


@pytest.fixture
def broken_doctor_repo():
    """A DoctorRepository whose every connection attempt fails."""
    return DoctorRepository(db=UnreachableDatabase())


@pytest.fixture
def patient_service(patient_repo):
    """Create a PatientService with the test repository."""
    return PatientService(patient_repository=patient_repo, default_page_size=10, max_page_size=100)


@pytest.fixture
def doctor_service(doctor_repo):
    """Create a DoctorService with the test repository."""
    return DoctorService(doctor_repository=doctor_repo)


@pytest.fixture
def test_app(temp_db, patient_repo, doctor_repo, patient_service, doctor_service):
    """
    Create a FastAPI test app with dependency overrides.

    Uses the real routers and exception handlers, with the DI functions
    replaced by ones returning the test instances.
    """
    from api.routers import health_router, patients_router, doctors_router

    app = FastAPI(title="Hospital Records Service Test")

    setup_exception_handlers(app)

    app.dependency_overrides[deps.get_database] = lambda: temp_db
    app.dependency_overrides[deps.get_patient_repository] = lambda: patient_repo
    app.dependency_overrides[deps.get_doctor_repository] = lambda: doctor_repo
    app.dependency_overrides[deps.get_patient_service] = lambda: patient_service
    app.dependency_overrides[deps.get_doctor_service] = lambda: doctor_service

    app.include_router(health_router)
    app.include_router(patients_router)
    app.include_router(doctors_router)

    yield app

    app.dependency_overrides.clear()


@pytest.fixture
def client(test_app):
    """Create a test client for the API."""
    return TestClient(test_app)
