"""
Service layer for doctor operations.

Architecture:
    API Layer (routers) → DoctorService → DoctorRepository → Database
"""
import logging
from typing import List

from models import Doctor
from repositories import DoctorRepository
from schemas import DoctorCreate, DoctorUpdate, DoctorResponse
from core.exceptions import DoctorNotFoundError, DatabaseError

logger = logging.getLogger(__name__)


def _to_response(doctor: Doctor) -> DoctorResponse:
    return DoctorResponse(**doctor.to_dict())


class DoctorService:
    """Service layer for doctor operations."""

    def __init__(self, doctor_repository: DoctorRepository):
        """
        Initialize the doctor service.

        Args:
            doctor_repository: DoctorRepository instance for data access.
        """
        self._repo = doctor_repository

    def list_doctors(self) -> List[DoctorResponse]:
        """Get all doctors, sorted alphabetically by name."""
        return [_to_response(d) for d in self._repo.list_all()]

    def get_doctor(self, doctor_id: int) -> DoctorResponse:
        """
        Get a doctor by ID.

        Raises:
            DoctorNotFoundError: If no doctor has this ID.
        """
        doctor = self._repo.get_by_id(doctor_id)
        if doctor is None:
            raise DoctorNotFoundError(doctor_id=doctor_id)
        return _to_response(doctor)

    def search_doctors(self, term: str) -> List[DoctorResponse]:
        """Search by name or specialization; a blank term lists everyone."""
        term = (term or "").strip()
        if not term:
            return self.list_doctors()
        return [_to_response(d) for d in self._repo.search(term)]

    def list_by_specialization(self, specialization: str) -> List[DoctorResponse]:
        return [_to_response(d) for d in self._repo.list_by_specialization(specialization)]

    def add_doctor(self, data: DoctorCreate) -> DoctorResponse:
        """
        Add a new doctor and return it as stored.

        Raises:
            DatabaseError: If the insert failed or the new row cannot be read back.
        """
        doctor = Doctor(**data.model_dump())
        logger.info(f"Adding new doctor: {doctor.name}")

        if not self._repo.add(doctor):
            raise DatabaseError(operation="add doctor")

        created = self._repo.get_latest()
        if created is None:
            raise DatabaseError(operation="read back new doctor")

        logger.info(f"Doctor created successfully: {created.name} (id={created.doctor_id})")
        return _to_response(created)

    def update_doctor(self, doctor_id: int, data: DoctorUpdate) -> DoctorResponse:
        """
        Replace a doctor's fields and return the stored result.

        Raises:
            DoctorNotFoundError: If no doctor has this ID.
            DatabaseError: If the update statement failed.
        """
        if self._repo.get_by_id(doctor_id) is None:
            raise DoctorNotFoundError(doctor_id=doctor_id)

        doctor = Doctor(doctor_id=doctor_id, **data.model_dump())
        if not self._repo.update(doctor):
            raise DatabaseError(operation="update doctor", doctor_id=doctor_id)

        updated = self._repo.get_by_id(doctor_id)
        if updated is None:
            raise DoctorNotFoundError(doctor_id=doctor_id)
        return _to_response(updated)

    def delete_doctor(self, doctor_id: int) -> None:
        """
        Delete a doctor.

        Raises:
            DoctorNotFoundError: If nothing was deleted.
        """
        if not self._repo.delete(doctor_id):
            raise DoctorNotFoundError(doctor_id=doctor_id)
        logger.info(f"Doctor deleted: id={doctor_id}")
