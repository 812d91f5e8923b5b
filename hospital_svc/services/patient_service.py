"""
Service layer for patient operations.

This service contains business logic for patient management
and orchestrates calls to repositories.

Architecture:
    API Layer (routers) → PatientService → PatientRepository → Database

The repository never raises; it answers None/False/[] on failure. This
service turns those answers into domain exceptions the API layer renders,
and re-reads records after every mutation so callers see stored values.
"""
import logging
import math
from typing import List, Optional

from models import Patient
from repositories import PatientRepository
from schemas import PatientCreate, PatientUpdate, PatientResponse, PatientPage
from core.config import DEFAULT_PAGE_SIZE, MAX_PAGE_SIZE
from core.exceptions import PatientNotFoundError, DatabaseError, InvalidPaginationError

logger = logging.getLogger(__name__)


def _to_response(patient: Patient) -> PatientResponse:
    return PatientResponse(**patient.to_dict())


class PatientService:
    """
    Service layer for patient operations.

    Handles paging arithmetic, error translation and coordination with the
    repository layer.
    """

    def __init__(
        self,
        patient_repository: PatientRepository,
        default_page_size: int = DEFAULT_PAGE_SIZE,
        max_page_size: int = MAX_PAGE_SIZE,
    ):
        """
        Initialize the patient service.

        Args:
            patient_repository: PatientRepository instance for data access.
            default_page_size: Page size used when the caller gives none.
            max_page_size: Largest page size a caller may ask for.
        """
        self._repo = patient_repository
        self._default_page_size = default_page_size
        self._max_page_size = max_page_size

    def get_page(self, page: int = 1, page_size: Optional[int] = None) -> PatientPage:
        """
        Get one page of patients, newest first.

        Args:
            page: 1-based page number.
            page_size: Patients per page. Defaults to the configured page size.

        Returns:
            PatientPage: The rows plus total count and pager flags. total_pages
                is at least 1 so an empty table still shows "Page 1 of 1".

        Raises:
            InvalidPaginationError: If page < 1 or page_size is out of range.
        """
        if page_size is None:
            page_size = self._default_page_size
        if page < 1:
            raise InvalidPaginationError(detail=f"Page must be 1 or greater, got {page}", page=page)
        if page_size < 1 or page_size > self._max_page_size:
            raise InvalidPaginationError(
                detail=f"Page size must be between 1 and {self._max_page_size}, got {page_size}",
                page_size=page_size
            )

        total = self._repo.count()
        total_pages = max(1, math.ceil(total / page_size))
        offset = (page - 1) * page_size
        patients = self._repo.list_page(page_size, offset)

        return PatientPage(
            items=[_to_response(p) for p in patients],
            page=page,
            page_size=page_size,
            total=total,
            total_pages=total_pages,
            has_previous=page > 1,
            has_next=page < total_pages,
        )

    def list_patients(self) -> List[PatientResponse]:
        """Get every patient, newest first."""
        return [_to_response(p) for p in self._repo.list_all()]

    def get_patient(self, patient_id: int) -> PatientResponse:
        """
        Get a patient by ID.

        Raises:
            PatientNotFoundError: If no patient has this ID.
        """
        patient = self._repo.get_by_id(patient_id)
        if patient is None:
            raise PatientNotFoundError(patient_id=patient_id)
        return _to_response(patient)

    def search_patients(self, term: str) -> List[PatientResponse]:
        """
        Search patients by name or phone.

        A blank term shows the first page instead, like clearing the search box.
        """
        term = (term or "").strip()
        if not term:
            return self.get_page(1).items

        results = self._repo.search(term)
        logger.info(
            "Patient search completed",
            extra={"term": term, "results": len(results)}
        )
        return [_to_response(p) for p in results]

    def add_patient(self, data: PatientCreate) -> PatientResponse:
        """
        Add a new patient and return it as stored.

        Raises:
            DatabaseError: If the insert failed or the new row cannot be read back.
        """
        patient = Patient(**data.model_dump())
        logger.info(f"Adding new patient: {patient.name}")

        if not self._repo.add(patient):
            raise DatabaseError(operation="add patient")

        created = self._repo.get_latest()
        if created is None:
            raise DatabaseError(operation="read back new patient")

        logger.info(f"Patient created successfully: {created.name} (id={created.patient_id})")
        return _to_response(created)

    def update_patient(self, patient_id: int, data: PatientUpdate) -> PatientResponse:
        """
        Replace a patient's fields and return the stored result.

        Raises:
            PatientNotFoundError: If no patient has this ID.
            DatabaseError: If the update statement failed.
        """
        if self._repo.get_by_id(patient_id) is None:
            raise PatientNotFoundError(patient_id=patient_id)

        patient = Patient(patient_id=patient_id, **data.model_dump())
        if not self._repo.update(patient):
            raise DatabaseError(operation="update patient", patient_id=patient_id)

        updated = self._repo.get_by_id(patient_id)
        if updated is None:
            raise PatientNotFoundError(patient_id=patient_id)

        logger.info(f"Patient updated: id={patient_id}")
        return _to_response(updated)

    def delete_patient(self, patient_id: int) -> None:
        """
        Delete a patient.

        Raises:
            PatientNotFoundError: If nothing was deleted.
        """
        if not self._repo.delete(patient_id):
            raise PatientNotFoundError(patient_id=patient_id)
        logger.info(f"Patient deleted: id={patient_id}")
