"""
Patients router - patient management endpoints.

This router is the patient table of the records tool: a paged listing,
search, and add/edit/delete actions that each return freshly re-read data.

Architecture:
    HTTP Request → Router (this file) → PatientService → PatientRepository → Database

Dependency Injection:
    Services are injected via FastAPI's Depends() mechanism.
    The DI chain is defined in core/dependencies.py.
"""
import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, Path, Query, Response, status

from schemas import PatientCreate, PatientUpdate, PatientResponse, PatientPage
from services.patient_service import PatientService
from core.config import DEFAULT_PAGE_SIZE, MAX_PAGE_SIZE, MAX_RECORD_ID
from core.dependencies import get_patient_service

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/api/v1/patients",
    tags=["Patients"],
)


@router.get(
    "",
    response_model=PatientPage,
    summary="List patients page by page",
    description=f"Newest patients first. Default page size is {DEFAULT_PAGE_SIZE}, maximum is {MAX_PAGE_SIZE}."
)
async def list_patients(
    page: int = Query(1, ge=1, description="1-based page number"),
    page_size: Optional[int] = Query(
        None,
        ge=1,
        le=MAX_PAGE_SIZE,
        description=f"Patients per page (1-{MAX_PAGE_SIZE}). Defaults to {DEFAULT_PAGE_SIZE}."
    ),
    patient_service: PatientService = Depends(get_patient_service)
):
    """
    Get one page of patients.

    The response carries total, total_pages, has_previous and has_next so a
    client can render "Page N of M" and enable its Previous/Next buttons.
    """
    return patient_service.get_page(page=page, page_size=page_size)


@router.get(
    "/search",
    response_model=List[PatientResponse],
    summary="Search patients",
    description="Case-insensitive substring match on name or phone, ordered by name. "
                "A blank query returns the first page."
)
async def search_patients(
    q: str = Query("", description="Text to look for in name or phone"),
    patient_service: PatientService = Depends(get_patient_service)
):
    return patient_service.search_patients(q)


@router.get(
    "/{patient_id}",
    response_model=PatientResponse,
    summary="Get a patient"
)
async def get_patient(
    patient_id: int = Path(..., ge=1, le=MAX_RECORD_ID),
    patient_service: PatientService = Depends(get_patient_service)
):
    """Raises 404 if the patient does not exist."""
    return patient_service.get_patient(patient_id)


@router.post(
    "",
    response_model=PatientResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Add a patient",
    description="Validates the form fields, stores the patient and returns it as stored. "
                "admission_date defaults to today."
)
async def create_patient(
    patient: PatientCreate,
    patient_service: PatientService = Depends(get_patient_service)
):
    return patient_service.add_patient(patient)


@router.put(
    "/{patient_id}",
    response_model=PatientResponse,
    summary="Edit a patient",
    description="Replaces every field of the patient. Omitting admission_date keeps the stored date."
)
async def update_patient(
    patient: PatientUpdate,
    patient_id: int = Path(..., ge=1, le=MAX_RECORD_ID),
    patient_service: PatientService = Depends(get_patient_service)
):
    return patient_service.update_patient(patient_id, patient)


@router.delete(
    "/{patient_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete a patient"
)
async def delete_patient(
    patient_id: int = Path(..., ge=1, le=MAX_RECORD_ID),
    patient_service: PatientService = Depends(get_patient_service)
):
    """Raises 404 if nothing was deleted."""
    patient_service.delete_patient(patient_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
