"""
Doctors router - doctor management endpoints.

Unpaginated counterpart of the patients router, plus a listing by
specialization.

Architecture:
    HTTP Request → Router (this file) → DoctorService → DoctorRepository → Database
"""
import logging
from typing import List

from fastapi import APIRouter, Depends, Path, Query, Response, status

from schemas import DoctorCreate, DoctorUpdate, DoctorResponse
from services.doctor_service import DoctorService
from core.config import MAX_RECORD_ID
from core.dependencies import get_doctor_service

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/api/v1/doctors",
    tags=["Doctors"],
)


@router.get(
    "",
    response_model=List[DoctorResponse],
    summary="List all doctors",
    description="All doctors sorted alphabetically by name."
)
async def list_doctors(
    doctor_service: DoctorService = Depends(get_doctor_service)
):
    return doctor_service.list_doctors()


@router.get(
    "/search",
    response_model=List[DoctorResponse],
    summary="Search doctors",
    description="Case-insensitive substring match on name or specialization, ordered by name."
)
async def search_doctors(
    q: str = Query("", description="Text to look for in name or specialization"),
    doctor_service: DoctorService = Depends(get_doctor_service)
):
    return doctor_service.search_doctors(q)


@router.get(
    "/specializations/{specialization}",
    response_model=List[DoctorResponse],
    summary="List doctors by specialization",
    description="Exact specialization match, ordered by name."
)
async def list_by_specialization(
    specialization: str,
    doctor_service: DoctorService = Depends(get_doctor_service)
):
    return doctor_service.list_by_specialization(specialization)


@router.get(
    "/{doctor_id}",
    response_model=DoctorResponse,
    summary="Get a doctor"
)
async def get_doctor(
    doctor_id: int = Path(..., ge=1, le=MAX_RECORD_ID),
    doctor_service: DoctorService = Depends(get_doctor_service)
):
    return doctor_service.get_doctor(doctor_id)


@router.post(
    "",
    response_model=DoctorResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Add a doctor"
)
async def create_doctor(
    doctor: DoctorCreate,
    doctor_service: DoctorService = Depends(get_doctor_service)
):
    return doctor_service.add_doctor(doctor)


@router.put(
    "/{doctor_id}",
    response_model=DoctorResponse,
    summary="Edit a doctor"
)
async def update_doctor(
    doctor: DoctorUpdate,
    doctor_id: int = Path(..., ge=1, le=MAX_RECORD_ID),
    doctor_service: DoctorService = Depends(get_doctor_service)
):
    return doctor_service.update_doctor(doctor_id, doctor)


@router.delete(
    "/{doctor_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete a doctor"
)
async def delete_doctor(
    doctor_id: int = Path(..., ge=1, le=MAX_RECORD_ID),
    doctor_service: DoctorService = Depends(get_doctor_service)
):
    doctor_service.delete_doctor(doctor_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
