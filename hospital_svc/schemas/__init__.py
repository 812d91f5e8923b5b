"""
Pydantic schemas for API request/response validation.

This module contains all Pydantic models used at API boundaries.
"""
from schemas.patient import PatientCreate, PatientUpdate, PatientResponse, PatientPage
from schemas.doctor import DoctorCreate, DoctorUpdate, DoctorResponse

__all__ = [
    # Patient schemas
    "PatientCreate",
    "PatientUpdate",
    "PatientResponse",
    "PatientPage",
    # Doctor schemas
    "DoctorCreate",
    "DoctorUpdate",
    "DoctorResponse",
]
