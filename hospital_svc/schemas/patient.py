"""
Pydantic schemas for patient-related API operations.

Request schemas run the same field checks as the patient form
(services.validators); a failing check becomes a 422 with the form's message.
"""
from datetime import date
from typing import Any, List, Optional

from pydantic import BaseModel, Field, field_validator

from core.config import PATIENT_MIN_AGE, PATIENT_MAX_AGE
from services.validators import age_error, email_error, phone_error, required_error


def _blank_to_none(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    value = value.strip()
    return value or None


class PatientCreate(BaseModel):
    """Schema for creating a new patient.

    Only name and age are required. admission_date defaults to today.
    """
    name: str = Field(..., max_length=200, description="Patient full name", examples=["John Doe"])
    age: int = Field(..., description=f"Age in years ({PATIENT_MIN_AGE}-{PATIENT_MAX_AGE})", examples=[45])
    gender: Optional[str] = Field(None, max_length=20, examples=["Male"])
    phone: Optional[str] = Field(None, description="10-15 digits, optional leading +", examples=["+14155550100"])
    email: Optional[str] = Field(None, examples=["john.doe@example.com"])
    address: Optional[str] = Field(None, max_length=500)
    disease: Optional[str] = Field(None, max_length=200, examples=["Hypertension"])
    blood_group: Optional[str] = Field(None, max_length=5, examples=["O+"])
    emergency_contact: Optional[str] = Field(None, max_length=200)
    admission_date: Optional[date] = Field(None, description="Defaults to today when omitted")

    @field_validator("name")
    @classmethod
    def check_name(cls, value: str) -> str:
        error = required_error(value, "Name")
        if error:
            raise ValueError(error)
        return value.strip()

    @field_validator("age", mode="before")
    @classmethod
    def check_age(cls, value: Any) -> int:
        text = "" if value is None else str(value)
        error = age_error(text, PATIENT_MIN_AGE, PATIENT_MAX_AGE)
        if error:
            raise ValueError(error)
        return int(text.strip())

    @field_validator("email")
    @classmethod
    def check_email(cls, value: Optional[str]) -> Optional[str]:
        error = email_error(value)
        if error:
            raise ValueError(error)
        return _blank_to_none(value)

    @field_validator("phone")
    @classmethod
    def check_phone(cls, value: Optional[str]) -> Optional[str]:
        error = phone_error(value)
        if error:
            raise ValueError(error)
        return _blank_to_none(value)

    @field_validator("gender", "address", "disease", "blood_group", "emergency_contact")
    @classmethod
    def strip_optional(cls, value: Optional[str]) -> Optional[str]:
        return _blank_to_none(value)


class PatientUpdate(PatientCreate):
    """Schema for replacing a patient's fields.

    Every mutable field is replaced. An omitted admission_date keeps the stored one.
    """


class PatientResponse(BaseModel):
    """Schema for patient response."""
    patient_id: int = Field(..., description="Unique patient identifier", examples=[1])
    name: str
    age: int
    gender: Optional[str] = None
    phone: Optional[str] = None
    email: Optional[str] = None
    address: Optional[str] = None
    disease: Optional[str] = None
    blood_group: Optional[str] = None
    emergency_contact: Optional[str] = None
    admission_date: date

    class Config:
        from_attributes = True


class PatientPage(BaseModel):
    """One page of the patient table plus the numbers the pager needs."""
    items: List[PatientResponse]
    page: int = Field(..., ge=1, description="1-based page number")
    page_size: int = Field(..., ge=1)
    total: int = Field(..., ge=0, description="Total number of patients")
    total_pages: int = Field(..., ge=1, description="Never less than 1, even when empty")
    has_previous: bool
    has_next: bool
