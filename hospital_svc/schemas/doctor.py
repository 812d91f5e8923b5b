"""
Pydantic schemas for doctor-related API operations.
"""
from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, Field, field_validator

from services.validators import email_error, phone_error, required_error


def _blank_to_none(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    value = value.strip()
    return value or None


class DoctorCreate(BaseModel):
    """Schema for creating a new doctor."""
    name: str = Field(..., max_length=200, examples=["Dr. Sarah Lee"])
    specialization: str = Field(..., max_length=100, examples=["Cardiology"])
    phone: Optional[str] = Field(None, description="10-15 digits, optional leading +")
    email: Optional[str] = None
    experience_years: int = Field(0, ge=0, le=80, examples=[12])
    qualification: Optional[str] = Field(None, max_length=200, examples=["MBBS, MD"])
    consultation_fee: Decimal = Field(
        Decimal("0.00"),
        ge=0,
        max_digits=10,
        decimal_places=2,
        examples=["150.00"]
    )
    available_days: Optional[str] = Field(None, max_length=100, examples=["Mon-Fri"])
    available_time: Optional[str] = Field(None, max_length=100, examples=["09:00-17:00"])

    @field_validator("name")
    @classmethod
    def check_name(cls, value: str) -> str:
        error = required_error(value, "Name")
        if error:
            raise ValueError(error)
        return value.strip()

    @field_validator("specialization")
    @classmethod
    def check_specialization(cls, value: str) -> str:
        error = required_error(value, "Specialization")
        if error:
            raise ValueError(error)
        return value.strip()

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

    @field_validator("qualification", "available_days", "available_time")
    @classmethod
    def strip_optional(cls, value: Optional[str]) -> Optional[str]:
        return _blank_to_none(value)


class DoctorUpdate(DoctorCreate):
    """Schema for replacing a doctor's fields."""


class DoctorResponse(BaseModel):
    """Schema for doctor response. consultation_fee serialises as a string."""
    doctor_id: int = Field(..., examples=[1])
    name: str
    specialization: str
    phone: Optional[str] = None
    email: Optional[str] = None
    experience_years: int
    qualification: Optional[str] = None
    consultation_fee: Decimal
    available_days: Optional[str] = None
    available_time: Optional[str] = None

    class Config:
        from_attributes = True
