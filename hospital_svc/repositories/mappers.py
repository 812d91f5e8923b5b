"""
Row mappers between SQLite rows and domain models.

Every SELECT in the repositories lists its columns in the order given by
PATIENT_COLUMNS / DOCTOR_COLUMNS, so rows are decoded by position. The
mappers only coerce types (ISO text to date, numeric to Decimal cents);
they never validate.
"""
from decimal import Decimal, ROUND_HALF_UP
from typing import Any, Optional, Sequence, Tuple

from models import Doctor, Patient
from core.datetime_utils import from_db_date, to_db_date

CENTS = Decimal("0.01")

PATIENT_COLUMNS: Tuple[str, ...] = (
    "patient_id",
    "name",
    "age",
    "gender",
    "phone",
    "email",
    "address",
    "disease",
    "blood_group",
    "emergency_contact",
    "admission_date",
)

DOCTOR_COLUMNS: Tuple[str, ...] = (
    "doctor_id",
    "name",
    "specialization",
    "phone",
    "email",
    "experience_years",
    "qualification",
    "consultation_fee",
    "available_days",
    "available_time",
)

# Columns written by INSERT/UPDATE, i.e. everything but the key
PATIENT_MUTABLE_COLUMNS = PATIENT_COLUMNS[1:]
DOCTOR_MUTABLE_COLUMNS = DOCTOR_COLUMNS[1:]

PATIENT_SELECT = ", ".join(PATIENT_COLUMNS)
DOCTOR_SELECT = ", ".join(DOCTOR_COLUMNS)


def to_money(value: Any) -> Decimal:
    """Coerce a stored or submitted amount to a two-place Decimal."""
    if value is None:
        return Decimal("0.00")
    # str() first so floats from SQLite's NUMERIC affinity don't drag binary noise in
    return Decimal(str(value)).quantize(CENTS, rounding=ROUND_HALF_UP)


def patient_from_row(row: Sequence[Any]) -> Patient:
    """
    Create a Patient from a database row.

    Args:
        row: Tuple in PATIENT_COLUMNS order.
    """
    return Patient(
        patient_id=row[0],
        name=row[1],
        age=int(row[2]) if row[2] is not None else 0,
        gender=row[3],
        phone=row[4],
        email=row[5],
        address=row[6],
        disease=row[7],
        blood_group=row[8],
        emergency_contact=row[9],
        admission_date=from_db_date(row[10]),
    )


def patient_to_params(patient: Patient) -> Tuple[Optional[Any], ...]:
    """Bind parameters for PATIENT_MUTABLE_COLUMNS."""
    return (
        patient.name,
        patient.age,
        patient.gender,
        patient.phone,
        patient.email,
        patient.address,
        patient.disease,
        patient.blood_group,
        patient.emergency_contact,
        to_db_date(patient.admission_date),
    )


def doctor_from_row(row: Sequence[Any]) -> Doctor:
    """
    Create a Doctor from a database row.

    Args:
        row: Tuple in DOCTOR_COLUMNS order.
    """
    return Doctor(
        doctor_id=row[0],
        name=row[1],
        specialization=row[2],
        phone=row[3],
        email=row[4],
        experience_years=int(row[5]) if row[5] is not None else 0,
        qualification=row[6],
        consultation_fee=to_money(row[7]),
        available_days=row[8],
        available_time=row[9],
    )


def doctor_to_params(doctor: Doctor) -> Tuple[Optional[Any], ...]:
    """Bind parameters for DOCTOR_MUTABLE_COLUMNS."""
    return (
        doctor.name,
        doctor.specialization,
        doctor.phone,
        doctor.email,
        doctor.experience_years,
        doctor.qualification,
        str(to_money(doctor.consultation_fee)),
        doctor.available_days,
        doctor.available_time,
    )
