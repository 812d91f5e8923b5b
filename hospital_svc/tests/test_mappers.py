"""
Tests for the row mappers.
"""
from datetime import date
from decimal import Decimal

from repositories.mappers import (
    PATIENT_COLUMNS,
    PATIENT_MUTABLE_COLUMNS,
    DOCTOR_COLUMNS,
    DOCTOR_MUTABLE_COLUMNS,
    patient_from_row,
    patient_to_params,
    doctor_from_row,
    doctor_to_params,
    to_money,
)
from conftest import make_doctor, make_patient


def test_column_tuples_match_schema_order():
    assert PATIENT_COLUMNS[0] == "patient_id"
    assert PATIENT_COLUMNS[-1] == "admission_date"
    assert len(PATIENT_COLUMNS) == 11
    assert DOCTOR_COLUMNS[0] == "doctor_id"
    assert len(DOCTOR_COLUMNS) == 10


def test_patient_from_row_decodes_date():
    row = (7, "Mary Major", 34, "Female", "5550001111", "mary@example.org",
           "1 Elm St", "Asthma", "A-", "Tom Major", "2024-03-09")

    patient = patient_from_row(row)

    assert patient.patient_id == 7
    assert patient.age == 34
    assert patient.blood_group == "A-"
    assert patient.admission_date == date(2024, 3, 9)


def test_patient_from_row_accepts_timestamp_text():
    """A datetime-looking value still yields the calendar date."""
    row = (1, "A", 1, None, None, None, None, None, None, None, "2024-03-09 08:15:00")
    assert patient_from_row(row).admission_date == date(2024, 3, 9)


def test_patient_to_params_order():
    patient = make_patient(admission_date=date(2024, 1, 15))

    params = patient_to_params(patient)

    assert len(params) == len(PATIENT_MUTABLE_COLUMNS)
    assert params[0] == "John Doe"
    assert params[1] == 45
    assert params[-1] == "2024-01-15"


def test_patient_to_params_leaves_missing_date_unset():
    """Defaulting the date is the repository's call, not the mapper's."""
    assert patient_to_params(make_patient(admission_date=None))[-1] is None


def test_doctor_from_row_coerces_fee():
    row = (3, "Dr. Who", "General", None, None, 40, "PhD", 150.5, "Mon", "10-12")

    doctor = doctor_from_row(row)

    assert doctor.consultation_fee == Decimal("150.50")
    assert doctor.experience_years == 40


def test_doctor_to_params_formats_fee():
    params = doctor_to_params(make_doctor(consultation_fee=Decimal("80")))

    assert len(params) == len(DOCTOR_MUTABLE_COLUMNS)
    assert params[DOCTOR_MUTABLE_COLUMNS.index("consultation_fee")] == "80.00"


def test_to_money():
    assert to_money(None) == Decimal("0.00")
    assert to_money(12) == Decimal("12.00")
    assert to_money("19.999") == Decimal("20.00")
    assert str(to_money(0.1)) == "0.10"


def test_patient_from_row_replaces_unreadable_date_with_today(caplog):
    """A stored record always comes back with an admission date."""
    row = (1, "A", 1, None, None, None, None, None, None, None, "not a date")

    patient = patient_from_row(row)

    assert patient.admission_date == date.today()
    assert any("not a date" in r.getMessage() for r in caplog.records)


def test_patient_from_row_accepts_day_first_text():
    row = (1, "A", 1, None, None, None, None, None, None, None, "15/01/2024")
    assert patient_from_row(row).admission_date == date(2024, 1, 15)
