"""
Domain model for patients.
"""
from dataclasses import dataclass
from datetime import date
from typing import Any, Dict, Optional


@dataclass
class Patient:
    """
    Model representing a patient in the system.

    patient_id is None until the database has assigned one; once assigned it
    never changes. admission_date may be None on a patient that has not been
    stored yet, the repository fills in today's date on insert.
    """

    name: str
    age: int
    gender: Optional[str] = None
    phone: Optional[str] = None
    email: Optional[str] = None
    address: Optional[str] = None
    disease: Optional[str] = None
    blood_group: Optional[str] = None
    emergency_contact: Optional[str] = None
    admission_date: Optional[date] = None
    patient_id: Optional[int] = None

    def to_dict(self) -> Dict[str, Any]:
        """Convert patient to dictionary for API responses."""
        return {
            "patient_id": self.patient_id,
            "name": self.name,
            "age": self.age,
            "gender": self.gender,
            "phone": self.phone,
            "email": self.email,
            "address": self.address,
            "disease": self.disease,
            "blood_group": self.blood_group,
            "emergency_contact": self.emergency_contact,
            "admission_date": self.admission_date.isoformat() if self.admission_date else None,
        }
