"""
Domain model for doctors.
"""
from dataclasses import dataclass
from decimal import Decimal
from typing import Any, Dict, Optional


@dataclass
class Doctor:
    """Model representing a doctor in the system."""

    name: str
    specialization: str
    phone: Optional[str] = None
    email: Optional[str] = None
    experience_years: int = 0
    qualification: Optional[str] = None
    consultation_fee: Decimal = Decimal("0.00")
    available_days: Optional[str] = None
    available_time: Optional[str] = None
    doctor_id: Optional[int] = None

    def to_dict(self) -> Dict[str, Any]:
        """Convert doctor to dictionary; the fee is kept as a string to stay exact."""
        return {
            "doctor_id": self.doctor_id,
            "name": self.name,
            "specialization": self.specialization,
            "phone": self.phone,
            "email": self.email,
            "experience_years": self.experience_years,
            "qualification": self.qualification,
            "consultation_fee": str(self.consultation_fee),
            "available_days": self.available_days,
            "available_time": self.available_time,
        }
