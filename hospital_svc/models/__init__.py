"""
Domain models for the hospital records service.

This module contains the internal domain models shared by repositories and services.
"""
from models.doctor import Doctor
from models.patient import Patient

__all__ = ["Doctor", "Patient"]
