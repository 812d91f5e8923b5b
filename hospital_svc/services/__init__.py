"""
Service layer for business logic.

This module contains the orchestration services that sit between the
routers and the repositories.

Note: Services are not re-exported here because the request schemas import
services.validators, and re-exporting the services would make that import
circular. Import them directly from their modules:
- from services.patient_service import PatientService
- from services.doctor_service import DoctorService
"""
