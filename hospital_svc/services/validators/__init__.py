"""
Validation utilities for services.
"""
from services.validators.form_validator import (
    FormField,
    validate_required,
    validate_email,
    validate_phone,
    validate_age,
    highlight_error,
    clear_error,
    clear_all_errors,
    required_error,
    email_error,
    phone_error,
    age_error,
    normalize_phone,
    DEFAULT_STYLE,
    ERROR_STYLE,
)

__all__ = [
    "FormField",
    "validate_required",
    "validate_email",
    "validate_phone",
    "validate_age",
    "highlight_error",
    "clear_error",
    "clear_all_errors",
    "required_error",
    "email_error",
    "phone_error",
    "age_error",
    "normalize_phone",
    "DEFAULT_STYLE",
    "ERROR_STYLE",
]
