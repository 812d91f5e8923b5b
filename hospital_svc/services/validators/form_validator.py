"""
Validation utilities for patient and doctor form input.

Each validator takes a FormField, returns None when the text is acceptable or
a message to show the user, and marks the field's style as "error" or back
to "default". The text predicates underneath (required_error, email_error,
phone_error, age_error) hold no state and are reused by the request schemas.

Validation failures are user feedback, not faults, so nothing here logs.
"""
import re
from dataclasses import dataclass
from typing import Optional

# Email: letters/digits/+_.- before @, dotted domain, 2+ letter final segment
EMAIL_PATTERN = re.compile(r"^[A-Za-z0-9+_.-]+@[A-Za-z0-9.-]+\.[A-Za-z]{2,}$")

# Phone: 10-15 digits, may start with +
PHONE_PATTERN = re.compile(r"^\+?[0-9]{10,15}$")

# Characters people type into phone numbers that carry no meaning
PHONE_SEPARATORS = re.compile(r"[\s\-()]")

# Age: optional sign and ASCII digits only; int() alone also takes "1_0" and non-ASCII digits
AGE_PATTERN = re.compile(r"^[+-]?[0-9]+$")

DEFAULT_STYLE = "default"
ERROR_STYLE = "error"


@dataclass
class FormField:
    """A single form input: its current text and how it is displayed."""

    text: str = ""
    style: str = DEFAULT_STYLE

    @property
    def has_error(self) -> bool:
        return self.style == ERROR_STYLE


# =============================================================================
# TEXT PREDICATES
# =============================================================================

def normalize_phone(text: str) -> str:
    """Strip whitespace, hyphens and parentheses from a phone number."""
    return PHONE_SEPARATORS.sub("", (text or "").strip())


def required_error(text: Optional[str], field_name: str) -> Optional[str]:
    if not (text or "").strip():
        return f"{field_name} is required."
    return None


def email_error(text: Optional[str]) -> Optional[str]:
    """An empty email is fine; use required_error to demand one."""
    email = (text or "").strip()
    if email and not EMAIL_PATTERN.match(email):
        return "Please enter a valid email address (e.g., example@domain.com)."
    return None


def phone_error(text: Optional[str]) -> Optional[str]:
    phone = normalize_phone(text)
    if phone and not PHONE_PATTERN.match(phone):
        return "Please enter a valid phone number (10-15 digits)."
    return None


def age_error(text: Optional[str], min_age: int, max_age: int) -> Optional[str]:
    """
    Check an age typed as text against an inclusive range.

    Empty, non-numeric and out-of-range values each get their own message.
    """
    age_text = (text or "").strip()
    if not age_text:
        return "Age is required."

    if not AGE_PATTERN.match(age_text):
        return "Please enter a valid number for age."
    try:
        age = int(age_text)
    except ValueError:
        # digit strings past the interpreter's int conversion limit
        return "Please enter a valid number for age."

    if age < min_age or age > max_age:
        return f"Please enter a valid age between {min_age} and {max_age}."
    return None


# =============================================================================
# FIELD VALIDATORS
# =============================================================================

def highlight_error(field: FormField) -> None:
    """Mark a field as invalid."""
    field.style = ERROR_STYLE


def clear_error(field: FormField) -> None:
    """Restore a field's default look."""
    field.style = DEFAULT_STYLE


def clear_all_errors(*fields: FormField) -> None:
    for field in fields:
        clear_error(field)


def _apply(field: FormField, error: Optional[str]) -> Optional[str]:
    if error:
        highlight_error(field)
    else:
        clear_error(field)
    return error


def validate_required(field: FormField, field_name: str) -> Optional[str]:
    """Validate that a field is not blank."""
    return _apply(field, required_error(field.text, field_name))


def validate_email(field: FormField) -> Optional[str]:
    """Validate email format."""
    return _apply(field, email_error(field.text))


def validate_phone(field: FormField) -> Optional[str]:
    """Validate phone number format."""
    return _apply(field, phone_error(field.text))


def validate_age(field: FormField, min_age: int, max_age: int) -> Optional[str]:
    """Validate that age is a whole number within [min_age, max_age]."""
    return _apply(field, age_error(field.text, min_age, max_age))
