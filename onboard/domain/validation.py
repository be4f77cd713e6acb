"""
Registration form validation.

Pure rule checks over a candidate registration payload. Rules are
evaluated in a fixed precedence order and the first failure wins:

1. Required fields present
2. Email shape
3. Phone number shape
4. Password confirmation
5. Password length
"""

import re
from enum import Enum

from .customer import RegistrationForm

EMAIL_PATTERN = re.compile(r"[^\s@]+@[^\s@]+\.[^\s@]+")
PHONE_PATTERN = re.compile(r"[0-9]{10}")
MIN_PASSWORD_LENGTH = 6

REQUIRED_TEXT_FIELDS = (
    "full_name",
    "email",
    "phone_number",
    "gender",
    "date_of_birth",
    "address",
    "password",
)
REQUIRED_COORDINATES = ("latitude", "longitude")


class ValidationFailure(Enum):
    """First failing validation rule, valued by its client-facing message."""

    MISSING_FIELDS = "All fields are required"
    INVALID_EMAIL = "Invalid email format"
    INVALID_PHONE = "Phone number must be 10 digits"
    PASSWORD_MISMATCH = "Passwords do not match"
    PASSWORD_TOO_SHORT = "Password must be at least 6 characters"

    @property
    def message(self) -> str:
        return self.value


def check_registration(form: RegistrationForm) -> ValidationFailure | None:
    """
    Check a registration form against all rules.

    Coordinates are only required to be present: 0 is a valid
    latitude or longitude.

    Returns:
        None if the form is valid, otherwise the first failing rule
    """
    if _has_missing_fields(form):
        return ValidationFailure.MISSING_FIELDS
    if not EMAIL_PATTERN.fullmatch(form.email):
        return ValidationFailure.INVALID_EMAIL
    if not PHONE_PATTERN.fullmatch(form.phone_number):
        return ValidationFailure.INVALID_PHONE
    if form.password != form.confirm_password:
        return ValidationFailure.PASSWORD_MISMATCH
    if len(form.password) < MIN_PASSWORD_LENGTH:
        return ValidationFailure.PASSWORD_TOO_SHORT
    return None


def _has_missing_fields(form: RegistrationForm) -> bool:
    for name in REQUIRED_TEXT_FIELDS:
        if not getattr(form, name):
            return True
    return any(getattr(form, name) is None for name in REQUIRED_COORDINATES)
