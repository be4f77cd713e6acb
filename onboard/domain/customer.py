"""
Customer records and registration forms.

Plain dataclasses shared by the domain service, the ports and the
adapters. Attribute names are snake_case; the API layer maps them to
the camelCase wire format.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any


@dataclass
class RegistrationForm:
    """
    Candidate registration payload, exactly as submitted.

    Every field is optional here; presence is a validation rule,
    not a construction requirement.
    """

    full_name: str | None = None
    email: str | None = None
    phone_number: str | None = None
    gender: str | None = None
    date_of_birth: str | None = None
    address: str | None = None
    password: str | None = None
    confirm_password: str | None = None
    latitude: float | None = None
    longitude: float | None = None
    device_info: Any = None


@dataclass
class Customer:
    """
    Persisted registration record.

    The password is kept exactly as submitted. Hashing is a known
    outstanding hardening item and is not performed anywhere yet.
    """

    full_name: str
    email: str
    phone_number: str
    gender: str
    date_of_birth: str
    address: str
    password: str
    latitude: float
    longitude: float
    device_info: Any = None
    id: int | None = field(default=None, compare=False)
    created_at: datetime | None = field(default=None, compare=False)

    @classmethod
    def from_form(cls, form: RegistrationForm) -> "Customer":
        """Build a customer from a form that already passed validation."""
        return cls(
            full_name=form.full_name,
            email=form.email,
            phone_number=form.phone_number,
            gender=form.gender,
            date_of_birth=form.date_of_birth,
            address=form.address,
            password=form.password,
            latitude=float(form.latitude),
            longitude=float(form.longitude),
            device_info=form.device_info,
        )


@dataclass(frozen=True)
class RegistrationOutcome:
    """Result of a successful registration."""

    customer: Customer
    email_sent: bool
