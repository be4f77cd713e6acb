"""
Shared test fixtures and configuration.

This module provides pytest fixtures for:
- A valid registration payload (wire format) and form (domain)
- Stored customer records
"""

from typing import Any

import pytest

from onboard.domain.customer import Customer, RegistrationForm


@pytest.fixture
def registration_payload() -> dict[str, Any]:
    """Valid POST /api/customers body."""
    return {
        "fullName": "Jane Doe",
        "email": "jane@example.com",
        "phoneNumber": "1234567890",
        "gender": "F",
        "dateOfBirth": "1990-01-01",
        "address": "1 Main St",
        "password": "secret1",
        "confirmPassword": "secret1",
        "latitude": 12.34,
        "longitude": 56.78,
    }


@pytest.fixture
def registration_form() -> RegistrationForm:
    """Valid domain registration form."""
    return RegistrationForm(
        full_name="Jane Doe",
        email="jane@example.com",
        phone_number="1234567890",
        gender="F",
        date_of_birth="1990-01-01",
        address="1 Main St",
        password="secret1",
        confirm_password="secret1",
        latitude=12.34,
        longitude=56.78,
    )


@pytest.fixture
def stored_customer() -> Customer:
    """Customer as returned by a repository after insert."""
    return Customer(
        id=1,
        full_name="Jane Doe",
        email="jane@example.com",
        phone_number="1234567890",
        gender="F",
        date_of_birth="1990-01-01",
        address="1 Main St",
        password="secret1",
        latitude=12.34,
        longitude=56.78,
        device_info={"platform": "web"},
    )
