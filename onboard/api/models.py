"""
API request and response models.

Pydantic models for FastAPI endpoint validation and OpenAPI schema generation.
Field names are snake_case in Python and camelCase on the wire.
"""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator
from pydantic.alias_generators import to_camel

from onboard.domain.customer import Customer, RegistrationForm


class CamelModel(BaseModel):
    """Base model exposing camelCase aliases."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class RegisterRequest(CamelModel):
    """
    Request model for customer registration.

    Every field is optional so that missing fields reach the domain
    validation rules (400) instead of failing schema validation.
    """

    model_config = ConfigDict(coerce_numbers_to_str=True, allow_inf_nan=False)

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

    @field_validator("latitude", "longitude", mode="before")
    @classmethod
    def blank_coordinate_is_missing(cls, value: Any) -> Any:
        """Treat an empty form value as an absent coordinate."""
        if isinstance(value, str) and not value.strip():
            return None
        return value

    def to_form(self) -> RegistrationForm:
        """Convert to the domain registration form."""
        return RegistrationForm(**self.model_dump())


class CustomerResponse(CamelModel):
    """
    Response model for customer lookup.

    The stored password is deliberately not part of the response.
    """

    id: int | None = None
    full_name: str
    email: str
    phone_number: str
    gender: str
    date_of_birth: str
    address: str
    latitude: float
    longitude: float
    device_info: Any = None
    created_at: datetime | None = None

    @classmethod
    def from_customer(cls, customer: Customer) -> "CustomerResponse":
        return cls(
            id=customer.id,
            full_name=customer.full_name,
            email=customer.email,
            phone_number=customer.phone_number,
            gender=customer.gender,
            date_of_birth=customer.date_of_birth,
            address=customer.address,
            latitude=customer.latitude,
            longitude=customer.longitude,
            device_info=customer.device_info,
            created_at=customer.created_at,
        )


class MessageResponse(BaseModel):
    """Response model carrying a human-readable status message."""

    message: str


class ErrorResponse(BaseModel):
    """Standard error response model."""

    error: str
