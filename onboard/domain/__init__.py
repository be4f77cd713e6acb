"""
Domain layer - Pure business logic with zero framework imports.

This package contains the core business logic for customer registration.
It defines its own port interfaces for infrastructure abstraction, so
storage and email transports can be swapped without touching the workflow.
"""

from .customer import Customer, RegistrationForm, RegistrationOutcome
from .exceptions import (
    NotificationError,
    PersistenceError,
    RegistrationError,
    ValidationFailed,
)
from .ports import CustomerRepository, EmailSender
from .registration import RegistrationService
from .validation import ValidationFailure, check_registration

__all__ = [
    "Customer",
    "CustomerRepository",
    "EmailSender",
    "NotificationError",
    "PersistenceError",
    "RegistrationError",
    "RegistrationForm",
    "RegistrationOutcome",
    "RegistrationService",
    "ValidationFailed",
    "ValidationFailure",
    "check_registration",
]
