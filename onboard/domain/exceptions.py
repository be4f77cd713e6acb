"""
Domain exceptions - Semantic error types for registration.

This module defines domain-specific exceptions that communicate
business rule violations without leaking infrastructure details.
"""

from .validation import ValidationFailure


class RegistrationError(Exception):
    """Base class for registration domain errors."""

    pass


class ValidationFailed(RegistrationError):
    """Registration form rejected by a validation rule."""

    def __init__(self, failure: ValidationFailure) -> None:
        super().__init__(failure.message)
        self.failure = failure


class PersistenceError(RegistrationError):
    """Customer store could not complete a read or write."""

    pass


class NotificationError(RegistrationError):
    """Confirmation email could not be delivered."""

    pass
