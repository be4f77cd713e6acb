"""
Registration domain service.

This module contains the core business logic for customer registration:

    validate -> persist -> notify -> outcome

Partial Failure Policy
======================

Persistence and notification are sequential and independent:

- A validation failure stops the flow before any store access.
- A persistence failure stops the flow before any email is attempted.
- A notification failure never undoes or blocks a stored registration.
  It is logged and reported through RegistrationOutcome.email_sent so
  callers can tell the user the confirmation email did not go out.
"""

import html
import logging
from dataclasses import dataclass

from .customer import Customer, RegistrationForm, RegistrationOutcome
from .exceptions import NotificationError, ValidationFailed
from .ports import CustomerRepository, EmailSender
from .validation import check_registration

logger = logging.getLogger(__name__)

CONFIRMATION_SUBJECT = "Registration Confirmation"

CONFIRMATION_TEMPLATE = """\
<h2>Welcome, {full_name}!</h2>
<p>Thank you for registering with us!</p>
<p>Your account has been successfully created. You can now log in using your email and password.</p>
<p>If you did not initiate this registration, please contact our support team.</p>
<p>Best regards,<br>Registration System Team</p>
"""


@dataclass
class RegistrationService:
    """
    Domain service for customer registration.

    Orchestrates the registration flow: form validation,
    customer persistence, and confirmation email delivery.
    """

    repository: CustomerRepository
    email_sender: EmailSender

    def register(self, form: RegistrationForm) -> RegistrationOutcome:
        """
        Register a new customer and send a confirmation email.

        Args:
            form: Registration form as submitted

        Returns:
            RegistrationOutcome with the stored customer and whether
            the confirmation email was delivered

        Raises:
            ValidationFailed: If the form breaks a validation rule
            PersistenceError: If the customer could not be stored
        """
        failure = check_registration(form)
        if failure is not None:
            raise ValidationFailed(failure)

        customer = self.repository.insert(Customer.from_form(form))
        logger.info("Customer registered: id=%s", customer.id)

        email_sent = self._send_confirmation(customer)
        return RegistrationOutcome(customer=customer, email_sent=email_sent)

    def find_by_phone(self, phone_number: str) -> Customer | None:
        """
        Look up a customer for form autofill.

        Exact match only; a missing customer is a normal outcome.

        Raises:
            PersistenceError: If the store cannot be queried
        """
        return self.repository.find_by_phone(phone_number)

    def _send_confirmation(self, customer: Customer) -> bool:
        body = CONFIRMATION_TEMPLATE.format(full_name=html.escape(customer.full_name))
        try:
            self.email_sender.send(customer.email, CONFIRMATION_SUBJECT, body)
        except NotificationError as e:
            logger.warning("Confirmation email to %s failed: %s", customer.email, e)
            return False
        return True
