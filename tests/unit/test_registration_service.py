"""
Unit tests for RegistrationService domain logic.

Tests domain logic with mocked ports to verify:
- Validation short-circuits before persistence
- Customer construction from the form
- Confirmation email content
- Partial failure policy (email failure never fails registration)
- Lookup by phone number
"""

import logging
from dataclasses import replace
from unittest.mock import Mock

import pytest

from onboard.domain.customer import Customer, RegistrationForm
from onboard.domain.exceptions import NotificationError, PersistenceError, ValidationFailed
from onboard.domain.registration import CONFIRMATION_SUBJECT, RegistrationService
from onboard.domain.validation import ValidationFailure


def make_service(stored_customer: Customer | None = None) -> tuple[RegistrationService, Mock, Mock]:
    """Create a service with mocked repository and email sender."""
    repo = Mock()
    repo.insert.side_effect = lambda customer: stored_customer or replace(customer, id=1)
    sender = Mock()
    service = RegistrationService(repository=repo, email_sender=sender)
    return service, repo, sender


class TestValidationShortCircuit:
    """Tests that invalid forms never reach the ports."""

    def test_missing_fields_raises_before_persistence(self) -> None:
        """A form missing fields is rejected without any store or email call."""
        service, repo, sender = make_service()

        with pytest.raises(ValidationFailed) as exc_info:
            service.register(RegistrationForm(full_name="Jane Doe"))

        assert exc_info.value.failure is ValidationFailure.MISSING_FIELDS
        repo.insert.assert_not_called()
        sender.send.assert_not_called()

    @pytest.mark.parametrize(
        ("changes", "failure"),
        [
            ({"email": "foo@bar"}, ValidationFailure.INVALID_EMAIL),
            ({"phone_number": "12345"}, ValidationFailure.INVALID_PHONE),
            ({"confirm_password": "secret2"}, ValidationFailure.PASSWORD_MISMATCH),
            ({"password": "abc12", "confirm_password": "abc12"}, ValidationFailure.PASSWORD_TOO_SHORT),
        ],
    )
    def test_rule_failure_raises_validation_failed(
        self, registration_form: RegistrationForm, changes: dict, failure: ValidationFailure
    ) -> None:
        service, repo, sender = make_service()

        with pytest.raises(ValidationFailed) as exc_info:
            service.register(replace(registration_form, **changes))

        assert exc_info.value.failure is failure
        assert str(exc_info.value) == failure.message
        repo.insert.assert_not_called()
        sender.send.assert_not_called()


class TestPersistence:
    """Tests for customer construction and storage."""

    def test_register_inserts_customer_once(self, registration_form: RegistrationForm) -> None:
        service, repo, _ = make_service()

        service.register(registration_form)

        repo.insert.assert_called_once()

    def test_customer_built_from_form(self, registration_form: RegistrationForm) -> None:
        """Every form field except confirm_password lands on the customer."""
        service, repo, _ = make_service()
        form = replace(registration_form, device_info={"userAgent": "Mozilla/5.0"})

        service.register(form)

        customer = repo.insert.call_args[0][0]
        assert customer == Customer(
            full_name="Jane Doe",
            email="jane@example.com",
            phone_number="1234567890",
            gender="F",
            date_of_birth="1990-01-01",
            address="1 Main St",
            password="secret1",
            latitude=12.34,
            longitude=56.78,
            device_info={"userAgent": "Mozilla/5.0"},
        )

    def test_password_stored_as_submitted(self, registration_form: RegistrationForm) -> None:
        """No hashing is applied yet (outstanding hardening item)."""
        service, repo, _ = make_service()

        service.register(registration_form)

        assert repo.insert.call_args[0][0].password == "secret1"

    def test_persistence_error_propagates_without_email(
        self, registration_form: RegistrationForm
    ) -> None:
        """A failed insert raises PersistenceError and no email is sent."""
        service, repo, sender = make_service()
        repo.insert.side_effect = PersistenceError("connection refused")

        with pytest.raises(PersistenceError, match="connection refused"):
            service.register(registration_form)

        sender.send.assert_not_called()

    def test_outcome_carries_stored_customer(
        self, registration_form: RegistrationForm, stored_customer: Customer
    ) -> None:
        service, _, _ = make_service(stored_customer)

        outcome = service.register(registration_form)

        assert outcome.customer is stored_customer


class TestConfirmationEmail:
    """Tests for confirmation email content."""

    def test_email_sent_to_registrant(self, registration_form: RegistrationForm) -> None:
        service, _, sender = make_service()

        service.register(registration_form)

        sender.send.assert_called_once()
        to, subject, _ = sender.send.call_args[0]
        assert to == "jane@example.com"
        assert subject == CONFIRMATION_SUBJECT == "Registration Confirmation"

    def test_body_greets_by_full_name(self, registration_form: RegistrationForm) -> None:
        service, _, sender = make_service()

        service.register(registration_form)

        body = sender.send.call_args[0][2]
        assert "Welcome, Jane Doe!" in body

    def test_full_name_is_html_escaped(self, registration_form: RegistrationForm) -> None:
        service, _, sender = make_service()

        service.register(replace(registration_form, full_name="<b>Jane</b>"))

        body = sender.send.call_args[0][2]
        assert "<b>Jane</b>" not in body
        assert "&lt;b&gt;Jane&lt;/b&gt;" in body


class TestPartialFailurePolicy:
    """Tests that email failures degrade to a soft-success signal."""

    def test_email_sent_outcome(self, registration_form: RegistrationForm) -> None:
        service, _, _ = make_service()

        outcome = service.register(registration_form)

        assert outcome.email_sent is True

    def test_email_failure_still_returns_outcome(
        self, registration_form: RegistrationForm
    ) -> None:
        """NotificationError does not escalate; the customer stays stored."""
        service, repo, sender = make_service()
        sender.send.side_effect = NotificationError("SMTP down")

        outcome = service.register(registration_form)

        assert outcome.email_sent is False
        assert outcome.customer.id == 1
        repo.insert.assert_called_once()

    def test_email_failure_is_logged(
        self, registration_form: RegistrationForm, caplog: pytest.LogCaptureFixture
    ) -> None:
        service, _, sender = make_service()
        sender.send.side_effect = NotificationError("SMTP down")

        with caplog.at_level(logging.WARNING):
            service.register(registration_form)

        assert len(caplog.records) == 1
        assert caplog.records[0].levelno == logging.WARNING
        assert "SMTP down" in caplog.text

    def test_unexpected_sender_error_is_not_swallowed(
        self, registration_form: RegistrationForm
    ) -> None:
        """Only NotificationError is degraded; programming errors propagate."""
        service, _, sender = make_service()
        sender.send.side_effect = TypeError("bad call")

        with pytest.raises(TypeError):
            service.register(registration_form)


class TestFindByPhone:
    """Tests for customer lookup."""

    def test_returns_customer(self, stored_customer: Customer) -> None:
        service, repo, _ = make_service()
        repo.find_by_phone.return_value = stored_customer

        assert service.find_by_phone("1234567890") is stored_customer
        repo.find_by_phone.assert_called_once_with("1234567890")

    def test_not_found_returns_none(self) -> None:
        """Not found is a normal outcome, not an exception."""
        service, repo, _ = make_service()
        repo.find_by_phone.return_value = None

        assert service.find_by_phone("0000000000") is None

    def test_phone_number_not_normalized(self) -> None:
        service, repo, _ = make_service()
        repo.find_by_phone.return_value = None

        service.find_by_phone(" 123-456-7890 ")

        repo.find_by_phone.assert_called_once_with(" 123-456-7890 ")

    def test_persistence_error_propagates(self) -> None:
        service, repo, _ = make_service()
        repo.find_by_phone.side_effect = PersistenceError("timeout")

        with pytest.raises(PersistenceError):
            service.find_by_phone("1234567890")
