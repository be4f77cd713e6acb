"""
Port interfaces - Protocol definitions for infrastructure abstraction.

This module defines the interfaces (ports) that the domain requires
from infrastructure. Adapters implement these protocols.
"""

from typing import Protocol

from .customer import Customer


class CustomerRepository(Protocol):
    """Port interface for customer persistence."""

    def insert(self, customer: Customer) -> Customer:
        """
        Store a new customer record.

        No uniqueness is enforced: registering the same phone number
        or email twice creates two records.

        Args:
            customer: Customer to persist (id is ignored)

        Returns:
            The stored customer with id and created_at assigned

        Raises:
            PersistenceError: If the store rejects the write
        """
        ...

    def find_by_phone(self, phone_number: str) -> Customer | None:
        """
        Look up a customer by exact phone number match.

        Args:
            phone_number: Phone number as stored, no normalization applied

        Returns:
            The earliest stored match, or None if there is none

        Raises:
            PersistenceError: If the store cannot be queried
        """
        ...


class EmailSender(Protocol):
    """Port interface for email delivery."""

    def send(self, to: str, subject: str, html_body: str) -> None:
        """
        Deliver an HTML email.

        Args:
            to: Recipient email address
            subject: Subject line
            html_body: HTML message body

        Raises:
            NotificationError: If the transport fails to deliver
        """
        ...
