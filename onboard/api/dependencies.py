"""
FastAPI dependencies - Dependency injection factories.

This module provides Depends() factories for injecting
domain services and infrastructure adapters into routes.
"""

from functools import lru_cache

from fastapi import Depends, Request
from psycopg_pool import ConnectionPool

from onboard.adapters.mail import create_email_sender
from onboard.adapters.repository.postgres import PostgresCustomerRepository
from onboard.config.settings import get_settings
from onboard.domain.ports import EmailSender
from onboard.domain.registration import RegistrationService


def get_pool(request: Request) -> ConnectionPool:
    """
    Get connection pool from app state.

    The pool is created during app lifespan startup and stored in app.state.
    """
    return request.app.state.pool


def get_repository(request: Request) -> PostgresCustomerRepository:
    """Create repository with connection pool from app state."""
    pool = get_pool(request)
    return PostgresCustomerRepository(pool)


@lru_cache
def get_email_sender() -> EmailSender:
    """Get the configured email sender (singleton, adapters are stateless)."""
    return create_email_sender(get_settings())


def get_registration_service(
    repository: PostgresCustomerRepository = Depends(get_repository),
    email_sender: EmailSender = Depends(get_email_sender),
) -> RegistrationService:
    """
    Create registration service with injected dependencies.

    Wires together the repository and email sender for the domain service.
    """
    return RegistrationService(repository=repository, email_sender=email_sender)
