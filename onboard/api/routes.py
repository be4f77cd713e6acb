"""
API routes - Customer registration and lookup endpoints.

This module defines the HTTP endpoints (mounted under /api):
- GET /api/test - Liveness message
- GET /api/customers/phone/{phone_number} - Look up a customer for autofill
- POST /api/customers - Register a customer and send a confirmation email
"""

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from onboard.api.dependencies import get_registration_service
from onboard.api.errors import error_response, server_error
from onboard.api.models import (
    CustomerResponse,
    ErrorResponse,
    MessageResponse,
    RegisterRequest,
)
from onboard.domain.exceptions import PersistenceError, ValidationFailed
from onboard.domain.registration import RegistrationService

router = APIRouter(tags=["customers"])

REGISTERED_EMAIL_SENT = "Customer registered successfully and confirmation email sent"
REGISTERED_EMAIL_FAILED = "Customer registered successfully, but failed to send confirmation email"


@router.get("/test", response_model=MessageResponse, summary="Check the backend is running")
async def backend_status() -> MessageResponse:
    return MessageResponse(message="Backend is running!")


@router.get(
    "/customers/phone/{phone_number}",
    response_model=CustomerResponse,
    responses={
        404: {"model": ErrorResponse, "description": "Customer not found"},
        500: {"model": ErrorResponse, "description": "Server error"},
    },
    summary="Find a customer by phone number",
    description="Exact-match lookup used to autofill the registration form.",
)
def get_customer_by_phone(
    phone_number: str,
    service: RegistrationService = Depends(get_registration_service),
) -> CustomerResponse | JSONResponse:
    """
    Fetch the customer registered with a phone number.

    - **phone_number**: Phone number exactly as registered
    """
    try:
        customer = service.find_by_phone(phone_number)
    except PersistenceError as e:
        return server_error(e)

    if customer is None:
        return error_response(status.HTTP_404_NOT_FOUND, "Customer not found")
    return CustomerResponse.from_customer(customer)


@router.post(
    "/customers",
    response_model=MessageResponse,
    status_code=status.HTTP_201_CREATED,
    responses={
        400: {"model": ErrorResponse, "description": "Validation error"},
        500: {"model": ErrorResponse, "description": "Server error"},
    },
    summary="Register a new customer",
    description="Validate and store a registration, then send a confirmation email. "
    "A failed email does not fail the registration; the message says whether it was sent.",
)
def register_customer(
    request_data: RegisterRequest,
    service: RegistrationService = Depends(get_registration_service),
) -> MessageResponse | JSONResponse:
    """
    Register a new customer.

    Returns 201 whenever the customer was stored, with a message telling
    whether the confirmation email went out.
    """
    try:
        outcome = service.register(request_data.to_form())
    except ValidationFailed as e:
        return error_response(status.HTTP_400_BAD_REQUEST, e.failure.message)
    except PersistenceError as e:
        return server_error(e)

    if outcome.email_sent:
        return MessageResponse(message=REGISTERED_EMAIL_SENT)
    return MessageResponse(message=REGISTERED_EMAIL_FAILED)
