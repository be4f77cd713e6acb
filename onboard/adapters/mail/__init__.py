"""Email adapters - EmailSender implementations selected by configuration."""

from email.utils import formataddr

from onboard.config.settings import Settings

from .console import ConsoleEmailSender
from .http_api import HttpApiEmailSender
from .smtp import SmtpEmailSender

__all__ = [
    "ConsoleEmailSender",
    "HttpApiEmailSender",
    "SmtpEmailSender",
    "create_email_sender",
]


def create_email_sender(
    settings: Settings,
) -> ConsoleEmailSender | HttpApiEmailSender | SmtpEmailSender:
    """
    Build the email sender for the configured transport.

    Args:
        settings: Application settings; email_transport picks the adapter

    Returns:
        An object satisfying the EmailSender protocol
    """
    sender = formataddr((settings.email_from_name, settings.email_user))

    if settings.email_transport == "http":
        return HttpApiEmailSender(
            api_url=settings.email_api_url,
            api_key=settings.email_api_key,
            sender=sender,
            timeout=settings.email_timeout_seconds,
        )
    if settings.email_transport == "smtp":
        return SmtpEmailSender(
            host=settings.smtp_host,
            port=settings.smtp_port,
            username=settings.email_user,
            password=settings.email_pass,
            sender=sender,
            timeout=settings.email_timeout_seconds,
        )
    return ConsoleEmailSender()
