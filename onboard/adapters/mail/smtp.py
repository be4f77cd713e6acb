"""
SMTP email sender adapter - Implements EmailSender protocol.

Delivers messages over SMTP with implicit TLS (e.g. Gmail on port 465)
using the standard library smtplib.
"""

import logging
import smtplib
from email.message import EmailMessage

from onboard.domain.exceptions import NotificationError

logger = logging.getLogger(__name__)


class SmtpEmailSender:
    """
    Implements EmailSender protocol via SMTP.

    Opens one connection per message; nothing is pooled.
    """

    def __init__(
        self,
        host: str,
        port: int,
        username: str,
        password: str,
        sender: str,
        timeout: float = 10.0,
    ) -> None:
        self._host = host
        self._port = port
        self._username = username
        self._password = password
        self._sender = sender
        self._timeout = timeout

    def send(self, to: str, subject: str, html_body: str) -> None:
        """
        Send an HTML message through the configured SMTP server.

        Raises:
            NotificationError: On connection, authentication or delivery failure
        """
        message = EmailMessage()
        message["From"] = self._sender
        message["To"] = to
        message["Subject"] = subject
        message.set_content(html_body, subtype="html")

        try:
            with smtplib.SMTP_SSL(self._host, self._port, timeout=self._timeout) as smtp:
                smtp.login(self._username, self._password)
                smtp.send_message(message)
        except (smtplib.SMTPException, OSError) as e:
            raise NotificationError(f"SMTP delivery failed: {e}") from e

        logger.info("Confirmation email sent to %s", to)
