"""
HTTP API email sender adapter - Implements EmailSender protocol.

Delivers messages through a JSON email API (Resend-compatible payload)
using requests.
"""

import logging

import requests

from onboard.domain.exceptions import NotificationError

logger = logging.getLogger(__name__)


class HttpApiEmailSender:
    """
    Implements EmailSender protocol via an HTTP email API.

    Uses structural subtyping - no explicit inheritance from Protocol.
    """

    def __init__(
        self,
        api_url: str,
        api_key: str,
        sender: str,
        timeout: float = 10.0,
    ) -> None:
        """
        Initialize sender with API endpoint and credentials.

        Args:
            api_url: Endpoint accepting POSTed JSON messages
            api_key: Bearer token for the API
            sender: From header value, e.g. '"Name" <addr@example.com>'
            timeout: Request timeout in seconds
        """
        self._api_url = api_url
        self._api_key = api_key
        self._sender = sender
        self._timeout = timeout

    def send(self, to: str, subject: str, html_body: str) -> None:
        """
        POST the message to the email API.

        Raises:
            NotificationError: On transport failure or non-2xx response
        """
        payload = {
            "from": self._sender,
            "to": [to],
            "subject": subject,
            "html": html_body,
        }
        headers = {"Authorization": f"Bearer {self._api_key}"}

        try:
            response = requests.post(
                self._api_url, json=payload, headers=headers, timeout=self._timeout
            )
        except requests.RequestException as e:
            raise NotificationError(f"Email API request failed: {e}") from e

        if not response.ok:
            raise NotificationError(
                f"Email API returned {response.status_code}: {response.text}"
            )

        logger.info("Confirmation email sent to %s", to)
