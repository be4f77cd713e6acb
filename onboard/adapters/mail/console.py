"""
Console email sender adapter - Implements EmailSender protocol.

This module provides a console-based implementation of the domain's
email sender port, logging outgoing messages instead of delivering them.
Used when no email transport is configured.
"""

import logging

logger = logging.getLogger(__name__)


class ConsoleEmailSender:
    """
    Implements EmailSender protocol via console logging.

    Uses structural subtyping - no explicit inheritance from Protocol.
    For demo/development purposes - never fails.
    """

    def send(self, to: str, subject: str, html_body: str) -> None:
        """
        Log the message envelope (simulates email delivery).

        The body is logged at DEBUG only, envelope at INFO.

        Args:
            to: Recipient email address
            subject: Subject line
            html_body: HTML message body
        """
        logger.info("[EMAIL] To: %s Subject: %s", to, subject)
        logger.debug("[EMAIL] Body: %s", html_body)
