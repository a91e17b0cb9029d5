"""Email senders for STOREFRONT."""

import logging
from dataclasses import dataclass

from storefront.interfaces.email import EmailSender

logger = logging.getLogger(__name__)

# pylint: disable=too-few-public-methods


@dataclass(frozen=True)
class OutgoingEmail:
    """An email handed to a sender."""

    to: str
    content: str


class LoggingEmailSender(EmailSender):
    """Email sender that logs messages instead of delivering them.

    Sent messages are kept in `outbox` in the order they were sent.
    """

    def __init__(self) -> None:
        self.outbox: list[OutgoingEmail] = []

    async def send_email(self, address: str, content: str) -> OutgoingEmail:
        email = OutgoingEmail(to=address, content=content)
        self.outbox.append(email)
        logger.info("Email to %s: %s", address, content)
        return email
