"""Account use-cases: sign-up and login."""

import logging

from storefront.domain.rules import is_valid_email
from storefront.interfaces.email import EmailSender
from storefront.interfaces.security import SecurityCodeGenerator

logger = logging.getLogger(__name__)

WELCOME_MESSAGE = "Welcome aboard!"


async def sign_up(email: str, email_sender: EmailSender) -> bool:
    """Register `email` and send it a welcome message.

    Returns:
        bool: False without sending anything if the address is invalid,
        True once the welcome email has been sent.
    """
    if not is_valid_email(email):
        logger.debug("Rejected sign-up for invalid address %r", email)
        return False
    await email_sender.send_email(email, WELCOME_MESSAGE)
    return True


async def login(
    email: str, code_generator: SecurityCodeGenerator, email_sender: EmailSender
) -> None:
    """Email a freshly generated one-time security code to `email`."""
    code = code_generator.generate_code()
    logger.debug("Sending login code to %s", email)
    await email_sender.send_email(email, str(code))
