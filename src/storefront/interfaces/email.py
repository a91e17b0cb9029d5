"""Interface for email senders."""

import abc

# pylint: disable=too-few-public-methods


class EmailSender(abc.ABC):
    """Contract for delivering an email to a single recipient."""

    @abc.abstractmethod
    async def send_email(self, address: str, content: str) -> object:
        """Deliver `content` to `address`.

        The return value is implementation specific and ignored by callers.
        """
