"""Interface and DTOs for payment processors.

A payment processor charges an opaque payment instrument (for example a card
number token) and reports the outcome as a `ChargeResult`. Processors are
asynchronous because real ones talk to a remote gateway.
"""

import abc
from dataclasses import dataclass
from enum import Enum

# pylint: disable=too-few-public-methods


class ChargeStatus(str, Enum):
    """Possible outcomes of a charge."""

    SUCCESS = "success"
    FAILED = "failed"


@dataclass(frozen=True)
class ChargeResult:
    """Outcome reported by a payment processor.

    `status` is normally a `ChargeStatus`, but processors outside our control
    may report any string; callers must treat anything other than "success"
    as a failure.
    """

    status: ChargeStatus | str


class PaymentProcessor(abc.ABC):
    """Contract for a payment processor."""

    @abc.abstractmethod
    async def charge(self, payment_instrument: str, amount: float) -> ChargeResult:
        """Charge `amount` to `payment_instrument`.

        Args:
            payment_instrument: Opaque payment token, e.g. a card number.
            amount: Amount to charge.

        Returns:
            The processor's charge outcome.
        """
