"""Payment processors for STOREFRONT."""

import logging
from dataclasses import dataclass

from storefront.interfaces.payment import ChargeResult, ChargeStatus, PaymentProcessor

logger = logging.getLogger(__name__)

# pylint: disable=too-few-public-methods


@dataclass(frozen=True)
class ChargeAttempt:
    """A charge seen by the simulated processor."""

    payment_instrument: str
    amount: float
    status: ChargeStatus


class SimulatedPaymentProcessor(PaymentProcessor):
    """Payment processor that decides outcomes locally.

    A charge fails when the instrument is on the decline list, when the amount
    is not positive, or when it exceeds `limit` (if one is set). Every attempt
    is recorded in `charges`.

    Note:
        Not suitable for production use; primarily for demos and testing.
    """

    def __init__(
        self,
        declined_instruments: tuple[str, ...] = (),
        limit: float | None = None,
    ) -> None:
        self._declined = frozenset(declined_instruments)
        self._limit = limit
        self.charges: list[ChargeAttempt] = []

    async def charge(self, payment_instrument: str, amount: float) -> ChargeResult:
        status = self._decide(payment_instrument, amount)
        self.charges.append(ChargeAttempt(payment_instrument, amount, status))
        logger.info("Charged %s: %s", amount, status.value)
        return ChargeResult(status=status)

    def _decide(self, payment_instrument: str, amount: float) -> ChargeStatus:
        if payment_instrument in self._declined:
            return ChargeStatus.FAILED
        if amount <= 0:
            return ChargeStatus.FAILED
        if self._limit is not None and amount > self._limit:
            return ChargeStatus.FAILED
        return ChargeStatus.SUCCESS
