"""Order use-cases."""

import logging

from storefront.domain.value_objects import Order, SubmitResult
from storefront.interfaces.payment import ChargeStatus, PaymentProcessor

logger = logging.getLogger(__name__)


async def submit_order(
    order: Order, payment_instrument: str, payment_processor: PaymentProcessor
) -> SubmitResult:
    """Charge the order total to `payment_instrument`.

    Exactly one charge is attempted. Any status other than "success" is
    reported as a `payment_error` result; exceptions raised by the processor
    propagate unchanged.

    Args:
        order: The order being paid for.
        payment_instrument: Opaque payment token, e.g. a card number.
        payment_processor: Processor used to charge the instrument.

    Returns:
        SubmitResult: `success=True`, or `success=False` with
        `error="payment_error"`.
    """
    result = await payment_processor.charge(payment_instrument, order.total_amount)
    if result.status != ChargeStatus.SUCCESS:
        logger.warning(
            "Payment of %s was not accepted (status=%s)",
            order.total_amount,
            result.status,
        )
        return SubmitResult.payment_failed()
    logger.debug("Payment of %s accepted", order.total_amount)
    return SubmitResult.ok()
