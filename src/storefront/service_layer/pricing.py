"""Pricing use-cases."""

import logging

from storefront.interfaces.currency import ExchangeRateProvider

logger = logging.getLogger(__name__)


def get_price_in_currency(
    price: float, currency_code: str, rate_provider: ExchangeRateProvider
) -> float:
    """Convert `price` into `currency_code` using the provider's current rate.

    Provider errors are not caught.
    """
    rate = rate_provider.get_exchange_rate(currency_code)
    logger.debug("Converting %s to %s at rate %s", price, currency_code, rate)
    return price * rate
