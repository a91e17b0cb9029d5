"""Shipping use-cases."""

import logging

from storefront.interfaces.shipping import ShippingQuoteProvider

logger = logging.getLogger(__name__)

SHIPPING_UNAVAILABLE = "Shipping Unavailable"


def format_cost(cost: float) -> str:
    """Render a cost with a leading dollar sign.

    Whole amounts drop their decimals ("$10"); others keep two ("$10.50").
    """
    if float(cost).is_integer():
        return f"${int(cost)}"
    return f"${cost:.2f}"


def get_shipping_info(destination: str, quote_provider: ShippingQuoteProvider) -> str:
    """Return a human-readable shipping line for `destination`."""
    quote = quote_provider.get_shipping_quote(destination)
    if quote is None:
        logger.debug("No shipping quote available for %s", destination)
        return SHIPPING_UNAVAILABLE
    return f"Shipping Cost: {format_cost(quote.cost)} ({quote.estimated_days} Days)"
