"""Shipping quote providers for STOREFRONT."""

from collections.abc import Mapping

from storefront.interfaces.shipping import ShippingQuote, ShippingQuoteProvider

# pylint: disable=too-few-public-methods


class FlatRateShippingQuoteProvider(ShippingQuoteProvider):
    """Fixed quotes per destination.

    Destinations are matched case-insensitively; unknown destinations have no
    quote.
    """

    def __init__(self, quotes: Mapping[str, ShippingQuote]) -> None:
        self._quotes = {dest.casefold(): quote for dest, quote in quotes.items()}

    def get_shipping_quote(self, destination: str) -> ShippingQuote | None:
        return self._quotes.get(destination.casefold())
