"""Interface and DTO for shipping quote providers."""

import abc
from dataclasses import dataclass

# pylint: disable=too-few-public-methods


@dataclass(frozen=True)
class ShippingQuote:
    """A cost/time estimate for delivering to a destination."""

    cost: float
    estimated_days: int


class ShippingQuoteProvider(abc.ABC):
    """Contract for a source of shipping quotes."""

    @abc.abstractmethod
    def get_shipping_quote(self, destination: str) -> ShippingQuote | None:
        """Return a quote for `destination`, or None when no quote is available."""
