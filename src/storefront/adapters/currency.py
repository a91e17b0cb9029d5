"""Exchange rate providers for STOREFRONT."""

from collections.abc import Mapping

from storefront.interfaces.currency import ExchangeRateProvider
from storefront.interfaces.errors import UnknownCurrencyError

# pylint: disable=too-few-public-methods


class StaticExchangeRateProvider(ExchangeRateProvider):
    """Exchange rates from a fixed table.

    Currency codes are matched case-insensitively.
    """

    def __init__(self, rates: Mapping[str, float]) -> None:
        self._rates = {code.upper(): float(rate) for code, rate in rates.items()}

    def get_exchange_rate(self, currency_code: str) -> float:
        try:
            return self._rates[currency_code.upper()]
        except KeyError as e:
            raise UnknownCurrencyError(currency_code) from e
