"""Interface for exchange rate providers."""

import abc

# pylint: disable=too-few-public-methods


class ExchangeRateProvider(abc.ABC):
    """Contract for a source of currency exchange rates."""

    @abc.abstractmethod
    def get_exchange_rate(self, currency_code: str) -> float:
        """Return the rate that converts a base price into `currency_code`.

        Raises:
            UnknownCurrencyError: If no rate is known for the currency.
        """
