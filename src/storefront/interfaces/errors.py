"""Errors raised by collaborator implementations."""


class CollaboratorError(Exception):
    """Base class for errors raised by external collaborators."""


class UnknownCurrencyError(CollaboratorError, LookupError):
    """Raised when no exchange rate is known for a currency code."""

    def __init__(self, currency_code: str) -> None:
        super().__init__(f"No exchange rate available for currency '{currency_code}'")
        self.currency_code = currency_code
