"""Fake collaborators for testing the service layer.

Each fake records the calls it receives so tests can assert on the exact
interaction, and returns a canned answer configured at construction.
"""

from dataclasses import dataclass, field

from storefront.interfaces.analytics import AnalyticsTracker
from storefront.interfaces.currency import ExchangeRateProvider
from storefront.interfaces.email import EmailSender
from storefront.interfaces.payment import ChargeResult, ChargeStatus, PaymentProcessor
from storefront.interfaces.security import SecurityCodeGenerator
from storefront.interfaces.shipping import ShippingQuote, ShippingQuoteProvider

# pylint: disable=too-few-public-methods


@dataclass
class FakeExchangeRateProvider(ExchangeRateProvider):
    """Quotes the same rate for every currency."""

    rate: float
    calls: list[str] = field(default_factory=list)

    def get_exchange_rate(self, currency_code: str) -> float:
        self.calls.append(currency_code)
        return self.rate


@dataclass
class FakeShippingQuoteProvider(ShippingQuoteProvider):
    """Returns the same quote (or lack of one) for every destination."""

    quote: ShippingQuote | None
    calls: list[str] = field(default_factory=list)

    def get_shipping_quote(self, destination: str) -> ShippingQuote | None:
        self.calls.append(destination)
        return self.quote


@dataclass
class FakePaymentProcessor(PaymentProcessor):
    """Reports the configured status for every charge."""

    status: ChargeStatus | str = ChargeStatus.SUCCESS
    calls: list[tuple[str, float]] = field(default_factory=list)

    async def charge(self, payment_instrument: str, amount: float) -> ChargeResult:
        self.calls.append((payment_instrument, amount))
        return ChargeResult(status=self.status)


@dataclass
class FakeEmailSender(EmailSender):
    """Records every (address, content) pair it is asked to send."""

    sent: list[tuple[str, str]] = field(default_factory=list)

    async def send_email(self, address: str, content: str) -> None:
        self.sent.append((address, content))


@dataclass
class FakeSecurityCodeGenerator(SecurityCodeGenerator):
    """Always generates the configured code and counts calls."""

    code: int
    calls: int = 0

    def generate_code(self) -> int:
        self.calls += 1
        return self.code


@dataclass
class FakeAnalytics(AnalyticsTracker):
    """Records every tracked page view."""

    page_views: list[str] = field(default_factory=list)

    def track_page_view(self, path: str) -> None:
        self.page_views.append(path)
