"""Interfaces (application boundary) for STOREFRONT.

Defines framework-free application contracts: ABCs and small DTOs shared by
the service layer and adapters (rate and quote providers, payment processors,
email senders, security code generators, analytics trackers, clocks). Business
rules stay out of this package.

Dependency rule: this package is independent; do not import from any
`storefront.*` modules outside it. It may be imported by
`storefront.service_layer`, `storefront.adapters`, and `storefront.bootstrap`.
"""

from .analytics import AnalyticsTracker
from .clock import Clock
from .currency import ExchangeRateProvider
from .email import EmailSender
from .errors import CollaboratorError, UnknownCurrencyError
from .payment import ChargeResult, ChargeStatus, PaymentProcessor
from .security import SecurityCodeGenerator
from .shipping import ShippingQuote, ShippingQuoteProvider

__all__ = [
    "AnalyticsTracker",
    "ChargeResult",
    "ChargeStatus",
    "Clock",
    "CollaboratorError",
    "EmailSender",
    "ExchangeRateProvider",
    "PaymentProcessor",
    "SecurityCodeGenerator",
    "ShippingQuote",
    "ShippingQuoteProvider",
    "UnknownCurrencyError",
]
