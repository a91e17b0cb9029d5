"""Global pytest fixtures for STOREFRONT."""

from __future__ import annotations

from collections.abc import Callable
from datetime import datetime

import pytest

from storefront.adapters.clock import FixedClock
from tests.helpers.fakes import (
    FakeAnalytics,
    FakeEmailSender,
    FakeExchangeRateProvider,
    FakePaymentProcessor,
    FakeSecurityCodeGenerator,
    FakeShippingQuoteProvider,
)


@pytest.fixture
def clock_at() -> Callable[..., FixedClock]:
    """Factory for clocks pinned to a local date and time.

    Example:
        ```py
        def test_something(clock_at):
            clock = clock_at(2024, 12, 25, 8, 0)
        ```
    """

    def _make(*args: int) -> FixedClock:
        return FixedClock(datetime(*args))

    return _make


@pytest.fixture
def email_sender() -> FakeEmailSender:
    """Return an email sender that records what it was asked to send."""
    return FakeEmailSender()


@pytest.fixture
def payment_processor() -> FakePaymentProcessor:
    """Return a payment processor that accepts every charge."""
    return FakePaymentProcessor()


@pytest.fixture
def rate_provider() -> FakeExchangeRateProvider:
    """Return a rate provider that quotes 1.5 for every currency."""
    return FakeExchangeRateProvider(rate=1.5)


@pytest.fixture
def quote_provider() -> FakeShippingQuoteProvider:
    """Return a shipping provider with no quote configured."""
    return FakeShippingQuoteProvider(quote=None)


@pytest.fixture
def code_generator() -> FakeSecurityCodeGenerator:
    """Return a security code generator with a fixed code."""
    return FakeSecurityCodeGenerator(code=123456)


@pytest.fixture
def analytics() -> FakeAnalytics:
    """Return an analytics tracker that records page views."""
    return FakeAnalytics()
