"""Bootstrap the store use-cases with their collaborators."""

from __future__ import annotations

import functools
import inspect
import logging
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Any

from storefront import config
from storefront.adapters.analytics import LoggingAnalytics
from storefront.adapters.clock import SystemClock
from storefront.adapters.currency import StaticExchangeRateProvider
from storefront.adapters.email import LoggingEmailSender
from storefront.adapters.payment import SimulatedPaymentProcessor
from storefront.adapters.security import RandomSecurityCodeGenerator
from storefront.adapters.shipping import FlatRateShippingQuoteProvider
from storefront.domain.value_objects import StoreHours
from storefront.interfaces.shipping import ShippingQuote
from storefront.service_layer import accounts, orders, pages, pricing, shipping, store

logger = logging.getLogger(__name__)

DEFAULT_SHIPPING_QUOTES = {
    "domestic": ShippingQuote(cost=10, estimated_days=2),
    "europe": ShippingQuote(cost=25, estimated_days=5),
    "worldwide": ShippingQuote(cost=40, estimated_days=10),
}


@dataclass(frozen=True)
class AppContainer:
    """Use-cases with their collaborators already bound.

    Each attribute takes only the request arguments, e.g.
    `app.get_price_in_currency(10, "PLN")` or `await app.sign_up(email)`.
    """

    get_price_in_currency: Callable[..., float]
    get_shipping_info: Callable[..., str]
    render_page: Callable[..., Any]
    submit_order: Callable[..., Any]
    sign_up: Callable[..., Any]
    login: Callable[..., Any]
    is_online: Callable[..., bool]
    get_discount: Callable[..., float]
    dependencies: Mapping[str, object]


def build_dependencies(settings: config.Settings) -> dict[str, object]:
    """Build the default collaborators, keyed by the parameter name they fill."""
    return {
        "rate_provider": StaticExchangeRateProvider(settings.exchange_rates),
        "quote_provider": FlatRateShippingQuoteProvider(DEFAULT_SHIPPING_QUOTES),
        "payment_processor": SimulatedPaymentProcessor(
            declined_instruments=settings.declined_instruments
        ),
        "email_sender": LoggingEmailSender(),
        "code_generator": RandomSecurityCodeGenerator(),
        "analytics": LoggingAnalytics(),
        "clock": SystemClock(),
        "hours": StoreHours(settings.opening_hour, settings.closing_hour),
    }


def bootstrap(
    settings: config.Settings | None = None,
    overrides: Mapping[str, object] | None = None,
) -> AppContainer:
    """Wire every use-case to its collaborators.

    Args:
        settings: Settings to build adapters from. Read from the environment
            when omitted.
        overrides: Collaborators replacing the defaults, keyed by parameter
            name (e.g. `{"clock": FixedClock(...)}`).

    Returns:
        AppContainer: The bound use-cases.
    """
    settings = settings or config.get_settings()
    dependencies = {**build_dependencies(settings), **(overrides or {})}
    logger.debug(
        "Store hours: %02d:00-%02d:00, currencies: %s",
        settings.opening_hour,
        settings.closing_hour,
        ", ".join(sorted(settings.exchange_rates)),
    )
    logger.debug("Bootstrapping with collaborators %s", sorted(dependencies))

    def bind(handler: Callable) -> Callable:
        return inject_dependencies(handler, dependencies)

    return AppContainer(
        get_price_in_currency=bind(pricing.get_price_in_currency),
        get_shipping_info=bind(shipping.get_shipping_info),
        render_page=bind(pages.render_page),
        submit_order=bind(orders.submit_order),
        sign_up=bind(accounts.sign_up),
        login=bind(accounts.login),
        is_online=bind(store.is_online),
        get_discount=bind(store.get_discount),
        dependencies=dependencies,
    )


def inject_dependencies(
    handler: Callable, dependencies: Mapping[str, object]
) -> Callable:
    """Bind the dependencies named in the handler's parameters.

    Coroutine functions stay coroutine functions: calling the result returns
    an awaitable.
    """
    params = inspect.signature(handler).parameters
    deps = {
        name: dependency for name, dependency in dependencies.items() if name in params
    }
    return functools.partial(handler, **deps)
