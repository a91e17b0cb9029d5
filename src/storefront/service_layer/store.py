"""Store-hour and discount use-cases.

Both read the current time through an injected `Clock`.
"""

import logging

from storefront.domain.value_objects import StoreHours
from storefront.interfaces.clock import Clock

logger = logging.getLogger(__name__)

DEFAULT_STORE_HOURS = StoreHours()
CHRISTMAS_DISCOUNT = 0.2
NO_DISCOUNT = 0


def is_online(clock: Clock, hours: StoreHours = DEFAULT_STORE_HOURS) -> bool:
    """Return True if the store is open at the clock's current local time."""
    now = clock.now()
    online = hours.includes(now.hour)
    logger.debug("Store online at %s: %s", now.isoformat(), online)
    return online


def get_discount(clock: Clock) -> float:
    """Return the discount rate that applies today."""
    now = clock.now()
    if now.month == 12 and now.day == 25:
        return CHRISTMAS_DISCOUNT
    return NO_DISCOUNT
