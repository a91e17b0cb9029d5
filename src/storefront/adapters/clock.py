"""Clocks for STOREFRONT."""

from datetime import datetime

from storefront.interfaces.clock import Clock

# pylint: disable=too-few-public-methods


class SystemClock(Clock):
    """Clock backed by the local system time."""

    def now(self) -> datetime:
        return datetime.now()


class FixedClock(Clock):
    """Clock that always reports the same instant."""

    def __init__(self, instant: datetime) -> None:
        self._instant = instant

    def now(self) -> datetime:
        return self._instant
