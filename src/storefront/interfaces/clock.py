"""Interface for clocks.

Business rules that depend on the current time read it through a `Clock`
instead of the system clock, so tests can pin the instant.
"""

import abc
from datetime import datetime

# pylint: disable=too-few-public-methods


class Clock(abc.ABC):
    """Contract for a source of the current local time."""

    @abc.abstractmethod
    def now(self) -> datetime:
        """Return the current local date and time."""
