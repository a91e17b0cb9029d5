"""Interface for analytics trackers."""

import abc

# pylint: disable=too-few-public-methods


class AnalyticsTracker(abc.ABC):
    """Contract for a fire-and-forget analytics sink."""

    @abc.abstractmethod
    def track_page_view(self, path: str) -> None:
        """Record that the page at `path` was viewed."""
