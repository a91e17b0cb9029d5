"""Analytics trackers for STOREFRONT."""

import logging

from storefront.interfaces.analytics import AnalyticsTracker

logger = logging.getLogger(__name__)

# pylint: disable=too-few-public-methods


class LoggingAnalytics(AnalyticsTracker):
    """Analytics tracker that logs page views and keeps them in `page_views`."""

    def __init__(self) -> None:
        self.page_views: list[str] = []

    def track_page_view(self, path: str) -> None:
        self.page_views.append(path)
        logger.info("Page view: %s", path)
