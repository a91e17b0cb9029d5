"""Page rendering use-cases."""

from storefront.interfaces.analytics import AnalyticsTracker

HOME_PATH = "/home"


async def render_page(analytics: AnalyticsTracker) -> str:
    """Render the home page, recording one page view."""
    analytics.track_page_view(HOME_PATH)
    return "<div>content</div>"
