"""CLI helpers for STOREFRONT.

Option parsing callbacks and stderr message emitters with emoji/ASCII
fallbacks.
"""

from .log_level_parser import parse_log_level
from .messages import error, success, warn

__all__ = ["parse_log_level", "error", "success", "warn"]
