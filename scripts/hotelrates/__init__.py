"""
Hotel Rate Scrapers Package

Lowest-nightly-rate snapshot for one locality across several booking sites.
Each site has its own URL builder in hotelrates/sites/.
"""

from .schema import DateWindow, SiteResult, RunSnapshot
from .errors import NavigationError, ExtractionError, SerializationError
from .pricing import extract_lowest_price, MAX_FRAGMENTS
from .base import create_browser, open_page, navigate, collect_all_text
from .registry import SiteDescriptor, TARGETS, get_target, get_targets
from .runner import run, save_snapshot

__all__ = [
    "DateWindow",
    "SiteResult",
    "RunSnapshot",
    "NavigationError",
    "ExtractionError",
    "SerializationError",
    "extract_lowest_price",
    "MAX_FRAGMENTS",
    "create_browser",
    "open_page",
    "navigate",
    "collect_all_text",
    "SiteDescriptor",
    "TARGETS",
    "get_target",
    "get_targets",
    "run",
    "save_snapshot",
]
