"""
Goibibo (goibibo.com)

Goibibo wants compact dates (YYYYMMDD) and encodes occupancy as
rooms-adults-children.
"""

from __future__ import annotations

from . import ADULTS, ROOMS

SOURCE_ID = "goibibo"
NAME = "Goibibo"
SETTLE_DELAY_MS = 5000

CITY_SLUG = "hotels-in-hyderabad-ct"
NEARBY = "Kondapur"


def compact_date(date_str: str) -> str:
    """2024-01-01 -> 20240101"""
    return date_str.replace("-", "")


def build_search_url(
    checkin: str,
    checkout: str,
    nearby: str = NEARBY,
    adults: int = ADULTS,
    rooms: int = ROOMS,
) -> str:
    """Build a Goibibo city search URL from YYYY-MM-DD dates."""
    return (
        f"https://www.goibibo.com/hotels/{CITY_SLUG}/"
        f"?check_in={compact_date(checkin)}"
        f"&check_out={compact_date(checkout)}"
        f"&nearby={nearby}"
        f"&r={rooms}-{adults}-0"
    )
