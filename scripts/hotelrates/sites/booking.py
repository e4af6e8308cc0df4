"""
Booking.com (booking.com)

Search results sorted by price, so the cheapest listing renders near the top.
"""

from __future__ import annotations

from . import ADULTS, LOCALITY, ROOMS, quoted_locality

SOURCE_ID = "booking"
NAME = "Booking.com"
SETTLE_DELAY_MS = 4000


def build_search_url(
    checkin: str,
    checkout: str,
    locality: str = LOCALITY,
    adults: int = ADULTS,
    rooms: int = ROOMS,
) -> str:
    """
    Build a Booking.com search URL.

    Args:
        checkin: Check-in date YYYY-MM-DD
        checkout: Check-out date YYYY-MM-DD
        locality: Free-text search string
        adults: Number of adults
        rooms: Number of rooms
    """
    return (
        f"https://www.booking.com/searchresults.html"
        f"?ss={quoted_locality(locality)}"
        f"&checkin={checkin}"
        f"&checkout={checkout}"
        f"&group_adults={adults}"
        f"&no_rooms={rooms}"
        f"&order=price"
    )
