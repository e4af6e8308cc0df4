"""
MakeMyTrip (makemytrip.com)

Hotel listing for Hyderabad narrowed by search text. Heavy SPA, so it gets
the longest settle delay.
"""

from __future__ import annotations

from . import ADULTS, LOCALITY, ROOMS, quoted_locality

SOURCE_ID = "mmt"
NAME = "MakeMyTrip"
SETTLE_DELAY_MS = 6000

# Known MakeMyTrip city locus IDs
LOCUS_IDS = {
    "hyderabad": "CTHYD",
}


def room_stay_qualifier(adults: int = ADULTS, rooms: int = ROOMS) -> str:
    """
    Occupancy token: rooms, adults, children, then the "e" separators.

    1 room with 2 adults and no children -> "1e2e0e".
    """
    return f"{rooms}e{adults}e0e"


def build_search_url(
    checkin: str,
    checkout: str,
    locality: str = LOCALITY,
    adults: int = ADULTS,
    rooms: int = ROOMS,
    locus_id: str = LOCUS_IDS["hyderabad"],
) -> str:
    """Build a MakeMyTrip hotel listing URL (dates YYYY-MM-DD)."""
    return (
        f"https://www.makemytrip.com/hotels/hotel-listing/"
        f"?checkin={checkin}"
        f"&checkout={checkout}"
        f"&locusId={locus_id}"
        f"&locusType=city"
        f"&searchText={quoted_locality(locality)}"
        f"&roomStayQualifier={room_stay_qualifier(adults, rooms)}"
    )
