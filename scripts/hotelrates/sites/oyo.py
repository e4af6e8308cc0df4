"""
OYO (oyorooms.com)
"""

from __future__ import annotations

from . import ADULTS, LOCALITY, ROOMS, quoted_locality

SOURCE_ID = "oyo"
NAME = "OYO"
SETTLE_DELAY_MS = 5000


def build_search_url(
    checkin: str,
    checkout: str,
    locality: str = LOCALITY,
    adults: int = ADULTS,
    rooms: int = ROOMS,
) -> str:
    return (
        f"https://www.oyorooms.com/search"
        f"?location={quoted_locality(locality)}"
        f"&checkin={checkin}"
        f"&checkout={checkout}"
        f"&guests={adults}"
        f"&rooms={rooms}"
    )
