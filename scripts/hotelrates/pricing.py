"""
Rupee Price Extraction

Pure functions that scan rendered page text for the lowest plausible
nightly rate. This is a heuristic lower-bound scan, not a price-field
parser: review counts, years and similar 3-6 digit numbers are picked up
too, and the smallest of them wins.
"""

from __future__ import annotations

import re
from itertools import islice
from typing import Iterable, Optional


# Only the first N fragments of a page are scanned
MAX_FRAGMENTS = 2000

CURRENCY_MARKERS = ("₹", "INR")

_FRAGMENT_FILTER = re.compile(r"₹|INR|\d")

# Grouping commas only: "2,499" and Indian "1,23,456", not "3,4,5"
_DIGIT_SEPARATOR = re.compile(r"(?<=\d),(?=\d{2,3}(?!\d))")
_SEPARATOR_RUN = re.compile(r"[, ]+")

# 3-6 digit run that does not touch more digits, with an optional
# currency prefix and an optional paise fraction.
_PRICE_PATTERN = re.compile(
    r"(?:₹|INR|Rs\.?)?\s*(?<!\d)(?<!\d\.)(\d{3,6})(?!\d)(?:\.\d{1,2})?"
)


def is_price_fragment(text: Optional[str]) -> bool:
    """True if the text carries a currency marker or at least one digit."""
    if not text:
        return False
    return bool(_FRAGMENT_FILTER.search(text))


def normalize_fragment(text: str) -> str:
    """Drop digit-group commas, then collapse comma/space runs to one space."""
    text = _DIGIT_SEPARATOR.sub("", text)
    return _SEPARATOR_RUN.sub(" ", text)


def find_price_candidates(text: str) -> list[int]:
    """Integer parts of every plausible price in one text fragment."""
    normalized = normalize_fragment(text)
    return [int(m.group(1)) for m in _PRICE_PATTERN.finditer(normalized)]


def extract_lowest_price(
    fragments: Iterable[Optional[str]],
    limit: int = MAX_FRAGMENTS,
) -> Optional[int]:
    """
    Lowest plausible price across text fragments.

    Only the first `limit` fragments are considered. Returns None when no
    fragment holds a 3-6 digit number.
    """
    best: Optional[int] = None
    for text in islice(fragments, limit):
        if text is None:
            continue
        for value in find_price_candidates(str(text)):
            if value > 0 and (best is None or value < best):
                best = value
    return best
