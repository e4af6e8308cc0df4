"""
Site Modules

One module per booking site: a pure search URL builder plus the site's
default settle delay.
"""

from urllib.parse import quote

LOCALITY = "Kondapur, Hyderabad"
ADULTS = 2
ROOMS = 1


def quoted_locality(locality: str = LOCALITY) -> str:
    """Percent-encode a locality for a query string ("," -> %2C, " " -> %20)."""
    return quote(locality, safe="")
