"""
Rate Snapshot Schema

Defines the per-site result record and the run snapshot written to rates.json.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime, timedelta, timezone
from typing import Optional


DATE_FORMAT = "%Y-%m-%d"


@dataclass(frozen=True)
class DateWindow:
    """One-night stay window shared by every target in a run."""

    checkin: str = ""   # ISO format: YYYY-MM-DD
    checkout: str = ""  # ISO format: YYYY-MM-DD

    @classmethod
    def starting(cls, day: date) -> DateWindow:
        """Window from `day` to the next calendar day."""
        return cls(
            checkin=day.strftime(DATE_FORMAT),
            checkout=(day + timedelta(days=1)).strftime(DATE_FORMAT),
        )


@dataclass
class SiteResult:
    """Outcome of scraping one site."""

    site: str = ""
    name: str = ""
    url: str = ""
    price: Optional[int] = None
    error: Optional[str] = None

    def to_dict(self) -> dict:
        d = {
            "site": self.site,
            "name": self.name,
            "url": self.url,
            "price": self.price,
        }
        # Successful rows carry no error key at all
        if self.error is not None:
            d["error"] = self.error
        return d


@dataclass
class RunSnapshot:
    """
    Aggregate output of one run.

    Serialized wholesale on every run; nothing from a previous snapshot
    is merged in.
    """

    updated_at: str = ""
    checkin: str = ""
    checkout: str = ""
    results: list[SiteResult] = field(default_factory=list)

    @property
    def priced(self) -> list[SiteResult]:
        """Results that produced a price."""
        return [r for r in self.results if r.price is not None]

    @property
    def cheapest(self) -> Optional[SiteResult]:
        priced = self.priced
        if not priced:
            return None
        return min(priced, key=lambda r: r.price)

    def to_dict(self) -> dict:
        """Serialize with the camelCase keys consumers of rates.json expect."""
        return {
            "updatedAt": self.updated_at,
            "checkin": self.checkin,
            "checkout": self.checkout,
            "results": [r.to_dict() for r in self.results],
        }


def utc_timestamp(moment: Optional[datetime] = None) -> str:
    """ISO-8601 UTC timestamp with millisecond precision and a Z suffix."""
    moment = moment or datetime.now(timezone.utc)
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    moment = moment.astimezone(timezone.utc)
    return moment.isoformat(timespec="milliseconds").replace("+00:00", "Z")
