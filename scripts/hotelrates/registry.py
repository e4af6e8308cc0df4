"""
Target Registry

Ordered list of booking sites to scrape. Order is the output order of
rates.json; it carries no ranking.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Awaitable, Callable, Iterable, Optional

from .base import pick_visible_price
from .schema import DateWindow
from .sites import booking, goibibo, makemytrip, oyo


UrlBuilder = Callable[[str, str], str]
PriceStrategy = Callable[..., Awaitable[Optional[int]]]


@dataclass(frozen=True)
class SiteDescriptor:
    """A site to scrape: how to build its URL and how to read a price off it."""

    key: str
    name: str
    build_url: UrlBuilder
    settle_delay_ms: int = 5000
    pick_price: PriceStrategy = pick_visible_price

    def url(self, window: DateWindow) -> str:
        return self.build_url(window.checkin, window.checkout)

    async def extract(self, page) -> Optional[int]:
        return await self.pick_price(page, self.settle_delay_ms)


def _descriptor(site_module) -> SiteDescriptor:
    return SiteDescriptor(
        key=site_module.SOURCE_ID,
        name=site_module.NAME,
        build_url=site_module.build_search_url,
        settle_delay_ms=site_module.SETTLE_DELAY_MS,
    )


TARGETS: tuple[SiteDescriptor, ...] = (
    _descriptor(booking),
    _descriptor(makemytrip),
    _descriptor(goibibo),
    _descriptor(oyo),
)


# ---------------------------------------------------------------------------
# Source Config Loader
# ---------------------------------------------------------------------------

DEFAULT_CONFIG_PATH = Path(__file__).parent.parent.parent / "data" / "rate-sources.json"

_source_config_cache: dict | None = None


def load_source_config(path: Path | str | None = None) -> dict:
    """
    Load per-site tunables from rate-sources.json.

    The default file is read once per process. A missing file means no
    overrides.
    """
    global _source_config_cache
    if path is None and _source_config_cache is not None:
        return _source_config_cache

    config_path = Path(path) if path is not None else DEFAULT_CONFIG_PATH
    if config_path.exists():
        with open(config_path, encoding="utf-8") as f:
            config = json.load(f).get("sources", {})
    else:
        config = {}

    if path is None:
        _source_config_cache = config
    return config


def _apply_overrides(target: SiteDescriptor, overrides: dict) -> SiteDescriptor:
    delay = overrides.get("settle_delay_ms")
    if delay is None:
        return target
    return replace(target, settle_delay_ms=int(delay))


# ---------------------------------------------------------------------------
# Lookup
# ---------------------------------------------------------------------------

def get_available_targets() -> list[str]:
    """Return all registered site keys in registry order."""
    return [t.key for t in TARGETS]


def get_target(key: str) -> SiteDescriptor:
    """
    Get the descriptor for a site key.

    Raises ValueError if no site is registered under that key.
    """
    for target in TARGETS:
        if target.key == key:
            return target
    raise ValueError(
        f"No site registered for key '{key}'. "
        f"Available: {', '.join(get_available_targets())}"
    )


def get_targets(
    keys: Optional[Iterable[str]] = None,
    config: Optional[dict] = None,
) -> list[SiteDescriptor]:
    """
    Descriptors to scrape, in registry order.

    `keys` narrows the run to a subset (unknown keys raise ValueError);
    `config` maps site keys to overrides and defaults to rate-sources.json.
    Sites with "enabled": false are skipped.
    """
    wanted = None
    if keys is not None:
        wanted = {get_target(k).key for k in keys}

    if config is None:
        config = load_source_config()

    targets = []
    for target in TARGETS:
        if wanted is not None and target.key not in wanted:
            continue
        overrides = config.get(target.key, {})
        if not overrides.get("enabled", True):
            continue
        targets.append(_apply_overrides(target, overrides))
    return targets
