"""
Rate Run

Visits every target once, in order, on a single shared page and writes
the aggregate snapshot. One site failing never stops the others.
"""

from __future__ import annotations

import json
import os
import tempfile
from datetime import date, datetime, timezone
from pathlib import Path
from typing import Optional, Sequence

from .base import navigate, open_page
from .errors import SerializationError
from .registry import SiteDescriptor, get_targets
from .schema import DateWindow, RunSnapshot, SiteResult, utc_timestamp


MAX_ERROR_LENGTH = 200
SNAPSHOT_MODE = 0o644


def date_window(today: Optional[date] = None) -> DateWindow:
    """Today -> tomorrow, computed once per run (UTC calendar date)."""
    if today is None:
        today = datetime.now(timezone.utc).date()
    return DateWindow.starting(today)


def short_error(exc: BaseException) -> str:
    """First line of an exception message, trimmed for the snapshot."""
    message = str(exc).strip() or type(exc).__name__
    first_line = message.splitlines()[0]
    return first_line[:MAX_ERROR_LENGTH]


def format_progress(result: SiteResult) -> str:
    if result.error is not None:
        return f"[ERR] {result.name}: {result.error}"
    price = result.price if result.price is not None else "null"
    return f"[OK] {result.name}: {price}"


async def scrape_target(page, target: SiteDescriptor, window: DateWindow) -> SiteResult:
    """Navigate to one target and read its lowest price. Never raises."""
    url = target.url(window)
    result = SiteResult(site=target.key, name=target.name, url=url)

    try:
        await navigate(page, url)
        result.price = await target.extract(page)
    except Exception as e:
        result.price = None
        result.error = short_error(e)

    print(format_progress(result))
    return result


async def collect_rates(
    page,
    targets: Sequence[SiteDescriptor],
    window: DateWindow,
) -> list[SiteResult]:
    """Scrape targets one after another on the same page."""
    results = []
    for target in targets:
        results.append(await scrape_target(page, target, window))
    return results


def build_snapshot(
    window: DateWindow,
    results: list[SiteResult],
    updated_at: Optional[datetime] = None,
) -> RunSnapshot:
    return RunSnapshot(
        updated_at=utc_timestamp(updated_at),
        checkin=window.checkin,
        checkout=window.checkout,
        results=list(results),
    )


def save_snapshot(snapshot: RunSnapshot, output_path: str | Path) -> Path:
    """
    Write the snapshot as pretty-printed JSON, replacing any previous file.

    The JSON goes to a temp file next to the target and is moved into
    place, so readers never see a half-written snapshot.
    Raises SerializationError if anything goes wrong.
    """
    path = Path(output_path)
    tmp_name = None
    try:
        payload = json.dumps(snapshot.to_dict(), ensure_ascii=False, indent=2) + "\n"
        path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(
            prefix=f".{path.name}.", suffix=".tmp", dir=path.parent
        )
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            f.write(payload)
        # mkstemp creates the file as 0600
        os.chmod(tmp_name, SNAPSHOT_MODE)
        os.replace(tmp_name, path)
    except (OSError, TypeError, ValueError) as e:
        if tmp_name and os.path.exists(tmp_name):
            os.unlink(tmp_name)
        raise SerializationError(path, str(e)) from e
    return path


async def run(
    output_path: str | Path = "rates.json",
    targets: Optional[Sequence[SiteDescriptor]] = None,
    headless: bool = True,
    today: Optional[date] = None,
    page_factory=open_page,
    window: Optional[DateWindow] = None,
) -> RunSnapshot:
    """
    One full batch run: scrape every target, then write the snapshot.

    `page_factory` is an async context manager factory yielding a page;
    it owns the browser and releases it before the snapshot is written.
    """
    if targets is None:
        targets = get_targets()
    if window is None:
        window = date_window(today)

    async with page_factory(headless=headless) as page:
        results = await collect_rates(page, targets, window)

    snapshot = build_snapshot(window, results)
    save_snapshot(snapshot, output_path)
    print(f"Saved {len(results)} results to {output_path}")
    return snapshot
