"""
Browser Helpers

Playwright helpers shared by every site: browser setup, single-shot
navigation, settle delay and rendered-text collection. Each helper takes
the page explicitly so tests can hand in a fake page object.
"""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

from .errors import ExtractionError, NavigationError
from .pricing import extract_lowest_price, is_price_fragment


DEFAULT_VIEWPORT = {"width": 1280, "height": 1600}
NAVIGATION_TIMEOUT_MS = 60000
# Only wait for the initial document parse, not the full load
WAIT_UNTIL = "domcontentloaded"

USER_AGENT = (
    "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) "
    "AppleWebKit/537.36 (KHTML, like Gecko) "
    "Chrome/120.0.0.0 Safari/537.36"
)

_ALL_TEXT_SCRIPT = "els => els.map(e => e.textContent)"


# ---------------------------------------------------------------------------
# Browser lifecycle
# ---------------------------------------------------------------------------

async def create_browser(playwright, headless: bool = True, viewport: dict | None = None):
    """Create a browser + context with standard settings."""
    browser = await playwright.chromium.launch(headless=headless)
    context = await browser.new_context(
        viewport=viewport or DEFAULT_VIEWPORT,
        user_agent=USER_AGENT,
    )
    page = await context.new_page()
    return browser, context, page


@asynccontextmanager
async def open_page(headless: bool = True, viewport: dict | None = None) -> AsyncIterator:
    """
    Yield one page that is reused for every target in a run.

    The browser is closed on every exit path, including when a target or
    the snapshot write raises.
    """
    from playwright.async_api import async_playwright

    async with async_playwright() as p:
        browser, _context, page = await create_browser(p, headless=headless, viewport=viewport)
        try:
            yield page
        finally:
            await browser.close()


# ---------------------------------------------------------------------------
# Page helpers
# ---------------------------------------------------------------------------

async def navigate(
    page,
    url: str,
    timeout: int = NAVIGATION_TIMEOUT_MS,
    wait_until: str = WAIT_UNTIL,
) -> None:
    """
    Load a URL once.

    No retries: a timeout or network failure raises NavigationError. The
    next goto on the same page replaces whatever half-loaded document a
    failure leaves behind.
    """
    try:
        await page.goto(url, wait_until=wait_until, timeout=timeout)
    except Exception as e:
        raise NavigationError(url, str(e)) from e


async def settle(page, delay_ms: int) -> None:
    """Fixed wait for client-side rendering to finish."""
    if delay_ms > 0:
        await page.wait_for_timeout(delay_ms)


async def collect_all_text(page) -> list[Optional[str]]:
    """Text content of every element in the rendered document."""
    try:
        texts = await page.eval_on_selector_all("*", _ALL_TEXT_SCRIPT)
    except Exception as e:
        raise ExtractionError(f"Could not read page text: {e}") from e
    return list(texts or [])


# ---------------------------------------------------------------------------
# Shared extraction strategy
# ---------------------------------------------------------------------------

async def pick_visible_price(page, settle_delay_ms: int) -> Optional[int]:
    """
    Lowest rupee-like number on the rendered page.

    Waits `settle_delay_ms`, reads every element's text, keeps fragments
    with a currency marker or a digit and hands them to the price scan.
    """
    await settle(page, settle_delay_ms)
    texts = await collect_all_text(page)
    fragments = [t for t in texts if is_price_fragment(t)]
    try:
        return extract_lowest_price(fragments)
    except Exception as e:
        raise ExtractionError(f"Price scan failed: {e}") from e
