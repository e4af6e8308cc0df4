"""
Shared fixtures for rate scraper tests.

FakePage stands in for a Playwright page: it serves canned element texts
per host and can be told to fail navigation for a host.
"""

import os
import sys
from contextlib import asynccontextmanager
from urllib.parse import urlparse

import pytest

# Add scripts/ to path so we can import the hotelrates package
_scripts_dir = os.path.join(os.path.dirname(__file__), "..", "..", "scripts")
if _scripts_dir not in sys.path:
    sys.path.insert(0, _scripts_dir)


class FakePage:
    """Minimal async page: goto, wait_for_timeout, eval_on_selector_all."""

    def __init__(self, pages=None):
        # host -> list of element texts, or an exception to raise on goto
        self.pages = pages or {}
        self.visited = []
        self.goto_kwargs = []
        self.waits = []
        self._texts = []

    async def goto(self, url, wait_until=None, timeout=None):
        self.visited.append(url)
        self.goto_kwargs.append({"wait_until": wait_until, "timeout": timeout})
        content = self.pages.get(urlparse(url).hostname, [])
        if isinstance(content, Exception):
            self._texts = []
            raise content
        self._texts = list(content)

    async def wait_for_timeout(self, ms):
        self.waits.append(ms)

    async def eval_on_selector_all(self, selector, expression):
        return list(self._texts)


@pytest.fixture
def fake_page():
    return FakePage


@pytest.fixture
def page_factory():
    """Build an open_page-compatible factory around a FakePage."""

    def _make(page):
        state = {"opened": 0, "closed": 0, "headless": None}

        @asynccontextmanager
        async def factory(headless=True):
            state["opened"] += 1
            state["headless"] = headless
            try:
                yield page
            finally:
                state["closed"] += 1

        factory.state = state
        return factory

    return _make
