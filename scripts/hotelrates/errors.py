"""
Scrape Errors

NavigationError and ExtractionError are recorded per site and never stop a
run. SerializationError means the snapshot could not be written and is
allowed to propagate.
"""


class RateScrapeError(Exception):
    """Base class for rate scraper failures."""


class NavigationError(RateScrapeError):
    """Timeout or network failure while loading a target URL."""

    def __init__(self, url: str, message: str):
        super().__init__(message)
        self.url = url


class ExtractionError(RateScrapeError):
    """Reading text from the rendered page or scanning it failed."""


class SerializationError(RateScrapeError):
    """The run snapshot could not be written."""

    def __init__(self, path, message: str):
        super().__init__(f"Could not write snapshot to {path}: {message}")
        self.path = path
