"""Exception hierarchy for PageScan.

Each pipeline stage raises one of these.  The page analyzer turns them into
a per-URL :class:`~pagescan.scraper.models.Failed` outcome, so none of them
ever stops a batch.
"""

from __future__ import annotations

from pathlib import Path


class PageScanError(Exception):
    """Base class for all PageScan errors."""


class ConfigMissing(PageScanError, KeyError):
    """A configuration key was requested that is not set."""

    def __init__(self, key: str) -> None:
        self.key = key
        super().__init__(key)

    def __str__(self) -> str:
        return f"configuration key not found: {self.key!r}"


class FetchError(PageScanError):
    """The HTTP GET for *url* failed (transport error or 4xx/5xx)."""

    def __init__(self, url: str, cause: BaseException | None = None) -> None:
        self.url = url
        self.cause = cause
        super().__init__(f"failed to fetch {url}: {cause}")


class ParseError(PageScanError):
    """The HTML for *url* could not be turned into a tree."""

    def __init__(self, url: str, cause: BaseException | str | None = None) -> None:
        self.url = url
        self.cause = cause
        super().__init__(f"failed to parse {url or '<document>'}: {cause}")


class SaveError(PageScanError, OSError):
    """The report for a page could not be written to *path*."""

    def __init__(self, path: Path | str, cause: BaseException | None = None) -> None:
        self.path = Path(path)
        self.cause = cause
        super().__init__(f"failed to write {self.path}: {cause}")

    def __str__(self) -> str:
        return f"failed to write {self.path}: {self.cause}"
