"""HTTP fetcher: one GET per call, configured User-Agent."""

from __future__ import annotations

import logging

import httpx

from pagescan.config import settings
from pagescan.errors import FetchError
from pagescan.log import get_logger
from pagescan.scraper.models import RawPage


def build_client(
    user_agent: str | None = None,
    timeout: float | None = None,
) -> httpx.Client:
    """Return an ``httpx.Client`` carrying the configured User-Agent."""
    return httpx.Client(
        headers={"User-Agent": user_agent or settings.get("user_agent")},
        timeout=timeout if timeout is not None else settings.request_timeout,
        follow_redirects=True,
    )


def fetch_url(
    url: str,
    *,
    user_agent: str | None = None,
    timeout: float | None = None,
    client: httpx.Client | None = None,
    logger: logging.Logger | None = None,
) -> RawPage:
    """Fetch *url* and return a :class:`RawPage`.

    When *client* is given it is reused (the batch runner shares one);
    otherwise a short-lived client is created for this request.  An explicit
    *timeout* applies either way; without one a shared client keeps its own.

    Raises:
        FetchError: On any transport error or a 4xx/5xx status code.
    """
    log = get_logger(__name__, logger)
    headers = {"User-Agent": user_agent} if user_agent else None

    log.info("Fetching %s", url)
    try:
        if client is not None:
            if timeout is not None:
                response = client.get(url, headers=headers, timeout=timeout)
            else:
                response = client.get(url, headers=headers)
        else:
            with build_client(user_agent, timeout) as own_client:
                response = own_client.get(url)
        response.raise_for_status()
    except httpx.HTTPError as exc:
        log.error("Fetch failed for %s: %s", url, exc)
        raise FetchError(url, exc) from exc

    log.debug("HTTP %d from %s (%d chars)", response.status_code, url, len(response.text))
    return RawPage(url=url, html=response.text, status_code=response.status_code)
