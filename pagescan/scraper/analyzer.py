"""Single-page pipeline: fetch -> parse -> extract -> report.

:func:`analyze_page` never raises for a :class:`~pagescan.errors.PageScanError`;
every stage failure becomes a :class:`Failed` outcome carrying the stage it
happened in.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable

import httpx
import typer

from pagescan.config import settings
from pagescan.errors import PageScanError, ParseError
from pagescan.log import get_logger
from pagescan.scraper.extractor import extract_page
from pagescan.scraper.fetcher import fetch_url
from pagescan.scraper.models import Failed, PageOutcome, Stage, Success
from pagescan.scraper.parser import parse_html
from pagescan.scraper.reporter import display, save


def analyze_page(
    url: str,
    *,
    output_path: Path | str | None = None,
    user_agent: str | None = None,
    client: httpx.Client | None = None,
    echo: Callable[[str], None] | None = None,
    logger: logging.Logger | None = None,
) -> PageOutcome:
    """Run the full pipeline for *url* and return its :class:`PageOutcome`.

    The report is printed through *echo* (default ``typer.echo``) and saved to
    *output_path* (default ``settings.output_file``).
    """
    log = get_logger(__name__, logger)
    echo = echo or typer.echo
    target = Path(output_path) if output_path is not None else settings.output_path
    stage = Stage.FETCHING

    def fail(exc: Exception) -> PageOutcome:
        log.error("[%s] %s failed: %s", url, stage.value, exc)
        echo(f"[scrape] ✗ {url} ({stage.value}): {exc}")
        return PageOutcome(url=url, outcome=Failed(stage=stage, reason=str(exc)), output_path=None)

    try:
        raw = fetch_url(url, user_agent=user_agent, client=client, logger=logger)

        stage = Stage.PARSING
        log.info("[%s] parsing %d chars", url, len(raw.html))
        tree = parse_html(raw.html, url=url, logger=logger)
        if tree.failed:
            raise ParseError(url, tree.error)

        stage = Stage.EXTRACTING
        data = extract_page(tree)
        log.info("[%s] %d title(s), %d link(s)", url, len(data.titles), len(data.links))

        stage = Stage.REPORTING
        display(data.titles, data.links, echo=echo)
        saved = save(target, data.titles, data.links)
        log.info("[%s] saved to %s", url, saved)
    except PageScanError as exc:
        return fail(exc)

    log.debug("[%s] %s", url, Stage.DONE.value)
    return PageOutcome(url=url, outcome=Success(data), output_path=saved)
