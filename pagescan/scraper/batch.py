"""Batch runner: the page pipeline over many URLs on a bounded thread pool."""

from __future__ import annotations

import logging
import threading
from concurrent.futures import ThreadPoolExecutor, as_completed
from pathlib import Path
from typing import Callable, Sequence

import typer

from pagescan.config import settings
from pagescan.log import get_logger
from pagescan.scraper.analyzer import analyze_page
from pagescan.scraper.fetcher import build_client
from pagescan.scraper.models import BatchResult, Failed, PageOutcome, Stage
from pagescan.utils import output_path_for


def run_batch(
    urls: Sequence[str],
    *,
    max_workers: int | None = None,
    output_path: Path | str | None = None,
    user_agent: str | None = None,
    echo: Callable[[str], None] | None = None,
    logger: logging.Logger | None = None,
) -> BatchResult:
    """Scrape every URL in *urls* concurrently and wait for all of them.

    At most *max_workers* (default ``settings.max_workers``) pages are in
    flight at once.  Each URL is saved to its own file derived from
    *output_path* (see :func:`~pagescan.utils.output_path_for`).  A failing
    URL is recorded in the result and never stops the others.
    """
    log = get_logger(__name__, logger)
    base = Path(output_path) if output_path is not None else settings.output_path
    workers = max(1, max_workers or settings.max_workers)
    outer_echo = echo or typer.echo

    # Report blocks from different threads must not interleave.
    echo_lock = threading.Lock()

    def locked_echo(message: str) -> None:
        with echo_lock:
            outer_echo(message)

    if not urls:
        log.info("Batch: no URLs to scrape")
        return BatchResult()

    # A URL listed twice is scraped once; each output file has a single writer.
    unique = list(dict.fromkeys(urls))
    if len(unique) < len(urls):
        log.info("Batch: %d duplicate URL(s) skipped", len(urls) - len(unique))

    log.info("Batch: %d URL(s), %d worker(s)", len(unique), workers)
    results: dict[str, PageOutcome] = {}

    with build_client(user_agent) as client, ThreadPoolExecutor(max_workers=workers) as pool:
        future_to_url = {
            pool.submit(
                analyze_page,
                url,
                output_path=output_path_for(url, base),
                user_agent=user_agent,
                client=client,
                echo=locked_echo,
                logger=logger,
            ): url
            for url in unique
        }
        for future in as_completed(future_to_url):
            url = future_to_url[future]
            try:
                results[url] = future.result()
            except Exception as exc:
                log.exception("Batch: unexpected error for %s", url)
                results[url] = PageOutcome(
                    url=url,
                    outcome=Failed(stage=Stage.INTERNAL, reason=f"{type(exc).__name__}: {exc}"),
                )
            status = "✓" if results[url].ok else "✗"
            log.debug("Batch: %s %s", status, url)

    batch = BatchResult(outcomes=[results[url] for url in urls])
    log.info("Batch: %d succeeded, %d failed", len(batch.succeeded), len(batch.failed))
    return batch
