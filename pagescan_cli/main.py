"""PageScan CLI — entry-point for scraping runs.

Usage:
    pagescan --help
    python pagescan_cli/main.py --help

Commands:
    scrape  → one URL through the full pipeline
    batch   → many URLs on a bounded worker pool
    run     → log the configuration, scrape the target URL, then the batch URLs
    config  → show settings
"""

from __future__ import annotations

import sys
from pathlib import Path

# Ensure the project root is on sys.path so that `from pagescan.xxx import ...`
# works when the CLI is invoked as `python pagescan_cli/main.py`.
_ROOT = Path(__file__).resolve().parent.parent
if str(_ROOT) not in sys.path:
    sys.path.insert(0, str(_ROOT))

import logging
from dataclasses import replace
from typing import List, Optional

import typer

from pagescan.config import Settings, settings
from pagescan.errors import ConfigMissing
from pagescan.log import configure_logging
from pagescan.scraper import analyze_page, run_batch
from pagescan.scraper.models import BatchResult
from pagescan.utils import format_timestamp

logger = logging.getLogger("pagescan.cli")

app = typer.Typer(
    name="pagescan",
    help="Fetch pages and extract their headings and links.",
    no_args_is_help=True,
)


@app.callback()
def main(
    log_level: Optional[str] = typer.Option(
        None, "--log-level", help="DEBUG | INFO | WARNING | ERROR (default from settings)."
    ),
) -> None:
    """Configure logging before any command runs."""
    configure_logging(log_level or settings.log_level)


def _effective_settings(
    output: Optional[Path] = None,
    user_agent: Optional[str] = None,
    workers: Optional[int] = None,
) -> Settings:
    """Return ``settings`` with any command-line overrides applied."""
    overrides = {}
    if output is not None:
        overrides["output_file"] = str(output)
    if user_agent is not None:
        overrides["user_agent"] = user_agent
    if workers is not None:
        overrides["max_workers"] = workers
    return replace(settings, **overrides)


def _report_batch(batch: BatchResult) -> None:
    for outcome in batch.outcomes:
        if outcome.ok:
            typer.echo(f"  ✓ {outcome.url} → {outcome.output_path}")
        else:
            failure = outcome.failure
            typer.echo(f"  ✗ {outcome.url} ({failure.stage.value}): {failure.reason}")
    typer.echo(
        f"[batch] {len(batch.succeeded)} succeeded, {len(batch.failed)} failed "
        f"({format_timestamp()})"
    )


def _require(cfg: Settings, key: str):
    try:
        return cfg.get(key)
    except ConfigMissing as exc:
        typer.echo(f"[config] {exc}")
        raise typer.Exit(2)


# ---------------------------------------------------------------------------
# Commands
# ---------------------------------------------------------------------------
@app.command("scrape")
def scrape(
    url: Optional[str] = typer.Option(None, help="URL to scrape (default: target_url)."),
    output: Optional[Path] = typer.Option(None, "--output", "-o", help="Output file."),
    user_agent: Optional[str] = typer.Option(None, "--user-agent", help="User-Agent header."),
) -> None:
    """Scrape one URL, print its titles and links and save them to a file."""
    cfg = _effective_settings(output=output, user_agent=user_agent)
    target = url or _require(cfg, "target_url")

    typer.echo(f"[scrape] {target} ({format_timestamp()})")
    outcome = analyze_page(
        target,
        output_path=_require(cfg, "output_file"),
        user_agent=_require(cfg, "user_agent"),
    )
    if not outcome.ok:
        raise typer.Exit(1)
    typer.echo(f"[scrape] Saved to {outcome.output_path}")


@app.command("batch")
def batch(
    urls: Optional[List[str]] = typer.Argument(None, help="URLs (default: batch_urls)."),
    output: Optional[Path] = typer.Option(
        None, "--output", "-o", help="Base output file; one file per URL is derived from it."
    ),
    workers: Optional[int] = typer.Option(None, "--workers", "-w", min=1, help="Worker pool size."),
    user_agent: Optional[str] = typer.Option(None, "--user-agent", help="User-Agent header."),
) -> None:
    """Scrape several URLs concurrently; exit 1 if any of them failed."""
    cfg = _effective_settings(output=output, user_agent=user_agent, workers=workers)
    targets = list(urls) if urls else _require(cfg, "batch_urls")

    typer.echo(f"[batch] {len(targets)} URL(s), {cfg.max_workers} worker(s) ({format_timestamp()})")
    result = run_batch(
        targets,
        max_workers=cfg.max_workers,
        output_path=_require(cfg, "output_file"),
        user_agent=_require(cfg, "user_agent"),
    )
    _report_batch(result)
    raise typer.Exit(result.exit_code)


@app.command("run")
def run() -> None:
    """Log the configuration, scrape ``target_url``, then batch-scrape ``batch_urls``."""
    logger.info("Applied configuration: %s", settings.as_dict())

    target = _require(settings, "target_url")
    output = _require(settings, "output_file")
    user_agent = _require(settings, "user_agent")

    typer.echo(f"[run] Sample scrape: {target}")
    single = analyze_page(target, output_path=output, user_agent=user_agent)

    urls = _require(settings, "batch_urls")
    typer.echo(f"[run] Batch scrape: {len(urls)} URL(s)")
    result = run_batch(
        urls, max_workers=settings.max_workers, output_path=output, user_agent=user_agent
    )
    _report_batch(result)

    raise typer.Exit(1 if (not single.ok or result.exit_code) else 0)


@app.command("config")
def config(
    key: Optional[str] = typer.Argument(None, help="Show only this setting."),
) -> None:
    """Print the current settings (or a single one)."""
    if key is not None:
        typer.echo(f"{key} = {_require(settings, key)}")
        return
    for name, value in settings.as_dict().items():
        typer.echo(f"  {name:<16} {value}")


# ---------------------------------------------------------------------------
# Entry-point
# ---------------------------------------------------------------------------
if __name__ == "__main__":
    app()
