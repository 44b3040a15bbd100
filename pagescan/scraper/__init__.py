"""Scraper package — fetch, parse, extract and report page titles and links."""

from pagescan.scraper.analyzer import analyze_page
from pagescan.scraper.batch import run_batch
from pagescan.scraper.extractor import extract_links, extract_page, extract_titles
from pagescan.scraper.fetcher import fetch_url
from pagescan.scraper.models import (
    BatchResult,
    Failed,
    PageData,
    PageOutcome,
    ParsedNode,
    ParsedTree,
    RawPage,
    Stage,
    Success,
)
from pagescan.scraper.parser import parse_html
from pagescan.scraper.reporter import display, load, save

__all__ = [
    "analyze_page",
    "run_batch",
    "fetch_url",
    "parse_html",
    "extract_titles",
    "extract_links",
    "extract_page",
    "display",
    "save",
    "load",
    "RawPage",
    "ParsedNode",
    "ParsedTree",
    "PageData",
    "PageOutcome",
    "BatchResult",
    "Stage",
    "Success",
    "Failed",
]
