"""Small helpers shared by the scraper and the CLI."""

from __future__ import annotations

import hashlib
import re
from datetime import datetime
from pathlib import Path
from urllib.parse import urlparse

_UNSAFE = re.compile(r"[^A-Za-z0-9.]+")


def format_timestamp(dt: datetime | None = None) -> str:
    """Format *dt* (default: now) as ``YYYY-MM-DD HH:MM:SS``."""
    return (dt or datetime.now()).strftime("%Y-%m-%d %H:%M:%S")


def output_path_for(url: str, base: Path | str) -> Path:
    """Derive a per-URL output file from *base*.

    ``scraped_data.txt`` + ``https://www.python.org/about`` becomes
    ``scraped_data-www.python.org-<sha1[:8]>.txt`` in the same directory.
    The hash covers the full URL so two pages on one host never collide.
    """
    base = Path(base)
    host = urlparse(url).netloc or "page"
    host = _UNSAFE.sub("_", host).strip("_") or "page"
    digest = hashlib.sha1(url.encode("utf-8")).hexdigest()[:8]
    return base.with_name(f"{base.stem}-{host}-{digest}{base.suffix}")
