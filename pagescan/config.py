"""Centralised settings for PageScan.

All runtime configuration is resolved here in one place.  Values can be
overridden via environment variables or a `.env` file in the project root
(loaded automatically when this module is imported).
"""

from __future__ import annotations

import os
from dataclasses import asdict, dataclass, field, fields
from pathlib import Path
from typing import Any

from dotenv import load_dotenv

from pagescan.errors import ConfigMissing

# Load .env from the project root (one level up from this file)
_env_path = Path(__file__).resolve().parent.parent / ".env"
load_dotenv(_env_path, override=False)

_DEFAULT_BATCH_URLS = (
    "https://www.python.org,"
    "https://www.wikipedia.org,"
    "https://news.ycombinator.com"
)


def _split_urls(raw: str) -> list[str]:
    return [u.strip() for u in raw.split(",") if u.strip()]


@dataclass
class Settings:
    # ------------------------------------------------------------------
    # Single-page scrape
    # ------------------------------------------------------------------
    target_url: str = field(
        default_factory=lambda: os.environ.get("PAGESCAN_TARGET_URL", "https://example.com")
    )
    output_file: str = field(
        default_factory=lambda: os.environ.get("PAGESCAN_OUTPUT_FILE", "scraped_data.txt")
    )

    # ------------------------------------------------------------------
    # HTTP
    # ------------------------------------------------------------------
    user_agent: str = field(
        default_factory=lambda: os.environ.get(
            "PAGESCAN_USER_AGENT", "Mozilla/5.0 (compatible; PageScan/1.0)"
        )
    )
    request_timeout: float = field(
        default_factory=lambda: float(os.environ.get("PAGESCAN_REQUEST_TIMEOUT", "30.0"))
    )

    # ------------------------------------------------------------------
    # Batch
    # ------------------------------------------------------------------
    batch_urls: list[str] = field(
        default_factory=lambda: _split_urls(
            os.environ.get("PAGESCAN_BATCH_URLS", _DEFAULT_BATCH_URLS)
        )
    )
    max_workers: int = field(
        default_factory=lambda: int(os.environ.get("PAGESCAN_MAX_WORKERS", "3"))
    )

    # ------------------------------------------------------------------
    # Logging
    # ------------------------------------------------------------------
    log_level: str = field(
        default_factory=lambda: os.environ.get("PAGESCAN_LOG_LEVEL", "INFO")
    )

    def get(self, key: str) -> Any:
        """Return the setting named *key*.

        ``"user-agent"`` and ``"user_agent"`` name the same setting.  There
        is no fallback: an unknown key, or a key whose value is empty, raises
        :class:`~pagescan.errors.ConfigMissing`.
        """
        name = key.strip().lstrip("'").replace("-", "_")
        if name not in {f.name for f in fields(self)}:
            raise ConfigMissing(key)
        value = getattr(self, name)
        if value is None or value == "" or value == []:
            raise ConfigMissing(key)
        return value

    def as_dict(self) -> dict[str, Any]:
        """Return every setting as a plain dict."""
        return asdict(self)

    @property
    def output_path(self) -> Path:
        """The configured output file as a :class:`Path`."""
        return Path(self.output_file)


# Module-level singleton — import this everywhere:
#   from pagescan.config import settings
settings = Settings()
