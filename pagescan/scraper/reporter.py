"""Console and file output for extracted page data.

File layout::

    Titoli:
    <one title per line>

    Link:
    <one link per line>

Entries are escaped so each fits on one line: ``\\`` becomes ``\\\\``,
newlines and carriage returns become ``\\n`` and ``\\r``, and an entry equal
to ``Link:`` is written as ``\\Link:``.  The only bare ``Link:`` line after
the first is therefore the section header.
"""

from __future__ import annotations

import re
from pathlib import Path
from typing import Callable, Sequence

import typer

from pagescan.errors import SaveError
from pagescan.scraper.models import PageData

TITLES_HEADER = "Titoli:"
LINKS_HEADER = "Link:"

_ESCAPED = re.compile(r"\\(.)")
_UNESCAPE = {"n": "\n", "r": "\r"}


def _escape(entry: str) -> str:
    entry = entry.replace("\\", "\\\\").replace("\n", "\\n").replace("\r", "\\r")
    return "\\" + entry if entry == LINKS_HEADER else entry


def _unescape(line: str) -> str:
    return _ESCAPED.sub(lambda m: _UNESCAPE.get(m.group(1), m.group(1)), line)


def format_report(titles: Sequence[str], links: Sequence[str]) -> str:
    """Render *titles* and *links* in the report layout."""
    lines = [
        TITLES_HEADER,
        *(_escape(t) for t in titles),
        "",
        LINKS_HEADER,
        *(_escape(link) for link in links),
    ]
    return "\n".join(lines) + "\n"


def display(
    titles: Sequence[str],
    links: Sequence[str],
    *,
    echo: Callable[[str], None] = typer.echo,
) -> None:
    """Print the report to stdout (or through *echo*)."""
    echo(format_report(titles, links).rstrip("\n"))


def save(path: Path | str, titles: Sequence[str], links: Sequence[str]) -> Path:
    """Write the report to *path*, replacing any previous content.

    Raises:
        SaveError: If the file (or its parent directory) cannot be written.
    """
    path = Path(path)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(format_report(titles, links), encoding="utf-8")
    except OSError as exc:
        raise SaveError(path, exc) from exc
    return path


def load(path: Path | str) -> PageData:
    """Read a report written by :func:`save` back into a :class:`PageData`.

    Raises:
        ValueError: If the file is not in the report layout.
    """
    lines = Path(path).read_text(encoding="utf-8").split("\n")
    if not lines or lines[0] != TITLES_HEADER:
        raise ValueError(f"{path}: missing {TITLES_HEADER!r} header")
    if lines[-1] == "":
        lines = lines[:-1]

    for i in range(1, len(lines) - 1):
        if lines[i] == "" and lines[i + 1] == LINKS_HEADER:
            return PageData(
                titles=[_unescape(t) for t in lines[1:i]],
                links=[_unescape(link) for link in lines[i + 2:]],
            )
    raise ValueError(f"{path}: missing {LINKS_HEADER!r} section")
