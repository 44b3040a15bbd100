"""HTML parser adapter: BeautifulSoup soup -> :class:`ParsedTree`."""

from __future__ import annotations

import logging

from bs4 import BeautifulSoup
from bs4.element import NavigableString, PreformattedString, Tag

from pagescan.log import get_logger
from pagescan.scraper.models import ParsedNode, ParsedTree


def _convert(tag: Tag) -> ParsedNode:
    """Convert *tag* and its subtree iteratively."""
    root = ParsedNode(tag=tag.name.lower(), attrs=_attrs(tag))
    stack = [(tag, root)]
    while stack:
        source, target = stack.pop()
        for child in source.children:
            if isinstance(child, Tag):
                node = ParsedNode(tag=child.name.lower(), attrs=_attrs(child))
                target.children.append(node)
                stack.append((child, node))
            elif isinstance(child, NavigableString) and not isinstance(child, PreformattedString):
                target.children.append(ParsedNode(text=str(child)))
    return root


def _attrs(tag: Tag) -> dict[str, str]:
    # bs4 returns multi-valued attributes (class, rel, ...) as lists.
    return {
        key.lower(): " ".join(value) if isinstance(value, list) else str(value)
        for key, value in tag.attrs.items()
    }


def parse_html(
    html: str,
    *,
    url: str = "",
    logger: logging.Logger | None = None,
) -> ParsedTree:
    """Parse *html* into a :class:`ParsedTree`.

    Never raises.  If the document cannot be parsed the error is logged and
    an empty tree with ``error`` set is returned.
    """
    log = get_logger(__name__, logger)
    if not html or not html.strip():
        log.debug("Empty document for %s", url or "<document>")
        return ParsedTree()

    try:
        soup = BeautifulSoup(html, "html.parser")
        nodes = []
        for child in soup.contents:
            if isinstance(child, Tag):
                nodes.append(_convert(child))
            elif isinstance(child, NavigableString) and not isinstance(child, PreformattedString):
                nodes.append(ParsedNode(text=str(child)))
    except Exception as exc:  # noqa: BLE001
        log.error("Parse failed for %s: %s", url or "<document>", exc)
        return ParsedTree(error=f"{type(exc).__name__}: {exc}")

    log.debug("Parsed %d top-level node(s) for %s", len(nodes), url or "<document>")
    return ParsedTree(nodes=nodes)
