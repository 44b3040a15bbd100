"""Title and link extraction from a :class:`ParsedTree`."""

from __future__ import annotations

import re
from typing import Iterator, List

from pagescan.scraper.models import PageData, ParsedNode, ParsedTree

TITLE_TAGS = frozenset({"h1", "h2"})
LINK_TAG = "a"

_WHITESPACE = re.compile(r"\s+")


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------

def _clean_text(text: str) -> str:
    """Collapse runs of whitespace (including newlines) to single spaces."""
    return _WHITESPACE.sub(" ", text).strip()


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def flatten(tree: ParsedTree) -> Iterator[ParsedNode]:
    """Yield every element of *tree* in document (pre-order) order."""
    stack = list(reversed(tree.nodes))
    while stack:
        node = stack.pop()
        if not node.is_element:
            continue
        yield node
        stack.extend(reversed(node.children))


def extract_titles(tree: ParsedTree) -> List[str]:
    """Return the text of every ``h1``/``h2`` element, in document order."""
    return [_clean_text(node.text_content()) for node in flatten(tree) if node.tag in TITLE_TAGS]


def extract_links(tree: ParsedTree) -> List[str]:
    """Return the ``href`` of every ``a`` element, in document order.

    An anchor without ``href`` contributes ``""``.  Elements that are not
    anchors contribute nothing.
    """
    return [node.attrs.get("href", "").strip() for node in flatten(tree) if node.tag == LINK_TAG]


def extract_page(tree: ParsedTree) -> PageData:
    """Run both extractions over *tree*."""
    return PageData(titles=extract_titles(tree), links=extract_links(tree))
