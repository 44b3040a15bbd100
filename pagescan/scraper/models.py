"""Data models for the scraper pipeline."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Dict, Generic, List, Optional, TypeVar, Union

T = TypeVar("T")


@dataclass
class RawPage:
    """The raw HTTP response for a single URL fetch."""

    url: str
    html: str
    status_code: int


@dataclass
class ParsedNode:
    """One node of a parsed document.

    An element has a ``tag`` (lower-case), ``attrs`` and ``children``; a text
    leaf has ``tag=None`` and carries its string in ``text``.
    """

    tag: Optional[str] = None
    attrs: Dict[str, str] = field(default_factory=dict)
    children: List["ParsedNode"] = field(default_factory=list)
    text: str = ""

    @property
    def is_element(self) -> bool:
        return self.tag is not None

    def text_content(self) -> str:
        """Concatenated text of this node and all of its descendants."""
        if not self.is_element:
            return self.text
        parts: List[str] = []
        stack = list(reversed(self.children))
        while stack:
            node = stack.pop()
            if node.is_element:
                stack.extend(reversed(node.children))
            else:
                parts.append(node.text)
        return "".join(parts)


@dataclass
class ParsedTree:
    """Top-level nodes of a document.

    ``error`` is set when parsing failed; the tree is then empty.  An empty
    tree with no error is a document that simply has no content.
    """

    nodes: List[ParsedNode] = field(default_factory=list)
    error: Optional[str] = None

    @property
    def failed(self) -> bool:
        return self.error is not None


@dataclass
class PageData:
    """Titles and links extracted from one page, in document order."""

    titles: List[str] = field(default_factory=list)
    links: List[str] = field(default_factory=list)


# ---------------------------------------------------------------------------
# Outcomes
# ---------------------------------------------------------------------------

class Stage(str, Enum):
    FETCHING = "fetching"
    PARSING = "parsing"
    EXTRACTING = "extracting"
    REPORTING = "reporting"
    DONE = "done"
    INTERNAL = "internal"


@dataclass(frozen=True)
class Success(Generic[T]):
    value: T


@dataclass(frozen=True)
class Failed:
    """A pipeline run that stopped at *stage* because of *reason*."""

    stage: Stage
    reason: str


Outcome = Union[Success[T], Failed]


@dataclass
class PageOutcome:
    """Result of running the whole pipeline for one URL."""

    url: str
    outcome: Union[Success[PageData], Failed]
    output_path: Optional[Path] = None

    @property
    def ok(self) -> bool:
        return isinstance(self.outcome, Success)

    @property
    def data(self) -> Optional[PageData]:
        return self.outcome.value if isinstance(self.outcome, Success) else None

    @property
    def failure(self) -> Optional[Failed]:
        return self.outcome if isinstance(self.outcome, Failed) else None


@dataclass
class BatchResult:
    """One :class:`PageOutcome` per input URL, in input order."""

    outcomes: List[PageOutcome] = field(default_factory=list)

    @property
    def succeeded(self) -> List[PageOutcome]:
        return [o for o in self.outcomes if o.ok]

    @property
    def failed(self) -> List[PageOutcome]:
        return [o for o in self.outcomes if not o.ok]

    @property
    def exit_code(self) -> int:
        """0 when every URL succeeded, 1 otherwise."""
        return 1 if self.failed else 0
