#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/gdoc2md/nodes.py
"""Intermediate node classes produced by the Google Docs parser.

The parser folds a document's block tree into a flat, ordered sequence of
Markdown-shaped nodes. Each node knows its tagged dictionary form (the
JSON contract between the parsing and rendering stages) and supports the
visitor pattern used by the renderers.

Node Types
----------
- TextBlock: paragraph, block quote or heading holding pre-styled text
- ImageBlock: a standalone image
- ListBlock: ordered or unordered list of pre-rendered item strings
- TableBlock: header strings plus rows of cell strings

"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Optional

from gdoc2md.constants import ParagraphTag


@dataclass(frozen=True)
class ImageDescriptor:
    """A resolved inline image.

    Parameters
    ----------
    source : str
        Image content URI
    title : str, default = ''
        Image title
    alt : str, default = ''
        Alternative text (the embedded object's description)

    """

    source: str
    title: str = ""
    alt: str = ""

    def to_dict(self) -> dict[str, str]:
        """Return the ``{source, title, alt}`` form."""
        return {"source": self.source, "title": self.title, "alt": self.alt}


@dataclass(frozen=True)
class Cover:
    """Cover image taken from the document's first-page header."""

    image: str
    title: str = ""
    alt: str = ""

    @classmethod
    def from_image(cls, image: ImageDescriptor) -> "Cover":
        """Build a cover from a resolved image."""
        return cls(image=image.source, title=image.title, alt=image.alt)

    def to_dict(self) -> dict[str, str]:
        """Return the ``{image, title, alt}`` form."""
        return {"image": self.image, "title": self.title, "alt": self.alt}


class Node(ABC):
    """Base class for all intermediate nodes."""

    @abstractmethod
    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this node."""

    @abstractmethod
    def to_dict(self) -> dict[str, Any]:
        """Return the single-key tagged dictionary form of this node."""


@dataclass
class TextBlock(Node):
    """Paragraph, block quote or heading.

    Parameters
    ----------
    tag : ParagraphTag
        Block kind
    text : str
        Already escaped and styled Markdown text

    """

    tag: ParagraphTag
    text: str

    def accept(self, visitor: Any) -> Any:
        """Dispatch to ``visitor.visit_text_block``."""
        return visitor.visit_text_block(self)

    def to_dict(self) -> dict[str, Any]:
        """Return ``{tag: text}``."""
        return {self.tag.value: self.text}


@dataclass
class ImageBlock(Node):
    """Standalone image."""

    image: ImageDescriptor

    def accept(self, visitor: Any) -> Any:
        """Dispatch to ``visitor.visit_image_block``."""
        return visitor.visit_image_block(self)

    def to_dict(self) -> dict[str, Any]:
        """Return ``{"img": {source, title, alt}}``."""
        return {"img": self.image.to_dict()}


@dataclass
class ListBlock(Node):
    """Flat list of item strings.

    Nested items are not separate entries: they are appended to the previous
    item as extra indented lines carrying their own marker.

    Parameters
    ----------
    ordered : bool
        True for numbered lists
    items : list of str
        Rendered item strings

    """

    ordered: bool = False
    items: list[str] = field(default_factory=list)

    @property
    def tag(self) -> str:
        """Return ``"ol"`` or ``"ul"``."""
        return "ol" if self.ordered else "ul"

    def accept(self, visitor: Any) -> Any:
        """Dispatch to ``visitor.visit_list_block``."""
        return visitor.visit_list_block(self)

    def to_dict(self) -> dict[str, Any]:
        """Return ``{"ol"|"ul": [items]}``."""
        return {self.tag: list(self.items)}


@dataclass
class TableBlock(Node):
    """Table flattened to plain strings; the first source row is the header."""

    headers: list[str] = field(default_factory=list)
    rows: list[list[str]] = field(default_factory=list)

    def accept(self, visitor: Any) -> Any:
        """Dispatch to ``visitor.visit_table_block``."""
        return visitor.visit_table_block(self)

    def to_dict(self) -> dict[str, Any]:
        """Return ``{"table": {"headers": [...], "rows": [[...]]}}``."""
        return {"table": {"headers": list(self.headers), "rows": [list(row) for row in self.rows]}}


@dataclass
class ConversionResult:
    """Output of the parsing stage.

    Parameters
    ----------
    cover : Cover or None
        Cover image, when the first-page header starts with one
    content : list of Node
        Nodes in document order

    """

    cover: Optional[Cover] = None
    content: list[Node] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        """Return ``{"cover": ..., "content": [...]}``."""
        return {
            "cover": self.cover.to_dict() if self.cover is not None else None,
            "content": [node.to_dict() for node in self.content],
        }
