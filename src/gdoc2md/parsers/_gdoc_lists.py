#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/gdoc2md/parsers/_gdoc_lists.py
"""List accumulation for the Google Docs parser.

Google Docs has no list container: each list item is a paragraph with a
``bullet`` pointing at a list id. Consecutive bulleted paragraphs sharing a
list id are folded into one :class:`ListBlock`. Nested items do not become
nested lists; they are appended to the previous item as indented lines.
"""

from __future__ import annotations

import logging
from typing import Any, Mapping, Optional

from gdoc2md.constants import NESTED_LIST_INDENT, ORDERED_NESTED_MARKER, UNORDERED_NESTED_MARKER
from gdoc2md.nodes import ListBlock, Node
from gdoc2md.parsers._gdoc_images import require_image
from gdoc2md.parsers._gdoc_text import fix_punctuation_spacing, format_text_run, is_newline_run
from gdoc2md.utils.markdown import image_to_markdown

logger = logging.getLogger(__name__)


def is_ordered_list(document: Mapping[str, Any], list_id: str) -> bool:
    """Return True when the list's level-0 nesting definition has a glyph type."""
    list_properties = ((document.get("lists") or {}).get(list_id) or {}).get("listProperties") or {}
    nesting_levels = list_properties.get("nestingLevels") or []
    return bool(nesting_levels) and nesting_levels[0].get("glyphType") is not None


def nested_item_prefix(level: int, ordered: bool) -> str:
    """Return the indentation and marker for a nested item at ``level``."""
    marker = ORDERED_NESTED_MARKER if ordered else UNORDERED_NESTED_MARKER
    return f"{NESTED_LIST_INDENT * level}{marker}"


def render_bullet_content(document: Mapping[str, Any], paragraph: Mapping[str, Any]) -> str:
    """Render the text runs and images of a bulleted paragraph and join them with spaces.

    The bare ``"\\n"`` run closing the paragraph is left out, so items carry
    no trailing space. Other elements (page breaks, rules, auto text) are
    skipped.

    Raises
    ------
    MalformedDocumentError
        If an inline object in the bullet is missing or is not an image

    """
    parts: list[str] = []
    for element in paragraph.get("elements") or []:
        if "inlineObjectElement" in element:
            parts.append(image_to_markdown(require_image(document, element)))
        elif "textRun" in element and not is_newline_run(element):
            parts.append(format_text_run(element))
    return fix_punctuation_spacing(" ".join(parts))


class ListAccumulator:
    """Fold consecutive bulleted paragraphs into list nodes.

    The accumulator tracks the currently open list node and its list id.
    The caller closes the open list whenever a non-bullet block is seen.

    Parameters
    ----------
    document : Mapping
        The full Google Docs document (for list definitions and images)
    output : list of Node
        Node sequence that new list nodes are appended to

    """

    def __init__(self, document: Mapping[str, Any], output: list[Node]):
        """Initialize with an empty open-list state."""
        self._document = document
        self._output = output
        self._open_list: Optional[ListBlock] = None
        self._open_list_id: Optional[str] = None

    @property
    def open_list(self) -> Optional[ListBlock]:
        """The list node currently receiving items, if any."""
        return self._open_list

    def add(self, paragraph: Mapping[str, Any]) -> None:
        """Add one bulleted paragraph, extending or opening a list."""
        bullet = paragraph["bullet"]
        list_id = bullet.get("listId")
        content = render_bullet_content(self._document, paragraph)

        if self._open_list is not None and list_id == self._open_list_id:
            nesting_level = bullet.get("nestingLevel")
            if nesting_level is not None:
                prefix = nested_item_prefix(nesting_level, self._open_list.ordered)
                self._open_list.items[-1] += f"\n{prefix} {content}"
            else:
                self._open_list.items.append(content)
            return

        ordered = is_ordered_list(self._document, list_id)
        logger.debug("Opening %s list %s", "ordered" if ordered else "unordered", list_id)
        self._open_list = ListBlock(ordered=ordered, items=[content])
        self._open_list_id = list_id
        self._output.append(self._open_list)

    def close(self) -> None:
        """Close the open list so the next bullet starts a new one."""
        self._open_list = None
        self._open_list_id = None
