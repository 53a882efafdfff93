#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Constants and default values for the gdoc2md library.

Constants are organized by category:
1. Type Definitions - Literal types and the paragraph style enumeration
2. Markdown Formatting - Markers and delimiters used in rendered output
3. Conversion Defaults - Default option values
"""

from __future__ import annotations

from enum import Enum
from typing import Literal, Optional

# =============================================================================
# Type Definitions
# =============================================================================

BulletSymbol = Literal["-", "*", "+"]


class ParagraphTag(str, Enum):
    """Output tag for a non-list paragraph, keyed by its Google Docs named style.

    The lookup is closed: a named style without a member here (``TITLE``,
    ``HEADING_6``, ...) has no tag and the paragraph is dropped.
    """

    PARAGRAPH = "p"
    BLOCKQUOTE = "blockquote"
    H1 = "h1"
    H2 = "h2"
    H3 = "h3"
    H4 = "h4"
    H5 = "h5"

    @classmethod
    def from_named_style(cls, named_style: Optional[str]) -> Optional["ParagraphTag"]:
        """Return the tag for a ``namedStyleType`` or None when unrecognized."""
        if named_style == "NORMAL_TEXT":
            return cls.PARAGRAPH
        if named_style == "SUBTITLE":
            return cls.BLOCKQUOTE
        if named_style == "HEADING_1":
            return cls.H1
        if named_style == "HEADING_2":
            return cls.H2
        if named_style == "HEADING_3":
            return cls.H3
        if named_style == "HEADING_4":
            return cls.H4
        if named_style == "HEADING_5":
            return cls.H5
        return None

    @property
    def heading_level(self) -> int:
        """Heading depth (1-5), or 0 for paragraphs and quotes."""
        if self.value.startswith("h"):
            return int(self.value[1:])
        return 0


TEXT_TAGS: frozenset[str] = frozenset(tag.value for tag in ParagraphTag)

# =============================================================================
# Markdown Formatting
# =============================================================================

FRONTMATTER_DELIMITER = "---"
NESTED_LIST_INDENT = "  "
ORDERED_NESTED_MARKER = "1. "
UNORDERED_NESTED_MARKER = "- "
EMPHASIS_MARKER = "_"
STRONG_MARKER = "**"
STRIKETHROUGH_MARKER = "~~"

# Spacing artifacts left behind when styled runs are joined with a space
PUNCTUATION_SPACING_FIXUPS: tuple[tuple[str, str], ...] = ((" .", "."), (" ,", ","))

# =============================================================================
# Conversion Defaults
# =============================================================================

DEFAULT_EXTRACT_COVER = True
DEFAULT_INCLUDE_METADATA = True
DEFAULT_BULLET_SYMBOL: BulletSymbol = "-"
DEFAULT_TABLE_PIPE_ESCAPE = True
