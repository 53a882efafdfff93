#  Copyright (c) 2025 Tom Villani, Ph.D.

# gdoc2md/options/gdoc.py
"""Configuration options for Google Docs document parsing."""

from __future__ import annotations

from dataclasses import dataclass, field

from gdoc2md.constants import DEFAULT_EXTRACT_COVER
from gdoc2md.options.base import BaseParserOptions


@dataclass(frozen=True)
class GoogleDocOptions(BaseParserOptions):
    """Configuration options for Google Docs to intermediate node conversion.

    Parameters
    ----------
    extract_cover : bool, default True
        Whether to look for a cover image in the document's first-page header.
        When False the conversion result always carries ``cover=None``.

    """

    extract_cover: bool = field(
        default=DEFAULT_EXTRACT_COVER,
        metadata={"help": "Extract a cover image from the first-page header"},
    )
