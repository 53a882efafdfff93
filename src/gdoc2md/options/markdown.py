#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Configuration options for Markdown rendering."""
# src/gdoc2md/options/markdown.py


from __future__ import annotations

from dataclasses import dataclass, field
from typing import get_args

from gdoc2md.constants import DEFAULT_BULLET_SYMBOL, DEFAULT_TABLE_PIPE_ESCAPE, BulletSymbol
from gdoc2md.options.base import BaseRendererOptions


@dataclass(frozen=True)
class MarkdownRendererOptions(BaseRendererOptions):
    """Markdown rendering options for the intermediate node renderer.

    Parameters
    ----------
    bullet_symbol : {"-", "*", "+"}, default "-"
        Marker used for top-level unordered list items.
    table_pipe_escape : bool, default True
        Whether to escape ``|`` characters inside table cells.

    """

    bullet_symbol: BulletSymbol = field(
        default=DEFAULT_BULLET_SYMBOL,
        metadata={"help": "Marker for unordered list items", "choices": list(get_args(BulletSymbol))},
    )
    table_pipe_escape: bool = field(
        default=DEFAULT_TABLE_PIPE_ESCAPE,
        metadata={"help": "Escape pipe characters in table cells"},
    )

    def __post_init__(self) -> None:
        """Validate option values.

        Raises
        ------
        ValueError
            If ``bullet_symbol`` is not a supported list marker.

        """
        if self.bullet_symbol not in get_args(BulletSymbol):
            raise ValueError(f"bullet_symbol must be one of {get_args(BulletSymbol)}, got {self.bullet_symbol!r}")
