#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Configuration options for gdoc2md parsing and rendering.

Options are frozen dataclasses; use ``create_updated()`` to derive a
modified copy.
"""

from gdoc2md.options.base import BaseParserOptions, BaseRendererOptions, CloneFrozenMixin
from gdoc2md.options.gdoc import GoogleDocOptions
from gdoc2md.options.markdown import MarkdownRendererOptions

__all__ = [
    "BaseParserOptions",
    "BaseRendererOptions",
    "CloneFrozenMixin",
    "GoogleDocOptions",
    "MarkdownRendererOptions",
]
