#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Renderers turning gdoc2md intermediate nodes into output text."""

from gdoc2md.renderers.base import BaseRenderer
from gdoc2md.renderers.markdown import MarkdownRenderer, assemble_markdown, convert_json_to_markdown

__all__ = ["BaseRenderer", "MarkdownRenderer", "assemble_markdown", "convert_json_to_markdown"]
