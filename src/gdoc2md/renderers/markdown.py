#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/gdoc2md/renderers/markdown.py
"""Markdown rendering from intermediate nodes.

This module provides the MarkdownRenderer class, which turns the node
sequence produced by the parser into Markdown body text, and the assembly
functions that put a YAML front matter block in front of it.

Node text is already escaped and styled by the parser, so the renderer only
adds block syntax: heading hashes, quote prefixes, list markers and table
pipes.

"""

from __future__ import annotations

from typing import Any, Mapping, Optional, Sequence

from gdoc2md.constants import FRONTMATTER_DELIMITER, ParagraphTag
from gdoc2md.exceptions import RenderingError
from gdoc2md.nodes import ImageBlock, ListBlock, Node, TableBlock, TextBlock
from gdoc2md.options.markdown import MarkdownRendererOptions
from gdoc2md.renderers.base import BaseRenderer
from gdoc2md.serialization import nodes_from_dicts
from gdoc2md.utils.markdown import image_to_markdown
from gdoc2md.utils.metadata import format_yaml_block


class MarkdownRenderer(BaseRenderer):
    """Render intermediate nodes to Markdown text.

    Parameters
    ----------
    options : MarkdownRendererOptions or None, default = None
        Markdown formatting options

    Examples
    --------
        >>> from gdoc2md.constants import ParagraphTag
        >>> from gdoc2md.nodes import ListBlock, TextBlock
        >>> renderer = MarkdownRenderer()
        >>> print(renderer.render_nodes([TextBlock(ParagraphTag.H1, "Title"), ListBlock(items=["a", "b"])]), end="")
        # Title
        <BLANKLINE>
        - a
        - b

    """

    def __init__(self, options: MarkdownRendererOptions | None = None):
        """Initialize the Markdown renderer with options."""
        BaseRenderer._validate_options_type(options, MarkdownRendererOptions, "markdown")
        options = options or MarkdownRendererOptions()
        super().__init__(options)
        self.options: MarkdownRendererOptions = options

    def render_nodes(self, content: Sequence[Node]) -> str:
        """Render the body: blocks separated by a blank line, ending in a newline.

        Raises
        ------
        RenderingError
            If a node type has no Markdown rendering

        """
        blocks: list[str] = []
        for node in content:
            if not isinstance(node, Node):
                raise RenderingError(
                    f"Cannot render object of type {type(node).__name__}", rendering_stage="body"
                )
            block = node.accept(self)
            if block:
                blocks.append(block)

        if not blocks:
            return ""
        return "\n\n".join(blocks) + "\n"

    def render_document(self, content: Sequence[Node], metadata: Mapping[str, Any]) -> str:
        """Render front matter and body.

        The front matter delimiters and the blank line after them are fixed.
        """
        return (
            f"{FRONTMATTER_DELIMITER}\n{format_yaml_block(metadata)}\n{FRONTMATTER_DELIMITER}\n\n"
            f"{self.render_nodes(content)}"
        )

    def visit_text_block(self, node: TextBlock) -> str:
        """Render a paragraph, quote or heading."""
        if node.tag is ParagraphTag.PARAGRAPH:
            return node.text
        if node.tag is ParagraphTag.BLOCKQUOTE:
            return "\n".join(f"> {line}" for line in node.text.split("\n"))
        return f"{'#' * node.tag.heading_level} {node.text}"

    def visit_image_block(self, node: ImageBlock) -> str:
        """Render a standalone image."""
        return image_to_markdown(node.image)

    def visit_list_block(self, node: ListBlock) -> str:
        """Render list items; nested continuation lines stay inside their item."""
        lines = []
        for number, item in enumerate(node.items, start=1):
            marker = f"{number}." if node.ordered else self.options.bullet_symbol
            lines.append(f"{marker} {item}")
        return "\n".join(lines)

    def visit_table_block(self, node: TableBlock) -> str:
        """Render a GFM pipe table; rows are padded or cut to the header width."""
        num_cols = len(node.headers)
        if num_cols == 0:
            return ""

        def render_row(cells: Sequence[str]) -> str:
            cells = list(cells[:num_cols]) + [""] * (num_cols - len(cells))
            if self.options.table_pipe_escape:
                cells = [cell.replace("|", "\\|") for cell in cells]
            return "| " + " | ".join(cells) + " |"

        lines = [render_row(node.headers), "|" + "|".join(["---"] * num_cols) + "|"]
        lines.extend(render_row(row) for row in node.rows)
        return "\n".join(lines)


def assemble_markdown(
    content: Sequence[Node],
    metadata: Mapping[str, Any],
    options: Optional[MarkdownRendererOptions] = None,
) -> str:
    """Combine metadata and nodes into the final Markdown document.

    Examples
    --------
        >>> from gdoc2md.constants import ParagraphTag
        >>> from gdoc2md.nodes import TextBlock
        >>> assemble_markdown([TextBlock(ParagraphTag.H1, "T")], {"title": "T"})
        '---\\ntitle: T\\n---\\n\\n# T\\n'

    """
    return MarkdownRenderer(options).render_document(content, metadata)


def convert_json_to_markdown(
    data: Mapping[str, Any], options: Optional[MarkdownRendererOptions] = None
) -> str:
    """Assemble Markdown from the ``{content, metadata}`` mapping form.

    ``content`` holds tagged node dictionaries such as ``{"h1": "T"}``.

    Raises
    ------
    ValidationError
        If a content entry is not a known node
    RenderingError
        If rendering fails

    """
    content = nodes_from_dicts(data.get("content") or [])
    return assemble_markdown(content, data.get("metadata") or {}, options)
