#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/gdoc2md/parsers/gdoc.py
"""Google Docs document to intermediate node converter.

This module walks the ``body.content`` block list of a document returned by
the Google Docs API and folds it into an ordered sequence of Markdown-shaped
nodes. Paragraphs become headings, quotes, paragraphs or images; bulleted
paragraphs are accumulated into lists; tables are flattened to strings.

"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Mapping, Optional

from gdoc2md.constants import ParagraphTag
from gdoc2md.exceptions import FileError, MalformedDocumentError, ValidationError
from gdoc2md.nodes import ConversionResult, Cover, ImageBlock, Node, TableBlock, TextBlock
from gdoc2md.options.gdoc import GoogleDocOptions
from gdoc2md.parsers._gdoc_images import extract_cover, resolve_image
from gdoc2md.parsers._gdoc_lists import ListAccumulator
from gdoc2md.parsers._gdoc_text import (
    clean_text,
    fix_punctuation_spacing,
    format_text_run,
    is_newline_run,
    paragraph_plain_text,
)
from gdoc2md.parsers.base import BaseParser, ParserInput
from gdoc2md.utils.metadata import build_metadata

logger = logging.getLogger(__name__)


class GoogleDocParser(BaseParser):
    """Convert Google Docs API documents to intermediate nodes.

    Parameters
    ----------
    options : GoogleDocOptions or None
        Conversion options

    Examples
    --------
        >>> parser = GoogleDocParser()
        >>> result = parser.parse({"body": {"content": []}})
        >>> result.to_dict()
        {'cover': None, 'content': []}

    """

    def __init__(self, options: GoogleDocOptions | None = None):
        """Initialize the parser with options."""
        BaseParser._validate_options_type(options, GoogleDocOptions, "gdoc")
        options = options or GoogleDocOptions()
        super().__init__(options)
        self.options: GoogleDocOptions = options

    def parse(self, input_data: ParserInput) -> ConversionResult:
        """Load a document and convert it to intermediate nodes.

        Raises
        ------
        ValidationError
            If the input type is not supported
        FileError
            If a path input cannot be read
        MalformedDocumentError
            If the input is not a Google Docs document or references
            inline objects that do not exist

        """
        return self.convert_to_nodes(self.load_document(input_data))

    def load_document(self, input_data: ParserInput) -> Mapping[str, Any]:
        """Decode the input into a document mapping.

        Parameters
        ----------
        input_data : Mapping, str, Path, IO[bytes], or bytes
            Document mapping, path to a JSON file, JSON bytes, or a stream

        Returns
        -------
        Mapping
            The decoded document

        """
        file_path = str(input_data) if isinstance(input_data, (str, Path)) else None

        try:
            if isinstance(input_data, Mapping):
                document = input_data
            elif isinstance(input_data, (str, Path)):
                with open(input_data, "r", encoding="utf-8") as f:
                    document = json.load(f)
            elif isinstance(input_data, bytes):
                document = json.loads(input_data.decode("utf-8"))
            elif hasattr(input_data, "read"):
                content = input_data.read()
                if isinstance(content, bytes):
                    content = content.decode("utf-8")
                document = json.loads(content)
            else:
                raise ValidationError(
                    f"Unsupported input type: {type(input_data).__name__}",
                    parameter_name="input_data",
                    parameter_value=type(input_data),
                )
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            raise MalformedDocumentError(
                f"Input is not a valid JSON document: {e}",
                parsing_stage="input_processing",
                original_error=e,
            ) from e
        except OSError as e:
            raise FileError(f"Could not read document: {e}", file_path=file_path, original_error=e) from e

        body = document.get("body") if isinstance(document, Mapping) else None
        if not isinstance(body, Mapping) or not isinstance(body.get("content"), list):
            raise MalformedDocumentError(
                "Invalid document format: 'body.content' is missing or not a list.",
                parsing_stage="input_processing",
            )

        return document

    def convert_to_nodes(self, document: Mapping[str, Any]) -> ConversionResult:
        """Walk the document body and build the node sequence.

        Blocks are visited strictly in document order. Bulleted paragraphs go
        to the list accumulator; any other block closes the open list first.

        Parameters
        ----------
        document : Mapping
            The decoded Google Docs document

        Returns
        -------
        ConversionResult
            Cover (if enabled and found) and nodes

        """
        cover = extract_cover(document) if self.options.extract_cover else None

        nodes: list[Node] = []
        lists = ListAccumulator(document, nodes)

        for index, block in enumerate(document["body"]["content"]):
            paragraph = block.get("paragraph")
            table = block.get("table")

            if paragraph is not None and paragraph.get("bullet") is not None:
                lists.add(paragraph)
                continue

            lists.close()

            if paragraph is not None:
                nodes.extend(self._render_paragraph(document, paragraph))
            elif table is not None and table.get("tableRows"):
                nodes.append(self._render_table(table))
            else:
                logger.debug("Skipping block %d with no renderable content", index)

        logger.debug("Converted document into %d nodes", len(nodes))
        return ConversionResult(cover=cover, content=nodes)

    def _render_paragraph(self, document: Mapping[str, Any], paragraph: Mapping[str, Any]) -> list[Node]:
        """Render a non-bulleted paragraph.

        Text runs share the paragraph's tag and collapse into one block;
        if any image sits among them, every piece is emitted on its own.
        """
        named_style = (paragraph.get("paragraphStyle") or {}).get("namedStyleType")
        tag = ParagraphTag.from_named_style(named_style)
        if tag is None:
            logger.debug("Dropping paragraph with unsupported style %s", named_style)
            return []

        is_heading = tag is not ParagraphTag.PARAGRAPH
        items: list[Node] = []

        for element in paragraph.get("elements") or []:
            if "inlineObjectElement" in element:
                image = resolve_image(document, element)
                if image is not None:
                    items.append(ImageBlock(image=image))
            elif "textRun" in element and not is_newline_run(element):
                items.append(TextBlock(tag=tag, text=format_text_run(element, is_heading=is_heading)))

        if all(isinstance(item, TextBlock) for item in items):
            text = fix_punctuation_spacing(" ".join(item.text for item in items))
            return [TextBlock(tag=tag, text=text)]

        return items

    def _render_table(self, table: Mapping[str, Any]) -> TableBlock:
        """Flatten a table; the first row becomes the header."""
        header_row, *body_rows = table["tableRows"]
        return TableBlock(
            headers=[self._cell_text(cell) for cell in header_row.get("tableCells") or []],
            rows=[[self._cell_text(cell) for cell in row.get("tableCells") or []] for row in body_rows],
        )

    @staticmethod
    def _cell_text(cell: Mapping[str, Any]) -> str:
        return "".join(
            clean_text(paragraph_plain_text(block["paragraph"])) if "paragraph" in block else ""
            for block in cell.get("content") or []
        )

    def extract_metadata(self, document: Any, cover: Optional[Cover] = None) -> dict[str, Any]:
        """Collect the document title and cover for the front matter."""
        return build_metadata(document, cover=cover)
