#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/gdoc2md/api.py
"""High-level conversion API for gdoc2md.

Two entry points cover the two stages of a conversion:

- :func:`to_json` returns the intermediate :class:`ConversionResult`
  (cover plus node sequence).
- :func:`to_markdown` runs both stages and returns Markdown with a YAML
  front matter block.

Examples
--------
    >>> from gdoc2md import to_markdown
    >>> document = {
    ...     "title": "Hello",
    ...     "body": {"content": [{"paragraph": {
    ...         "paragraphStyle": {"namedStyleType": "HEADING_1"},
    ...         "elements": [{"textRun": {"content": "Hello\\n", "textStyle": {}}}],
    ...     }}]},
    ... }
    >>> print(to_markdown(document), end="")
    ---
    title: Hello
    ---
    <BLANKLINE>
    # Hello

"""

from __future__ import annotations

import logging
from typing import Any, Mapping, Optional

from gdoc2md.nodes import ConversionResult
from gdoc2md.options.gdoc import GoogleDocOptions
from gdoc2md.options.markdown import MarkdownRendererOptions
from gdoc2md.parsers.base import ParserInput
from gdoc2md.parsers.gdoc import GoogleDocParser
from gdoc2md.renderers.markdown import assemble_markdown
from gdoc2md.utils.metadata import build_metadata

logger = logging.getLogger(__name__)


def to_json(source: ParserInput, options: Optional[GoogleDocOptions] = None) -> ConversionResult:
    """Convert a Google Docs document to the intermediate representation.

    Parameters
    ----------
    source : Mapping, str, Path, IO[bytes], or bytes
        Document mapping or JSON source
    options : GoogleDocOptions, optional
        Parser options

    Returns
    -------
    ConversionResult
        Cover and node sequence

    """
    return GoogleDocParser(options).parse(source)


def to_markdown(
    source: ParserInput,
    metadata: Optional[Mapping[str, Any]] = None,
    options: Optional[GoogleDocOptions] = None,
    renderer_options: Optional[MarkdownRendererOptions] = None,
) -> str:
    """Convert a Google Docs document to Markdown with YAML front matter.

    Parameters
    ----------
    source : Mapping, str, Path, IO[bytes], or bytes
        Document mapping or JSON source
    metadata : Mapping, optional
        Extra front matter fields; they override the collected title and cover
    options : GoogleDocOptions, optional
        Parser options. With ``include_metadata=False`` only ``metadata``
        is written to the front matter.
    renderer_options : MarkdownRendererOptions, optional
        Markdown rendering options

    Returns
    -------
    str
        The Markdown document

    Raises
    ------
    ParsingError
        If the document cannot be read or is malformed
    RenderingError
        If the nodes cannot be rendered

    """
    parser = GoogleDocParser(options)
    document = parser.load_document(source)
    result = parser.convert_to_nodes(document)

    if parser.options.include_metadata:
        front_matter = build_metadata(document, cover=result.cover, extra=metadata)
    else:
        front_matter = dict(metadata or {})

    logger.debug("Front matter fields: %s", ", ".join(front_matter) or "(none)")
    return assemble_markdown(result.content, front_matter, renderer_options)
