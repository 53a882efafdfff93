"""gdoc2md - convert Google Docs documents to Markdown.

gdoc2md takes the JSON document tree returned by the Google Docs API and
produces Markdown with a YAML front matter block. Conversion happens in two
stages: the document body is folded into an ordered list of Markdown-shaped
nodes (headings, paragraphs, quotes, lists, tables, images), and those nodes
are rendered to text behind the front matter.

Examples
--------
Convert a document fetched from the API:

    >>> from gdoc2md import to_markdown
    >>> markdown = to_markdown(document, metadata={"date": "2025-01-31"})

Inspect or cache the intermediate representation:

    >>> from gdoc2md import to_json
    >>> result = to_json("document.json")
    >>> result.to_dict()["cover"]

"""

#  Copyright (c) 2025 Tom Villani, Ph.D.

__version__ = "1.0.0"

from gdoc2md.api import to_json, to_markdown
from gdoc2md.exceptions import (
    DependencyError,
    Gdoc2MdError,
    MalformedDocumentError,
    ParsingError,
    RenderingError,
    ValidationError,
)
from gdoc2md.nodes import ConversionResult, Cover, ImageDescriptor
from gdoc2md.options import GoogleDocOptions, MarkdownRendererOptions
from gdoc2md.parsers.gdoc import GoogleDocParser
from gdoc2md.renderers.markdown import MarkdownRenderer, assemble_markdown, convert_json_to_markdown

__all__ = [
    "__version__",
    "to_json",
    "to_markdown",
    "assemble_markdown",
    "convert_json_to_markdown",
    "GoogleDocParser",
    "MarkdownRenderer",
    "GoogleDocOptions",
    "MarkdownRendererOptions",
    "ConversionResult",
    "Cover",
    "ImageDescriptor",
    "Gdoc2MdError",
    "DependencyError",
    "ValidationError",
    "ParsingError",
    "MalformedDocumentError",
    "RenderingError",
]
