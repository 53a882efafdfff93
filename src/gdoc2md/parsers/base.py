#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/gdoc2md/parsers/base.py
"""Base class for document parsers.

A parser turns a source document into a :class:`ConversionResult`, the
ordered intermediate node sequence plus an optional cover image.

"""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path
from typing import IO, Any, Mapping, Optional, Union

from gdoc2md.exceptions import InvalidOptionsError
from gdoc2md.nodes import ConversionResult, Cover
from gdoc2md.options.base import BaseParserOptions

ParserInput = Union[Mapping[str, Any], str, Path, IO[bytes], bytes]


class BaseParser(ABC):
    """Abstract base class for document parsers.

    Parameters
    ----------
    options : BaseParserOptions or None, default = None
        Format-specific parsing options

    """

    def __init__(self, options: BaseParserOptions | None = None):
        """Initialize the parser with optional configuration."""
        self.options: BaseParserOptions | None = options

    @staticmethod
    def _validate_options_type(options: BaseParserOptions | None, expected_type: type, parser_name: str) -> None:
        """Validate that options are of the correct type for this parser.

        Raises
        ------
        InvalidOptionsError
            If options are not None and not an instance of expected_type

        """
        if options is not None and not isinstance(options, expected_type):
            raise InvalidOptionsError(
                converter_name=parser_name,
                expected_type=expected_type,
                received_type=type(options),
            )

    @abstractmethod
    def parse(self, input_data: ParserInput) -> ConversionResult:
        """Parse the input document into intermediate nodes.

        Parameters
        ----------
        input_data : Mapping, str, Path, IO[bytes], or bytes
            An already-decoded document, a path to a JSON file, raw JSON
            bytes, or a binary stream

        Returns
        -------
        ConversionResult
            Cover and node sequence

        Raises
        ------
        ParsingError
            If parsing fails due to invalid or inconsistent input

        """
        raise NotImplementedError

    @abstractmethod
    def extract_metadata(self, document: Any, cover: Optional[Cover] = None) -> dict[str, Any]:
        """Collect document-level fields for the front matter.

        Parameters
        ----------
        document : Any
            The loaded source document
        cover : Cover or None
            Cover found by the parser, if any

        Returns
        -------
        dict
            Metadata mapping, empty when nothing is available

        """
        raise NotImplementedError
