#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Document parsers producing gdoc2md intermediate nodes."""

from gdoc2md.parsers.base import BaseParser
from gdoc2md.parsers.gdoc import GoogleDocParser

__all__ = ["BaseParser", "GoogleDocParser"]
