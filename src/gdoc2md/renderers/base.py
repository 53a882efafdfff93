#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/gdoc2md/renderers/base.py
"""Base class for intermediate node renderers."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from pathlib import Path
from typing import IO, Any, Mapping, Sequence, Union

from gdoc2md.exceptions import InvalidOptionsError, OutputWriteError
from gdoc2md.nodes import Node
from gdoc2md.options.base import BaseRendererOptions

logger = logging.getLogger(__name__)


class BaseRenderer(ABC):
    """Abstract base class for renderers.

    Parameters
    ----------
    options : BaseRendererOptions or None, default = None
        Format-specific rendering options

    """

    def __init__(self, options: BaseRendererOptions | None = None):
        """Initialize the renderer with optional configuration."""
        self.options: BaseRendererOptions | None = options

    @staticmethod
    def _validate_options_type(options: BaseRendererOptions | None, expected_type: type, renderer_name: str) -> None:
        """Validate that options are of the correct type for this renderer.

        Raises
        ------
        InvalidOptionsError
            If options are not None and not an instance of expected_type

        """
        if options is not None and not isinstance(options, expected_type):
            raise InvalidOptionsError(
                converter_name=renderer_name,
                expected_type=expected_type,
                received_type=type(options),
            )

    @abstractmethod
    def render_document(self, content: Sequence[Node], metadata: Mapping[str, Any]) -> str:
        """Render nodes and metadata to a complete output string."""
        raise NotImplementedError

    def render(
        self, content: Sequence[Node], metadata: Mapping[str, Any], output: Union[str, Path, IO[bytes]]
    ) -> None:
        """Render to a file path or binary stream.

        Raises
        ------
        OutputWriteError
            If the output cannot be written

        """
        text = self.render_document(content, metadata)
        if isinstance(output, (str, Path)):
            try:
                Path(output).write_text(text, encoding="utf-8")
            except OSError as e:
                raise OutputWriteError(str(output), original_error=e) from e
            logger.info("Wrote %d characters to %s", len(text), output)
        else:
            output.write(text.encode("utf-8"))
