#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/gdoc2md/utils/markdown.py
"""Small Markdown syntax helpers shared by the parser and renderer."""

from __future__ import annotations

from gdoc2md.nodes import ImageDescriptor


def image_to_markdown(image: ImageDescriptor) -> str:
    """Render an image descriptor as inline Markdown image syntax.

    Examples
    --------
        >>> image_to_markdown(ImageDescriptor(source="https://x/a.png", title="A", alt="alt"))
        '![alt](https://x/a.png "A")'

    """
    return f'![{image.alt}]({image.source} "{image.title}")'
