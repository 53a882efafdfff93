#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/gdoc2md/parsers/_gdoc_text.py
"""Text run formatting helpers for the Google Docs parser.

A Google Docs text run carries its own ``textStyle``; these helpers turn one
run into escaped Markdown with emphasis, strikethrough and link wrapping.
"""

from __future__ import annotations

from typing import Any, Mapping

from gdoc2md.constants import (
    EMPHASIS_MARKER,
    PUNCTUATION_SPACING_FIXUPS,
    STRIKETHROUGH_MARKER,
    STRONG_MARKER,
)


def clean_text(text: str) -> str:
    """Remove embedded newlines and surrounding whitespace."""
    return text.replace("\n", "").strip()


def escape_emphasis_chars(text: str) -> str:
    r"""Backslash-escape ``*`` and ``_`` so they render literally.

    Examples
    --------
        >>> escape_emphasis_chars("snake_case * 2")
        'snake\\_case \\* 2'

    """
    return text.replace("*", "\\*").replace("_", "\\_")


def fix_punctuation_spacing(text: str) -> str:
    """Undo the first ``" ."`` and ``" ,"`` left by joining styled runs with spaces."""
    for artifact, replacement in PUNCTUATION_SPACING_FIXUPS:
        text = text.replace(artifact, replacement, 1)
    return text


def is_newline_run(element: Mapping[str, Any]) -> bool:
    """Return True for the bare ``"\\n"`` run that terminates every paragraph."""
    return element["textRun"].get("content") == "\n"


def format_text_run(element: Mapping[str, Any], is_heading: bool = False) -> str:
    """Render a ``textRun`` paragraph element as Markdown.

    Escaping happens first so the markers added for styling are never
    escaped. Wrapping is applied in a fixed order: underline, italic, bold,
    strikethrough, and finally the link.

    Parameters
    ----------
    element : Mapping
        Paragraph element holding a ``textRun``
    is_heading : bool, default False
        Suppress bold wrapping; headings carry their own weight

    Returns
    -------
    str
        Markdown-safe text

    """
    text_run = element["textRun"]
    style = text_run.get("textStyle") or {}

    text = escape_emphasis_chars(clean_text(text_run.get("content", "")))

    # Markdown has no underline, emphasis stands in for it
    if style.get("underline"):
        text = f"{EMPHASIS_MARKER}{text}{EMPHASIS_MARKER}"

    if style.get("italic"):
        text = f"{EMPHASIS_MARKER}{text}{EMPHASIS_MARKER}"

    if style.get("bold") and not is_heading:
        text = f"{STRONG_MARKER}{text}{STRONG_MARKER}"

    if style.get("strikethrough"):
        text = f"{STRIKETHROUGH_MARKER}{text}{STRIKETHROUGH_MARKER}"

    link = style.get("link") or {}
    if link.get("url"):
        return f"[{text}]({link['url']})"

    return text


def paragraph_plain_text(paragraph: Mapping[str, Any]) -> str:
    """Concatenate the formatted text runs of a paragraph, skipping newline runs."""
    return "".join(
        format_text_run(element)
        for element in paragraph.get("elements") or []
        if "textRun" in element and not is_newline_run(element)
    )
