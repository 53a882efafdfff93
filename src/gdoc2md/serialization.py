#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/gdoc2md/serialization.py
"""JSON serialization for the intermediate representation.

The ``{cover, content}`` mapping is the contract between the parsing and
rendering stages. These helpers rebuild typed nodes from that mapping so a
cached or hand-written intermediate document can be rendered directly.

Examples
--------
    >>> from gdoc2md.serialization import result_from_json, result_to_json
    >>> result = result_from_json('{"cover": null, "content": [{"h1": "Title"}]}')
    >>> result.content[0].text
    'Title'
    >>> result_to_json(result)
    '{"cover": null, "content": [{"h1": "Title"}]}'

"""

from __future__ import annotations

import json
from typing import Any, Mapping, Optional, Sequence

from gdoc2md.constants import TEXT_TAGS, ParagraphTag
from gdoc2md.exceptions import ValidationError
from gdoc2md.nodes import (
    ConversionResult,
    Cover,
    ImageBlock,
    ImageDescriptor,
    ListBlock,
    Node,
    TableBlock,
    TextBlock,
)


def node_from_dict(data: Mapping[str, Any]) -> Node:
    """Rebuild a node from its single-key tagged form.

    Parameters
    ----------
    data : Mapping
        A mapping such as ``{"h1": "Title"}`` or ``{"ul": ["a", "b"]}``

    Returns
    -------
    Node
        The typed node

    Raises
    ------
    ValidationError
        If the mapping does not hold exactly one known tag, or the tag's
        value has the wrong shape

    """
    if not isinstance(data, Mapping) or len(data) != 1:
        raise ValidationError(f"Node must be a mapping with exactly one tag, got {data!r}", parameter_value=data)

    tag, value = next(iter(data.items()))

    if tag in TEXT_TAGS:
        _require_type(tag, value, str, "a string")
        return TextBlock(tag=ParagraphTag(tag), text=value)
    if tag == "img":
        _require_type(tag, value, Mapping, "an object")
        return ImageBlock(image=_image_from_dict(value))
    if tag in ("ol", "ul"):
        _require_type(tag, value, list, "a list")
        return ListBlock(ordered=tag == "ol", items=[str(item) for item in value])
    if tag == "table":
        _require_type(tag, value, Mapping, "an object")
        headers = value.get("headers", [])
        rows = value.get("rows", [])
        rows_valid = isinstance(rows, list) and all(isinstance(row, list) for row in rows)
        if not isinstance(headers, list) or not rows_valid:
            raise ValidationError(
                "Table node requires 'headers' as a list and 'rows' as a list of lists",
                parameter_name=tag,
                parameter_value=value,
            )
        return TableBlock(
            headers=[str(cell) for cell in headers],
            rows=[[str(cell) for cell in row] for row in rows],
        )

    raise ValidationError(f"Unknown node tag: {tag!r}", parameter_name="tag", parameter_value=tag)


def _require_type(tag: str, value: Any, expected: Any, description: str) -> None:
    if not isinstance(value, expected):
        raise ValidationError(
            f"Node {tag!r} expects {description}, got {type(value).__name__}",
            parameter_name=tag,
            parameter_value=value,
        )


def nodes_from_dicts(data: Sequence[Mapping[str, Any]]) -> list[Node]:
    """Rebuild a node sequence, preserving order."""
    return [node_from_dict(item) for item in data]


def _image_from_dict(data: Mapping[str, Any]) -> ImageDescriptor:
    if "source" not in data:
        raise ValidationError("Image node requires a 'source'", parameter_name="source", parameter_value=data)
    return ImageDescriptor(source=data["source"], title=data.get("title") or "", alt=data.get("alt") or "")


def cover_from_dict(data: Optional[Mapping[str, Any]]) -> Optional[Cover]:
    """Rebuild a cover, passing None through."""
    if data is None:
        return None
    if "image" not in data:
        raise ValidationError("Cover requires an 'image'", parameter_name="image", parameter_value=data)
    return Cover(image=data["image"], title=data.get("title") or "", alt=data.get("alt") or "")


def result_from_dict(data: Mapping[str, Any]) -> ConversionResult:
    """Rebuild a :class:`ConversionResult` from ``{cover, content}``."""
    return ConversionResult(
        cover=cover_from_dict(data.get("cover")),
        content=nodes_from_dicts(data.get("content") or []),
    )


def result_to_json(result: ConversionResult, indent: Optional[int] = None) -> str:
    """Serialize a conversion result to JSON text."""
    return json.dumps(result.to_dict(), indent=indent, ensure_ascii=False)


def result_from_json(text: str) -> ConversionResult:
    """Parse JSON text produced by :func:`result_to_json`.

    Raises
    ------
    ValidationError
        If the text is not valid JSON or does not describe a result

    """
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise ValidationError(f"Invalid intermediate JSON: {e}", original_error=e) from e
    if not isinstance(data, dict):
        raise ValidationError("Intermediate JSON must be an object with 'cover' and 'content'")
    return result_from_dict(data)
