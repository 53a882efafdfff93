#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/gdoc2md/utils/metadata.py

"""Metadata collection and YAML front matter utilities for gdoc2md.

Document-level fields (title, cover) are gathered into a plain mapping and
serialized with PyYAML for the front matter block of the Markdown output.
"""

from __future__ import annotations

from typing import Any, Dict, Mapping, Optional

import yaml

from gdoc2md.nodes import Cover


def _value_is_meaningful(value: Any) -> bool:
    """Return True if the metadata value should be rendered."""
    if value is None:
        return False
    if isinstance(value, str):
        return bool(value.strip())
    if isinstance(value, (list, tuple, set, dict)):
        return bool(value)
    return True


def build_metadata(
    document: Mapping[str, Any],
    cover: Optional[Cover] = None,
    extra: Optional[Mapping[str, Any]] = None,
) -> Dict[str, Any]:
    """Collect front matter fields for a converted document.

    Parameters
    ----------
    document : Mapping
        The Google Docs document; only its ``title`` is read
    cover : Cover or None
        Cover image found during conversion
    extra : Mapping or None
        Caller-supplied fields, which override collected ones

    Returns
    -------
    dict
        Ordered metadata with empty values removed

    Examples
    --------
        >>> build_metadata({"title": "Notes"}, extra={"draft": True})
        {'title': 'Notes', 'draft': True}

    """
    metadata: Dict[str, Any] = {"title": document.get("title")}
    if cover is not None:
        metadata["cover"] = cover.to_dict()
    if extra:
        metadata.update(extra)

    return {key: value for key, value in metadata.items() if _value_is_meaningful(value)}


def format_yaml_block(metadata: Mapping[str, Any]) -> str:
    """Serialize metadata as a block-style YAML document without a trailing newline.

    Examples
    --------
        >>> format_yaml_block({"title": "T"})
        'title: T'

    """
    yaml_content = yaml.safe_dump(
        dict(metadata),
        sort_keys=False,
        default_flow_style=False,
        allow_unicode=True,
    )
    return yaml_content.rstrip("\n")
