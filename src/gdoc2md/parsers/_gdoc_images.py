#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/gdoc2md/parsers/_gdoc_images.py
"""Inline image and cover resolution for the Google Docs parser."""

from __future__ import annotations

import logging
from typing import Any, Mapping, Optional

from gdoc2md.exceptions import MalformedDocumentError
from gdoc2md.nodes import Cover, ImageDescriptor

logger = logging.getLogger(__name__)


def resolve_image(document: Mapping[str, Any], element: Mapping[str, Any]) -> Optional[ImageDescriptor]:
    """Dereference an ``inlineObjectElement`` into an image descriptor.

    Parameters
    ----------
    document : Mapping
        The full Google Docs document
    element : Mapping
        Paragraph element holding an ``inlineObjectElement``

    Returns
    -------
    ImageDescriptor or None
        The image, or None when the embedded object has no image properties

    Raises
    ------
    MalformedDocumentError
        If the referenced inline object does not exist in the document

    """
    object_id = element["inlineObjectElement"].get("inlineObjectId")
    inline_objects = document.get("inlineObjects") or {}

    if object_id not in inline_objects:
        raise MalformedDocumentError(
            f"Inline object {object_id!r} is referenced but not defined in the document",
            object_id=object_id,
            parsing_stage="image_resolution",
        )

    properties = inline_objects[object_id].get("inlineObjectProperties") or {}
    embedded_object = properties.get("embeddedObject") or {}
    image_properties = embedded_object.get("imageProperties")

    if not image_properties:
        logger.debug("Inline object %s has no image properties", object_id)
        return None

    return ImageDescriptor(
        source=image_properties.get("contentUri", ""),
        title=embedded_object.get("title") or "",
        alt=embedded_object.get("description") or "",
    )


def require_image(document: Mapping[str, Any], element: Mapping[str, Any]) -> ImageDescriptor:
    """Resolve an inline object that must be an image.

    Raises
    ------
    MalformedDocumentError
        If the object is missing or carries no image properties

    """
    image = resolve_image(document, element)
    if image is None:
        object_id = element["inlineObjectElement"].get("inlineObjectId")
        raise MalformedDocumentError(
            f"Inline object {object_id!r} has no image properties",
            object_id=object_id,
            parsing_stage="image_resolution",
        )
    return image


def extract_cover(document: Mapping[str, Any]) -> Optional[Cover]:
    """Extract the cover image from the document's first-page header.

    Only the first element of the first paragraph of that header is
    considered; a cover preceded by any other header content is not found.

    Parameters
    ----------
    document : Mapping
        The full Google Docs document

    Returns
    -------
    Cover or None
        The cover, or None when there is no first-page header image

    """
    document_style = document.get("documentStyle") or {}
    header_id = document_style.get("firstPageHeaderId")
    headers = document.get("headers") or {}

    if not header_id or header_id not in headers:
        return None

    content = headers[header_id].get("content") or []
    if not content:
        return None

    elements = (content[0].get("paragraph") or {}).get("elements") or []
    if not elements or "inlineObjectElement" not in elements[0]:
        return None

    image = resolve_image(document, elements[0])
    if image is None:
        return None

    logger.debug("Found cover image in header %s", header_id)
    return Cover.from_image(image)
