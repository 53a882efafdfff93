"""Test utilities for the gdoc2md test suite.

Builders for Google Docs API document fragments. Every builder returns plain
dicts shaped like the ``documents.get`` response so tests read close to the
real payloads.
"""

from typing import Any, Optional


def text_run(content: str, **style: Any) -> dict:
    """Build a ``textRun`` paragraph element; keyword arguments become the text style."""
    if "link" in style and isinstance(style["link"], str):
        style["link"] = {"url": style["link"]}
    return {"textRun": {"content": content, "textStyle": style}}


def inline_object(object_id: str) -> dict:
    """Build an ``inlineObjectElement`` paragraph element."""
    return {"inlineObjectElement": {"inlineObjectId": object_id}}


def image_object(content_uri: str, title: Optional[str] = None, description: Optional[str] = None) -> dict:
    """Build an ``inlineObjects`` entry holding an image."""
    embedded: dict = {"imageProperties": {"contentUri": content_uri}}
    if title is not None:
        embedded["title"] = title
    if description is not None:
        embedded["description"] = description
    return {"inlineObjectProperties": {"embeddedObject": embedded}}


def drawing_object() -> dict:
    """Build an ``inlineObjects`` entry without image properties."""
    return {"inlineObjectProperties": {"embeddedObject": {"embeddedDrawingProperties": {}}}}


def paragraph(*elements: dict, style: str = "NORMAL_TEXT", bullet: Optional[dict] = None) -> dict:
    """Build a paragraph block, appending the terminating newline run."""
    para: dict = {
        "paragraphStyle": {"namedStyleType": style},
        "elements": [*elements, text_run("\n")],
    }
    if bullet is not None:
        para["bullet"] = bullet
    return {"paragraph": para}


def bullet_paragraph(text: str, list_id: str, nesting_level: Optional[int] = None) -> dict:
    """Build a single-run bulleted paragraph."""
    bullet: dict = {"listId": list_id}
    if nesting_level is not None:
        bullet["nestingLevel"] = nesting_level
    return paragraph(text_run(text), bullet=bullet)


def list_definition(ordered: bool = False) -> dict:
    """Build a ``lists`` entry; ordered lists carry a glyph type at level 0."""
    level = {"glyphType": "DECIMAL"} if ordered else {"glyphSymbol": "●"}
    return {"listProperties": {"nestingLevels": [level, dict(level)]}}


def table(*rows: list) -> dict:
    """Build a table block from rows of cell strings."""
    return {
        "table": {
            "rows": len(rows),
            "tableRows": [
                {"tableCells": [{"content": [paragraph(text_run(cell))]} for cell in row]} for row in rows
            ],
        }
    }


def make_document(
    *blocks: dict,
    title: Optional[str] = None,
    lists: Optional[dict] = None,
    inline_objects: Optional[dict] = None,
    headers: Optional[dict] = None,
    first_page_header_id: Optional[str] = None,
) -> dict:
    """Assemble a document from body blocks and registries."""
    document: dict = {
        "documentId": "doc-1",
        "body": {"content": list(blocks)},
        "lists": lists or {},
        "inlineObjects": inline_objects or {},
        "headers": headers or {},
        "documentStyle": {},
    }
    if title is not None:
        document["title"] = title
    if first_page_header_id is not None:
        document["documentStyle"]["firstPageHeaderId"] = first_page_header_id
    return document
