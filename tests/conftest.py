"""Pytest configuration and shared fixtures for the gdoc2md test suite."""

import json
import logging
from pathlib import Path

import pytest
from utils import (
    bullet_paragraph,
    image_object,
    inline_object,
    list_definition,
    make_document,
    paragraph,
    table,
    text_run,
)

# Configure Hypothesis for property-based testing
try:
    from hypothesis import settings

    settings.register_profile("ci", max_examples=100)
    settings.register_profile("dev", max_examples=20)

    import os

    settings.load_profile(os.getenv("HYPOTHESIS_PROFILE", "dev"))
except ImportError:
    pass


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests - fast, isolated component tests")
    config.addinivalue_line("markers", "integration: Integration tests - component interaction tests")
    config.addinivalue_line("markers", "cli: Tests related to command-line interface")


@pytest.fixture
def sample_document() -> dict:
    """Provide a document exercising every block type.

    Returns
    -------
    dict
        Google Docs API document with a cover, headings, styled text,
        an ordered list with a nested item, an unordered list, an image
        and a table.

    """
    return make_document(
        paragraph(text_run("Release Notes"), style="HEADING_1"),
        paragraph(text_run("Quarterly summary"), style="SUBTITLE"),
        paragraph(text_run("This release is"), text_run("stable", bold=True), text_run(".")),
        bullet_paragraph("Install", "ol-1"),
        bullet_paragraph("Download the wheel", "ol-1", nesting_level=1),
        bullet_paragraph("Configure", "ol-1"),
        paragraph(text_run("See the diagram:"), inline_object("img-1")),
        bullet_paragraph("Fast", "ul-1"),
        bullet_paragraph("Small", "ul-1"),
        table(["Name", "Value"], ["alpha", "1"], ["beta", "2"]),
        title="Release Notes",
        lists={"ol-1": list_definition(ordered=True), "ul-1": list_definition()},
        inline_objects={
            "img-1": image_object("https://img.example/diagram.png", title="Diagram", description="Flow"),
            "cover-1": image_object("https://img.example/cover.png", title="Cover", description="Hero"),
        },
        headers={"kix.header": {"content": [paragraph(inline_object("cover-1"))]}},
        first_page_header_id="kix.header",
    )


@pytest.fixture
def sample_document_file(tmp_path: Path, sample_document: dict) -> Path:
    """Write the sample document to a JSON file."""
    path = tmp_path / "document.json"
    path.write_text(json.dumps(sample_document), encoding="utf-8")
    return path


@pytest.fixture
def package_logger():
    """Provide the ``gdoc2md`` logger and restore its handlers, level and propagation afterwards."""
    logger = logging.getLogger("gdoc2md")
    saved_handlers, saved_level, saved_propagate = logger.handlers[:], logger.level, logger.propagate
    yield logger
    for handler in logger.handlers:
        if handler not in saved_handlers:
            handler.close()
    logger.handlers[:] = saved_handlers
    logger.setLevel(saved_level)
    logger.propagate = saved_propagate
