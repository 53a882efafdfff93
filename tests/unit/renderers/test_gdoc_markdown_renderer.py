#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/renderers/test_gdoc_markdown_renderer.py
"""Unit tests for MarkdownRenderer and front matter assembly.

Tests cover:
- Rendering each node type to Markdown
- Renderer options (bullet symbol, pipe escaping)
- Exact front matter delimiter layout

"""

import pytest

from gdoc2md.constants import ParagraphTag
from gdoc2md.exceptions import InvalidOptionsError, RenderingError, ValidationError
from gdoc2md.nodes import ImageBlock, ImageDescriptor, ListBlock, TableBlock, TextBlock
from gdoc2md.options import GoogleDocOptions, MarkdownRendererOptions
from gdoc2md.renderers.markdown import MarkdownRenderer, assemble_markdown, convert_json_to_markdown


@pytest.mark.unit
class TestBlockRendering:
    """Tests for individual node rendering."""

    def test_empty_content(self):
        assert MarkdownRenderer().render_nodes([]) == ""

    def test_paragraph(self):
        assert MarkdownRenderer().render_nodes([TextBlock(ParagraphTag.PARAGRAPH, "Hello **world**")]) == (
            "Hello **world**\n"
        )

    @pytest.mark.parametrize("tag,prefix", [(ParagraphTag.H1, "#"), (ParagraphTag.H3, "###"), (ParagraphTag.H5, "#####")])
    def test_headings(self, tag, prefix):
        assert MarkdownRenderer().render_nodes([TextBlock(tag, "Title")]) == f"{prefix} Title\n"

    def test_blockquote(self):
        assert MarkdownRenderer().render_nodes([TextBlock(ParagraphTag.BLOCKQUOTE, "Quoted")]) == "> Quoted\n"

    def test_image(self):
        node = ImageBlock(ImageDescriptor("https://x/a.png", "Title", "Alt"))
        assert MarkdownRenderer().render_nodes([node]) == '![Alt](https://x/a.png "Title")\n'

    def test_unordered_list(self):
        assert MarkdownRenderer().render_nodes([ListBlock(items=["a", "b"])]) == "- a\n- b\n"

    def test_ordered_list(self):
        assert MarkdownRenderer().render_nodes([ListBlock(ordered=True, items=["a", "b"])]) == "1. a\n2. b\n"

    def test_nested_continuation_lines_are_kept(self):
        node = ListBlock(items=["Parent\n  -  Child", "Next"])
        assert MarkdownRenderer().render_nodes([node]) == "- Parent\n  -  Child\n- Next\n"

    def test_bullet_symbol_option(self):
        renderer = MarkdownRenderer(MarkdownRendererOptions(bullet_symbol="*"))
        assert renderer.render_nodes([ListBlock(items=["a"])]) == "* a\n"

    def test_table(self):
        node = TableBlock(headers=["A", "B"], rows=[["1", "2"]])
        assert MarkdownRenderer().render_nodes([node]) == "| A | B |\n|---|---|\n| 1 | 2 |\n"

    def test_table_rows_padded_and_cut(self):
        node = TableBlock(headers=["A", "B"], rows=[["1"], ["1", "2", "3"]])
        assert MarkdownRenderer().render_nodes([node]) == "| A | B |\n|---|---|\n| 1 |  |\n| 1 | 2 |\n"

    def test_table_pipe_escape(self):
        node = TableBlock(headers=["a|b"], rows=[])
        assert MarkdownRenderer().render_nodes([node]).startswith("| a\\|b |")
        unescaped = MarkdownRenderer(MarkdownRendererOptions(table_pipe_escape=False))
        assert unescaped.render_nodes([node]).startswith("| a|b |")

    def test_table_without_columns_renders_nothing(self):
        assert MarkdownRenderer().render_nodes([TableBlock()]) == ""

    def test_blocks_separated_by_blank_line(self):
        nodes = [TextBlock(ParagraphTag.H1, "T"), TextBlock(ParagraphTag.PARAGRAPH, "Body")]
        assert MarkdownRenderer().render_nodes(nodes) == "# T\n\nBody\n"

    def test_empty_blocks_are_skipped(self):
        nodes = [TextBlock(ParagraphTag.PARAGRAPH, "a"), TextBlock(ParagraphTag.PARAGRAPH, ""), TextBlock(ParagraphTag.PARAGRAPH, "b")]
        assert MarkdownRenderer().render_nodes(nodes) == "a\n\nb\n"

    def test_non_node_raises(self):
        with pytest.raises(RenderingError):
            MarkdownRenderer().render_nodes([{"h1": "T"}])


@pytest.mark.unit
class TestAssembly:
    """Tests for front matter assembly."""

    def test_exact_layout(self):
        assert assemble_markdown([TextBlock(ParagraphTag.H1, "T")], {"title": "T"}) == "---\ntitle: T\n---\n\n# T\n"

    def test_mapping_form(self):
        data = {"content": [{"h1": "T"}], "metadata": {"title": "T"}}
        assert convert_json_to_markdown(data) == "---\ntitle: T\n---\n\n# T\n"

    def test_metadata_key_order_is_preserved(self):
        output = assemble_markdown([], {"title": "T", "author": "A", "date": "2025-01-31"})
        assert output.startswith("---\ntitle: T\nauthor: A\ndate: '2025-01-31'\n---\n\n")

    def test_nested_metadata(self):
        output = assemble_markdown([], {"cover": {"image": "c.png", "title": "", "alt": ""}})
        assert output == "---\ncover:\n  image: c.png\n  title: ''\n  alt: ''\n---\n\n"

    def test_unknown_node_tag_in_mapping_form(self):
        with pytest.raises(ValidationError):
            convert_json_to_markdown({"content": [{"marquee": "x"}], "metadata": {}})

    def test_wrong_options_type(self):
        with pytest.raises(InvalidOptionsError):
            MarkdownRenderer(GoogleDocOptions())

    def test_invalid_bullet_symbol(self):
        with pytest.raises(ValueError):
            MarkdownRendererOptions(bullet_symbol="~")

    def test_render_to_path(self, tmp_path):
        out = tmp_path / "out.md"
        MarkdownRenderer().render([TextBlock(ParagraphTag.H1, "T")], {"title": "T"}, out)
        assert out.read_text(encoding="utf-8") == "---\ntitle: T\n---\n\n# T\n"
