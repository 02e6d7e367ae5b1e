"""
Unit Tests for the HTML Deserializer

Tests for deserialize() tag mapping, marks, whitespace handling and
fallbacks on malformed input.
"""

import logging

import pytest

from richtext_toolkit.codec import deserializer as deserializer_module
from richtext_toolkit.codec.config import DeserializerConfig
from richtext_toolkit.codec.deserializer import deserialize, map_node
from richtext_toolkit.codec.html_fragment import parse_html_fragment
from richtext_toolkit.core.models import TextNode


def _para(*children):
    return {"type": "paragraph", "children": list(children)}


def _item(*children):
    return {"type": "list-item", "children": list(children)}


class TestDeserializeFallbacks:
    """Inputs with nothing to parse give the canonical empty document."""

    @pytest.mark.parametrize("value", [None, "", 0, ["<p>x</p>"], {"html": "<p>x</p>"}])
    def test_deserialize_when_empty_or_not_string_then_empty_document(self, value, empty_tree):
        assert deserialize(value).to_list() == empty_tree

    def test_deserialize_when_whitespace_only_then_empty_document(self, empty_tree):
        assert deserialize("  \n\t ").to_list() == empty_tree

    def test_deserialize_when_only_comment_then_empty_document(self, empty_tree):
        assert deserialize("<!-- draft -->").to_list() == empty_tree

    def test_deserialize_when_parser_fails_then_logs_and_returns_empty(self, monkeypatch, caplog, empty_tree):
        """Parser exceptions are caught at the boundary."""
        def broken(html):
            raise ValueError("parser exploded")

        monkeypatch.setattr(deserializer_module, "parse_html_fragment", broken)
        with caplog.at_level(logging.WARNING, logger="richtext_toolkit.codec.deserializer"):
            result = deserialize("<p>x</p>")

        assert result.to_list() == empty_tree
        assert "could not parse stored HTML" in caplog.text


class TestDeserializeBlocks:
    """Tests for block tag mapping."""

    def test_deserialize_when_paragraph_with_bold_then_leaves_split(self):
        result = deserialize("<p>Hello <strong>world</strong></p>")
        assert result.to_list() == [_para({"text": "Hello "}, {"text": "world", "bold": True})]

    def test_deserialize_when_pre_then_code_block(self):
        result = deserialize("<pre>x = 1\ny = 2</pre>")
        assert result.to_list() == [{"type": "code-block", "children": [{"text": "x = 1\ny = 2"}]}]

    def test_deserialize_when_ordered_list_then_numbered(self):
        result = deserialize("<ol><li>a</li><li>b</li></ol>")
        assert result.to_list() == [{"type": "numbered-list", "children": [_item({"text": "a"}), _item({"text": "b"})]}]

    def test_deserialize_when_list_child_not_item_then_wrapped(self):
        """Non-item list children each get their own list item."""
        result = deserialize("<ul><span>a</span></ul>")
        assert result.to_list() == [{"type": "bulleted-list", "children": [_item({"text": "a"})]}]

    def test_deserialize_when_empty_list_then_one_empty_item(self):
        result = deserialize("<ul></ul>")
        assert result.to_list() == [{"type": "bulleted-list", "children": [_item({"text": ""})]}]

    def test_deserialize_when_empty_paragraph_then_empty_leaf(self, empty_tree):
        assert deserialize("<p></p>").to_list() == empty_tree

    def test_deserialize_when_unknown_tags_then_children_kept(self):
        """Structure of foreign tags is dropped, content is kept."""
        result = deserialize('<div class="x"><p>a</p><span>b</span></div>')
        assert result.to_list() == [_para({"text": "a"}), _para({"text": "b"})]

    def test_deserialize_when_br_then_newline_leaf(self):
        assert deserialize("<p>a<br>b</p>").to_list() == [_para({"text": "a\nb"})]

    def test_deserialize_when_nested_list_then_structure_kept(self):
        result = deserialize("<ul><li><p>a</p><ul><li>b</li></ul></li></ul>")
        assert result.to_list() == [{
            "type": "bulleted-list",
            "children": [_item(
                _para({"text": "a"}),
                {"type": "bulleted-list", "children": [_item({"text": "b"})]},
            )],
        }]

    def test_deserialize_when_attributes_present_then_ignored(self):
        html = '<pre class="bg-gray-900 text-white">code</pre>'
        assert deserialize(html).to_list() == [{"type": "code-block", "children": [{"text": "code"}]}]


class TestDeserializeMarks:
    """Tests for inline mark tags."""

    def test_deserialize_when_nested_marks_then_all_set(self):
        result = deserialize("<p><strong><em><code>x</code></em></strong></p>")
        assert result.to_list() == [_para({"text": "x", "bold": True, "italic": True, "code": True})]

    def test_deserialize_when_mark_wraps_block_then_leaves_marked(self):
        """Marks go on leaves inside blocks, never on the blocks."""
        result = deserialize("<strong><p>a</p></strong>")
        assert result.to_list() == [_para({"text": "a", "bold": True})]

    def test_deserialize_when_empty_mark_tag_then_marked_empty_leaf(self):
        assert deserialize("<p><em></em></p>").to_list() == [_para({"text": "", "italic": True})]

    def test_deserialize_when_entities_then_unescaped(self):
        assert deserialize("<p>a &lt; b &amp; c</p>").to_list() == [_para({"text": "a < b & c"})]


class TestDeserializeLegacyText:
    """Stored fields that hold plain text rather than HTML."""

    def test_deserialize_when_plain_text_then_single_paragraph(self):
        assert deserialize("What is 2 + 2?").to_list() == [_para({"text": "What is 2 + 2?"})]

    def test_deserialize_when_filename_like_text_then_paragraph(self):
        """Text that looks like a file name is still just text."""
        assert deserialize("answer.txt").to_list() == [_para({"text": "answer.txt"})]

    def test_deserialize_when_text_beside_blocks_then_wrapped(self):
        result = deserialize("Intro <em>here</em><p>Body</p>")
        assert result.to_list() == [
            _para({"text": "Intro "}, {"text": "here", "italic": True}),
            _para({"text": "Body"}),
        ]


class TestStructuralWhitespace:
    """Tests for DeserializerConfig.drop_structural_whitespace."""

    PRETTY = "<ul>\n  <li>a</li>\n  <li>b</li>\n</ul>\n<p>c</p>\n"

    def test_deserialize_when_pretty_printed_then_indentation_dropped(self):
        result = deserialize(self.PRETTY)
        assert result.to_list() == [
            {"type": "bulleted-list", "children": [_item({"text": "a"}), _item({"text": "b"})]},
            _para({"text": "c"}),
        ]

    def test_deserialize_when_whitespace_kept_then_extra_nodes(self):
        config = DeserializerConfig(drop_structural_whitespace=False)
        result = deserialize(self.PRETTY, config)
        bullets = result.to_list()[0]
        assert len(bullets["children"]) == 5
        assert bullets["children"][0] == _item({"text": "\n  "})

    def test_deserialize_when_whitespace_inside_paragraph_then_kept(self):
        assert deserialize("<p> </p>").to_list() == [_para({"text": " "})]


class TestMapNode:
    """Tests for map_node() on parsed nodes."""

    def test_map_node_when_text_then_one_leaf(self):
        root = parse_html_fragment("plain")
        assert map_node(root.contents[0]) == [TextNode("plain")]

    def test_map_node_when_comment_then_nothing(self):
        root = parse_html_fragment("<!-- note -->")
        assert map_node(root.contents[0]) == []

    def test_map_node_when_mark_tag_then_flattened(self):
        root = parse_html_fragment("<em>a<strong>b</strong></em>")
        assert map_node(root.contents[0]) == [
            TextNode("a", italic=True),
            TextNode("b", bold=True, italic=True),
        ]
