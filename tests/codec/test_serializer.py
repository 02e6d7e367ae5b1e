"""
Unit Tests for the HTML Serializer

Tests for serialize() output per node kind, mark nesting, escaping and
handling of bad input.
"""

import pytest

from richtext_toolkit.codec.config import SerializerConfig, TAILWIND_CLASS_NAMES
from richtext_toolkit.codec.serializer import serialize
from richtext_toolkit.core.models import BlockKind, Document, ElementNode, TextNode


class TestSerializeText:
    """Tests for text leaves."""

    def test_serialize_when_plain_leaf_then_text(self):
        assert serialize(TextNode("hi")) == "hi"

    def test_serialize_when_bold_italic_then_bold_outermost(self):
        assert serialize(TextNode("x", bold=True, italic=True)) == "<strong><em>x</em></strong>"

    def test_serialize_when_all_marks_then_code_innermost(self):
        leaf = TextNode("x", bold=True, italic=True, code=True)
        assert serialize(leaf) == "<strong><em><code>x</code></em></strong>"

    def test_serialize_when_markup_in_text_then_escaped(self):
        """Raw text never turns into markup."""
        assert serialize(TextNode("a < b && <p>")) == "a &lt; b &amp;&amp; &lt;p&gt;"

    def test_serialize_when_quotes_in_text_then_kept(self):
        assert serialize(TextNode('say "hi"')) == 'say "hi"'


class TestSerializeBlocks:
    """Tests for element kinds."""

    @pytest.mark.parametrize("kind,tag", [
        (BlockKind.PARAGRAPH, "p"),
        (BlockKind.CODE_BLOCK, "pre"),
        (BlockKind.BULLETED_LIST, "ul"),
        (BlockKind.NUMBERED_LIST, "ol"),
        (BlockKind.LIST_ITEM, "li"),
    ])
    def test_serialize_when_kind_then_matching_tag(self, kind, tag):
        node = ElementNode(kind, (TextNode("a"),))
        assert serialize(node) == f"<{tag}>a</{tag}>"

    def test_serialize_when_document_then_concatenated(self, mixed_document):
        assert serialize(mixed_document) == (
            "<p>Hello <strong>world</strong></p>"
            "<ul><li>one</li><li><em>two</em></li></ul>"
            "<pre>x = 1\ny = 2</pre>"
        )

    def test_serialize_when_empty_document_then_empty_paragraph(self):
        assert serialize(Document.empty()) == "<p></p>"

    def test_serialize_when_list_of_nodes_then_same_as_document(self, mixed_document):
        assert serialize(list(mixed_document.blocks)) == serialize(mixed_document)


class TestSerializeBadInput:
    """Bad input serializes to something, never raises."""

    @pytest.mark.parametrize("value", [None, [], 5, "text"])
    def test_serialize_when_unusable_then_empty_string(self, value):
        assert serialize(value) == ""

    def test_serialize_when_null_entries_then_skipped(self):
        assert serialize([None, TextNode("a"), 7]) == "a"

    def test_serialize_when_raw_dicts_then_same_output(self, mixed_document):
        """Legacy editor dicts serialize like their model form."""
        assert serialize(mixed_document.to_list()) == serialize(mixed_document)

    def test_serialize_when_unknown_kind_then_children_unwrapped(self):
        raw = {"type": "heading", "children": [{"text": "T", "bold": True}]}
        assert serialize(raw) == "<strong>T</strong>"

    def test_serialize_when_dict_children_missing_then_empty_tag(self):
        assert serialize({"type": "paragraph"}) == "<p></p>"


class TestSerializeConfig:
    """Tests for class attributes from SerializerConfig."""

    def test_serialize_when_tailwind_classes_then_attributes_emitted(self):
        config = SerializerConfig(class_names=TAILWIND_CLASS_NAMES)
        doc = Document((
            ElementNode(BlockKind.BULLETED_LIST, (ElementNode(BlockKind.LIST_ITEM, (TextNode("a", code=True),)),)),
        ))
        assert serialize(doc, config) == (
            '<ul class="list-disc pl-6"><li><code class="bg-gray-100 px-1 rounded">a</code></li></ul>'
        )

    def test_config_when_unknown_key_then_raises(self):
        with pytest.raises(ValueError, match="unknown keys"):
            SerializerConfig(class_names={"heading": "big"})

    def test_config_when_quote_in_value_then_raises(self):
        with pytest.raises(ValueError, match="without quotes"):
            SerializerConfig(class_names={"paragraph": 'a" onclick="x'})
