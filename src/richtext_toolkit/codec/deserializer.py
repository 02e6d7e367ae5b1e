"""
Module: codec.deserializer

Purpose:
    HTML string -> Document. Copes with arbitrary stored markup: whatever
    the parser hands back is mapped onto the supported vocabulary, and the
    result is always passed through ``normalize`` so the invariants hold no
    matter how malformed the source was.

Key Functions:
    - deserialize(html, config): HTML string -> Document (never raises)
    - map_node(node, config): One parsed node -> list of document nodes

Dependencies:
    - beautifulsoup4 (via codec.html_fragment)
    - core.normalizer

Used By:
    - codec.fields
    - content.question_content

Tag mapping:
    p -> paragraph, pre -> code-block, ul/ol -> lists (non-item children
    wrapped in list items), li -> list-item, strong/em/code -> mark on every
    leaf inside, br -> "\\n" leaf. Any other tag passes its children through.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Dict, List, Optional

from richtext_toolkit.core.models.document import Document
from richtext_toolkit.core.models.nodes import ElementNode, Node, TextNode, empty_leaf
from richtext_toolkit.core.models.vocabulary import BlockKind, Mark
from richtext_toolkit.core.normalizer import normalize

from .config import DEFAULT_DESERIALIZER_CONFIG, DeserializerConfig
from .html_fragment import is_element, is_text, parse_html_fragment, tag_name

logger = logging.getLogger(__name__)

BLOCK_KINDS_BY_TAG: Dict[str, BlockKind] = {
    "p": BlockKind.PARAGRAPH,
    "pre": BlockKind.CODE_BLOCK,
    "ul": BlockKind.BULLETED_LIST,
    "ol": BlockKind.NUMBERED_LIST,
    "li": BlockKind.LIST_ITEM,
}

MARKS_BY_TAG: Dict[str, Mark] = {
    "strong": Mark.BOLD,
    "em": Mark.ITALIC,
    "code": Mark.CODE,
}

# Containers whose direct whitespace-only text is layout, not content.
_STRUCTURAL_TAGS = frozenset({"ul", "ol"})


def deserialize(html: Any, config: Optional[DeserializerConfig] = None) -> Document:
    """
    Parse stored HTML into a Document.

    Args:
        html: Stored field value. None, ``''`` and non-strings give the
            canonical empty document. Plain text (no markup) becomes a
            single paragraph.
        config: Input options

    Returns:
        Normalized Document. Parser failures are logged and give the
        canonical empty document.

    Example:
        >>> deserialize("<p>Hello <strong>world</strong></p>").to_list()
        [{'type': 'paragraph', 'children': [{'text': 'Hello '}, {'text': 'world', 'bold': True}]}]
    """
    if not html or not isinstance(html, str):
        logger.debug(f"deserialize: empty or non-string input ({type(html).__name__}), using empty document")
        return Document.empty()

    config = config or DEFAULT_DESERIALIZER_CONFIG
    try:
        root = parse_html_fragment(html)
        nodes = _map_children(root, config, structural=True)
    except Exception as e:
        logger.warning(f"deserialize: could not parse stored HTML, using empty document: {e!r}")
        return Document.empty()

    if not nodes:
        return Document.empty()
    return normalize(nodes)


def map_node(node: Any, config: Optional[DeserializerConfig] = None) -> List[Node]:
    """
    Map one parsed node to document nodes.

    Text with content gives one leaf; empty text, comments and other
    markup declarations give nothing. Elements map their children and never
    come back empty-handed: a childless element wraps an empty leaf.
    """
    config = config or DEFAULT_DESERIALIZER_CONFIG
    if is_text(node):
        text = str(node)
        return [TextNode(text)] if text else []
    if not is_element(node):
        return []

    name = tag_name(node)
    if name == "br":
        return [TextNode("\n")]

    children = _map_children(node, config, structural=name in _STRUCTURAL_TAGS)
    if not children:
        children = [empty_leaf()]

    kind = BLOCK_KINDS_BY_TAG.get(name)
    if kind is not None:
        if kind.is_list:
            children = [
                child if _is_list_item(child) else ElementNode(BlockKind.LIST_ITEM, (child,))
                for child in children
            ]
        return [ElementNode(kind, tuple(children))]

    mark = MARKS_BY_TAG.get(name)
    if mark is not None:
        return [_apply_mark(child, mark) for child in children]

    return children


# ─────────────────────────────────────────────────────────────────────────────
# Helpers
# ─────────────────────────────────────────────────────────────────────────────

def _map_children(parent: Any, config: DeserializerConfig, *, structural: bool) -> List[Node]:
    skip_blank: Callable[[Any], bool] = (
        _is_blank_text if structural and config.drop_structural_whitespace else lambda _: False
    )
    mapped: List[Node] = []
    for child in parent.contents:
        if skip_blank(child):
            continue
        mapped.extend(map_node(child, config))
    return mapped


def _is_blank_text(node: Any) -> bool:
    return is_text(node) and not str(node).strip()


def _is_list_item(node: Node) -> bool:
    return isinstance(node, ElementNode) and node.kind == BlockKind.LIST_ITEM


def _apply_mark(node: Node, mark: Mark) -> Node:
    """Set ``mark`` on every leaf in ``node``; elements never carry marks."""
    if isinstance(node, TextNode):
        return node.with_mark(mark)
    return node.with_children(tuple(_apply_mark(child, mark) for child in node.children))
