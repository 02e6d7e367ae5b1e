"""
Module: codec.serializer

Purpose:
    Document tree -> HTML string. This is the only wire format that
    crosses the persistence boundary.

Key Functions:
    - serialize(nodes, config): Document / node / node list -> HTML

Dependencies:
    - html (std): text escaping
    - core.models

Used By:
    - codec.fields
    - content.question_content

Output rules:
    - Text is HTML-escaped, then wrapped in marks with code innermost and
      bold outermost: <strong><em><code>x</code></em></strong>
    - paragraph -> <p>, code-block -> <pre>, bulleted-list -> <ul>,
      numbered-list -> <ol>, list-item -> <li>
    - Unrecognized element kinds emit their children unwrapped
    - None and non-object entries emit nothing
"""

from __future__ import annotations

import logging
from html import escape
from typing import Any, Iterable, Mapping, Optional

from richtext_toolkit.core.models.document import Document
from richtext_toolkit.core.models.nodes import ElementNode, TextNode
from richtext_toolkit.core.models.vocabulary import BlockKind, Mark, MARK_NESTING
from richtext_toolkit.core.normalizer import looks_like_text

from .config import DEFAULT_SERIALIZER_CONFIG, SerializerConfig

logger = logging.getLogger(__name__)

BLOCK_TAGS: dict[BlockKind, str] = {
    BlockKind.PARAGRAPH: "p",
    BlockKind.CODE_BLOCK: "pre",
    BlockKind.BULLETED_LIST: "ul",
    BlockKind.NUMBERED_LIST: "ol",
    BlockKind.LIST_ITEM: "li",
}

MARK_TAGS: dict[Mark, str] = {
    Mark.BOLD: "strong",
    Mark.ITALIC: "em",
    Mark.CODE: "code",
}


def serialize(nodes: Any, config: Optional[SerializerConfig] = None) -> str:
    """
    Serialize nodes to HTML.

    Args:
        nodes: A Document, a single node, or a list/tuple of nodes. Raw
            editor dicts are accepted too.
        config: Output options (defaults to no class attributes)

    Returns:
        HTML string; ``''`` for None or unusable input. Never raises.

    Example:
        >>> serialize(TextNode("x", bold=True, italic=True))
        '<strong><em>x</em></strong>'
    """
    config = config or DEFAULT_SERIALIZER_CONFIG
    if nodes is None:
        return ""
    if isinstance(nodes, Document):
        items: Iterable[Any] = nodes.blocks
    elif isinstance(nodes, (list, tuple)):
        items = nodes
    else:
        items = (nodes,)

    try:
        return _serialize_all(items, config)
    except Exception as e:
        logger.warning(f"serialize: could not serialize tree: {e!r}")
        return ""


def _serialize_all(items: Iterable[Any], config: SerializerConfig) -> str:
    return "".join(_serialize_node(node, config) for node in items)


def _serialize_node(node: Any, config: SerializerConfig) -> str:
    if isinstance(node, TextNode):
        return _serialize_text(node.text, node.marks, config)
    if isinstance(node, ElementNode):
        return _wrap_block(node.kind, _serialize_all(node.children, config), config)
    if not isinstance(node, Mapping):
        return ""

    # Raw editor dicts, e.g. legacy trees handed over unnormalized
    if looks_like_text(node):
        text = node.get("text")
        marks = frozenset(m for m in Mark if node.get(m.value))
        return _serialize_text("" if text is None else str(text), marks, config)

    children = node.get("children")
    inner = _serialize_all(children, config) if isinstance(children, (list, tuple)) else ""
    return _wrap_block(BlockKind.parse(node.get("type", node.get("kind"))), inner, config)


def _serialize_text(text: str, marks: frozenset[Mark], config: SerializerConfig) -> str:
    html = escape(text, quote=False)
    for mark in MARK_NESTING:
        if mark in marks:
            html = _wrap(MARK_TAGS[mark], html, config.class_for(mark.value))
    return html


def _wrap_block(kind: Optional[BlockKind], inner: str, config: SerializerConfig) -> str:
    if kind is None:
        return inner
    return _wrap(BLOCK_TAGS[kind], inner, config.class_for(kind.value))


def _wrap(tag: str, inner: str, class_name: Optional[str]) -> str:
    if class_name:
        return f'<{tag} class="{class_name}">{inner}</{tag}>'
    return f"<{tag}>{inner}</{tag}>"
