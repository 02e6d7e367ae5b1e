"""
Module: normalizer

Purpose:
    Repairs arbitrary input into a valid Document. This is the safety net
    run after every edit and after every HTML load, so the editing surface
    always has a well-formed tree to render and a place to type.

Key Functions:
    - normalize(value, keep_leaves): Any value -> Document (total, never raises)
    - fix_node(node): Any value -> Node (one subtree)
    - looks_like_text(mapping): Leaf/element test for raw dicts

Dependencies:
    - logging (std)
    - core.models

Used By:
    - codec.deserializer (every load)
    - codec.fields (legacy raw trees)
    - commands (every command result)

Invariants enforced:
    1. Every element has at least one child; an element with none gets
       a single empty text leaf.
    2. No text leaf at the top level; consecutive stray leaves share one
       paragraph.
    3. List children are list items; anything else is wrapped in one.
    4. Marks are booleans on text leaves only.
    5. Empty or non-sequence input gives the canonical empty document.
    6. normalize(normalize(x)) == normalize(x).
    7. Outside lists, an element's children are all leaves or all
       elements; leaf runs beside elements are wrapped in paragraphs.
    8. Adjacent leaves with the same marks are merged; empty leaves are
       dropped unless nothing else is left. Leaves named in ``keep_leaves``
       are exempt: they stay where they are as separate leaves.
"""

from __future__ import annotations

import logging
from dataclasses import replace
from typing import AbstractSet, Any, Iterable, List, Mapping, Optional, Sequence, Tuple

from .models.document import Document, Path
from .models.nodes import ElementNode, Node, TextNode, empty_leaf
from .models.vocabulary import BlockKind, Mark

logger = logging.getLogger(__name__)

# Keys that mark a mapping as an element rather than a text leaf.
_ELEMENT_KEYS = ("type", "kind", "children")


def normalize(value: Any, *, keep_leaves: AbstractSet[Path] = frozenset()) -> Document:
    """
    Repair ``value`` into a Document.

    Accepts a Document, or a list/tuple of nodes in any state of repair
    (TextNode/ElementNode instances, editor dicts, bare strings, None).
    Anything else, including a plain string, yields the canonical empty
    document.

    Args:
        value: Candidate document
        keep_leaves: Paths (into ``value``) of text leaves that must not be
            merged into their neighbours or dropped when empty. Mark
            commands pass the leaves they changed so the same target still
            addresses them afterwards.

    Returns:
        A Document satisfying every invariant above. Never raises: internal
        failures are logged and degrade to ``Document.empty()``.

    Example:
        >>> normalize([{"text": "hi"}]).to_list()
        [{'type': 'paragraph', 'children': [{'text': 'hi'}]}]
    """
    if not isinstance(value, (list, tuple, Document)) or len(value) == 0:
        logger.debug(f"normalize: no blocks in {type(value).__name__} input, using empty document")
        return Document.empty()

    try:
        fixed = [_fix(item, (index,), keep_leaves) for index, item in enumerate(value)]
        blocks = _wrap_text_runs(fixed)
    except Exception as e:
        logger.warning(f"normalize: could not repair document, using empty document: {e!r}")
        return Document.empty()

    if not blocks:
        return Document.empty()
    return Document(tuple(blocks))


def fix_node(node: Any) -> Node:
    """
    Repair a single subtree.

    - None or a non-object becomes an empty text leaf; a bare string becomes
      a leaf carrying it.
    - Text-like values (a ``text`` key and no element keys) become leaves,
      with ``text`` defaulted to ``''`` and marks coerced to booleans.
    - Everything else is treated as an element: children are repaired
      recursively and the kind defaults to paragraph when missing or
      unrecognized.
    """
    return _fix(node, (), frozenset())


def looks_like_text(node: Mapping) -> bool:
    """A mapping is a text leaf if it has ``text`` and no element keys."""
    return "text" in node and not any(key in node for key in _ELEMENT_KEYS)


# ─────────────────────────────────────────────────────────────────────────────
# Helpers
# ─────────────────────────────────────────────────────────────────────────────

def _fix(node: Any, path: Path, keep: AbstractSet[Path]) -> Node:
    if isinstance(node, TextNode):
        return _leaf(node.text, node.bold, node.italic, node.code)
    if isinstance(node, ElementNode):
        return _fix_element(node.kind, node.children, path, keep)
    if isinstance(node, str):
        return TextNode(node)
    if not isinstance(node, Mapping):
        return empty_leaf()

    if looks_like_text(node):
        return _leaf(
            node.get("text"),
            node.get(Mark.BOLD.value),
            node.get(Mark.ITALIC.value),
            node.get(Mark.CODE.value),
        )

    raw_children = node.get("children")
    if not isinstance(raw_children, (list, tuple)):
        raw_children = ()
    kind = BlockKind.parse(node.get("type", node.get("kind")))
    if kind is None:
        kind = BlockKind.PARAGRAPH
    return _fix_element(kind, raw_children, path, keep)


def _leaf(text: Any, bold: Any, italic: Any, code: Any) -> TextNode:
    if text is None:
        text = ""
    elif not isinstance(text, str):
        text = str(text)
    return TextNode(text, bold=bool(bold), italic=bool(italic), code=bool(code))


def _fix_element(
    kind: BlockKind, raw_children: Iterable[Any], path: Path, keep: AbstractSet[Path]
) -> ElementNode:
    children: List[Node] = [
        _fix(child, path + (index,), keep) for index, child in enumerate(raw_children)
    ]
    if not children:
        children = [empty_leaf()]

    if kind.is_list:
        children = [
            child if _is_list_item(child) else ElementNode(BlockKind.LIST_ITEM, (child,))
            for child in children
        ]
    elif any(isinstance(child, ElementNode) for child in children):
        children = _wrap_text_runs(children)
    else:
        kept = [path + (index,) in keep for index in range(len(children))] if keep else None
        children = _merge_leaves(children, kept)

    return ElementNode(kind, tuple(children))


def _is_list_item(node: Node) -> bool:
    return isinstance(node, ElementNode) and node.kind == BlockKind.LIST_ITEM


def _wrap_text_runs(nodes: List[Node]) -> List[Node]:
    """Wrap each run of consecutive text leaves in one paragraph."""
    result: List[Node] = []
    run: List[TextNode] = []
    for node in nodes:
        if isinstance(node, TextNode):
            run.append(node)
            continue
        if run:
            result.append(ElementNode(BlockKind.PARAGRAPH, tuple(_merge_leaves(run))))
            run = []
        result.append(node)
    if run:
        result.append(ElementNode(BlockKind.PARAGRAPH, tuple(_merge_leaves(run))))
    return result


def _merge_leaves(leaves: List[TextNode], kept: Optional[Sequence[bool]] = None) -> List[TextNode]:
    """Drop empty leaves (keeping one if all are empty) and merge equal-mark neighbours."""
    flags = kept if kept is not None else [False] * len(leaves)
    candidates: List[Tuple[TextNode, bool]] = [
        (leaf, flag) for leaf, flag in zip(leaves, flags) if flag or not leaf.is_empty
    ]
    if not candidates:
        return [leaves[0]]

    merged: List[TextNode] = []
    previous_kept = False
    for leaf, flag in candidates:
        if merged and not flag and not previous_kept and merged[-1].same_marks(leaf):
            merged[-1] = replace(merged[-1], text=merged[-1].text + leaf.text)
        else:
            merged.append(leaf)
        previous_kept = flag
    return merged
