"""
Module: commands.marks

Purpose:
    Inline mark commands. A mark change applies to every text leaf under
    every targeted node as one transaction: the result never has the mark
    on only some of the targeted leaves. Targeted text leaves keep their
    boundaries in the result, so applying a toggle twice to the same leaf
    target restores it.

Key Functions:
    - toggle_mark(doc, target, mark): All on -> all off, otherwise all on
    - add_mark / remove_mark: Unconditional set / clear
    - is_mark_active(doc, target, mark): Every targeted leaf has the mark

Dependencies:
    - core.normalizer

Used By:
    - commands.hotkeys
    - editing surface toolbar
"""

from __future__ import annotations

import logging
from typing import FrozenSet, Tuple

from richtext_toolkit.core.models.document import Document, Path
from richtext_toolkit.core.models.nodes import ElementNode, Node, TextNode
from richtext_toolkit.core.models.vocabulary import Mark
from richtext_toolkit.core.normalizer import normalize

from .target import CommandTarget

logger = logging.getLogger(__name__)


def is_mark_active(doc: Document, target: CommandTarget, mark: Mark) -> bool:
    """
    Check whether every text leaf under the target has ``mark``.

    Returns False for targets that address nothing.
    """
    resolved = target.resolve(doc)
    if resolved is None:
        return False
    mark = Mark(mark)
    leaves = [leaf for _, node in resolved for leaf in _leaves(node)]
    return bool(leaves) and all(leaf.has_mark(mark) for leaf in leaves)


def toggle_mark(doc: Document, target: CommandTarget, mark: Mark) -> Document:
    """
    Toggle ``mark`` on every text leaf under the target.

    If all targeted leaves already have the mark it is cleared from all of
    them; otherwise it is set on all of them.

    Args:
        doc: Current document
        target: Addressed nodes
        mark: Mark to toggle

    Returns:
        New normalized document, or ``doc`` itself when the target
        addresses nothing
    """
    return _set_mark(doc, target, mark, on=not is_mark_active(doc, target, mark))


def add_mark(doc: Document, target: CommandTarget, mark: Mark) -> Document:
    return _set_mark(doc, target, mark, on=True)


def remove_mark(doc: Document, target: CommandTarget, mark: Mark) -> Document:
    return _set_mark(doc, target, mark, on=False)


# ─────────────────────────────────────────────────────────────────────────────
# Helpers
# ─────────────────────────────────────────────────────────────────────────────

def _set_mark(doc: Document, target: CommandTarget, mark: Mark, *, on: bool) -> Document:
    resolved = target.resolve(doc)
    if resolved is None:
        logger.debug(f"Mark command ignored, target {target.paths} addresses no node")
        return doc
    paths = frozenset(path for path, _ in resolved)
    blocks = _rebuild(doc.blocks, (), paths, Mark(mark), on, inside=False)
    # Targeted leaves stay separate so the same target still addresses them.
    leaf_paths = frozenset(path for path, node in resolved if isinstance(node, TextNode))
    return normalize(Document(blocks), keep_leaves=leaf_paths)


def _rebuild(
    nodes: Tuple[Node, ...],
    prefix: Path,
    paths: FrozenSet[Path],
    mark: Mark,
    on: bool,
    *,
    inside: bool,
) -> Tuple[Node, ...]:
    rebuilt = []
    for index, node in enumerate(nodes):
        path = prefix + (index,)
        hit = inside or path in paths
        if isinstance(node, TextNode):
            rebuilt.append(node.with_mark(mark, on) if hit else node)
        else:
            rebuilt.append(node.with_children(_rebuild(node.children, path, paths, mark, on, inside=hit)))
    return tuple(rebuilt)


def _leaves(node: Node):
    if isinstance(node, ElementNode):
        return list(node.iter_leaves())
    return [node]
