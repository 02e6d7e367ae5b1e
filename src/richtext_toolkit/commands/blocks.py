"""
Module: commands.blocks

Purpose:
    Block kind commands, including wrapping blocks into lists and
    unwrapping them out again.

Key Functions:
    - toggle_block(doc, target, kind): Set or revert the kind of the
      targeted blocks
    - is_block_active(doc, target, kind): Whether every targeted block
      already has ``kind``

Dependencies:
    - core.normalizer
    - commands.tree

Used By:
    - editing surface toolbar

Toggle steps:
    1. Resolve targets to blocks. A text leaf stands for its parent block;
       a list stands for its items. Targets inside other targets are
       dropped.
    2. Each block is lifted out of its outermost list ancestor. Only the
       block leaves: the items before and after it stay in lists of the
       original kind on either side.
    3. Active blocks revert to paragraphs. For a list kind, each block
       becomes a list item inside a new list of that kind, and new lists
       that end up adjacent are merged into one. Any other kind is set
       directly.
    4. The result is normalized.

    Blocks are processed last to first so that lifting one block never
    shifts the path of a block that comes before it.
"""

from __future__ import annotations

import logging
from typing import Dict, List, Sequence, Tuple

from richtext_toolkit.core.models.document import Document, Path
from richtext_toolkit.core.models.nodes import ElementNode, Node, TextNode
from richtext_toolkit.core.models.vocabulary import BlockKind
from richtext_toolkit.core.normalizer import normalize

from .target import CommandTarget
from .tree import is_descendant, node_at, replace_at, split_at

logger = logging.getLogger(__name__)


def is_block_active(doc: Document, target: CommandTarget, kind: BlockKind) -> bool:
    """
    Check whether every targeted block already has ``kind``.

    For list kinds a block counts as active when its nearest list ancestor
    is a list of that kind.
    """
    kind = BlockKind(kind)
    current = normalize(doc)
    block_paths = _block_paths(current, target)
    return bool(block_paths) and all(_is_active(current, path, kind) for path in block_paths)


def toggle_block(doc: Document, target: CommandTarget, kind: BlockKind) -> Document:
    """
    Toggle the targeted blocks to or from ``kind``.

    Args:
        doc: Current document
        target: Addressed nodes
        kind: Requested block kind

    Returns:
        New normalized document, or ``doc`` itself when the target
        addresses nothing. The input is normalized first and target paths
        are resolved against the repaired tree.

    Example:
        >>> doc = deserialize("<p>a</p>")
        >>> serialize(toggle_block(doc, CommandTarget.at(0), BlockKind.BULLETED_LIST))
        '<ul><li>a</li></ul>'
    """
    kind = BlockKind(kind)
    current = normalize(doc)
    block_paths = _block_paths(current, target)
    if not block_paths:
        logger.debug(f"Block command ignored, target {target.paths} addresses no block")
        return doc

    active = all(_is_active(current, path, kind) for path in block_paths)

    blocks: Tuple[Node, ...] = current.blocks
    created: Dict[int, ElementNode] = {}
    for path in reversed(block_paths):
        blocks, path = _lift_out_of_lists(blocks, path)
        block = node_at(blocks, path)
        if not isinstance(block, ElementNode):
            continue

        if active:
            replacement = block.with_kind(BlockKind.PARAGRAPH)
        elif kind.is_list:
            replacement = ElementNode(kind, (block.with_kind(BlockKind.LIST_ITEM),))
            created[id(replacement)] = replacement
        else:
            replacement = block.with_kind(kind)
        blocks = replace_at(blocks, path, (replacement,))

    if created:
        blocks = _merge_new_lists(blocks, created)
    return normalize(Document(blocks))


# ─────────────────────────────────────────────────────────────────────────────
# Helpers
# ─────────────────────────────────────────────────────────────────────────────

def _block_paths(doc: Document, target: CommandTarget) -> List[Path]:
    """Targeted block paths in document order, outermost targets only."""
    resolved = target.resolve(doc)
    if resolved is None:
        return []

    paths = set()
    for path, node in resolved:
        if isinstance(node, TextNode):
            path = path[:-1]
            node = doc.node_at(path)
            if node is None:
                # Stray top-level leaf; normalized documents have none
                continue
        if node.is_list:
            paths.update(path + (index,) for index in range(len(node.children)))
        else:
            paths.add(path)

    return sorted(p for p in paths if not any(is_descendant(p, other) for other in paths))


def _is_active(doc: Document, path: Path, kind: BlockKind) -> bool:
    if kind.is_list:
        for depth in range(len(path) - 1, 0, -1):
            ancestor = doc.node_at(path[:depth])
            if isinstance(ancestor, ElementNode) and ancestor.is_list:
                return ancestor.kind == kind
        return False
    node = doc.node_at(path)
    return isinstance(node, ElementNode) and node.kind == kind


def _lift_out_of_lists(blocks: Tuple[Node, ...], path: Path) -> Tuple[Tuple[Node, ...], Path]:
    """Split the block at ``path`` out of its outermost list; return new tree and path."""
    for depth in range(1, len(path)):
        list_path = path[:depth]
        ancestor = node_at(blocks, list_path)
        if isinstance(ancestor, ElementNode) and ancestor.is_list:
            break
    else:
        return blocks, path

    before, block, after = split_at(ancestor, path[depth:])
    replacement = [node for node in (before, block, after) if node is not None]
    offset = 1 if before is not None else 0
    new_path = list_path[:-1] + (list_path[-1] + offset,)
    return replace_at(blocks, list_path, replacement), new_path


def _merge_new_lists(nodes: Sequence[Node], created: Dict[int, ElementNode]) -> Tuple[Node, ...]:
    """Merge runs of adjacent lists created by this command."""
    merged: List[Tuple[Node, bool]] = []
    for node in nodes:
        is_new = id(node) in created
        if not is_new and isinstance(node, ElementNode):
            node = node.with_children(_merge_new_lists(node.children, created))
        if is_new and merged and merged[-1][1] and merged[-1][0].kind == node.kind:
            previous = merged[-1][0]
            merged[-1] = (previous.with_children(previous.children + node.children), True)
        else:
            merged.append((node, is_new))
    return tuple(node for node, _ in merged)
