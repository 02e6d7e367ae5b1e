"""
Path-based tree surgery shared by the commands.

All helpers take and return tuples of nodes; nothing is mutated. Paths
must be valid for the nodes given: every step above the last addresses an
element. The commands resolve them against a normalized document first.
"""

from __future__ import annotations

from typing import Optional, Sequence, Tuple

from richtext_toolkit.core.models.document import Path
from richtext_toolkit.core.models.nodes import ElementNode, Node


def node_at(nodes: Sequence[Node], path: Path) -> Node:
    """Node at ``path``; the path must be valid."""
    node = nodes[path[0]]
    for index in path[1:]:
        node = node.children[index]  # type: ignore[union-attr]
    return node


def replace_at(nodes: Sequence[Node], path: Path, replacement: Sequence[Node]) -> Tuple[Node, ...]:
    """Replace the node at ``path`` with zero or more nodes, rebuilding its ancestors."""
    index = path[0]
    head, tail = tuple(nodes[:index]), tuple(nodes[index + 1:])
    if len(path) == 1:
        return head + tuple(replacement) + tail
    parent = nodes[index]
    rebuilt = parent.with_children(replace_at(parent.children, path[1:], replacement))  # type: ignore[union-attr]
    return head + (rebuilt,) + tail


def split_at(
    node: ElementNode, relative_path: Path
) -> Tuple[Optional[ElementNode], Node, Optional[ElementNode]]:
    """
    Split ``node`` around one descendant.

    Every element between ``node`` and the descendant is cut in two at the
    descendant's position.

    Args:
        node: Element to split
        relative_path: Path of the descendant below ``node``

    Returns:
        ``(before, descendant, after)`` where ``before``/``after`` are copies of
        ``node`` holding what came before/after the descendant, or None when
        that side is empty
    """
    index, rest = relative_path[0], relative_path[1:]
    children = node.children
    if not rest:
        target = children[index]
        before_children = children[:index]
        after_children = children[index + 1:]
    else:
        child = children[index]
        child_before, target, child_after = split_at(child, rest)  # type: ignore[arg-type]
        before_children = children[:index] + ((child_before,) if child_before is not None else ())
        after_children = ((child_after,) if child_after is not None else ()) + children[index + 1:]

    before = node.with_children(before_children) if before_children else None
    after = node.with_children(after_children) if after_children else None
    return before, target, after


def is_descendant(path: Path, ancestor: Path) -> bool:
    return len(path) > len(ancestor) and path[:len(ancestor)] == ancestor
