"""
Module: commands.target

Purpose:
    Provides CommandTarget - the editing surface's description of which
    nodes the active selection addresses, as child-index paths from the
    document root.

Key Functions:
    - CommandTarget.at(*path): Target one node
    - CommandTarget.of(*paths): Target several nodes
    - CommandTarget.whole(document): Target every top-level block
    - CommandTarget.resolve(document): Paths -> nodes, or None if any path
      addresses nothing

Used By:
    - commands.marks
    - commands.blocks
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Optional, Tuple

from richtext_toolkit.core.models.document import Document, Path
from richtext_toolkit.core.models.nodes import Node


@dataclass(frozen=True, slots=True)
class CommandTarget:
    """
    Nodes addressed by a selection (immutable).

    Attributes:
        paths: One path per addressed node, e.g. ``((0,), (2, 1))``

    Example:
        >>> target = CommandTarget.at(0, 1)
        >>> target.paths
        ((0, 1),)
    """

    paths: Tuple[Path, ...] = ()

    def __post_init__(self) -> None:
        """Freeze nested paths into tuples."""
        object.__setattr__(self, "paths", tuple(tuple(path) for path in self.paths))

    @classmethod
    def at(cls, *path: int) -> CommandTarget:
        return cls((tuple(path),))

    @classmethod
    def of(cls, *paths: Iterable[int]) -> CommandTarget:
        return cls(tuple(tuple(path) for path in paths))

    @classmethod
    def whole(cls, document: Document) -> CommandTarget:
        """Target every top-level block of ``document``."""
        return cls(tuple((index,) for index in range(len(document))))

    def resolve(self, document: Document) -> Optional[List[Tuple[Path, Node]]]:
        """
        Look up every addressed node.

        Returns:
            ``(path, node)`` pairs in target order, or None when there are no
            paths or any path addresses no node
        """
        if not self.paths:
            return None
        resolved = []
        for path in self.paths:
            node = document.node_at(path)
            if node is None:
                return None
            resolved.append((path, node))
        return resolved
