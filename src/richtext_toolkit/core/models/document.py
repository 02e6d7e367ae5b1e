"""
Module: document

Purpose:
    Provides the Document dataclass - the immutable value that one editable
    question field holds during an edit session. A Document is an ordered
    tuple of top-level block nodes; the root itself holds no marks.

Key Functions:
    - Document.empty(): The canonical empty document
    - Document.node_at(path): Address a node by child-index path
    - Document.iter_leaves(): Text leaves in document order
    - Document.iter_nodes(): (path, node) pairs, pre-order
    - Document.plain_text() / is_blank(): Content checks
    - Document.to_list(): Editor-facing list-of-dicts value

Dependencies:
    - dataclasses (std)
    - .nodes

Used By:
    - core.normalizer (producer)
    - codec.serializer / codec.deserializer
    - commands
    - content.question_content
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterator, Optional, Tuple

from .nodes import ElementNode, Node, TextNode, empty_paragraph


Path = Tuple[int, ...]


@dataclass(frozen=True, slots=True)
class Document:
    """
    Rich-text document (immutable).

    Attributes:
        blocks: Top-level nodes, in order

    Invariants (when produced by ``normalize``):
        - At least one block
        - No top-level text leaves

    Example:
        >>> Document.empty().to_list()
        [{'type': 'paragraph', 'children': [{'text': ''}]}]
    """

    blocks: Tuple[Node, ...] = ()

    @classmethod
    def empty(cls) -> Document:
        """Canonical empty document: one paragraph holding one empty leaf."""
        return cls((empty_paragraph(),))

    def __iter__(self) -> Iterator[Node]:
        return iter(self.blocks)

    def __len__(self) -> int:
        return len(self.blocks)

    def __getitem__(self, index: int) -> Node:
        return self.blocks[index]

    # ─────────────────────────────────────────────────────────────────────────
    # Traversal
    # ─────────────────────────────────────────────────────────────────────────

    def node_at(self, path: Path) -> Optional[Node]:
        """
        Find the node addressed by ``path``.

        Args:
            path: Child indices from the root, e.g. ``(0, 1)`` is the
                second child of the first block

        Returns:
            The node, or None if the path addresses nothing (empty path,
            out-of-range or negative index, or descending into a leaf)
        """
        if not path:
            return None
        children: Tuple[Node, ...] = self.blocks
        node: Optional[Node] = None
        for index in path:
            if not isinstance(index, int) or index < 0 or index >= len(children):
                return None
            node = children[index]
            children = node.children if isinstance(node, ElementNode) else ()
        return node

    def iter_nodes(self) -> Iterator[tuple[Path, Node]]:
        """Yield ``(path, node)`` for every node, pre-order."""
        def walk(nodes: Tuple[Node, ...], prefix: Path) -> Iterator[tuple[Path, Node]]:
            for index, node in enumerate(nodes):
                path = prefix + (index,)
                yield path, node
                if isinstance(node, ElementNode):
                    yield from walk(node.children, path)

        yield from walk(self.blocks, ())

    def iter_leaves(self) -> Iterator[TextNode]:
        for node in self.blocks:
            if isinstance(node, TextNode):
                yield node
            else:
                yield from node.iter_leaves()

    # ─────────────────────────────────────────────────────────────────────────
    # Content
    # ─────────────────────────────────────────────────────────────────────────

    def plain_text(self) -> str:
        """Text content with one line per top-level block."""
        lines = []
        for node in self.blocks:
            if isinstance(node, TextNode):
                lines.append(node.text)
            else:
                lines.append("".join(leaf.text for leaf in node.iter_leaves()))
        return "\n".join(lines)

    def is_blank(self) -> bool:
        """True when no leaf holds anything but whitespace."""
        return all(not leaf.text.strip() for leaf in self.iter_leaves())

    def to_list(self) -> list[dict[str, Any]]:
        return [node.to_dict() for node in self.blocks]
