"""
Module: nodes

Purpose:
    Provides the two node variants of the rich-text tree. A TextNode is a
    leaf holding a string plus boolean marks; an ElementNode is a block of a
    given kind holding an ordered tuple of child nodes.

Key Functions:
    - TextNode.with_mark(mark, on): Copy with one mark changed
    - TextNode.has_mark(mark): Check a mark flag
    - ElementNode.with_children(children) / with_kind(kind): Copies
    - ElementNode.iter_leaves(): Text leaves in document order
    - to_dict(): Editor-facing dict value

Dependencies:
    - dataclasses (std)
    - .vocabulary

Used By:
    - core.models.document.Document
    - core.normalizer
    - codec, commands

Design Notes:
    Nodes are frozen. Every edit builds new nodes, so a Document value handed
    to the editing surface never changes underneath it.
    The dict form uses the "type" key, which is what stored legacy trees use.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any, Iterator, Tuple, Union

from .vocabulary import BlockKind, Mark


@dataclass(frozen=True, slots=True)
class TextNode:
    """
    Text leaf with inline marks.

    Attributes:
        text: Leaf content (may be empty)
        bold: Bold mark
        italic: Italic mark
        code: Inline code mark

    Invariants:
        - Never has children
        - Marks are plain booleans; False means absent

    Example:
        >>> leaf = TextNode("x", bold=True)
        >>> leaf.to_dict()
        {'text': 'x', 'bold': True}
    """

    text: str = ""
    bold: bool = False
    italic: bool = False
    code: bool = False

    @property
    def marks(self) -> frozenset[Mark]:
        """Set of marks that are on."""
        return frozenset(m for m in Mark if getattr(self, m.value))

    @property
    def is_empty(self) -> bool:
        return self.text == ""

    def has_mark(self, mark: Mark) -> bool:
        return bool(getattr(self, Mark(mark).value))

    def with_mark(self, mark: Mark, on: bool = True) -> TextNode:
        """Return a copy with ``mark`` set to ``on``."""
        return replace(self, **{Mark(mark).value: bool(on)})

    def same_marks(self, other: TextNode) -> bool:
        return (self.bold, self.italic, self.code) == (other.bold, other.italic, other.code)

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {"text": self.text}
        for mark in Mark:
            if getattr(self, mark.value):
                data[mark.value] = True
        return data


@dataclass(frozen=True, slots=True)
class ElementNode:
    """
    Structural block node.

    Attributes:
        kind: Block kind
        children: Child nodes (immutable tuple)

    Example:
        >>> para = ElementNode(BlockKind.PARAGRAPH, (TextNode("hi"),))
        >>> para.to_dict()
        {'type': 'paragraph', 'children': [{'text': 'hi'}]}
    """

    kind: BlockKind
    children: Tuple[Node, ...] = ()

    @property
    def is_list(self) -> bool:
        return self.kind.is_list

    def with_children(self, children: Tuple[Node, ...] | list[Node]) -> ElementNode:
        return replace(self, children=tuple(children))

    def with_kind(self, kind: BlockKind) -> ElementNode:
        return replace(self, kind=kind)

    def iter_leaves(self) -> Iterator[TextNode]:
        """Yield every text leaf below this element in document order."""
        for child in self.children:
            if isinstance(child, TextNode):
                yield child
            else:
                yield from child.iter_leaves()

    def to_dict(self) -> dict[str, Any]:
        return {
            "type": self.kind.value,
            "children": [child.to_dict() for child in self.children],
        }


Node = Union[TextNode, ElementNode]


def empty_leaf() -> TextNode:
    """The placeholder leaf used wherever a block would otherwise be empty."""
    return TextNode("")


def empty_paragraph() -> ElementNode:
    return ElementNode(BlockKind.PARAGRAPH, (empty_leaf(),))
