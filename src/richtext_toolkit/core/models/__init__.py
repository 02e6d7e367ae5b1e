"""
Core Models Package

Immutable node and document models for question rich text.

All models in this package are frozen dataclasses. Edits never mutate a
node; they build a new tree, so a Document handed to a caller is a stable
value for as long as the caller holds it.
"""

from .vocabulary import BlockKind, Mark, LIST_KINDS, MARK_NESTING
from .nodes import ElementNode, Node, TextNode, empty_leaf, empty_paragraph
from .document import Document, Path

__all__ = [
    "BlockKind",
    "Mark",
    "LIST_KINDS",
    "MARK_NESTING",
    "ElementNode",
    "Node",
    "TextNode",
    "empty_leaf",
    "empty_paragraph",
    "Document",
    "Path",
]
