"""
Module: vocabulary

Purpose:
    The closed vocabularies of the rich-text model: inline marks that can
    sit on a text leaf, and the block kinds an element can have.

Key Classes:
    - Mark: bold / italic / code
    - BlockKind: paragraph / code-block / bulleted-list / numbered-list / list-item

Used By:
    - core.models.nodes
    - core.normalizer
    - codec.serializer, codec.deserializer
    - commands
"""

from __future__ import annotations

from enum import Enum
from typing import FrozenSet


class Mark(str, Enum):
    """Inline formatting flag on a text leaf."""
    BOLD = "bold"
    ITALIC = "italic"
    CODE = "code"

    def __str__(self) -> str:
        return self.value


class BlockKind(str, Enum):
    """Kind of a structural element."""
    PARAGRAPH = "paragraph"
    CODE_BLOCK = "code-block"
    BULLETED_LIST = "bulleted-list"
    NUMBERED_LIST = "numbered-list"
    LIST_ITEM = "list-item"

    def __str__(self) -> str:
        return self.value

    @property
    def is_list(self) -> bool:
        """True for the two list container kinds."""
        return self in LIST_KINDS

    @classmethod
    def parse(cls, value: object) -> BlockKind | None:
        """
        Look up a kind by wire name.

        Returns:
            Matching BlockKind, or None for anything unrecognized
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value)
            except ValueError:
                return None
        return None


LIST_KINDS: FrozenSet[BlockKind] = frozenset({BlockKind.BULLETED_LIST, BlockKind.NUMBERED_LIST})

# Order in which marks wrap text on output, innermost first.
MARK_NESTING: tuple[Mark, ...] = (Mark.CODE, Mark.ITALIC, Mark.BOLD)
