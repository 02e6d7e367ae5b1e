"""
Question Rich-Text Core Package

Shared document models, the normalizer that keeps every tree valid, and
tree schema validation. Codec and command modules build on this package.

**DESIGN NOTES:**

1. **Immutable Values**
   - Nodes and documents are frozen dataclasses
   - Every transform returns a new Document

2. **Repair, Don't Reject**
   - `normalize()` accepts anything and always returns a valid Document
   - Bad data is logged, never raised to the editing surface

3. **Explicit Normalization**
   - Called at every Document transition (after load, after each command)
   - No implicit change hooks
"""

from .models import (
    BlockKind,
    Mark,
    ElementNode,
    TextNode,
    Node,
    Document,
    Path,
)
from .normalizer import normalize, fix_node

__all__ = [
    "BlockKind",
    "Mark",
    "ElementNode",
    "TextNode",
    "Node",
    "Document",
    "Path",
    "normalize",
    "fix_node",
]
