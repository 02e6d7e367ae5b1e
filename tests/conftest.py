import pytest
import sys
from pathlib import Path

# Add src to sys.path so we can import richtext_toolkit
SRC_PATH = Path(__file__).resolve().parent.parent / "src"
if SRC_PATH.as_posix() not in sys.path:
    sys.path.insert(0, SRC_PATH.as_posix())

from richtext_toolkit.core.models import BlockKind, Document, ElementNode, TextNode  # noqa: E402


# Common test fixtures
@pytest.fixture
def empty_tree():
    """Editor-facing value of the canonical empty document."""
    return [{"type": "paragraph", "children": [{"text": ""}]}]


@pytest.fixture
def mixed_document() -> Document:
    """Paragraph with marks, a two-item bulleted list and a code block."""
    return Document((
        ElementNode(BlockKind.PARAGRAPH, (
            TextNode("Hello "),
            TextNode("world", bold=True),
        )),
        ElementNode(BlockKind.BULLETED_LIST, (
            ElementNode(BlockKind.LIST_ITEM, (TextNode("one"),)),
            ElementNode(BlockKind.LIST_ITEM, (TextNode("two", italic=True),)),
        )),
        ElementNode(BlockKind.CODE_BLOCK, (TextNode("x = 1\ny = 2"),)),
    ))
