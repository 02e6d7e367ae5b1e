"""
Unit Tests for Tree Schema Validation

Tests for validate_tree() and is_canonical_tree().
"""

import pytest

from richtext_toolkit.core.normalizer import normalize
from richtext_toolkit.core.schemas.validator import (
    ValidationError,
    is_canonical_tree,
    validate_tree,
)


class TestValidateTree:
    """Tests for validate_tree()."""

    def test_validate_when_canonical_then_passes(self, mixed_document):
        """Normalized trees pass strict validation."""
        validate_tree(mixed_document.to_list(), strict=True)

    def test_validate_when_not_list_then_raises(self):
        with pytest.raises(ValidationError, match="non-empty list"):
            validate_tree({"type": "paragraph"})

    def test_validate_when_empty_then_raises(self):
        with pytest.raises(ValidationError, match="non-empty list"):
            validate_tree([])

    def test_validate_when_top_level_leaf_then_raises_with_path(self):
        with pytest.raises(ValidationError) as exc_info:
            validate_tree([{"type": "paragraph", "children": [{"text": ""}]}, {"text": "stray"}])
        assert exc_info.value.path == "1"

    def test_validate_when_not_strict_then_shape_only(self):
        """Basic checks do not look inside blocks."""
        validate_tree([{"type": "heading", "children": []}], strict=False)

    def test_validate_when_strict_and_empty_children_then_raises(self):
        with pytest.raises(ValidationError) as exc_info:
            validate_tree([{"type": "paragraph", "children": []}], strict=True)
        assert exc_info.value.path == "0.children"
        assert exc_info.value.errors

    def test_validate_when_strict_and_list_child_not_item_then_raises(self):
        tree = [{"type": "bulleted-list", "children": [{"type": "paragraph", "children": [{"text": "a"}]}]}]
        with pytest.raises(ValidationError):
            validate_tree(tree, strict=True)

    def test_validate_when_strict_and_mark_not_boolean_then_raises(self):
        with pytest.raises(ValidationError):
            validate_tree([{"type": "paragraph", "children": [{"text": "a", "bold": "yes"}]}], strict=True)


class TestIsCanonicalTree:
    """Tests for is_canonical_tree()."""

    def test_is_canonical_when_normalized_then_true(self):
        tree = normalize([{"type": "numbered-list", "children": ["a", "b"]}]).to_list()
        assert is_canonical_tree(tree)

    def test_is_canonical_when_legacy_then_false(self):
        assert not is_canonical_tree([{"type": "paragraph"}])
        assert not is_canonical_tree("<p>html</p>")
