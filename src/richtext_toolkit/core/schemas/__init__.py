"""
Schemas Package

JSON schema definition and validation for document trees.
"""

from .validator import (
    validate_tree,
    is_canonical_tree,
    ValidationError,
)

__all__ = [
    "validate_tree",
    "is_canonical_tree",
    "ValidationError",
]
