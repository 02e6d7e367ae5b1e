"""
Schema Validation Utilities

Validates editor-facing document trees (the ``Document.to_list()`` shape)
against the document JSON schema.

``normalize`` never needs this: it repairs anything. Validation is for
callers that want to know whether a stored tree was already canonical, e.g.
to log which legacy records were repaired on load.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Mapping

import jsonschema


# Load schemas lazily
_SCHEMAS: dict[str, dict] = {}


def _load_schema(name: str) -> dict:
    """Load a schema from the schemas directory."""
    if name not in _SCHEMAS:
        schema_path = Path(__file__).parent / f"{name}.schema.json"
        if not schema_path.exists():
            raise FileNotFoundError(f"Schema not found: {schema_path}")
        with open(schema_path, "r", encoding="utf-8") as f:
            _SCHEMAS[name] = json.load(f)
    return _SCHEMAS[name]


class ValidationError(Exception):
    """Raised when a tree fails validation."""

    def __init__(self, message: str, path: str = "", errors: list[str] | None = None):
        super().__init__(message)
        self.path = path
        self.errors = errors or []


def validate_tree(data: Any, *, strict: bool = False) -> None:
    """
    Validate a document tree.

    Args:
        data: List of block dicts
        strict: If True, check the full schema; if False, only check that
            the root is a non-empty list of block-shaped mappings

    Raises:
        ValidationError: If data is invalid
    """
    if not isinstance(data, list) or not data:
        raise ValidationError(
            "Document must be a non-empty list of blocks",
            path="",
        )

    for index, block in enumerate(data):
        if not isinstance(block, Mapping) or "children" not in block:
            raise ValidationError(
                f"Top-level node {index} is not a block",
                path=str(index),
            )

    if strict:
        validator = jsonschema.Draft202012Validator(_load_schema("document"))
        errors = sorted(validator.iter_errors(data), key=lambda e: [str(p) for p in e.absolute_path])
        if errors:
            first = errors[0]
            raise ValidationError(
                f"Schema validation failed: {first.message}",
                path=".".join(str(p) for p in first.absolute_path),
                errors=[
                    f"{'.'.join(str(p) for p in e.absolute_path) or '<root>'}: {e.message}"
                    for e in errors
                ],
            )


def is_canonical_tree(data: Any) -> bool:
    """True if ``data`` passes strict validation."""
    try:
        validate_tree(data, strict=True)
    except ValidationError:
        return False
    return True
