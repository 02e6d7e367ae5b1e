"""
Stored field loading.

A question field is normally stored as an HTML string, but old records
may hold a raw editor tree instead. ``load_document`` accepts both and
``dump_document`` always writes HTML.
"""

from __future__ import annotations

import logging
from typing import Any, Optional

from richtext_toolkit.core.models.document import Document
from richtext_toolkit.core.normalizer import normalize
from richtext_toolkit.core.schemas.validator import ValidationError, validate_tree

from .config import DeserializerConfig, SerializerConfig
from .deserializer import deserialize
from .serializer import serialize

logger = logging.getLogger(__name__)


def load_document(value: Any, config: Optional[DeserializerConfig] = None) -> Document:
    """
    Load a stored field value.

    Args:
        value: HTML string, legacy raw tree (list of node dicts), Document,
            or anything else (treated as empty)
        config: Deserializer options for HTML values

    Returns:
        Normalized Document
    """
    if isinstance(value, Document):
        return normalize(value)
    if isinstance(value, (list, tuple)):
        try:
            validate_tree(list(value), strict=True)
        except ValidationError as e:
            logger.warning(f"Repairing legacy tree: {e} ({len(e.errors)} issue(s))")
        return normalize(value)
    if value is not None and not isinstance(value, str):
        logger.warning(f"Unsupported stored value type {type(value).__name__}, using empty document")
    return deserialize(value, config)


def dump_document(document: Document, config: Optional[SerializerConfig] = None) -> str:
    """Serialize a Document for storage."""
    return serialize(document, config)
