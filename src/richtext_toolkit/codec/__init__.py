"""
Codec Package

HTML serialization and deserialization of question rich text, plus the
stored-field loader that also accepts legacy raw trees.
"""

from .config import (
    SerializerConfig,
    DeserializerConfig,
    TAILWIND_CLASS_NAMES,
    DEFAULT_SERIALIZER_CONFIG,
    DEFAULT_DESERIALIZER_CONFIG,
)
from .serializer import serialize
from .deserializer import deserialize, map_node
from .fields import load_document, dump_document

__all__ = [
    "SerializerConfig",
    "DeserializerConfig",
    "TAILWIND_CLASS_NAMES",
    "DEFAULT_SERIALIZER_CONFIG",
    "DEFAULT_DESERIALIZER_CONFIG",
    "serialize",
    "deserialize",
    "map_node",
    "load_document",
    "dump_document",
]
