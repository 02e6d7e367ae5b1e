"""
Module: codec.config

Purpose:
    Configuration dataclasses for the HTML serializer and deserializer.
    Immutable configuration with validation on construction.

Key Classes:
    - SerializerConfig: Output options (class attributes per kind/mark)
    - DeserializerConfig: Whitespace handling on input

Dependencies:
    - dataclasses (std)

Used By:
    - codec.serializer
    - codec.deserializer
"""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping

from richtext_toolkit.core.models.vocabulary import BlockKind, Mark


# Styling classes the question editor puts on its markup.
TAILWIND_CLASS_NAMES: Mapping[str, str] = MappingProxyType({
    BlockKind.CODE_BLOCK.value: "bg-gray-900 text-white p-4 rounded-lg font-mono text-sm",
    BlockKind.BULLETED_LIST.value: "list-disc pl-6",
    BlockKind.NUMBERED_LIST.value: "list-decimal pl-6",
    Mark.CODE.value: "bg-gray-100 px-1 rounded",
})


@dataclass(frozen=True)
class SerializerConfig:
    """
    Configuration for HTML output (immutable).

    Attributes:
        class_names: Maps a block kind or mark wire name to the value of
            the ``class`` attribute put on its tag. Missing entries get no
            attribute.

    Example:
        >>> config = SerializerConfig(class_names=TAILWIND_CLASS_NAMES)
    """

    class_names: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        """Validate configuration on construction."""
        known = {k.value for k in BlockKind} | {m.value for m in Mark}
        unknown = sorted(str(key) for key in self.class_names if str(key) not in known)
        if unknown:
            raise ValueError(f"class_names has unknown keys: {unknown}")
        for key, value in self.class_names.items():
            if not isinstance(value, str) or '"' in value:
                raise ValueError(f"class_names[{key!r}] must be a string without quotes: {value!r}")

    def class_for(self, name: str) -> str | None:
        return self.class_names.get(name) or None


@dataclass(frozen=True)
class DeserializerConfig:
    """
    Configuration for HTML input (immutable).

    Attributes:
        drop_structural_whitespace: Drop whitespace-only text sitting
            directly under the fragment root or a ``ul``/``ol``, where
            pretty-printed markup would otherwise turn indentation into
            empty paragraphs or list items
    """

    drop_structural_whitespace: bool = True


DEFAULT_SERIALIZER_CONFIG = SerializerConfig()
DEFAULT_DESERIALIZER_CONFIG = DeserializerConfig()
