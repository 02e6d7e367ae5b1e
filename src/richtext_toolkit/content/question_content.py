"""
Module: question_content

Purpose:
    Provides the QuestionContent dataclass - the rich-text fields of one
    question, loaded from a stored question payload and written back as
    HTML strings on commit (submit or save-draft).

Key Functions:
    - QuestionContent.from_payload(payload): Stored record -> documents
    - QuestionContent.to_payload(): Documents -> HTML field values
    - QuestionContent.with_field(name, doc): Copy with one field replaced
    - QuestionContent.blank_fields(): Single-value fields with no text

Dependencies:
    - dataclasses (std)
    - codec.fields

Used By:
    - question authoring screens (external)

Payload keys follow the stored question record: ``title``,
``description``, ``constraints``, ``explanation``, ``codeSnippet``,
``correctAnswer``, ``examples`` (list) and ``options`` (list).
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any, Dict, List, Mapping, Optional, Tuple

from richtext_toolkit.codec.config import DeserializerConfig, SerializerConfig
from richtext_toolkit.codec.fields import dump_document, load_document
from richtext_toolkit.core.models.document import Document


# Dataclass field -> payload key, for the single-document fields
SINGLE_FIELDS: Dict[str, str] = {
    "title": "title",
    "description": "description",
    "constraints": "constraints",
    "explanation": "explanation",
    "code_snippet": "codeSnippet",
    "correct_answer": "correctAnswer",
}

# New questions start with one example slot and four option slots
DEFAULT_EXAMPLE_COUNT = 1
DEFAULT_OPTION_COUNT = 4


@dataclass(frozen=True)
class QuestionContent:
    """
    Rich-text fields of a question (immutable).

    Attributes:
        title: Question title
        description: Problem statement
        constraints: Input/answer constraints
        explanation: Worked explanation
        code_snippet: Code shown with fill-in-the-blank coding questions
        correct_answer: Expected answer for fill-in-the-blank questions
        examples: Worked examples, in order
        options: Multiple-choice options, in order

    Example:
        >>> content = QuestionContent.from_payload({"title": "<p>Sum</p>"})
        >>> content.to_payload()["title"]
        '<p>Sum</p>'
    """

    title: Document = field(default_factory=Document.empty)
    description: Document = field(default_factory=Document.empty)
    constraints: Document = field(default_factory=Document.empty)
    explanation: Document = field(default_factory=Document.empty)
    code_snippet: Document = field(default_factory=Document.empty)
    correct_answer: Document = field(default_factory=Document.empty)
    examples: Tuple[Document, ...] = field(
        default_factory=lambda: tuple(Document.empty() for _ in range(DEFAULT_EXAMPLE_COUNT))
    )
    options: Tuple[Document, ...] = field(
        default_factory=lambda: tuple(Document.empty() for _ in range(DEFAULT_OPTION_COUNT))
    )

    @classmethod
    def from_payload(
        cls,
        payload: Optional[Mapping[str, Any]],
        config: Optional[DeserializerConfig] = None,
    ) -> QuestionContent:
        """
        Load rich-text fields from a stored question record.

        Missing or malformed fields load as empty documents. ``examples`` and
        ``options`` fall back to the default slot counts when the stored value
        is not a list.

        Args:
            payload: Stored record (other keys are ignored)
            config: Deserializer options

        Returns:
            QuestionContent instance
        """
        payload = payload if isinstance(payload, Mapping) else {}
        singles = {
            name: load_document(payload.get(key), config)
            for name, key in SINGLE_FIELDS.items()
        }
        return cls(
            **singles,
            examples=_load_list(payload.get("examples"), DEFAULT_EXAMPLE_COUNT, config),
            options=_load_list(payload.get("options"), DEFAULT_OPTION_COUNT, config),
        )

    def to_payload(self, config: Optional[SerializerConfig] = None) -> Dict[str, Any]:
        """
        Serialize every field to HTML for storage.

        Blank examples are left out; options keep their positions because
        correct-option indices refer to them.
        """
        payload: Dict[str, Any] = {
            key: dump_document(getattr(self, name), config)
            for name, key in SINGLE_FIELDS.items()
        }
        # Untouched example slots (an empty editor, "<p></p>") are not saved.
        payload["examples"] = [
            dump_document(example, config) for example in self.examples if not example.is_blank()
        ]
        payload["options"] = [dump_document(option, config) for option in self.options]
        return payload

    def with_field(self, name: str, document: Document) -> QuestionContent:
        """Copy with the single-document field ``name`` replaced."""
        if name not in SINGLE_FIELDS:
            raise ValueError(f"Unknown rich-text field: {name!r}")
        return replace(self, **{name: document})

    def blank_fields(self) -> List[str]:
        """Names of single-document fields that hold no text."""
        return [name for name in SINGLE_FIELDS if getattr(self, name).is_blank()]


def _load_list(
    value: Any, default_count: int, config: Optional[DeserializerConfig]
) -> Tuple[Document, ...]:
    if not isinstance(value, list):
        return tuple(Document.empty() for _ in range(default_count))
    return tuple(load_document(item, config) for item in value)
