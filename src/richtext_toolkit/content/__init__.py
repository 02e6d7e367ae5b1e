"""
Content Package

Question-level bundles of rich-text fields.
"""

from .question_content import QuestionContent, SINGLE_FIELDS

__all__ = [
    "QuestionContent",
    "SINGLE_FIELDS",
]
