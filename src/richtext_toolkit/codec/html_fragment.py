"""
Module: codec.html_fragment

Purpose:
    Boundary to the external HTML parser. Turns an HTML string into a
    generic tree of tags and text nodes using BeautifulSoup with the
    stdlib ``html.parser`` backend, which keeps the fragment as written
    (no implicit <html>/<body> wrapper, no re-nesting).

Key Functions:
    - parse_html_fragment(html): str -> BeautifulSoup root
    - is_text(node) / is_element(node): Classify generic nodes
    - tag_name(node): Lower-cased tag name

Dependencies:
    - beautifulsoup4

Used By:
    - codec.deserializer
"""

from __future__ import annotations

import warnings
from typing import Any

from bs4 import BeautifulSoup, MarkupResemblesLocatorWarning, NavigableString, Tag
from bs4.element import PreformattedString


PARSER = "html.parser"


def parse_html_fragment(html: str) -> BeautifulSoup:
    """
    Parse an HTML fragment.

    The core only reads the result; no sanitizing happens here.

    Args:
        html: Markup string (may be plain text)

    Returns:
        Root of the parsed tree; its ``contents`` are the fragment's
        top-level nodes
    """
    with warnings.catch_warnings():
        # Short plain strings like "answer.txt" look like filenames to bs4.
        warnings.simplefilter("ignore", MarkupResemblesLocatorWarning)
        return BeautifulSoup(html, PARSER)


def is_text(node: Any) -> bool:
    """True for character data; comments, doctypes and CDATA are not text."""
    return isinstance(node, NavigableString) and not isinstance(node, PreformattedString)


def is_element(node: Any) -> bool:
    return isinstance(node, Tag)


def tag_name(node: Tag) -> str:
    return (node.name or "").lower()
