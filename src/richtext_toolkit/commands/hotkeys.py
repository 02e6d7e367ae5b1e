"""
Keyboard shortcuts for inline marks.

``mod`` stands for Ctrl on Windows/Linux and Cmd on macOS; the editing
surface may report either name and both fold to ``mod``. A shortcut adds
its mark (it does not toggle), matching the toolbar-less typing flow.
"""

from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Mapping, Optional

from richtext_toolkit.core.models.document import Document
from richtext_toolkit.core.models.vocabulary import Mark

from .marks import add_mark
from .target import CommandTarget

logger = logging.getLogger(__name__)

HOTKEYS: Mapping[str, Mark] = MappingProxyType({
    "mod+b": Mark.BOLD,
    "mod+i": Mark.ITALIC,
    "mod+`": Mark.CODE,
})

_MODIFIER_ALIASES = {
    "mod": "mod",
    "ctrl": "mod",
    "control": "mod",
    "cmd": "mod",
    "command": "mod",
    "meta": "mod",
    "alt": "alt",
    "option": "alt",
    "shift": "shift",
}
_MODIFIER_ORDER = ("mod", "alt", "shift")


def normalize_hotkey(combo: str) -> str:
    """
    Canonical form of a key combination.

    Example:
        >>> normalize_hotkey("Ctrl+B")
        'mod+b'
        >>> normalize_hotkey("shift + cmd + I")
        'mod+shift+i'
    """
    parts = [part.strip().lower() for part in combo.split("+")]
    if combo.endswith("+"):
        # "mod++" means the plus key itself
        parts = parts[:-2] + ["+"]
    key = parts[-1] if parts else ""
    modifiers = {_MODIFIER_ALIASES.get(part, part) for part in parts[:-1] if part}
    ordered = [m for m in _MODIFIER_ORDER if m in modifiers]
    ordered += sorted(modifiers - set(_MODIFIER_ORDER))
    return "+".join(ordered + [key])


def mark_for_hotkey(combo: str) -> Optional[Mark]:
    return HOTKEYS.get(normalize_hotkey(combo))


def apply_hotkey(doc: Document, target: CommandTarget, combo: str) -> Document:
    """Add the mark bound to ``combo``; unbound combinations leave ``doc`` as is."""
    mark = mark_for_hotkey(combo)
    if mark is None:
        logger.debug(f"No mark bound to hotkey {combo!r}")
        return doc
    return add_mark(doc, target, mark)
