"""
Commands Package

Total tree transforms driven by the editing surface: inline mark toggles,
block kind toggles (with list wrap/unwrap) and keyboard shortcuts. Every
command takes a Document and a CommandTarget and returns a normalized
Document; a target that addresses nothing leaves the document unchanged.
"""

from .target import CommandTarget
from .marks import toggle_mark, add_mark, remove_mark, is_mark_active
from .blocks import toggle_block, is_block_active
from .hotkeys import HOTKEYS, apply_hotkey, mark_for_hotkey, normalize_hotkey

__all__ = [
    "CommandTarget",
    "toggle_mark",
    "add_mark",
    "remove_mark",
    "is_mark_active",
    "toggle_block",
    "is_block_active",
    "HOTKEYS",
    "apply_hotkey",
    "mark_for_hotkey",
    "normalize_hotkey",
]
