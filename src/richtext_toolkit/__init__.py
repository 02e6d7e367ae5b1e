"""Top-level package for the question rich-text toolkit.

Provides subpackages:
- richtext_toolkit.core – node/document models, normalizer, tree schema
- richtext_toolkit.codec – HTML serializer/deserializer and field loading
- richtext_toolkit.commands – mark and block commands, hotkeys
- richtext_toolkit.content – question-level field bundles
"""

import re
from importlib.metadata import PackageNotFoundError, version
from pathlib import Path

DISTRIBUTION = "richtext-toolkit"

_VERSION_LINE = re.compile(r'^version\s*=\s*["\']([^"\']+)["\']', re.MULTILINE)


def _get_version() -> str:
    """Installed distribution version, else the source checkout's pyproject version."""
    try:
        return version(DISTRIBUTION)
    except PackageNotFoundError:
        pass

    pyproject = Path(__file__).resolve().parents[2] / "pyproject.toml"
    try:
        match = _VERSION_LINE.search(pyproject.read_text(encoding="utf-8"))
    except OSError:
        match = None
    return match.group(1) if match else "0.0.0"


__version__ = _get_version()
__all__: list[str] = ["DISTRIBUTION", "__version__"]
