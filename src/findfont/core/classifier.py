"""File name helpers shared by the lister and the finder."""

import os
from collections.abc import Iterable

DEFAULT_SUFFIXES: tuple[str, ...] = (".ttf", ".ttc", ".otf")


def is_font_file(name: str, suffixes: Iterable[str]) -> bool:
    """Check whether a file name ends with one of the given suffixes.

    The comparison ignores case on both sides.

    Args:
        name: File name or path
        suffixes: Accepted suffixes, e.g. ``(".ttf", ".otf")``

    Returns:
        True on the first matching suffix, False if none match
    """
    lower = name.lower()
    for suffix in suffixes:
        if lower.endswith(suffix.lower()):
            return True
    return False


def strip_extension(name: str) -> str:
    """Drop the final extension from a file name."""
    return os.path.splitext(name)[0]


def base_name(path: str) -> str:
    """Return the last path component, ignoring trailing separators."""
    stripped = path.rstrip("/" + os.sep)
    return os.path.basename(stripped)
