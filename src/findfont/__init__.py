"""findfont - Locate installed font files by name.

findfont searches the current directory plus the platform's user and system
font directories for a font file. An exact (case-insensitive) file name match
wins; otherwise the closest file whose name contains the requested name is
returned.

Example:
    >>> from findfont import find
    >>> find("DejaVuSans")
    '/usr/share/fonts/truetype/dejavu/DejaVuSans.ttf'
"""

from findfont.core import (
    DEFAULT_SUFFIXES,
    find,
    find_with_suffixes,
    font_directories,
    list_fonts,
    list_with_suffixes,
)
from findfont.exceptions import FindFontError, FontNotFoundError

__version__ = "0.1.0"

__all__ = [
    "DEFAULT_SUFFIXES",
    "FindFontError",
    "FontNotFoundError",
    "__version__",
    "find",
    "find_with_suffixes",
    "font_directories",
    "list_fonts",
    "list_with_suffixes",
]
