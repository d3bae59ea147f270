"""Core font lookup for findfont.

- Directory provider: platform font directories in search order
- Classifier: suffix test for font file names
- Lister: every font file in the search directories
- Finder: exact match first, closest partial match as fallback

All functions are stateless; every call rescans the filesystem.
"""

from findfont.core.classifier import DEFAULT_SUFFIXES, is_font_file, strip_extension
from findfont.core.directories import font_directories, unique_directories
from findfont.core.finder import (
    MatchCandidate,
    find,
    find_with_suffixes,
    match_score,
    search,
)
from findfont.core.lister import list_fonts, list_with_suffixes

__all__ = [
    "DEFAULT_SUFFIXES",
    "MatchCandidate",
    "find",
    "find_with_suffixes",
    "font_directories",
    "is_font_file",
    "list_fonts",
    "list_with_suffixes",
    "match_score",
    "search",
    "strip_extension",
    "unique_directories",
]
