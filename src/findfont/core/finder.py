"""Font lookup by file name or bare font name.

The finder walks the search directories looking for a file whose name equals
the requested name, ignoring case. The first such file ends the search.
Otherwise the file whose extension-less name contains the extension-less
request and is shortest wins: its score is the length difference, and only a
strictly lower score replaces the current best, so earlier files win ties.
"""

import os
from collections.abc import Iterable
from dataclasses import dataclass

from findfont.core.classifier import DEFAULT_SUFFIXES, base_name, is_font_file, strip_extension
from findfont.core.directories import font_directories
from findfont.core.walker import iter_files
from findfont.exceptions import FontNotFoundError
from findfont.utils.logging import ScanStats, get_logger

logger = get_logger(__name__)


@dataclass
class MatchCandidate:
    """Best matches seen during a single search.

    Attributes:
        exact: Path of the exact match, if one was found
        partial: Path of the best partial match so far
        partial_score: Score of ``partial`` (lower is better)
    """

    exact: str | None = None
    partial: str | None = None
    partial_score: int | None = None

    def offer_partial(self, path: str, score: int) -> None:
        """Keep ``path`` if it scores strictly better than the current best."""
        if self.partial_score is None or score < self.partial_score:
            self.partial = path
            self.partial_score = score

    @property
    def best(self) -> str | None:
        return self.exact if self.exact is not None else self.partial


def _is_readable_file(path: str) -> bool:
    try:
        return os.path.isfile(path) and os.access(path, os.R_OK)
    except (OSError, ValueError):
        return False


def match_score(candidate_name: str, needle: str) -> int | None:
    """Score a partial match of ``needle`` against a file name.

    Both names are compared without extension and ignoring case.

    Args:
        candidate_name: Base name of a font file
        needle: Requested font name

    Returns:
        Length difference of the stripped names, or None when the stripped
        candidate does not contain the stripped needle
    """
    candidate_base = strip_extension(candidate_name.lower())
    needle_base = strip_extension(needle.lower())
    if needle_base not in candidate_base:
        return None
    return len(candidate_base) - len(needle_base)


def search(
    needle: str,
    suffixes: Iterable[str],
    directories: Iterable[str] | None = None,
) -> MatchCandidate:
    """Scan the directories for ``needle`` and collect the best matches.

    Args:
        needle: Base name of the requested font
        suffixes: Accepted file suffixes
        directories: Directories to scan (default: ``font_directories()``)

    Returns:
        The match candidate; ``exact`` is set if the scan stopped early
    """
    suffixes = tuple(suffixes)
    stats = ScanStats(directories=list(directories) if directories is not None else font_directories())
    lower_needle = needle.lower()
    candidate = MatchCandidate()

    for path, file_name in iter_files(stats.directories):
        stats.files_seen += 1
        if not is_font_file(file_name, suffixes):
            continue
        stats.fonts_seen += 1

        if file_name.lower() == lower_needle:
            candidate.exact = path
            break

        score = match_score(file_name, needle)
        if score is not None:
            candidate.offer_partial(path, score)

    stats.finish().log_summary(
        logger,
        "Font search complete",
        needle=needle,
        exact=candidate.exact,
        partial=candidate.partial,
        score=candidate.partial_score,
    )
    return candidate


def find_with_suffixes(
    file_name: str,
    suffixes: Iterable[str],
    directories: Iterable[str] | None = None,
) -> str:
    """Locate a font file, considering only files with the given suffixes.

    If ``file_name`` already points to a readable file it is returned as is.
    Otherwise its base name is searched for in the current directory and the
    user and system font directories.

    Args:
        file_name: Font file name, bare font name, or path
        suffixes: Accepted file suffixes
        directories: Directories to scan (default: ``font_directories()``)

    Returns:
        Path of the exact match, or of the closest partial match

    Raises:
        FontNotFoundError: If no file matches
    """
    if _is_readable_file(file_name):
        return file_name

    needle = base_name(file_name)
    if not needle:
        raise FontNotFoundError(file_name)

    logger.debug("Searching for font", needle=needle)
    match = search(needle, suffixes, directories).best
    if match is None:
        raise FontNotFoundError(file_name)
    return match


def find(file_name: str, directories: Iterable[str] | None = None) -> str:
    """Locate a ``.ttf``, ``.ttc`` or ``.otf`` font file.

    See ``find_with_suffixes``.
    """
    return find_with_suffixes(file_name, DEFAULT_SUFFIXES, directories=directories)
