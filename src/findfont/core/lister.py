"""Enumerate every font file in the search directories."""

from collections.abc import Iterable

from findfont.core.classifier import DEFAULT_SUFFIXES, is_font_file
from findfont.core.directories import font_directories
from findfont.core.walker import iter_files
from findfont.utils.logging import ScanStats, get_logger

logger = get_logger(__name__)


def list_with_suffixes(
    suffixes: Iterable[str],
    directories: Iterable[str] | None = None,
) -> list[str]:
    """Return the paths of all files whose name ends with one of ``suffixes``.

    Every call rescans the directories. Unreadable or missing directories are
    skipped.

    Args:
        suffixes: Accepted file suffixes
        directories: Directories to scan (default: ``font_directories()``)

    Returns:
        Matching paths in directory order, then filesystem order; empty if
        nothing matched
    """
    suffixes = tuple(suffixes)
    stats = ScanStats(directories=list(directories) if directories is not None else font_directories())

    paths = []
    for path, file_name in iter_files(stats.directories):
        stats.files_seen += 1
        if is_font_file(file_name, suffixes):
            stats.fonts_seen += 1
            paths.append(path)

    stats.finish().log_summary(logger, "Font listing complete", suffixes=list(suffixes))
    return paths


def list_fonts(directories: Iterable[str] | None = None) -> list[str]:
    """Return the paths of all ``.ttf``, ``.ttc`` and ``.otf`` files."""
    return list_with_suffixes(DEFAULT_SUFFIXES, directories=directories)
