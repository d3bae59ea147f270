"""Recursive directory walk that skips unreadable subtrees."""

import os
from collections.abc import Iterable, Iterator


def _skip(_error: OSError) -> None:
    """Ignore a traversal error so the walk continues with the next entry."""
    return None


def iter_files(directories: Iterable[str]) -> Iterator[tuple[str, str]]:
    """Yield ``(path, file_name)`` for every non-directory entry.

    Directories are visited in the given order and each one is walked
    recursively in filesystem order. Missing directories and permission errors
    are skipped. Symbolic links to directories are not followed.

    Args:
        directories: Root directories to walk

    Yields:
        Full path and base name of each file found
    """
    for directory in directories:
        for root, _dirs, files in os.walk(directory, onerror=_skip):
            for file_name in files:
                yield os.path.join(root, file_name), file_name
