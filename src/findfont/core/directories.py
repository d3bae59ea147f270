"""Platform-specific font directory lookup.

The directory list is rebuilt on every call since fonts may be installed or
removed between calls. Directories that do not exist are kept; the walker
skips them.
"""

import ntpath
import os
import platform

# (user directories, system directories) per platform
_DARWIN_DIRS = (
    ["~/Library/Fonts"],
    ["/Library/Fonts", "/System/Library/Fonts"],
)
_UNIX_SYSTEM_DIRS = ["/usr/local/share/fonts", "/usr/share/fonts"]


def _expand_user(path: str) -> str:
    """Expand a leading ``~``.

    ``os.path.expanduser`` returns the path unchanged when the home directory
    cannot be resolved; such a path is then simply not found by the walker.
    """
    return os.path.expanduser(path)


def _unix_directories() -> tuple[list[str], list[str]]:
    user_dirs = [_expand_user("~/.fonts")]
    data_home = os.environ.get("XDG_DATA_HOME")
    if data_home:
        user_dirs.append(os.path.join(_expand_user(data_home), "fonts"))
    else:
        user_dirs.append(_expand_user("~/.local/share/fonts"))

    data_dirs = os.environ.get("XDG_DATA_DIRS")
    if data_dirs:
        system_dirs = [
            os.path.join(_expand_user(entry), "fonts")
            for entry in data_dirs.split(os.pathsep)
            if entry
        ]
    else:
        system_dirs = list(_UNIX_SYSTEM_DIRS)
    return user_dirs, system_dirs


def _windows_directories() -> tuple[list[str], list[str]]:
    user_dirs = []
    local_app_data = os.environ.get("LOCALAPPDATA")
    if local_app_data:
        user_dirs.append(ntpath.join(local_app_data, "Microsoft", "Windows", "Fonts"))
    windir = os.environ.get("WINDIR") or os.environ.get("windir") or "C:\\Windows"
    return user_dirs, [ntpath.join(windir, "Fonts")]


def _darwin_directories() -> tuple[list[str], list[str]]:
    user_dirs, system_dirs = _DARWIN_DIRS
    return [_expand_user(d) for d in user_dirs], list(system_dirs)


def font_directories(system: str | None = None, include_current: bool = True) -> list[str]:
    """Return the directories searched for fonts, in search order.

    Args:
        system: Platform name as reported by ``platform.system()``
            (default: the running platform). Unknown names use the Unix layout.
        include_current: Put the current directory first

    Returns:
        Current directory, user font directories, then system font
        directories, without duplicates
    """
    if system is None:
        system = platform.system()

    if system == "Windows":
        user_dirs, system_dirs = _windows_directories()
    elif system == "Darwin":
        user_dirs, system_dirs = _darwin_directories()
    else:
        user_dirs, system_dirs = _unix_directories()

    candidates = [os.curdir] if include_current else []
    candidates.extend(user_dirs)
    candidates.extend(system_dirs)
    return unique_directories(candidates)


def unique_directories(directories: list[str]) -> list[str]:
    """Remove duplicate directories, keeping the first occurrence."""
    seen: set[str] = set()
    result = []
    for directory in directories:
        key = os.path.normpath(directory)
        if key in seen:
            continue
        seen.add(key)
        result.append(directory)
    return result
