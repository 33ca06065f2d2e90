"""Small helpers for paths, files and directories.

Operations report success as a boolean rather than raising.
"""

from __future__ import annotations

import os

_PROBE_NAME = "tmp"


def combine_path(dir_name: str, file_name: str) -> str:
    """Join a directory name and a file name with a slash."""
    return f"{dir_name}/{file_name}"


def is_file_exists(path: str) -> bool:
    """Return whether ``path`` can be opened for reading as a file."""
    try:
        with open(path, "rb"):
            return True
    except OSError:
        return False


def is_dir_exists(path: str) -> bool:
    """Return whether ``path`` is a directory a file can be written into.

    A probe file is created inside the directory and removed again.
    """
    probe = combine_path(path, _PROBE_NAME)
    existed_before = os.path.lexists(probe)
    try:
        with open(probe, "a"):
            pass
    except OSError:
        return False
    if not existed_before:
        try:
            os.remove(probe)
        except OSError:
            pass
    return True


def create_dir(path: str) -> bool:
    """Create a directory; return False if it exists or cannot be made."""
    if is_dir_exists(path):
        return False
    try:
        os.mkdir(path, 0o700)
    except OSError:
        return False
    return True


def create_file(dir_name: str, file_name: str, data: str = "") -> bool:
    """Create (or truncate) a file and write ``data`` into it.

    With an empty ``dir_name`` the file name is used as the path.
    """
    file_path = combine_path(dir_name, file_name) if dir_name else file_name
    print(f"filePath: {file_path}")
    try:
        with open(file_path, "w", encoding="utf-8") as out:
            if data:
                out.write(data)
    except OSError:
        return False
    return True


def remove_file(dir_name: str, file_name: str) -> bool:
    """Remove a file inside a directory; return whether it was removed."""
    try:
        os.remove(combine_path(dir_name, file_name))
    except OSError:
        return False
    return True


def remove_dir(dir_name: str) -> bool:
    """Remove an empty directory (or a plain file); return whether it was removed."""
    try:
        if os.path.isdir(dir_name) and not os.path.islink(dir_name):
            os.rmdir(dir_name)
        else:
            os.remove(dir_name)
    except OSError:
        return False
    return True