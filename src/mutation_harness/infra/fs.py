from __future__ import annotations

"""
FileSystem Infrastructure Layer.

Thin wrappers over 'os' and 'shutil' used by discovery and by the case
runner, so that encoding and directory creation behave uniformly.
"""

import os
import shutil
from typing import List, Optional, Sequence

# -----------------------------------------------------------------------------
# PATH RESOLUTION API
# -----------------------------------------------------------------------------

def normalize_path(path: Optional[str], fallback: str) -> str:
    """
    Normalize a directory path string into an absolute filesystem path.

    Handles environment variable expansion and user home shortcuts (~/).
    Reverts to fallback if the input is empty.

    Args:
        path: Raw input path string.
        fallback: Default path to use if the input is empty.

    Returns:
        str: Normalized absolute path.
    """
    p = (path or "").strip()
    if not p:
        p = fallback
    return os.path.abspath(os.path.expandvars(os.path.expanduser(p)))


# -----------------------------------------------------------------------------
# DIRECTORY INSPECTION API
# -----------------------------------------------------------------------------

def list_subdirectories(path: str) -> List[str]:
    """
    List the direct subdirectories of a path, sorted by base name.

    Non-directory entries are ignored.

    Args:
        path: Directory to inspect.

    Returns:
        List[str]: Base names of the subdirectories in lexicographic order.
    """
    with os.scandir(path) as entries:
        names = [entry.name for entry in entries if entry.is_dir()]
    return sorted(names)


def contains_files(path: str, file_names: Sequence[str]) -> bool:
    """
    Check that every name is a regular file directly inside a directory.

    Matching is exact and case-sensitive, even on case-insensitive
    filesystems.

    Args:
        path: Directory to inspect.
        file_names: Required file names.

    Returns:
        bool: True if all files are present.
    """
    with os.scandir(path) as entries:
        present = {entry.name for entry in entries if entry.is_file()}
    return all(name in present for name in file_names)


# -----------------------------------------------------------------------------
# FILE I/O API
# -----------------------------------------------------------------------------

def read_text(path: str) -> str:
    """Read a UTF-8 text file, preserving its line endings."""
    with open(path, "r", encoding="utf-8", newline="") as f:
        return f.read()


def write_text(path: str, content: str) -> None:
    """Write a UTF-8 text file, creating parent directories when missing."""
    parent = os.path.dirname(os.path.abspath(path))
    if parent:
        os.makedirs(parent, exist_ok=True)
    with open(path, "w", encoding="utf-8", newline="") as f:
        f.write(content)


def copy_file(source: str, destination: str) -> None:
    """Copy a file's contents over a destination path."""
    shutil.copyfile(source, destination)
