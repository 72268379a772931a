"""Cross-platform path string normalization.

Normalization is a pure string transform with no security decisions:
backslashes become forward slashes, runs of separators collapse, and '.'
segments disappear. '..' segments are kept as-is so that the validator can
reject them; they are never resolved here.
"""
from __future__ import annotations

import os
from pathlib import Path
from typing import List, Union

PathLike = Union[str, "os.PathLike[str]"]

SEPARATOR = "/"
FOREIGN_SEPARATORS = ("\\",)


def as_path_str(path: PathLike) -> str:
    """Return the string form of a path-like value."""
    return os.fspath(path)


def split_segments(path: str) -> List[str]:
    """Split a path into its meaningful segments.

    Both separator styles are honored; empty and '.' segments are dropped.

    Args:
        path: Raw or normalized path string

    Returns:
        List of segments in order
    """
    unified = path
    for sep in FOREIGN_SEPARATORS:
        unified = unified.replace(sep, SEPARATOR)
    return [segment for segment in unified.split(SEPARATOR) if segment and segment != "."]


def is_rooted(path: str) -> bool:
    """Return True if the path starts with a separator of either style."""
    return path.startswith(SEPARATOR) or path.startswith(FOREIGN_SEPARATORS)


def normalize_path_str(path: str) -> str:
    """Normalize a path string for cross-platform consistency.

    - Converts backslashes to forward slashes
    - Collapses repeated separators and drops trailing ones
    - Removes '.' segments
    - Keeps a single leading '/' when the input was rooted

    Examples:
        >>> normalize_path_str("a//b\\\\c")
        'a/b/c'
        >>> normalize_path_str("/repo/./src/")
        '/repo/src'

    Args:
        path: Raw path string

    Returns:
        Normalized path string (empty input yields an empty string)
    """
    body = SEPARATOR.join(split_segments(path))
    if is_rooted(path):
        return SEPARATOR + body
    return body


def normalize_path_buf(path: PathLike) -> Path:
    """Normalize a path-like value and return it as a Path.

    Args:
        path: Path or string to normalize

    Returns:
        Normalized Path
    """
    return Path(normalize_path_str(as_path_str(path)))


def join_and_normalize(base: PathLike, path: PathLike) -> Path:
    """Join two paths and normalize the result.

    Unlike ``Path.joinpath``, a leading separator on ``path`` is treated as a
    plain segment boundary, so ``base`` is never discarded.

    Examples:
        >>> join_and_normalize("source/", "/main.rs").as_posix()
        'source/main.rs'

    Args:
        base: Base directory
        path: Path to append to ``base``

    Returns:
        Normalized joined Path
    """
    base_str = normalize_path_str(as_path_str(base))
    path_str = normalize_path_str(as_path_str(path))

    if not base_str:
        return Path(path_str.lstrip(SEPARATOR))
    return Path(normalize_path_str(f"{base_str}{SEPARATOR}{path_str}"))
