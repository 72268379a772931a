"""Path safety rules.

Checks run in a fixed order and :func:`validate_path` raises on the first
violation:

1. empty path                      -> EmptyPathError
2. NUL or control codepoint        -> NullOrControlByteError
3. non-portable character          -> InvalidCharactersError
4. rooted, UNC or drive-prefixed   -> AbsolutePathNotAllowedError
5. '..' segment                    -> PathTraversalError
6. reserved device name component  -> ReservedNameError

:func:`find_violations` applies the same rules but collects every violation.
"""
from __future__ import annotations

import re
from typing import Callable, FrozenSet, List, Optional

from ..models.errors import (
    AbsolutePathNotAllowedError,
    EmptyPathError,
    InvalidCharactersError,
    NullOrControlByteError,
    PathError,
    PathTraversalError,
    ReservedNameError,
)
from .logging_factory import get_logger
from .normalize import is_rooted, split_segments

logger = get_logger(__name__)

INVALID_CHARACTERS: FrozenSet[str] = frozenset('<>:"|?*')

RESERVED_NAMES: FrozenSet[str] = frozenset(
    ["CON", "PRN", "AUX", "NUL"]
    + [f"COM{i}" for i in range(1, 10)]
    + [f"LPT{i}" for i in range(1, 10)]
)

_CONTROL_RE = re.compile(r"[\x00-\x1f\x7f]")
_DRIVE_RE = re.compile(r"^[A-Za-z]:")
_SEGMENT_RE = re.compile(r"[/\\]")


def _raw_segments(path: str) -> List[str]:
    """Split on both separator styles, keeping '.' and empty segments."""
    return _SEGMENT_RE.split(path)


def _check_empty(path: str) -> Optional[PathError]:
    if not path.strip() or not split_segments(path):
        return EmptyPathError(path)
    return None


def _check_control(path: str) -> Optional[PathError]:
    if _CONTROL_RE.search(path):
        return NullOrControlByteError(path)
    return None


def _check_characters(path: str) -> Optional[PathError]:
    if any(char in INVALID_CHARACTERS for char in path):
        return InvalidCharactersError(path)
    return None


def _check_absolute(path: str) -> Optional[PathError]:
    if is_rooted(path) or _DRIVE_RE.match(path):
        return AbsolutePathNotAllowedError(path)
    return None


def _check_traversal(path: str) -> Optional[PathError]:
    if ".." in _raw_segments(path):
        return PathTraversalError(path)
    return None


def reserved_component(path: str) -> Optional[str]:
    """Return the first component that is a reserved device name, if any.

    The name is compared case-insensitively and without its extension, so
    ``con``, ``CON`` and ``Con.txt`` all match.
    """
    for component in _raw_segments(path):
        base_name = component.split(".", 1)[0].upper()
        if base_name in RESERVED_NAMES:
            return component
    return None


def _check_reserved(path: str) -> Optional[PathError]:
    component = reserved_component(path)
    if component is not None:
        return ReservedNameError(path, filename=component)
    return None


# Order is part of the public contract.
_CHECKS: List[Callable[[str], Optional[PathError]]] = [
    _check_empty,
    _check_control,
    _check_characters,
    _check_absolute,
    _check_traversal,
    _check_reserved,
]


def validate_path(path: str) -> None:
    """Validate a path, raising the first violated rule.

    Args:
        path: Raw path string

    Raises:
        PathError: The subclass matching the first failed check
    """
    for check in _CHECKS:
        error = check(path)
        if error is not None:
            logger.debug("Rejected path %r: %s", path, error.code)
            raise error


def is_safe_path(path: str) -> bool:
    """Return True if ``validate_path`` accepts the path."""
    try:
        validate_path(path)
    except PathError:
        return False
    return True


def find_violations(path: str) -> List[PathError]:
    """Return every rule the path violates, in check order.

    An empty path short-circuits: the remaining rules have nothing to inspect.

    Args:
        path: Raw path string

    Returns:
        List of errors, empty if the path is safe
    """
    violations: List[PathError] = []
    for check in _CHECKS:
        error = check(path)
        if error is None:
            continue
        violations.append(error)
        if isinstance(error, EmptyPathError):
            break
    return violations
