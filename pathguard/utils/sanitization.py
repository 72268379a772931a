"""Path sanitization for directory-content file paths.

Paths extracted from archives or version-control metadata are logically
relative but frequently arrive with a leading separator ("/args.js"). The
sanitizer normalizes such a fragment, strips exactly one leading separator,
and validates what remains. Anything unsafe is rejected whole; offending
segments are never dropped.
"""
from __future__ import annotations

import re
from typing import Iterable, List, Union

from ..models.errors import AbsolutePathNotAllowedError, EmptyPathError, PathError
from ..models.results import SafePath
from .logging_factory import get_logger
from .normalize import SEPARATOR, normalize_path_str
from .validation import validate_path

logger = get_logger(__name__)

# "\\server\share" and "//server/share" name network locations
_UNC_PREFIX_RE = re.compile(r"^[/\\]{2}")


class PathSanitizer:
    """Utilities for turning untrusted path fragments into safe relative paths."""

    @staticmethod
    def sanitize_directory_file_path(path: str) -> SafePath:
        """Sanitize a file path taken from directory content.

        Args:
            path: Raw path, possibly carrying one leading separator

        Returns:
            SafePath relative to the directory being written into

        Raises:
            PathError: The first validation rule the path violates, reporting
                the raw input
        """
        if not path.strip():
            raise EmptyPathError(path)

        # Only a single leading separator may be stripped; UNC prefixes stay absolute
        if _UNC_PREFIX_RE.match(path):
            raise AbsolutePathNotAllowedError(path)

        normalized = normalize_path_str(path)
        if normalized.startswith(SEPARATOR):
            normalized = normalized[len(SEPARATOR):]

        try:
            validate_path(normalized)
        except PathError as e:
            raise e.with_path(path) from None

        return SafePath(normalized)

    @staticmethod
    def sanitize_many(paths: Iterable[str]) -> List[Union[SafePath, PathError]]:
        """Sanitize a batch of paths without stopping at the first failure.

        Args:
            paths: Raw paths to sanitize

        Returns:
            One SafePath or PathError per input, in input order
        """
        results: List[Union[SafePath, PathError]] = []
        for raw in paths:
            try:
                results.append(PathSanitizer.sanitize_directory_file_path(raw))
            except PathError as e:
                logger.debug("Sanitization rejected %r: %s", raw, e.code)
                results.append(e)
        return results


def sanitize_directory_file_path(path: str) -> SafePath:
    """Sanitize a directory-content file path.

    See PathSanitizer.sanitize_directory_file_path for details.
    """
    return PathSanitizer.sanitize_directory_file_path(path)


def sanitize_many(paths: Iterable[str]) -> List[Union[SafePath, PathError]]:
    """Sanitize a batch of paths. See PathSanitizer.sanitize_many for details."""
    return PathSanitizer.sanitize_many(paths)
