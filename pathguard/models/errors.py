"""Error types raised by path validation, sanitization and containment checks.

Every unsafe input maps to exactly one subclass of :class:`PathError`. Each
instance keeps the raw path that triggered it so callers can report the
offending value verbatim.
"""
from __future__ import annotations

import copy
from typing import Any, Dict, Optional


class PathError(ValueError):
    """Base class for every path safety violation."""

    code = "path_error"
    default_message = "Path validation failed"

    def __init__(self, path: str = "", message: Optional[str] = None):
        self.path = path
        super().__init__(message or self._format_message())

    def _format_message(self) -> str:
        return f"{self.default_message}: {self.path!r}"

    def with_path(self, path: str) -> "PathError":
        """Return a copy of this error reporting a different raw path."""
        clone = copy.copy(self)
        clone.path = path
        clone.args = (clone._format_message(),)
        return clone

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "code": self.code,
            "path": self.path,
            "message": str(self),
        }


class EmptyPathError(PathError):
    """Path is empty, blank, or has no segment left after normalization."""

    code = "empty_path"
    default_message = "Empty paths are not allowed"

    def _format_message(self) -> str:
        return self.default_message


class NullOrControlByteError(PathError):
    """Path contains a NUL byte or another control codepoint."""

    code = "null_or_control_byte"
    default_message = "Path contains NUL or control characters"


class InvalidCharactersError(PathError):
    """Path contains a character that is not portable across platforms."""

    code = "invalid_characters"
    default_message = "Invalid characters detected in path"


class AbsolutePathNotAllowedError(PathError):
    """Path is rooted, UNC-prefixed, or carries a drive letter."""

    code = "absolute_path_not_allowed"
    default_message = "Absolute paths are not allowed"


class PathTraversalError(PathError):
    """Path contains a '..' segment."""

    code = "path_traversal"
    default_message = "Path traversal detected"

    def _format_message(self) -> str:
        return f"{self.default_message}: {self.path!r} - '..' segments are not allowed"


class ReservedNameError(PathError):
    """A path component collides with a reserved device name."""

    code = "reserved_name"
    default_message = "Reserved filename detected"

    def __init__(self, path: str = "", filename: str = "", message: Optional[str] = None):
        self.filename = filename
        super().__init__(path, message)

    def _format_message(self) -> str:
        return f"{self.default_message}: {self.filename!r} in path {self.path!r}"

    def to_dict(self) -> Dict[str, Any]:
        data = super().to_dict()
        data["filename"] = self.filename
        return data


class EscapesContainmentError(PathError):
    """Joined path does not stay below its confinement root."""

    code = "escapes_containment"
    default_message = "Path escapes its workdir"

    def __init__(
        self,
        path: str = "",
        workdir: str = "",
        message: Optional[str] = None,
        target: Optional[str] = None,
        file: Optional[str] = None,
    ):
        self.workdir = workdir
        self.target = target
        self.file = file
        super().__init__(path, message)

    def _format_message(self) -> str:
        return f"{self.default_message}: {self.path!r} is not within {self.workdir!r}"

    def with_inputs(self, target: str, file: str) -> "EscapesContainmentError":
        """Return a copy that also records the raw target and file of a join."""
        clone = copy.copy(self)
        clone.target = target
        clone.file = file
        return clone

    def to_dict(self) -> Dict[str, Any]:
        data = super().to_dict()
        data["workdir"] = self.workdir
        if self.target is not None:
            data["target"] = self.target
        if self.file is not None:
            data["file"] = self.file
        return data
