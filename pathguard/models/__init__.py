"""Data models for path safety checks.

This module provides the error family raised for unsafe paths and the value
types returned once a path has been sanitized or confined to a workdir.
"""

from .errors import (
    AbsolutePathNotAllowedError,
    EmptyPathError,
    EscapesContainmentError,
    InvalidCharactersError,
    NullOrControlByteError,
    PathError,
    PathTraversalError,
    ReservedNameError,
)
from .results import ContainmentResult, SafePath

__all__ = [
    "AbsolutePathNotAllowedError",
    "ContainmentResult",
    "EmptyPathError",
    "EscapesContainmentError",
    "InvalidCharactersError",
    "NullOrControlByteError",
    "PathError",
    "PathTraversalError",
    "ReservedNameError",
    "SafePath",
]
