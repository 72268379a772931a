"""Path normalization and validation for writing untrusted paths into a confined tree.

Example:
    >>> from pathguard import safe_repository_join, sanitize_directory_file_path
    >>> sanitize_directory_file_path("/args.js")
    SafePath('args.js')
    >>> safe_repository_join("/repo", "testing/framework", "/args.js").as_posix()
    '/repo/testing/framework/args.js'
"""

__version__ = "1.0.0"

from .models import (
    AbsolutePathNotAllowedError,
    ContainmentResult,
    EmptyPathError,
    EscapesContainmentError,
    InvalidCharactersError,
    NullOrControlByteError,
    PathError,
    PathTraversalError,
    ReservedNameError,
    SafePath,
)
from .utils import (
    PathSanitizer,
    contain,
    ensure_within,
    find_violations,
    is_safe_path,
    join_and_normalize,
    normalize_path_buf,
    normalize_path_str,
    safe_repository_join,
    sanitize_directory_file_path,
    sanitize_many,
    validate_path,
)

__all__ = [
    "AbsolutePathNotAllowedError",
    "ContainmentResult",
    "EmptyPathError",
    "EscapesContainmentError",
    "InvalidCharactersError",
    "NullOrControlByteError",
    "PathError",
    "PathSanitizer",
    "PathTraversalError",
    "ReservedNameError",
    "SafePath",
    "__version__",
    "contain",
    "ensure_within",
    "find_violations",
    "is_safe_path",
    "join_and_normalize",
    "normalize_path_buf",
    "normalize_path_str",
    "safe_repository_join",
    "sanitize_directory_file_path",
    "sanitize_many",
    "validate_path",
]
