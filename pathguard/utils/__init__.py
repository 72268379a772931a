"""Path normalization, validation, sanitization and confinement utilities."""

from .normalize import join_and_normalize, normalize_path_buf, normalize_path_str
from .paths import contain, ensure_within, safe_repository_join
from .sanitization import PathSanitizer, sanitize_directory_file_path, sanitize_many
from .validation import find_violations, is_safe_path, validate_path

__all__ = [
    "PathSanitizer",
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
