"""Confined path joining for repository writes.

Functions here combine a trusted workdir, a target subdirectory and an
untrusted file fragment, and prove structurally that the result stays under
the workdir. Nothing here touches the filesystem, so the paths need not exist.
"""

from __future__ import annotations

from pathlib import Path
from typing import List

from ..models.errors import EscapesContainmentError
from ..models.results import ContainmentResult
from .logging_factory import get_logger
from .normalize import (
    SEPARATOR,
    PathLike,
    as_path_str,
    join_and_normalize,
    normalize_path_str,
)
from .sanitization import PathSanitizer
from .validation import validate_path

logger = get_logger(__name__)


def _segments(normalized: str) -> List[str]:
    return [segment for segment in normalized.split(SEPARATOR) if segment]


def ensure_within(workdir: PathLike, candidate: PathLike) -> ContainmentResult:
    """Check that ``candidate`` lies strictly below ``workdir``.

    Both paths are normalized and compared segment by segment, so "/repo2"
    never counts as inside "/repo". The remainder after the workdir prefix
    must be non-empty and free of '..' segments.

    Args:
        workdir: Confinement root
        candidate: Path to check

    Returns:
        ContainmentResult witnessing the containment

    Raises:
        EscapesContainmentError: If candidate is not below workdir
    """
    root = normalize_path_str(as_path_str(workdir))
    joined = normalize_path_str(as_path_str(candidate))

    root_parts = _segments(root)
    joined_parts = _segments(joined)
    remainder = joined_parts[len(root_parts):]

    contained = (
        root.startswith(SEPARATOR) == joined.startswith(SEPARATOR)
        and joined_parts[: len(root_parts)] == root_parts
        and len(remainder) > 0
        and ".." not in remainder
    )
    if not contained:
        logger.debug("Containment check failed: %r not within %r", joined, root)
        raise EscapesContainmentError(joined, workdir=root)

    return ContainmentResult(path=Path(joined), workdir=root, relative=SEPARATOR.join(remainder))


def contain(
    workdir: PathLike,
    target: PathLike,
    file: str,
    *,
    strict_target: bool = False,
) -> ContainmentResult:
    """Join workdir, target and a sanitized file path, and verify containment.

    Args:
        workdir: Trusted confinement root
        target: Subdirectory under workdir; trusted unless ``strict_target``
        file: Untrusted file path, typically from directory content
        strict_target: Also run ``target`` through the validator

    Returns:
        ContainmentResult for the joined path

    Raises:
        PathError: From sanitizing ``file`` or validating ``target``
        EscapesContainmentError: If the joined path leaves workdir; it also
            records the raw ``target`` and ``file``
    """
    safe_file = PathSanitizer.sanitize_directory_file_path(file)

    if strict_target:
        validate_path(as_path_str(target))

    joined = join_and_normalize(join_and_normalize(workdir, target), safe_file)
    try:
        return ensure_within(workdir, joined)
    except EscapesContainmentError as e:
        raise e.with_inputs(target=as_path_str(target), file=file) from None


def safe_repository_join(
    workdir: PathLike,
    target: PathLike,
    file: str,
    *,
    strict_target: bool = False,
) -> Path:
    """Return ``workdir / target / file`` once it is proven to stay in workdir.

    Example:
        >>> safe_repository_join("/repo", "testing/framework", "/args.js").as_posix()
        '/repo/testing/framework/args.js'

    Raises:
        PathError: See ``contain``
    """
    return contain(workdir, target, file, strict_target=strict_target).path
