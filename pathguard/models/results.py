"""Value types produced by the sanitizer and the repository joiner."""
from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Tuple


class SafePath(str):
    """A relative path that has passed every validation rule.

    Instances are plain strings, so they compare equal to the equivalent
    ``str`` and can be passed anywhere a string path is accepted.
    """

    __slots__ = ()

    @property
    def segments(self) -> Tuple[str, ...]:
        """Path components split on the canonical separator."""
        return tuple(self.split("/"))

    @property
    def name(self) -> str:
        """Final path component."""
        return self.segments[-1]

    def __repr__(self) -> str:
        return f"SafePath({str.__repr__(self)})"


@dataclass(frozen=True)
class ContainmentResult:
    """A joined path plus the witness that it lies below ``workdir``.

    ``relative`` is the segment-aligned remainder of ``path`` after the
    normalized ``workdir`` prefix; it is never empty and never contains '..'.
    """

    path: Path
    workdir: str
    relative: str

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "path": self.path.as_posix(),
            "workdir": self.workdir,
            "relative": self.relative,
        }
