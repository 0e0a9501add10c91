"""
Summary: Validation error records and exceptions raised around path parsing.
Why: Keep accumulated parse problems as data while collaborator failures stay exceptions.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class PathErrorKind(str, Enum):
    """Category of a validation problem recorded on a parsed path."""

    RESERVED_CHARACTER = "ReservedCharacter"
    NULL_CHARACTER = "NullCharacter"
    CONTROL_CHARACTER = "ControlCharacter"
    PATH_TOO_LONG = "PathTooLong"


@dataclass(slots=True, frozen=True)
class PathError:
    """A single validation problem found while parsing.

    ``position`` is the index of the offending scalar in the raw input, or
    ``None`` for problems that concern the whole path.
    """

    kind: PathErrorKind
    message: str
    position: int | None = None

    def __str__(self) -> str:
        if self.position is None:
            return f"{self.kind.value}: {self.message}"
        return f"{self.kind.value} at {self.position}: {self.message}"


class PathResolutionError(OSError):
    """Raised by a full path resolver that cannot canonicalize its input."""

    def __init__(self, path: str, reason: str) -> None:
        super().__init__(f"Unable to resolve full path for '{path}': {reason}")
        self.path: str = path
        self.reason: str = reason


__all__ = ["PathError", "PathErrorKind", "PathResolutionError"]
