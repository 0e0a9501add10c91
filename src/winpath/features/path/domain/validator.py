"""
Summary: Character and length rules for Windows path components.
Why: Report naming violations without interrupting the tokenizer.
"""

from __future__ import annotations

from typing import ClassVar, Final, final

from .errors import PathError, PathErrorKind

MAX_PATH_LENGTH: Final[int] = 255
MAX_EXTENDED_PATH_LENGTH: Final[int] = 32767


@final
class ComponentValidator:
    """Validate scalars against the general Windows naming rules.

    See MSDN, "Naming Files, Paths, and Namespaces". File systems may impose
    additional restrictions that are not checked here.
    """

    RESERVED: ClassVar[frozenset[str]] = frozenset('<>:"/\\|?*')

    @classmethod
    def check_scalar(cls, scalar: str, position: int | None = None) -> PathError | None:
        """Return the error for an illegal scalar, or ``None`` when it is valid.

        Args:
            scalar: A single code point.
            position: Index of the scalar in the raw input.

        Returns:
            PathError | None: Error describing the violation, if any.
        """
        if scalar in cls.RESERVED:
            return PathError(
                PathErrorKind.RESERVED_CHARACTER,
                f"reserved character {scalar!r} is present",
                position,
            )

        code = ord(scalar)
        if code == 0:
            return PathError(PathErrorKind.NULL_CHARACTER, "a NUL character is present", position)
        if 1 <= code <= 31:
            # Also flags alternate data stream names; those are not special-cased.
            return PathError(
                PathErrorKind.CONTROL_CHARACTER,
                f"control character {code:#04x} is present",
                position,
            )
        return None

    @classmethod
    def check_component(cls, component: str, start: int | None = None) -> list[PathError]:
        """Validate every scalar of an already accumulated component.

        Args:
            component: Component text.
            start: Index of the first scalar in the raw input.

        Returns:
            list[PathError]: One error per illegal scalar, in order.
        """
        found: list[PathError] = []
        for offset, scalar in enumerate(component):
            position = None if start is None else start + offset
            error = cls.check_scalar(scalar, position)
            if error is not None:
                found.append(error)
        return found


def check_length(raw_length: int, extended_length: bool) -> PathError | None:
    """Apply the path length ceiling to the raw scalar count of the input."""

    if extended_length:
        if raw_length > MAX_EXTENDED_PATH_LENGTH:
            return PathError(
                PathErrorKind.PATH_TOO_LONG,
                f"the extended-length path exceeds the maximum of {MAX_EXTENDED_PATH_LENGTH:,} characters",
            )
        return None

    if raw_length > MAX_PATH_LENGTH:
        return PathError(
            PathErrorKind.PATH_TOO_LONG,
            f"the path exceeds the maximum of {MAX_PATH_LENGTH} characters",
        )
    return None


__all__ = [
    "ComponentValidator",
    "MAX_EXTENDED_PATH_LENGTH",
    "MAX_PATH_LENGTH",
    "check_length",
]
