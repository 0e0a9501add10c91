"""
Summary: Structured result of lexically parsing a Windows path string.
Why: Give serializers and derived operations one value type to work on.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field

from winpath.platform.logging import logger

from .errors import PathError, PathResolutionError

SEPARATOR = "\\"
EXTENDED_PREFIX = "\\\\?\\"


@dataclass(slots=True)
class ParsedPath:
    """Device, host, directories and name of a parsed path.

    ``device`` and ``node`` are mutually exclusive. A malformed input still
    produces a best-effort value; problems are listed in ``errors``.

    The value is treated as immutable except for :meth:`make_directory`,
    which updates it in place. :meth:`make_absolute` always returns a new
    object (or the receiver when nothing could be resolved).
    """

    device: str = ""
    node: str = ""
    dirs: list[str] = field(default_factory=list)
    name: str = ""
    absolute: bool = False
    remote: bool = False
    extended_length: bool = False
    errors: list[PathError] = field(default_factory=list)

    def is_absolute(self) -> bool:
        return self.absolute

    def is_relative(self) -> bool:
        return not self.absolute

    def is_remote(self) -> bool:
        return self.remote

    def is_local(self) -> bool:
        return not self.remote

    def components(self) -> list[str]:
        """Return the directories followed by the name, when present."""
        if self.name:
            return [*self.dirs, self.name]
        return list(self.dirs)

    def to_string(self) -> str:
        """Render the canonical form, e.g. ``C:\\dir\\name`` or ``\\\\node\\dir``."""

        parts: list[str] = []
        if self.device:
            parts.append(f"{self.device}:")
        if self.node:
            parts.append(f"{SEPARATOR}{SEPARATOR}{self.node}")

        components = self.components()
        for component in components:
            parts.append(SEPARATOR)
            parts.append(component)

        if not components and self.absolute:
            parts.append(SEPARATOR)

        return "".join(parts)

    def to_extended_unc(self) -> str:
        """Render the extended-length form, e.g. ``\\\\?\\C:\\dir\\name``.

        The marker is emitted for every path, including relative ones.
        """

        parts: list[str] = [EXTENDED_PREFIX]
        if self.device:
            parts.append(f"{self.device}:{SEPARATOR}")
        if self.node:
            parts.append(f"UNC{SEPARATOR}{self.node}{SEPARATOR}")
        for directory in self.dirs:
            parts.append(directory)
            parts.append(SEPARATOR)
        parts.append(self.name)
        return "".join(parts)

    def make_directory(self) -> ParsedPath:
        """Treat the trailing name as a directory.

        Mutates the receiver and returns it, so callers holding the same
        object observe the change.
        """
        if self.name:
            self.dirs.append(self.name)
            self.name = ""
        return self

    def make_absolute(self, resolve: Callable[[str], str]) -> ParsedPath:
        """Return an absolute version of a relative local path.

        Args:
            resolve: Callable returning the full path for a relative path
                string; it signals failure by raising ``PathResolutionError``.

        Returns:
            ParsedPath: A newly parsed path, or the receiver itself when the
            path is remote, already absolute, or could not be resolved.
        """
        if self.remote or self.absolute:
            return self

        relative = self._relative_form()
        if not relative:
            return self

        try:
            resolved = resolve(relative)
        except PathResolutionError as e:
            logger.debug("Keeping relative path '%s': %s", relative, e.reason)
            return self

        from .tokenizer import parse

        return parse(resolved)

    def _relative_form(self) -> str:
        prefix = f"{self.device}:" if self.device else ""
        return prefix + SEPARATOR.join(self.components())

    def __str__(self) -> str:
        return self.to_string()


__all__ = ["EXTENDED_PREFIX", "ParsedPath", "SEPARATOR"]
