"""
Summary: Protocols for the operating system services used around parsed paths.
Why: Let use cases resolve and inspect paths without binding to Win32 or the local disk.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class FullPathResolver(Protocol):
    """Canonicalize a relative path against the current working directory."""

    def full_path(self, path: str) -> str:
        """Return the fully qualified path.

        Raises:
            PathResolutionError: When the path cannot be resolved.
        """
        ...


@runtime_checkable
class FileSystemGateway(Protocol):
    """Read-only existence checks."""

    def exists(self, path: str) -> bool:
        """Return True if anything exists at ``path``."""
        ...

    def is_directory(self, path: str) -> bool:
        """Return True when ``path`` names an existing directory."""
        ...


__all__ = ["FileSystemGateway", "FullPathResolver"]
