"""
Summary: Filesystem existence checks layered on top of parsed paths.
Why: Offer the convenience lookups without letting the parser touch the disk.
"""

from __future__ import annotations

from winpath.features.path.domain import ParsedPath

from .ports import FileSystemGateway


def _gateway(filesystem: FileSystemGateway | None) -> FileSystemGateway:
    if filesystem is not None:
        return filesystem

    from winpath.features.path.adapters import LocalFileSystemGateway

    return LocalFileSystemGateway()


def path_exists(path: ParsedPath, filesystem: FileSystemGateway | None = None) -> bool:
    """Return True when the canonical form of ``path`` exists."""

    return _gateway(filesystem).exists(path.to_string())


def directory_exists(path: ParsedPath, filesystem: FileSystemGateway | None = None) -> bool:
    """Return True when the canonical form of ``path`` is an existing directory."""

    return _gateway(filesystem).is_directory(path.to_string())


__all__ = ["directory_exists", "path_exists"]
