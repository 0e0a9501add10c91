"""Filesystem adapter for path inspection use cases."""

from __future__ import annotations

from pathlib import Path

from ..usecases.ports import FileSystemGateway


class LocalFileSystemGateway(FileSystemGateway):
    """Thin wrapper around the local filesystem."""

    def exists(self, path: str) -> bool:
        if not path:
            return False
        try:
            return Path(path).exists()
        except OSError:
            return False

    def is_directory(self, path: str) -> bool:
        if not path:
            return False
        try:
            return Path(path).is_dir()
        except OSError:
            return False


__all__ = ["LocalFileSystemGateway"]
