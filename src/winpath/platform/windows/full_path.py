"""Full path resolvers backing ``make_absolute``.

``Win32FullPathResolver`` asks the operating system (``GetFullPathNameW``),
so it also applies the usual Win32 normalization of ``.``/``..`` segments and
trailing dots. ``WorkingDirectoryResolver`` reproduces the same rules with
``ntpath`` against a fixed working directory, which keeps behaviour
predictable on non-Windows hosts and in tests.
"""

from __future__ import annotations

import ntpath
import os
from typing import TYPE_CHECKING, final

from winpath.features.path.domain import PathResolutionError
from winpath.features.path.usecases.ports import FullPathResolver
from winpath.platform.logging import logger

if TYPE_CHECKING:
    from winpath.config.config import Config

DEFAULT_WORKING_DIRECTORY = "C:\\"


def _is_windows() -> bool:
    return os.name == "nt"


@final
class Win32FullPathResolver(FullPathResolver):
    """Resolve paths through ``kernel32.GetFullPathNameW``."""

    def full_path(self, path: str) -> str:
        if not path:
            raise PathResolutionError(path, "empty path")
        if "\x00" in path:
            raise PathResolutionError(path, "path contains a NUL character")

        import ctypes
        from ctypes import wintypes

        kernel32 = ctypes.WinDLL("kernel32", use_last_error=True)
        get_full_path_name = kernel32.GetFullPathNameW
        get_full_path_name.argtypes = [
            wintypes.LPCWSTR,
            wintypes.DWORD,
            wintypes.LPWSTR,
            ctypes.POINTER(wintypes.LPWSTR),
        ]
        get_full_path_name.restype = wintypes.DWORD

        needed = get_full_path_name(path, 0, None, None)
        if needed == 0:
            raise PathResolutionError(path, ctypes.FormatError(ctypes.get_last_error()))

        buffer = ctypes.create_unicode_buffer(needed)
        written = get_full_path_name(path, needed, buffer, None)
        if written == 0 or written >= needed:
            raise PathResolutionError(path, ctypes.FormatError(ctypes.get_last_error()))

        return buffer.value


@final
class WorkingDirectoryResolver(FullPathResolver):
    """Resolve paths lexically against a configured Windows working directory.

    A drive-relative path on a drive other than the working directory's
    resolves against that drive's root, since per-drive working directories
    are not tracked.
    """

    working_directory: str

    def __init__(self, working_directory: str = DEFAULT_WORKING_DIRECTORY) -> None:
        drive, rest = ntpath.splitdrive(working_directory)
        if not drive or not rest.startswith(("\\", "/")):
            raise ValueError(
                f"Working directory must be a fully qualified Windows path: {working_directory!r}"
            )
        self.working_directory = working_directory

    def full_path(self, path: str) -> str:
        if not path:
            raise PathResolutionError(path, "empty path")
        if "\x00" in path:
            raise PathResolutionError(path, "path contains a NUL character")

        drive, rest = ntpath.splitdrive(path)
        if drive and rest.startswith(("\\", "/")):
            return ntpath.normpath(path)

        cwd_drive, _ = ntpath.splitdrive(self.working_directory)
        if not drive:
            joined = ntpath.join(self.working_directory, path)
        elif drive.upper() == cwd_drive.upper():
            joined = ntpath.join(self.working_directory, rest)
        else:
            joined = f"{drive}\\{rest}"

        return ntpath.normpath(joined)


def default_resolver(config: Config | None = None) -> FullPathResolver:
    """Pick the resolver for the running platform.

    Args:
        config: Configuration providing ``working_directory`` for non-Windows
            hosts; loaded from the default location when omitted.
    """
    if _is_windows():
        return Win32FullPathResolver()

    if config is None:
        from winpath.config.config import Config

        config = Config.load()

    working_directory = config.working_directory or DEFAULT_WORKING_DIRECTORY
    logger.debug("Resolving paths against working directory %s", working_directory)
    return WorkingDirectoryResolver(working_directory)


__all__ = [
    "DEFAULT_WORKING_DIRECTORY",
    "Win32FullPathResolver",
    "WorkingDirectoryResolver",
    "default_resolver",
]
