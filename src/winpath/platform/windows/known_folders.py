"""Machine identity and well-known directory lookups.

Each lookup returns a ``LocationResult`` of ``(value, ok)``. Environment
variables take precedence the same way the Windows shell applies them;
pass ``env`` to query a mapping other than ``os.environ``.

See also MSDN, "GetComputerName function" and "GetSystemDirectory function".
"""

from __future__ import annotations

import os
import platform
from collections.abc import Mapping
from typing import NamedTuple

from winpath.platform.logging import logger


class LocationResult(NamedTuple):
    """Value of a lookup and whether it succeeded."""

    value: str
    ok: bool


_FAILED = LocationResult("", False)


def _is_windows() -> bool:
    return os.name == "nt"


def _environ(env: Mapping[str, str] | None) -> Mapping[str, str]:
    return env if env is not None else os.environ


def _win32_computer_name() -> str | None:
    import ctypes
    from ctypes import wintypes

    kernel32 = ctypes.WinDLL("kernel32", use_last_error=True)
    size = wintypes.DWORD(0)
    _ = kernel32.GetComputerNameW(None, ctypes.byref(size))
    if size.value == 0:
        return None
    buffer = ctypes.create_unicode_buffer(size.value + 1)
    if not kernel32.GetComputerNameW(buffer, ctypes.byref(size)):
        logger.debug("GetComputerNameW failed: %s", ctypes.FormatError(ctypes.get_last_error()))
        return None
    return buffer.value


def _win32_system_directory() -> str | None:
    import ctypes

    kernel32 = ctypes.WinDLL("kernel32", use_last_error=True)
    needed = kernel32.GetSystemDirectoryW(None, 0)
    if needed == 0:
        return None
    buffer = ctypes.create_unicode_buffer(needed)
    if kernel32.GetSystemDirectoryW(buffer, needed) == 0:
        logger.debug("GetSystemDirectoryW failed: %s", ctypes.FormatError(ctypes.get_last_error()))
        return None
    return buffer.value


def computer_name(env: Mapping[str, str] | None = None) -> LocationResult:
    """Return the NetBIOS machine name."""

    if _is_windows():
        name = _win32_computer_name()
        if name:
            return LocationResult(name, True)

    name = _environ(env).get("COMPUTERNAME") or platform.node()
    if name:
        return LocationResult(name, True)
    return _FAILED


def system_directory(env: Mapping[str, str] | None = None) -> LocationResult:
    """Return the system directory, typically ``C:\\WINDOWS\\system32``."""

    if _is_windows():
        directory = _win32_system_directory()
        if directory:
            return LocationResult(directory, True)

    mapping = _environ(env)
    root = mapping.get("SystemRoot") or mapping.get("SYSTEMROOT") or mapping.get("windir")
    if root:
        return LocationResult(root.rstrip("\\") + "\\system32", True)
    return _FAILED


def home_directory(env: Mapping[str, str] | None = None) -> LocationResult:
    """Return the current user's profile directory, usually under ``C:\\Users``."""

    mapping = _environ(env)
    result = system_directory(env)
    drive = mapping.get("HOMEDRIVE")
    home_path = mapping.get("HOMEPATH")
    if drive and home_path:
        result = LocationResult(drive + home_path, True)
    profile = mapping.get("USERPROFILE")
    if profile:
        result = LocationResult(profile, True)
    return result


def config_home_directory(env: Mapping[str, str] | None = None) -> LocationResult:
    """Return the roaming application data directory of the current user.

    Data written here may be synchronized between the machines the user
    signs in to. See :func:`data_home_directory` for machine-local data.
    """
    app_data = _environ(env).get("APPDATA")
    if app_data:
        return LocationResult(app_data, True)
    return home_directory(env)


def data_home_directory(env: Mapping[str, str] | None = None) -> LocationResult:
    """Return the local (non-roaming) application data directory."""

    local_app_data = _environ(env).get("LOCALAPPDATA")
    if local_app_data:
        return LocationResult(local_app_data, True)
    return config_home_directory(env)


def config_directory(env: Mapping[str, str] | None = None) -> LocationResult:
    """Return the machine-wide application data directory.

    Writing here may require Administrator privileges.
    """
    program_data = _environ(env).get("PROGRAMDATA")
    if program_data:
        return LocationResult(program_data, True)
    return system_directory(env)


def known_locations(env: Mapping[str, str] | None = None) -> dict[str, LocationResult]:
    """Collect every lookup, keyed by a display label."""

    return {
        "Computer name": computer_name(env),
        "System directory": system_directory(env),
        "Home directory": home_directory(env),
        "Config home directory": config_home_directory(env),
        "Data home directory": data_home_directory(env),
        "Config directory": config_directory(env),
    }


__all__ = [
    "LocationResult",
    "computer_name",
    "config_directory",
    "config_home_directory",
    "data_home_directory",
    "home_directory",
    "known_locations",
    "system_directory",
]
