"""Tests for the full path resolvers."""

from __future__ import annotations

import pytest

from winpath.config.config import Config
from winpath.features.path import PathResolutionError
from winpath.platform.windows import (
    Win32FullPathResolver,
    WorkingDirectoryResolver,
    default_resolver,
    full_path,
)


@pytest.mark.parametrize(
    ("relative", "expected"),
    [
        ("x", "C:\\Users\\joe\\x"),
        ("..\\x", "C:\\Users\\x"),
        (".\\a\\.\\b\\..\\c", "C:\\Users\\joe\\a\\c"),
        ("\\msys64", "C:\\msys64"),
        ("C:\\a\\b\\..\\c", "C:\\a\\c"),
        ("C:docs", "C:\\Users\\joe\\docs"),
        ("E:docs", "E:\\docs"),
    ],
)
def test_working_directory_resolution(relative: str, expected: str) -> None:
    """Relative forms resolve lexically against the working directory."""

    resolver = WorkingDirectoryResolver("C:\\Users\\joe")

    assert resolver.full_path(relative) == expected


@pytest.mark.parametrize("working_directory", ["", "relative\\dir", "C:rel", "\\rooted"])
def test_working_directory_must_be_fully_qualified(working_directory: str) -> None:
    """Anything but ``X:\\...`` is rejected at construction."""

    with pytest.raises(ValueError):
        _ = WorkingDirectoryResolver(working_directory)


@pytest.mark.parametrize("resolver", [WorkingDirectoryResolver(), Win32FullPathResolver()])
@pytest.mark.parametrize("path", ["", "a\x00b"])
def test_unresolvable_inputs_raise(resolver: WorkingDirectoryResolver | Win32FullPathResolver, path: str) -> None:
    """Empty and NUL-bearing paths fail before any lookup."""

    with pytest.raises(PathResolutionError) as excinfo:
        _ = resolver.full_path(path)

    assert excinfo.value.path == path


def test_default_resolver_off_windows_uses_config(non_windows: None) -> None:
    """The configured working directory anchors resolution."""

    _ = non_windows
    resolver = default_resolver(Config(working_directory="D:\\work"))

    assert isinstance(resolver, WorkingDirectoryResolver)
    assert resolver.working_directory == "D:\\work"
    assert resolver.full_path("x") == "D:\\work\\x"


def test_default_resolver_off_windows_without_setting(non_windows: None) -> None:
    """Without a setting the drive root is used."""

    _ = non_windows
    resolver = default_resolver()

    assert isinstance(resolver, WorkingDirectoryResolver)
    assert resolver.working_directory == "C:\\"


def test_default_resolver_on_windows(monkeypatch: pytest.MonkeyPatch) -> None:
    """Windows hosts ask the operating system."""

    monkeypatch.setattr(full_path, "_is_windows", lambda: True)

    assert isinstance(default_resolver(Config()), Win32FullPathResolver)
