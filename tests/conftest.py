"""Shared pytest fixtures."""

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path

import pytest


@pytest.fixture(autouse=True)
def isolated_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Iterator[Path]:
    """Point configuration at a missing file and reset the cached instance."""

    from winpath.config.config import Config

    config_file = tmp_path / "isolated" / "winpath.toml"
    monkeypatch.setenv("WINPATH_CONFIG", str(config_file))

    original_instance = Config._instance  # pyright: ignore[reportPrivateUsage]
    original_loaded_from = Config._loaded_from  # pyright: ignore[reportPrivateUsage]
    Config._instance = None  # pyright: ignore[reportPrivateUsage]
    Config._loaded_from = None  # pyright: ignore[reportPrivateUsage]
    try:
        yield config_file
    finally:
        Config._instance = original_instance  # pyright: ignore[reportPrivateUsage]
        Config._loaded_from = original_loaded_from  # pyright: ignore[reportPrivateUsage]


@pytest.fixture
def non_windows(monkeypatch: pytest.MonkeyPatch) -> None:
    """Force the platform adapters onto their non-Windows code paths."""

    from winpath.platform.windows import code_page, full_path, known_folders

    for module in (code_page, full_path, known_folders):
        monkeypatch.setattr(module, "_is_windows", lambda: False, raising=True)
