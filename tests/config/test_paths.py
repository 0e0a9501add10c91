"""Tests for configuration path resolution helpers."""

from pathlib import Path

from winpath.config.paths import (
    default_config_path,
    default_log_dir,
    default_log_file,
    resolve_overridable_path,
)


def test_default_log_paths(portable_repo_root: Path) -> None:
    """Default log locations should live under the repository logs/ folder."""

    expected_dir = (portable_repo_root / "logs").resolve()
    assert default_log_dir() == expected_dir
    assert default_log_file() == expected_dir / "winpath.log"


def test_default_config_path_under_repo_root(portable_repo_root: Path) -> None:
    """Without an override the config lives under config/ in the repository."""

    assert default_config_path() == (portable_repo_root / "config" / "winpath.toml").resolve()


def test_environment_override_wins(portable_repo_root: Path, tmp_path: Path) -> None:
    """``WINPATH_CONFIG`` replaces the repository default."""

    _ = portable_repo_root
    override = tmp_path / "elsewhere" / "custom.toml"

    assert default_config_path({"WINPATH_CONFIG": str(override)}) == override.resolve()
    assert default_config_path({"WINPATH_CONFIG": "   "}) == (
        portable_repo_root / "config" / "winpath.toml"
    ).resolve()


def test_explicit_path_beats_environment(tmp_path: Path) -> None:
    explicit = tmp_path / "explicit.toml"

    resolved = resolve_overridable_path(
        explicit_path=explicit,
        env={"WINPATH_CONFIG": str(tmp_path / "env.toml")},
        env_var="WINPATH_CONFIG",
        default_factory=lambda: tmp_path / "default.toml",
    )

    assert resolved == explicit.resolve()
