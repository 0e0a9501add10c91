"""Tests for code page conversions."""

from __future__ import annotations

from pathlib import Path

import pytest

from winpath.platform.windows import (
    codec_for_code_page,
    from_universal_text,
    system_code_page,
    to_universal_text,
)


def test_decode_cp1252() -> None:
    """Single-byte code page characters map to their Unicode scalars."""

    assert to_universal_text(b"caf\xe9 \x80", "cp1252") == ("café €", True)


def test_decode_undefined_byte_reports_failure() -> None:
    """Bytes with no mapping are replaced and flagged."""

    text, ok = to_universal_text(b"a\x81b", "cp1252")

    assert ok is False
    assert text == "a\ufffdb"


def test_encode_cp1252() -> None:
    """Representable text encodes exactly."""

    assert from_universal_text("café €", "cp1252") == (b"caf\xe9 \x80", True)


@pytest.mark.parametrize(("text", "code_page"), [("日本", "cp1252"), ("\ud800", "utf-8")])
def test_encode_unrepresentable_text_reports_failure(text: str, code_page: str) -> None:
    """Unrepresentable scalars, lone surrogates included, are replaced and flagged."""

    encoded, ok = from_universal_text(text, code_page)

    assert ok is False
    assert encoded == b"?" * len(text)


def test_unknown_code_page() -> None:
    """An unknown codec never raises."""

    assert to_universal_text(b"ab", "no-such-codec") == ("ab", False)
    assert from_universal_text("ab", "no-such-codec") == (b"ab", False)


def test_system_code_page_off_windows(non_windows: None) -> None:
    """Non-Windows hosts fall back to the supplied default."""

    _ = non_windows

    assert system_code_page() == "cp1252"
    assert system_code_page(default="utf-8") == "utf-8"
    assert to_universal_text(b"\x80") == ("€", True)


@pytest.mark.parametrize(
    ("code_page", "codec"),
    [(1252, "cp1252"), (932, "cp932"), (65001, "utf-8"), (20127, "ascii")],
)
def test_codec_for_code_page(code_page: int, codec: str) -> None:
    """Code page numbers map to Python codec names."""

    assert codec_for_code_page(code_page) == codec


def test_system_code_page_follows_configuration(non_windows: None, isolated_config: Path) -> None:
    """The configured code page applies when the system cannot be asked."""

    _ = non_windows
    isolated_config.parent.mkdir(parents=True)
    _ = isolated_config.write_text("code_page = 'utf-8'\n", encoding="utf-8")

    assert system_code_page() == "utf-8"
    assert to_universal_text("é".encode("utf-8")) == ("é", True)


@pytest.mark.parametrize("content", ["log_level = 'LOUD'\n", "not toml = = =\n"], ids=["bad-value", "bad-toml"])
def test_broken_configuration_falls_back_to_cp1252(
    non_windows: None, isolated_config: Path, content: str
) -> None:
    """A configuration that cannot be loaded never makes conversions raise."""

    _ = non_windows
    isolated_config.parent.mkdir(parents=True)
    _ = isolated_config.write_text(content, encoding="utf-8")

    assert system_code_page() == "cp1252"
    assert to_universal_text(b"abc") == ("abc", True)
    assert from_universal_text("abc") == (b"abc", True)
