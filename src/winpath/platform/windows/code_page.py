"""Conversion between the active ANSI code page and Unicode text.

Callers use these helpers to obtain or emit strings around the parser; the
parser itself only ever sees ``str``. Failures are reported through the
returned flag and never raise.
"""

from __future__ import annotations

import codecs
import os
from typing import Final

from winpath.platform.logging import logger

CP1252: Final[str] = "cp1252"
UTF8: Final[str] = "utf-8"

# Code page numbers with a Python codec name that is not simply "cp<number>".
_CODE_PAGE_NAMES: Final[dict[int, str]] = {
    1201: "utf-16-be",
    10000: "mac-roman",
    12000: "utf-32-le",
    12001: "utf-32-be",
    20127: "ascii",
    28591: "iso8859-1",
    28592: "iso8859-2",
    65000: "utf-7",
    65001: UTF8,
}


def _is_windows() -> bool:
    return os.name == "nt"


def codec_for_code_page(code_page: int) -> str:
    """Map a Windows code page number to a Python codec name."""

    return _CODE_PAGE_NAMES.get(code_page, f"cp{code_page}")


def system_code_page(default: str | None = None) -> str:
    """Return the codec name of the system's default ANSI code page.

    On non-Windows hosts, or when the query fails, ``default`` is returned;
    without one, the configured ``code_page`` or cp1252.
    """
    if _is_windows():
        import ctypes

        code_page = int(ctypes.windll.kernel32.GetACP())
        if code_page:
            return codec_for_code_page(code_page)

    if default is not None:
        return default

    from winpath.config.config import Config, ConfigError

    try:
        configured = Config.load().code_page
    except ConfigError as e:
        logger.warning("Ignoring configured code page: %s", e)
        return CP1252
    return configured or CP1252


def _resolve_codec(code_page: str | None) -> str | None:
    codec = code_page or system_code_page()
    try:
        return codecs.lookup(codec).name
    except LookupError:
        logger.warning("Unknown code page '%s'", codec)
        return None


def to_universal_text(data: bytes, code_page: str | None = None) -> tuple[str, bool]:
    """Decode bytes in the given (or system) code page.

    Returns:
        tuple[str, bool]: Decoded text and whether decoding was exact. On
        failure the text has undecodable bytes replaced.
    """
    codec = _resolve_codec(code_page)
    if codec is None:
        return data.decode("latin-1"), False

    try:
        return data.decode(codec), True
    except UnicodeDecodeError as e:
        logger.debug("Invalid %s byte sequence: %s", codec, e)
        return data.decode(codec, errors="replace"), False


def from_universal_text(text: str, code_page: str | None = None) -> tuple[bytes, bool]:
    """Encode text into the given (or system) code page.

    Returns:
        tuple[bytes, bool]: Encoded bytes and whether every character was
        representable. On failure unrepresentable characters are replaced.
    """
    codec = _resolve_codec(code_page)
    if codec is None:
        return text.encode(UTF8, errors="replace"), False

    try:
        return text.encode(codec), True
    except UnicodeEncodeError as e:
        logger.debug("Text not representable in %s: %s", codec, e)
        return text.encode(codec, errors="replace"), False


__all__ = [
    "CP1252",
    "UTF8",
    "codec_for_code_page",
    "from_universal_text",
    "system_code_page",
    "to_universal_text",
]
