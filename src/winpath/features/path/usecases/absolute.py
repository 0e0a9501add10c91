"""
Summary: Force relative local paths to absolute ones through a resolver.
Why: Keep the blocking operating system call outside the pure parser.
"""

from __future__ import annotations

from winpath.features.path.domain import ParsedPath, parse

from .ports import FullPathResolver


def make_absolute(
    path: ParsedPath | str,
    resolver: FullPathResolver | None = None,
) -> ParsedPath:
    """Return an absolute version of ``path`` without modifying it.

    Args:
        path: Parsed path, or a raw string that is parsed first.
        resolver: Full path resolver; the platform default when omitted.

    Returns:
        ParsedPath: A new parsed path for a resolved relative local path,
        otherwise the input value itself.
    """
    parsed = parse(path) if isinstance(path, str) else path

    if resolver is None:
        from winpath.platform.windows.full_path import default_resolver

        resolver = default_resolver()

    return parsed.make_absolute(resolver.full_path)


__all__ = ["make_absolute"]
