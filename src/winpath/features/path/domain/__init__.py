"""Domain model and parser for Windows path strings."""

from __future__ import annotations

from .errors import PathError, PathErrorKind, PathResolutionError
from .parsed_path import EXTENDED_PREFIX, SEPARATOR, ParsedPath
from .tokenizer import ParserState, ScalarCursor, Tokenizer, UncSubState, parse
from .validator import (
    MAX_EXTENDED_PATH_LENGTH,
    MAX_PATH_LENGTH,
    ComponentValidator,
    check_length,
)

__all__ = [
    "ComponentValidator",
    "EXTENDED_PREFIX",
    "MAX_EXTENDED_PATH_LENGTH",
    "MAX_PATH_LENGTH",
    "ParsedPath",
    "ParserState",
    "PathError",
    "PathErrorKind",
    "PathResolutionError",
    "SEPARATOR",
    "ScalarCursor",
    "Tokenizer",
    "UncSubState",
    "check_length",
    "parse",
]
