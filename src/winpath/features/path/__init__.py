"""
Summary: Export path feature domain, use case and adapter symbols.
Why: Provide a stable import surface for the CLI and tests.
"""

from .adapters import LocalFileSystemGateway
from .domain import (
    EXTENDED_PREFIX,
    MAX_EXTENDED_PATH_LENGTH,
    MAX_PATH_LENGTH,
    SEPARATOR,
    ComponentValidator,
    ParsedPath,
    PathError,
    PathErrorKind,
    PathResolutionError,
    Tokenizer,
    parse,
)
from .usecases import (
    FileSystemGateway,
    FullPathResolver,
    directory_exists,
    make_absolute,
    path_exists,
)

__all__ = [
    "ComponentValidator",
    "EXTENDED_PREFIX",
    "FileSystemGateway",
    "FullPathResolver",
    "LocalFileSystemGateway",
    "MAX_EXTENDED_PATH_LENGTH",
    "MAX_PATH_LENGTH",
    "ParsedPath",
    "PathError",
    "PathErrorKind",
    "PathResolutionError",
    "SEPARATOR",
    "Tokenizer",
    "directory_exists",
    "make_absolute",
    "parse",
    "path_exists",
]
