"""Lexical parsing of Windows path strings.

>>> from winpath import parse
>>> path = parse("\\\\\\\\peaches\\\\msys64\\\\home\\\\joe")
>>> path.node, path.dirs, path.name
('peaches', ['msys64', 'home'], 'joe')
"""

from winpath.features.path import (
    FileSystemGateway,
    FullPathResolver,
    LocalFileSystemGateway,
    ParsedPath,
    PathError,
    PathErrorKind,
    PathResolutionError,
    directory_exists,
    make_absolute,
    parse,
    path_exists,
)

__version__ = "0.1.0"

__all__ = [
    "FileSystemGateway",
    "FullPathResolver",
    "LocalFileSystemGateway",
    "ParsedPath",
    "PathError",
    "PathErrorKind",
    "PathResolutionError",
    "__version__",
    "directory_exists",
    "make_absolute",
    "parse",
    "path_exists",
]
