"""Use cases that combine parsed paths with operating system services."""

from .absolute import make_absolute
from .inspection import directory_exists, path_exists
from .ports import FileSystemGateway, FullPathResolver

__all__ = [
    "FileSystemGateway",
    "FullPathResolver",
    "directory_exists",
    "make_absolute",
    "path_exists",
]
