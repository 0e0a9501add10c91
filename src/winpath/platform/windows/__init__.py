"""Windows services used by callers built on top of the parser."""

from __future__ import annotations

from .code_page import (
    codec_for_code_page,
    from_universal_text,
    system_code_page,
    to_universal_text,
)
from .full_path import (
    DEFAULT_WORKING_DIRECTORY,
    Win32FullPathResolver,
    WorkingDirectoryResolver,
    default_resolver,
)
from .known_folders import (
    LocationResult,
    computer_name,
    config_directory,
    config_home_directory,
    data_home_directory,
    home_directory,
    known_locations,
    system_directory,
)

__all__ = [
    "DEFAULT_WORKING_DIRECTORY",
    "LocationResult",
    "Win32FullPathResolver",
    "WorkingDirectoryResolver",
    "codec_for_code_page",
    "computer_name",
    "config_directory",
    "config_home_directory",
    "data_home_directory",
    "default_resolver",
    "from_universal_text",
    "home_directory",
    "known_locations",
    "system_code_page",
    "system_directory",
    "to_universal_text",
]
