"""Logging facade exports.

Where: platform/logging/__init__.py
What: Re-export the configured logger, setup helper and Rich handlers.
Why: Provide a single canonical import path for every module.
"""

from __future__ import annotations

from .config import DEFAULT_LOG_FILE, PATH_THEME, logger, setup_logger
from .handlers import WindowsPathHighlighter, WindowsPathRichHandler

__all__ = [
    "DEFAULT_LOG_FILE",
    "PATH_THEME",
    "WindowsPathHighlighter",
    "WindowsPathRichHandler",
    "logger",
    "setup_logger",
]
