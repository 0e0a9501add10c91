"""Rich console handler that highlights Windows paths in log messages."""

from __future__ import annotations

from typing import Any, ClassVar

from rich.highlighter import RegexHighlighter
from rich.logging import RichHandler


class WindowsPathHighlighter(RegexHighlighter):
    """Highlight drive, UNC and extended-length paths."""

    base_style: ClassVar[str] = "winpath."
    highlights: ClassVar[list[str]] = [
        r"(?P<extended>\\\\\?\\)",
        r"(?P<unc>\\\\[^\\\s'\"?]+)",
        r"(?P<drive>\b[A-Za-z]:)(?=\\|\s|$|')",
    ]


class WindowsPathRichHandler(RichHandler):
    """``RichHandler`` preconfigured with :class:`WindowsPathHighlighter`."""

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        _ = kwargs.setdefault("highlighter", WindowsPathHighlighter())
        _ = kwargs.setdefault("show_path", False)
        super().__init__(*args, **kwargs)


__all__ = ["WindowsPathHighlighter", "WindowsPathRichHandler"]
