"""
Summary: State machine that decomposes a Windows path string into a ParsedPath.
Why: Disambiguate drive, UNC and extended-length prefixes in one left-to-right pass.
"""

from __future__ import annotations

import string
from enum import Enum, auto
from typing import final

from winpath.platform.logging import logger

from .parsed_path import SEPARATOR, ParsedPath
from .validator import ComponentValidator, check_length

_DRIVE_LETTERS = frozenset(string.ascii_letters)
_EXTENDED_MARKER = "?"
_EXTENDED_UNC_MARKER = "UNC"


class ParserState(Enum):
    """Top level tokenizer states."""

    START = auto()
    UNC_PREFIX = auto()
    DRIVE = auto()
    PATH_COMPONENT = auto()


class UncSubState(Enum):
    """Progress through the ``\\\\``, ``\\\\?\\`` and ``\\\\?\\UNC\\`` prefixes."""

    PLAIN_START = auto()
    EXTENDED_MARKER_SEEN = auto()
    EXTENDED_UNC_SEEN = auto()


@final
class ScalarCursor:
    """Read position over the code points of the input.

    Supports a single kind of backtracking: returning to the start of the
    component currently being read, marked with :meth:`mark`.
    """

    def __init__(self, text: str) -> None:
        self._text: str = text
        self._mark: int = 0
        self.position: int = 0

    def at_end(self) -> bool:
        return self.position >= len(self._text)

    def peek(self, offset: int = 0) -> str | None:
        index = self.position + offset
        if index < len(self._text):
            return self._text[index]
        return None

    def advance(self, count: int = 1) -> None:
        self.position = min(self.position + count, len(self._text))

    def mark(self) -> None:
        self._mark = self.position

    def rewind(self, count: int) -> None:
        """Move back ``count`` scalars, never past the last mark."""
        if count < 0 or count > self.position - self._mark:
            raise ValueError(
                f"cannot rewind {count} scalars; only {self.position - self._mark} read since the mark"
            )
        self.position -= count


@final
class Tokenizer:
    """Single-use parser for one input string.

    ``rewind_count`` and ``rewind_distance`` record the backtracking done
    for an extended-length local path (``\\\\?\\C:\\...``).
    """

    def __init__(self, text: str) -> None:
        self._raw_length: int = len(text)
        self._cursor: ScalarCursor = ScalarCursor(text)
        self._result: ParsedPath = ParsedPath()
        self._state: ParserState = ParserState.START
        self._unc_state: UncSubState = UncSubState.PLAIN_START
        self._buffer: list[str] = []
        self._buffer_start: int = 0
        self._done: bool = False
        self.rewind_count: int = 0
        self.rewind_distance: int = 0

    @property
    def state(self) -> ParserState:
        return self._state

    def run(self) -> ParsedPath:
        """Consume the whole input and return the parsed path."""
        if self._done:
            return self._result

        handlers = {
            ParserState.START: self._on_start,
            ParserState.DRIVE: self._on_drive,
            ParserState.UNC_PREFIX: self._on_unc_prefix,
            ParserState.PATH_COMPONENT: self._on_path_component,
        }

        while True:
            if self._cursor.at_end():
                # A prefix cut short by the end of input resolves like a separator;
                # this may rewind and resume in DRIVE.
                if self._state is ParserState.UNC_PREFIX and self._buffer:
                    self._flush_unc_prefix()
                    continue
                break
            handlers[self._state]()

        self._finish()
        self._done = True
        return self._result

    def _on_start(self) -> None:
        cursor = self._cursor
        if cursor.peek() == SEPARATOR and cursor.peek(1) == SEPARATOR:
            cursor.advance(2)
            self._state = ParserState.UNC_PREFIX
        elif cursor.peek() == SEPARATOR:
            self._result.absolute = True
            cursor.advance()
            self._state = ParserState.PATH_COMPONENT
        else:
            self._state = ParserState.DRIVE

    def _on_drive(self) -> None:
        cursor = self._cursor
        letter = cursor.peek()
        if letter is not None and letter in _DRIVE_LETTERS and cursor.peek(1) == ":":
            self._result.device = letter.upper()
            if cursor.peek(2) == SEPARATOR:
                self._result.absolute = True
            # The separator itself is left for PATH_COMPONENT, which skips it.
            cursor.advance(2)
        self._state = ParserState.PATH_COMPONENT

    def _on_unc_prefix(self) -> None:
        cursor = self._cursor
        scalar = cursor.peek()
        if scalar == SEPARATOR:
            self._flush_unc_prefix()
            return

        assert scalar is not None
        if not self._buffer:
            self._buffer_start = cursor.position
            cursor.mark()
        self._buffer.append(scalar)
        cursor.advance()

    def _flush_unc_prefix(self) -> None:
        cursor = self._cursor
        if not self._buffer:
            cursor.advance()
            return

        pending = "".join(self._buffer)

        if self._unc_state is UncSubState.PLAIN_START and pending == _EXTENDED_MARKER:
            self._buffer.clear()
            self._result.extended_length = True
            self._unc_state = UncSubState.EXTENDED_MARKER_SEEN
            cursor.advance()
            return

        if self._unc_state is UncSubState.EXTENDED_MARKER_SEEN:
            self._buffer.clear()
            if pending == _EXTENDED_UNC_MARKER:
                self._unc_state = UncSubState.EXTENDED_UNC_SEEN
                cursor.advance()
                return

            # Extended-length local form: re-read the buffered scalars as a drive.
            cursor.rewind(len(pending))
            self.rewind_count += 1
            self.rewind_distance = len(pending)
            logger.debug("Re-reading %d scalars after extended-length marker", len(pending))
            self._state = ParserState.DRIVE
            return

        self._buffer.clear()
        self._result.errors.extend(ComponentValidator.check_component(pending, self._buffer_start))
        self._result.node = pending
        self._result.remote = True
        self._state = ParserState.PATH_COMPONENT
        cursor.advance()

    def _on_path_component(self) -> None:
        cursor = self._cursor
        scalar = cursor.peek()
        assert scalar is not None

        if scalar == SEPARATOR:
            if self._buffer:
                self._result.dirs.append("".join(self._buffer))
                self._buffer.clear()
            cursor.advance()
            return

        error = ComponentValidator.check_scalar(scalar, cursor.position)
        if error is not None:
            self._result.errors.append(error)
        self._buffer.append(scalar)
        cursor.advance()

    def _finish(self) -> None:
        if self._buffer:
            self._result.name = "".join(self._buffer)
            self._buffer.clear()

        length_error = check_length(self._raw_length, self._result.extended_length)
        if length_error is not None:
            self._result.errors.append(length_error)


def parse(path: str) -> ParsedPath:
    """Parse a local or remote file or directory path by lexical processing only.

    Accepted forms:
        1. Relative file or directory (``dir\\file``, ``C:file``)
        2. Absolute file or directory (``\\dir``, ``C:\\dir``)
        3. UNC file or directory (``\\\\host\\share\\file``)
        4. Extended-length absolute file or directory (``\\\\?\\C:\\dir``)
        5. Extended-length UNC file or directory (``\\\\?\\UNC\\host\\share``)

    Validation problems never abort parsing; they are collected on
    ``ParsedPath.errors``.

    Args:
        path: Any string, including one with characters illegal in file names.

    Returns:
        ParsedPath: Best-effort decomposition of ``path``.
    """
    return Tokenizer(path).run()


__all__ = ["ParserState", "ScalarCursor", "Tokenizer", "UncSubState", "parse"]
