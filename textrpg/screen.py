"""A fixed-size character grid that is drawn to a text stream."""

from __future__ import annotations

import sys
from typing import TextIO

DEFAULT_WIDTH = 128
DEFAULT_HEIGHT = 32

_PLACEHOLDER = "\0"
_HANGUL_FIRST = 0xAC00
_HANGUL_LAST = 0xD7A3

_HOME = "\x1b[H"
_SHOW_CURSOR = "\x1b[?25h"
_HIDE_CURSOR = "\x1b[?25l"


def char_width(c: str) -> int:
    """Number of terminal cells a character takes: 2 for Hangul syllables, else 1."""
    if len(c) != 1:
        raise ValueError(f"expected a single character, got {c!r}")
    code = ord(c)
    if _HANGUL_FIRST <= code <= _HANGUL_LAST:
        return 2
    return 1


class Screen:
    """An off-screen buffer of cells that is written to a stream in one go."""

    def __init__(
        self,
        width: int = DEFAULT_WIDTH,
        height: int = DEFAULT_HEIGHT,
        stream: TextIO | None = None,
    ) -> None:
        if width <= 0 or height <= 0:
            raise ValueError("screen width and height must be positive")
        self.width = width
        self.height = height
        self._stream = stream
        self._cells: list[str] = []
        self.cursor_visible = True
        self.clear()
        self.show_cursor(False)

    @property
    def stream(self) -> TextIO:
        """The stream the screen draws to."""
        return self._stream if self._stream is not None else sys.stdout

    def write(self, x: int, y: int, text: str) -> None:
        """Place text at column x of row y; runs on into following rows.

        Wide characters take two cells. Text starting outside the grid is
        ignored, and text running past its end is cut off.
        """
        if not (0 <= x < self.width and 0 <= y < self.height):
            return
        size = len(self._cells)
        pos = y * self.width + x
        for ch in text:
            if pos >= size:
                break
            self._cells[pos] = ch
            pos += 1
            if char_width(ch) == 2:
                if pos >= size:
                    break
                self._cells[pos] = _PLACEHOLDER
                pos += 1

    def clear(self) -> None:
        """Blank every cell."""
        self._cells = [" "] * (self.width * self.height)

    def lines(self) -> list[str]:
        """The grid as one string per row, wide characters shown once."""
        return [
            "".join(
                ch
                for ch in self._cells[row * self.width:(row + 1) * self.width]
                if ch != _PLACEHOLDER
            )
            for row in range(self.height)
        ]

    def render(self, stream: TextIO | None = None) -> None:
        """Draw the whole grid from the top-left corner of the stream."""
        out = stream if stream is not None else self.stream
        out.write(_HOME + "\n".join(self.lines()))
        out.flush()

    def show_cursor(self, visible: bool) -> None:
        """Show or hide the terminal cursor."""
        self.cursor_visible = visible
        out = self.stream
        out.write(_SHOW_CURSOR if visible else _HIDE_CURSOR)
        out.flush()