"""Line editing of typed characters into commands."""

from __future__ import annotations

_ENTER = frozenset({"\r", "\n"})
_BACKSPACE = frozenset({"\b", "\x7f"})


class CommandInput:
    """Collects typed characters and turns a finished line into a command."""

    def __init__(self) -> None:
        self._buffer: list[str] = []
        self._command = ""

    @property
    def input_buffer(self) -> str:
        """The line being typed, not yet entered."""
        return "".join(self._buffer)

    def feed(self, text: str) -> None:
        """Process typed characters: Enter finishes a line, Backspace deletes."""
        for ch in text:
            if ch in _ENTER:
                if self._buffer:
                    self._command = "".join(self._buffer)
                    self._buffer.clear()
            elif ch in _BACKSPACE:
                if self._buffer:
                    self._buffer.pop()
            else:
                self._buffer.append(ch)

    def has_command(self) -> bool:
        """True when an entered command is waiting to be taken."""
        return bool(self._command)

    def get_command(self) -> str:
        """Take the waiting command, with spaces removed."""
        command, self._command = self._command, ""
        return command.replace(" ", "")