"""A message log that reveals queued lines one at a time."""

from __future__ import annotations

import time
from collections import deque
from typing import Callable, Protocol


class _Writable(Protocol):
    def write(self, x: int, y: int, text: str) -> None: ...


def _monotonic_ms() -> int:
    return int(time.monotonic() * 1000)


class TextPrompt:
    """Queued messages appear one per update, every other row, oldest scrolled off."""

    def __init__(
        self,
        pos_x: int = 34,
        pos_y: int = 3,
        delay_ms: int = 0,
        max_line: int = 25,
        clock: Callable[[], int] = _monotonic_ms,
    ) -> None:
        self.pos_x = pos_x
        self.pos_y = pos_y
        self.delay_ms = delay_ms
        self.max_line = max_line
        self._clock = clock
        self._waiting: deque[str] = deque()
        self._printed: deque[str] = deque()
        self._last_print_time = 0

    @property
    def messages(self) -> tuple[str, ...]:
        """The messages currently shown, oldest first."""
        return tuple(self._printed)

    @property
    def pending(self) -> tuple[str, ...]:
        """Messages queued but not yet shown."""
        return tuple(self._waiting)

    def enqueue(self, msg: str) -> None:
        """Queue a message for display."""
        self._waiting.append(msg)

    def update(self) -> None:
        """Reveal the next queued message once the delay has passed."""
        now = self._clock()
        if not self._waiting or now - self._last_print_time < self.delay_ms:
            return
        self._printed.append(self._waiting.popleft())
        self._last_print_time = now
        if len(self._printed) * 2 - 1 > self.max_line:
            self._printed.popleft()

    def render(self, screen: _Writable) -> None:
        """Write the shown messages onto the screen, one every two rows."""
        for offset, msg in enumerate(self._printed):
            screen.write(self.pos_x, self.pos_y + offset * 2, msg)

    def clear(self) -> None:
        """Drop every queued and shown message."""
        self._waiting.clear()
        self._printed.clear()

    def is_running(self) -> bool:
        """True while messages are still waiting to be shown."""
        return bool(self._waiting)