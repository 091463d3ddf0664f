"""Small utility nodes: frame time, string comparison, status display and sleep."""

from __future__ import annotations

import time
from collections.abc import Callable
from dataclasses import dataclass, field
from enum import Enum, auto


def _c_string(value: str | bytes | None) -> str:
    if value is None:
        return ""
    if isinstance(value, (bytes, bytearray)):
        value = bytes(value).decode("utf-8", errors="replace")
    return value.split("\0", 1)[0]


@dataclass
class TimeNode:
    """Outputs elapsed time in seconds from a frame counter."""

    frame_count: int = 0

    def execute(self, delta_seconds: tuple[int, int]) -> float:
        """Return the time of the current frame and advance the counter."""
        num, den = delta_seconds
        if den == 0:
            raise ValueError("delta seconds denominator cannot be 0")
        result = (num * self.frame_count) / den
        self.frame_count += 1
        return result


def is_same_string(first: str | bytes, second: str | bytes) -> bool:
    """Whether two strings are equal, each read up to its first NUL."""
    return _c_string(first) == _c_string(second)


class StatusType(Enum):
    """Kind of a node status message."""

    INFO = auto()
    WARNING = auto()
    FAILURE = auto()


@dataclass
class StatusDisplay:
    """Shows one status message, updating it only when it changes."""

    message: str = ""
    status_type: StatusType | None = None
    shown: list[tuple[str, StatusType]] = field(default_factory=list)
    on_change: Callable[[list[tuple[str, StatusType]]], None] | None = None

    def update(self, message: str | bytes | None, status_type: StatusType) -> bool:
        """Set the message; an empty one clears the display.

        Returns whether the display changed.
        """
        text = _c_string(message)
        if text == self.message and status_type is self.status_type:
            return False
        self.message = text
        self.status_type = status_type
        self.shown = [] if not text else [(text, status_type)]
        if self.on_change is not None:
            self.on_change(list(self.shown))
        return True


def cpu_sleep(
    milliseconds: float,
    busy_wait: bool = False,
    is_preempted: Callable[[], bool] | None = None,
) -> bool:
    """Wait ``milliseconds``, spinning if ``busy_wait``.

    A busy wait ends early once ``is_preempted`` returns True. Returns
    False if the wait was cut short, True otherwise.
    """
    if milliseconds < 0:
        raise ValueError("sleep time cannot be negative")
    if not busy_wait:
        time.sleep(milliseconds / 1000.0)
        return True
    end = time.perf_counter_ns() + int(milliseconds * 1.0e6)
    while time.perf_counter_ns() < end:
        if is_preempted is not None and is_preempted():
            return False
    return True