"""A fixed set of reusable slots passed between a producer and a consumer."""

from __future__ import annotations

import copy
import threading
from collections import deque
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

TRY_POP_TIMEOUT_MS = 20


@dataclass(eq=False)
class Slot:
    """One reusable ring entry holding a value and the frame it belongs to."""

    data: Any = None
    frame_number: int = 0

    def reset(self) -> None:
        """Forget which frame the slot held."""
        self.frame_number = 0


class Ring:
    """Slots move from the write pool to the read pool and back.

    A producer takes an empty slot with ``begin_push``, fills it and hands
    it on with ``end_push``; a consumer takes it with ``begin_pop`` and
    returns it with ``end_pop``. ``stop`` wakes every waiter, after which
    the blocking calls return None.
    """

    def __init__(self, size: int, sample: Any = None) -> None:
        self.sample = sample
        self.slots: list[Slot] = []
        self.size = 0
        self.exit = False
        self._lock = threading.Lock()
        self._write_cv = threading.Condition(self._lock)
        self._read_cv = threading.Condition(self._lock)
        self._write: deque[Slot] = deque()
        self._read: deque[Slot] = deque()
        self.resize(size)

    def resize(self, size: int) -> None:
        """Replace every slot with ``size`` fresh empty ones."""
        if size < 0:
            raise ValueError("ring size cannot be negative")
        with self._lock:
            self.slots = [Slot(copy.deepcopy(self.sample)) for _ in range(size)]
            self._write = deque(self.slots)
            self._read = deque()
            self.size = size

    def stop(self) -> None:
        """Mark the ring as exiting and wake every waiting thread."""
        with self._lock:
            self.exit = True
            self._write_cv.notify_all()
            self._read_cv.notify_all()

    def is_full(self) -> bool:
        """Whether every slot is waiting to be read."""
        with self._lock:
            return len(self._read) == len(self.slots)

    def has_empty_slots(self) -> bool:
        """Whether a slot is free for writing."""
        return self.empty_frames() != 0

    def empty_frames(self) -> int:
        """Number of slots free for writing."""
        with self._lock:
            return len(self._write)

    def is_empty(self) -> bool:
        """Whether no slot is waiting to be read."""
        with self._lock:
            return not self._read

    def ready_frames(self) -> int:
        """Number of slots waiting to be read."""
        with self._lock:
            return len(self._read)

    def total_frame_count(self) -> int:
        """Number of slots not in the write pool."""
        with self._lock:
            return self.size - len(self._write)

    def begin_push(self) -> Slot | None:
        """Wait for a free slot and take it; None once the ring is stopped."""
        with self._write_cv:
            self._write_cv.wait_for(lambda: bool(self._write) or self.exit)
            if self.exit:
                return None
            return self._write.popleft()

    def _give(
        self, pool: deque[Slot], cv: threading.Condition, slot: Slot, front: bool
    ) -> None:
        with cv:
            if len(pool) >= len(self.slots):
                raise ValueError("ring pool is already full")
            if front:
                pool.appendleft(slot)
            else:
                pool.append(slot)
            cv.notify()

    def end_push(self, slot: Slot) -> None:
        """Hand a filled slot to the reader."""
        self._give(self._read, self._read_cv, slot, front=False)

    def cancel_push(self, slot: Slot) -> None:
        """Return an unfilled slot to the front of the write pool."""
        slot.frame_number = 0
        self._give(self._write, self._write_cv, slot, front=True)

    def cancel_pop(self, slot: Slot) -> None:
        """Return an unread slot to the front of the read pool."""
        self._give(self._read, self._read_cv, slot, front=True)

    def begin_pop(self, timeout_ms: float) -> Slot | None:
        """Take the oldest filled slot, waiting up to ``timeout_ms``.

        Returns None on timeout or once the ring is stopped.
        """
        with self._read_cv:
            ready = self._read_cv.wait_for(
                lambda: bool(self._read) or self.exit, timeout_ms / 1000.0
            )
            if not ready or self.exit:
                return None
            return self._read.popleft()

    def end_pop(self, slot: Slot) -> None:
        """Give a consumed slot back to the writer."""
        slot.frame_number = 0
        self._give(self._write, self._write_cv, slot, front=False)

    def can_pop(self, spare: int = 0) -> bool:
        """Whether more than ``spare`` slots are waiting to be read."""
        with self._lock:
            return len(self._read) > spare

    def can_push(self) -> bool:
        """Whether a slot is free for writing."""
        with self._lock:
            return bool(self._write)

    def try_push(self, timeout_ms: float | None = None) -> Slot | None:
        """Take a free slot if one is (or, with a timeout, becomes) available."""
        if timeout_ms is not None:
            with self._write_cv:
                if not self._write:
                    self._write_cv.wait_for(
                        lambda: bool(self._write), timeout_ms / 1000.0
                    )
        if self.can_push():
            return self.begin_push()
        return None

    def try_pop(self, spare: int = 0) -> Slot | None:
        """Take a filled slot if more than ``spare`` are waiting."""
        if self.can_pop(spare):
            return self.begin_pop(TRY_POP_TIMEOUT_MS)
        return None

    def reset(self, fill: bool) -> None:
        """Move every slot to the read pool if ``fill``, else to the write pool.

        Each moved slot is reset.
        """
        with self._lock:
            source, target = (self._write, self._read) if fill else (self._read, self._write)
            while source:
                slot = source.popleft()
                slot.reset()
                target.append(slot)
            self._write_cv.notify_all()
            self._read_cv.notify_all()

    def _pool_sizes(self) -> tuple[int, int]:
        with self._lock:
            return len(self._write), len(self._read)

    def __len__(self) -> int:
        return self.size

    def apply(self, func: Callable[[Slot], None]) -> None:
        """Call ``func`` on every slot."""
        for slot in list(self.slots):
            func(slot)