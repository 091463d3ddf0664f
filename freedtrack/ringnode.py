"""Queue nodes built on a ring of slots: a bounded queue and a ring buffer."""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable
from enum import Enum, auto
from typing import Any

from freedtrack.ring import Ring, Slot

log = logging.getLogger(__name__)

DEFAULT_POP_TIMEOUT_MS = 100
FILL_WAIT_S = 0.1


class RestartPolicy(Enum):
    """What a ring node does with its contents when the path restarts."""

    RESET = auto()
    WAIT_UNTIL_FULL = auto()


class RingMode(Enum):
    """Whether the node is serving frames or waiting for the ring to fill."""

    CONSUME = auto()
    FILL = auto()


class RingNode:
    """Pushes each executed value into a ring and serves them in order.

    The ring starts stopped; ``on_path_start`` opens it. ``copy_from``
    returns None when no frame became ready in time and raises
    RuntimeError once the ring is stopped.
    """

    name = "Ring"

    def __init__(
        self,
        size: int = 1,
        policy: RestartPolicy = RestartPolicy.RESET,
        sample: Any = None,
    ) -> None:
        self.policy = policy
        self.ring = Ring(size, sample)
        self.ring.stop()
        self.requested_size: int | None = None
        self.spare_count = 0
        self.mode = RingMode.CONSUME
        self._mode_cv = threading.Condition()
        self.last_popped: Slot | None = None
        self.scheduled = 0
        self.on_schedule: Callable[[int], None] | None = None
        self.on_restart_signal: Callable[[], None] | None = None

    def _schedule(self, count: int) -> None:
        self.scheduled += count
        if self.on_schedule is not None:
            self.on_schedule(count)

    def _signal_restart(self) -> None:
        if self.on_restart_signal is not None:
            self.on_restart_signal()

    def _set_mode(self, mode: RingMode) -> None:
        with self._mode_cv:
            self.mode = mode
            self._mode_cv.notify_all()

    def request_size(self, size: int) -> None:
        """Ask for a new ring size, applied at the next path start."""
        if size == 0:
            raise ValueError(f"{self.name} size cannot be 0")
        if self.ring.size != size and self.requested_size != size:
            self.requested_size = size
            self._signal_restart()
            self.ring.stop()

    def execute(self, value: Any, frame_number: int) -> None:
        """Store ``value`` for ``frame_number`` in the next free slot, waiting for one."""
        if self.ring.exit or self.ring.size == 0:
            raise RuntimeError(f"{self.name} is not running")
        if self.ring.is_full():
            log.info("Trying to push while ring is full")
        slot = self.ring.begin_push()
        if slot is None:
            raise RuntimeError(f"{self.name} stopped while waiting for an empty slot")
        slot.frame_number = frame_number
        slot.data = value
        self.ring.end_push(slot)
        if self.mode is RingMode.FILL and self.ring.is_full():
            self._set_mode(RingMode.CONSUME)

    def copy_from(self, timeout_ms: float = DEFAULT_POP_TIMEOUT_MS) -> Slot | None:
        """Take the oldest filled slot; None if none is ready in time."""
        if self.last_popped is not None:
            log.warning("%s: previous slot was not released", self.name)
        if self.ring.exit:
            raise RuntimeError(f"{self.name} is not running")
        log.debug(
            "%s read size %d, write size %d, total %d",
            self.name,
            self.ring.ready_frames(),
            self.ring.empty_frames(),
            self.ring.total_frame_count(),
        )
        if self.mode is RingMode.FILL:
            with self._mode_cv:
                if not self._mode_cv.wait_for(
                    lambda: self.mode is not RingMode.FILL, FILL_WAIT_S
                ):
                    return None
        slot = self.ring.begin_pop(timeout_ms)
        if slot is None:
            if self.ring.exit:
                raise RuntimeError(f"{self.name} is not running")
            return None
        return slot

    def on_path_start(self) -> None:
        """Apply a pending resize, schedule the free slots and open the ring."""
        if self.policy is RestartPolicy.RESET:
            self.ring.reset(False)
        if self.requested_size is not None:
            self.ring.resize(self.requested_size)
            self.requested_size = None
        empty = self.ring.empty_frames()
        self._schedule(empty)
        if empty == 0:
            self._set_mode(RingMode.CONSUME)
        self.ring.exit = False

    def on_path_stop(self) -> None:
        """Stop the ring; a wait-until-full node starts filling again."""
        if self.policy is RestartPolicy.WAIT_UNTIL_FULL:
            self._set_mode(RingMode.FILL)
        self.ring.stop()


class BoundedQueueNode(RingNode):
    """Serves values in order and frees each slot as soon as it is read."""

    name = "BoundedQueue"

    def __init__(self, size: int = 1, sample: Any = None) -> None:
        super().__init__(size, RestartPolicy.RESET, sample)

    def copy_from(
        self, timeout_ms: float = DEFAULT_POP_TIMEOUT_MS
    ) -> tuple[Any, int] | None:
        """Return (value, frame_number) of the oldest entry, or None if none is ready."""
        slot = super().copy_from(timeout_ms)
        if slot is None:
            return None
        result = (slot.data, slot.frame_number)
        self.ring.end_pop(slot)
        self._schedule(1)
        return result


class RingBufferNode(RingNode):
    """Serves values in order, holding each slot until the frame ends.

    After a path stop it waits until the ring is full before serving again.
    """

    name = "RingBuffer"

    def __init__(self, size: int = 1, sample: Any = None) -> None:
        super().__init__(size, RestartPolicy.WAIT_UNTIL_FULL, sample)

    def copy_from(
        self, timeout_ms: float = DEFAULT_POP_TIMEOUT_MS
    ) -> tuple[Any, int] | None:
        """Return (value, frame_number) of the oldest entry, or None if none is ready."""
        slot = super().copy_from(timeout_ms)
        if slot is None:
            return None
        self.last_popped = slot
        self._schedule(1)
        return slot.data, slot.frame_number

    def end_frame(self) -> None:
        """Release the slot served by the last ``copy_from``."""
        if self.last_popped is None:
            return
        self.ring.end_pop(self.last_popped)
        self.last_popped = None