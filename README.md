# freedtrack

This package provides building blocks for a frame pipeline. It has no
dependencies outside the standard library.

- `freedtrack.ring` contains a thread-safe ring of reusable slots shared by a
  producer and a consumer.
- `freedtrack.ringnode` contains queue nodes built on that ring: a bounded
  queue and a ring buffer.
- `freedtrack.formats` contains texture formats and the buffer element type
  each format stores.
- `freedtrack.nodes` contains small utility nodes: frame time, string
  comparison, status display and CPU sleep.

## Installation

```
pip install .
```

To install with the test dependencies:

```
pip install ".[test]"
```

## Rings

A `Ring` holds a fixed number of `Slot` objects. Each slot has a `data` value
and a `frame_number`, and each slot starts with its own deep copy of `sample`.

Slots move from the write pool to the read pool and back:

```python
from freedtrack.ring import Ring

ring = Ring(4, sample=None)

slot = ring.begin_push()      # waits for a free slot
slot.data = b"frame"
slot.frame_number = 1
ring.end_push(slot)

slot = ring.begin_pop(100)    # waits up to 100 ms
ring.end_pop(slot)
```

Stopping and blocking:

- `stop()` wakes every waiting thread.
- After `stop()`, `begin_push` and `begin_pop` return `None`.
- `begin_pop` also returns `None` on timeout.

Handing slots back:

- `cancel_push` returns an unfilled slot to the front of the write pool.
- `cancel_pop` returns an unread slot to the front of the read pool.
- Returning a slot to a pool that is already full raises `ValueError`.

Non-blocking access:

- `try_push(timeout_ms=None)` takes a free slot if one is available. With a
  timeout, it first waits up to that long for one to appear.
- `try_pop(spare=0)` takes a filled slot only if more than `spare` are waiting.

Managing the ring:

- `reset(fill)` moves every slot, resetting each one. With `fill` true, the
  slots go to the read pool; otherwise they go to the write pool.
- `resize(size)` replaces all slots with fresh empty ones.

Reporting on the ring:

- `is_full`, `is_empty` and `has_empty_slots` report the state of the pools.
- `empty_frames`, `ready_frames` and `total_frame_count` report slot counts.
- `can_push` and `can_pop` report whether a push or pop would succeed.

## Queue nodes

`RingNode` pushes each executed value into a ring. It serves the values in
order. A node is created with its ring stopped.

Starting and stopping:

- `on_path_start()` opens the ring.
- `on_path_stop()` stops the ring.

Pushing values:

- `execute(value, frame_number)` stores a value in the next free slot. It
  waits for a free slot if none is available.
- It raises `RuntimeError` if the ring is not running.

Reading values with `copy_from(timeout_ms=100)`:

- It returns `None` if no entry became ready in time.
- It raises `RuntimeError` once the ring is stopped.

Resizing:

- `request_size(size)` asks for a new ring size. The size is applied at the
  next `on_path_start()`.
- A size of 0 raises `ValueError`.
- A different size also stops the ring and calls `on_restart_signal`, if it
  is set.

Scheduling: each time the node schedules more frames, it adds to `scheduled`
and calls `on_schedule(count)`, if it is set.

There are two concrete nodes:

- `BoundedQueueNode` uses `RestartPolicy.RESET`.
  - The ring is emptied at every path start.
  - `copy_from` returns `(value, frame_number)` and frees the slot at once.
- `RingBufferNode` uses `RestartPolicy.WAIT_UNTIL_FULL`.
  - After a path stop, it enters `RingMode.FILL` and serves nothing until the
    ring is full.
  - `copy_from` returns `(value, frame_number)` and keeps the slot until
    `end_frame()` releases it.

```python
from freedtrack.ringnode import BoundedQueueNode

node = BoundedQueueNode(size=2)
node.on_path_start()
node.execute("a", 1)
node.copy_from()          # ("a", 1)
```

## Formats

`element_type_for_format(fmt)` maps a `Format` to the `BufferElementType`
its pixels are stored as. The argument may also be a format name given as a
string. Unknown formats map to `BufferElementType.UNDEFINED`.

```python
from freedtrack.formats import element_type_for_format

element_type_for_format("R16G16B16A16_SFLOAT")   # BufferElementType.FLOAT16
```

## Utility nodes

- **`TimeNode`**: `execute((num, den))` returns `num * frame_count / den` and
  advances the frame counter. A zero denominator raises `ValueError`.
- **`is_same_string`**: `is_same_string(first, second)` compares two strings
  or byte strings. Each one is read only up to its first NUL.
- **`StatusDisplay`**:
  - `update(message, status_type)` sets one status message of a given
    `StatusType`. An empty message clears the display.
  - It returns whether the display changed.
  - When the display changes, `on_change`, if it is set, receives the list of
    shown messages.
- **`cpu_sleep`**: `cpu_sleep(milliseconds, busy_wait=False, is_preempted=None)`
  waits for the given time, either sleeping or spinning.
  - A busy wait ends early once `is_preempted()` returns true. In that case
    the function returns `False`.
  - A negative time raises `ValueError`.

## What this package does not do

This package does not:

- decode camera-tracking packets;
- listen on a network socket;
- provide a command-line program.

It holds and moves values between threads, but it does not talk to a GPU.
The values in a ring are whatever Python objects you put there.

## Running the tests

```
pytest
```