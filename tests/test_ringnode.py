import pytest

from freedtrack.ringnode import (
    BoundedQueueNode,
    RestartPolicy,
    RingBufferNode,
    RingMode,
    RingNode,
)


def started_queue(size):
    node = BoundedQueueNode(size)
    node.on_path_start()
    return node


def test_execute_before_start_fails():
    node = BoundedQueueNode(2)
    with pytest.raises(RuntimeError):
        node.execute("a", 1)


def test_copy_from_before_start_fails():
    node = BoundedQueueNode(2)
    with pytest.raises(RuntimeError):
        node.copy_from(5)


def test_path_start_schedules_empty_slots():
    node = started_queue(3)
    assert node.scheduled == 3
    assert node.ring.exit is False


def test_bounded_queue_is_fifo():
    node = started_queue(3)
    node.execute("a", 10)
    node.execute("b", 11)
    assert node.copy_from(5) == ("a", 10)
    assert node.copy_from(5) == ("b", 11)


def test_bounded_queue_frees_slot_after_read():
    node = started_queue(2)
    node.execute("a", 1)
    assert node.ring.empty_frames() == 1
    node.copy_from(5)
    assert node.ring.empty_frames() == 2
    assert node.scheduled == 3


def test_bounded_queue_empty_returns_none():
    node = started_queue(2)
    assert node.copy_from(5) is None


def test_copy_from_after_stop_raises():
    node = started_queue(2)
    node.execute("a", 1)
    node.on_path_stop()
    with pytest.raises(RuntimeError):
        node.copy_from(5)


def test_request_size_zero_rejected():
    node = started_queue(2)
    with pytest.raises(ValueError):
        node.request_size(0)


def test_request_size_applies_on_path_start():
    node = started_queue(2)
    signals = []
    node.on_restart_signal = lambda: signals.append(True)
    node.request_size(4)
    assert node.ring.exit is True
    assert signals == [True]
    assert node.ring.size == 2
    node.on_path_start()
    assert node.ring.size == 4
    assert node.requested_size is None


def test_request_same_size_is_ignored():
    node = started_queue(2)
    signals = []
    node.on_restart_signal = lambda: signals.append(True)
    node.request_size(2)
    assert signals == []
    assert node.ring.exit is False


def test_reset_policy_clears_on_restart():
    node = started_queue(3)
    node.execute("a", 1)
    node.execute("b", 2)
    node.on_path_stop()
    node.on_path_start()
    assert node.ring.ready_frames() == 0
    assert node.ring.empty_frames() == 3


def test_schedule_callback_receives_counts():
    node = BoundedQueueNode(2)
    counts = []
    node.on_schedule = counts.append
    node.on_path_start()
    node.execute("a", 1)
    node.copy_from(5)
    assert counts == [2, 1]


def test_base_node_returns_slot():
    node = RingNode(2, RestartPolicy.RESET, None)
    node.on_path_start()
    node.execute("x", 7)
    slot = node.copy_from(5)
    assert slot.data == "x"
    assert slot.frame_number == 7


def test_ring_buffer_holds_slot_until_end_frame():
    node = RingBufferNode(2)
    node.on_path_start()
    node.execute("a", 1)
    assert node.copy_from(5) == ("a", 1)
    assert node.ring.empty_frames() == 1
    node.end_frame()
    assert node.ring.empty_frames() == 2
    assert node.last_popped is None


def test_ring_buffer_end_frame_without_pop_is_noop():
    node = RingBufferNode(2)
    node.on_path_start()
    node.end_frame()
    assert node.ring.empty_frames() == 2


def test_ring_buffer_waits_until_full_after_stop():
    node = RingBufferNode(2)
    node.on_path_start()
    node.on_path_stop()
    assert node.mode is RingMode.FILL
    node.on_path_start()
    node.execute("a", 1)
    assert node.copy_from(5) is None
    node.execute("b", 2)
    assert node.mode is RingMode.CONSUME
    assert node.copy_from(5) == ("a", 1)


def test_ring_buffer_keeps_contents_over_restart():
    node = RingBufferNode(3)
    node.on_path_start()
    node.execute("a", 1)
    node.on_path_stop()
    node.on_path_start()
    assert node.ring.ready_frames() == 1


def test_sample_is_copied_into_slots():
    sample = {"k": 1}
    node = BoundedQueueNode(2, sample)
    datas = [slot.data for slot in node.ring.slots]
    assert datas == [sample, sample]
    assert all(d is not sample for d in datas)