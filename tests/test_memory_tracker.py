import pytest

from orangekit.memory_tracker import (
    ChangeInfo,
    HeapChange,
    HeapTracker,
    MemoryLeakError,
)


def test_no_leaks_when_everything_freed():
    tracker = HeapTracker()
    tracker.record_allocation("a", 16)
    tracker.record_allocation("b", 32)
    tracker.record_deallocation("b")
    tracker.record_deallocation("a")
    assert tracker.find_memory_leaks() == []


def test_leak_reported_with_location():
    tracker = HeapTracker()
    tracker.record_allocation("a", 16, "Font.cpp", "LoadFont", 12)
    tracker.record_allocation("b", 8)
    tracker.record_deallocation("b")
    assert tracker.find_memory_leaks() == [ChangeInfo("a", 16, "Font.cpp", "LoadFont", 12)]


def test_find_stops_tracking():
    tracker = HeapTracker()
    tracker.record_allocation("a", 4)
    tracker.find_memory_leaks()
    assert tracker.tracking is False
    tracker.record_allocation("b", 4)
    assert [info.ref for info in tracker.find_memory_leaks()] == ["a"]


def test_check_raises_with_leaks():
    tracker = HeapTracker()
    tracker.record_allocation(1, 4)
    tracker.record_allocation(2, 4)
    tracker.record_deallocation(1)
    with pytest.raises(MemoryLeakError) as info:
        tracker.check_memory_leaks()
    assert [leak.ref for leak in info.value.leaks] == [2]


def test_check_clean_returns_none():
    tracker = HeapTracker()
    tracker.record_allocation(1, 4)
    tracker.record_deallocation(1)
    assert tracker.check_memory_leaks() is None


def test_track_with_explicit_change():
    tracker = HeapTracker()
    tracker.track(HeapChange.ALLOCATION, "x", 2)
    tracker.track(HeapChange.DEALLOCATION, "x")
    assert tracker.find_memory_leaks() == []


def test_limit_exceeded_raises():
    tracker = HeapTracker(limit=2)
    tracker.record_allocation("a")
    tracker.record_allocation("b")
    with pytest.raises(OverflowError):
        tracker.record_allocation("c")
    tracker.record_deallocation("a")
    assert [info.ref for info in tracker.find_memory_leaks()] == ["b"]


def test_negative_limit_rejected():
    with pytest.raises(ValueError):
        HeapTracker(limit=-1)


def test_heap_change_values_select_kind():
    tracker = HeapTracker()
    tracker.track(HeapChange(0), "kept", 8)
    tracker.track(HeapChange(0), "freed", 8)
    tracker.track(HeapChange(1), "freed")
    assert [info.ref for info in tracker.find_memory_leaks()] == ["kept"]