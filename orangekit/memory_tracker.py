"""Record allocations and deallocations and report what was never freed."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Hashable

__all__ = [
    "ALLOCATION_BUFFER_LIMIT",
    "HeapChange",
    "ChangeInfo",
    "MemoryLeakError",
    "HeapTracker",
]

ALLOCATION_BUFFER_LIMIT = 1000000


class HeapChange(enum.IntEnum):
    ALLOCATION = 0
    DEALLOCATION = 1


@dataclass(frozen=True)
class ChangeInfo:
    """One recorded change: what it concerned and where it was made."""

    ref: Hashable
    size: int = 0
    file_name: str = ""
    function_name: str = ""
    line_number: int = 0


class MemoryLeakError(Exception):
    """Raised when allocations were never matched by a deallocation."""

    def __init__(self, leaks: list[ChangeInfo]) -> None:
        super().__init__(f"{len(leaks)} memory leak(s) found")
        self.leaks = leaks


class HeapTracker:
    """Keeps up to ``limit`` changes of each kind until leaks are checked."""

    def __init__(self, limit: int = ALLOCATION_BUFFER_LIMIT) -> None:
        if limit < 0:
            raise ValueError("limit must not be negative")
        self.limit = limit
        self.tracking = True
        self._changes: dict[HeapChange, list[ChangeInfo]] = {
            HeapChange.ALLOCATION: [],
            HeapChange.DEALLOCATION: [],
        }

    def track(
        self,
        change: HeapChange,
        ref: Hashable,
        size: int = 0,
        file_name: str = "",
        function_name: str = "",
        line_number: int = 0,
    ) -> None:
        """Record a change; does nothing once tracking has stopped."""
        if not self.tracking:
            return
        records = self._changes[HeapChange(change)]
        if len(records) >= self.limit:
            raise OverflowError(
                "allocation buffer size exceeded; raise the limit or allocate less"
            )
        records.append(ChangeInfo(ref, size, file_name, function_name, line_number))

    def record_allocation(
        self,
        ref: Hashable,
        size: int = 0,
        file_name: str = "",
        function_name: str = "",
        line_number: int = 0,
    ) -> None:
        self.track(HeapChange.ALLOCATION, ref, size, file_name, function_name, line_number)

    def record_deallocation(self, ref: Hashable) -> None:
        self.track(HeapChange.DEALLOCATION, ref)

    def find_memory_leaks(self) -> list[ChangeInfo]:
        """Stop tracking and return every allocation whose ref was never freed."""
        self.tracking = False
        freed = {info.ref for info in self._changes[HeapChange.DEALLOCATION]}
        return [
            info for info in self._changes[HeapChange.ALLOCATION] if info.ref not in freed
        ]

    def check_memory_leaks(self) -> None:
        """Raise MemoryLeakError if any allocation was never freed."""
        leaks = self.find_memory_leaks()
        if leaks:
            raise MemoryLeakError(leaks)