# seatplan/cache.py
from __future__ import annotations

import hashlib
import json
from collections import OrderedDict
from typing import Mapping, Sequence

from seatplan.engine import allocate
from seatplan.result_types import AllocationResult
from seatplan.roster import Student
from seatplan.seat import Seat


def input_fingerprint(
    room_seats: Mapping[str, Sequence[Seat]],
    students_by_class: Mapping[str, Sequence[Student]],
) -> str:
    """
    sha256 over a canonical dump of both snapshots. Map iteration order is
    kept, since equal inputs are only guaranteed equal outputs when they are
    iterated the same way.
    """
    payload = {
        "rooms": [
            [room_id, [[s.seat_number, s.coordinate, s.status] for s in seats]]
            for room_id, seats in room_seats.items()
        ],
        "classes": [
            [class_id, [[s.student_id, s.class_id] for s in students]]
            for class_id, students in students_by_class.items()
        ],
    }
    blob = json.dumps(payload, separators=(",", ":"), ensure_ascii=False)
    return hashlib.sha256(blob.encode("utf-8")).hexdigest()


def _copy(result: AllocationResult) -> AllocationResult:
    # Student is frozen, so copying the two maps is enough
    return AllocationResult(dict(result.assignment), dict(result.unseated))


class AllocationCache:
    """
    Memoizes `allocate` by input fingerprint, evicting least recently used.

    Every call hands back its own result object; editing one never changes
    what later hits return.
    """

    def __init__(self, max_entries: int = 32) -> None:
        if max_entries <= 0:
            raise ValueError("max_entries must be > 0.")
        self.max_entries = max_entries
        self._entries: OrderedDict[str, AllocationResult] = OrderedDict()
        self.hits = 0
        self.misses = 0

    def __len__(self) -> int:
        return len(self._entries)

    def allocate(
        self,
        room_seats: Mapping[str, Sequence[Seat]],
        students_by_class: Mapping[str, Sequence[Student]],
    ) -> AllocationResult:
        key = input_fingerprint(room_seats, students_by_class)
        cached = self._entries.get(key)
        if cached is not None:
            self.hits += 1
            self._entries.move_to_end(key)
            return _copy(cached)

        self.misses += 1
        result = allocate(room_seats, students_by_class)
        self._entries[key] = _copy(result)
        if len(self._entries) > self.max_entries:
            self._entries.popitem(last=False)
        return result

    def clear(self) -> None:
        self._entries.clear()
        self.hits = self.misses = 0
