# seatplan/preference.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping, Optional, Sequence

from seatplan.seat import BenchKey, Seat

# Slots reserved by the first and second class when exactly two classes share
# benches wider than two seats.
TWO_CLASS_SLOTS = (0, 2)


@dataclass
class ClassAssignmentState:
    """Per-class bookkeeping for one allocation run."""

    remaining_count: int
    current_room_id: Optional[str] = None
    preferred_slot: Optional[int] = None
    last_bench_key: Optional[BenchKey] = None


def lookahead_bench_capacity(seats: Sequence[Seat], pointer: int) -> int:
    """
    Bench capacity seen from `seats[pointer]`: scan forward while the room and
    bench are unchanged and return the highest slot index + 1. Slot indices
    that cannot be parsed are ignored.
    """
    start = seats[pointer]
    bench = start.bench_key
    max_slot = -1
    for seat in seats[pointer:]:
        if seat.bench_key != bench:
            break
        slot = seat.slot_index
        if slot is not None:
            max_slot = max(max_slot, slot)
    return max_slot + 1


def resolve_preferred_slot(
    class_id: str,
    room_id: str,
    bench_capacity: int,
    sorted_class_ids: Sequence[str],
    states: Mapping[str, ClassAssignmentState],
) -> int:
    """
    Pick the bench slot `class_id` will use while it stays in `room_id`.

    - With exactly two classes and benches wider than two seats, the first
      class takes slot 0 and the second slot 2.
    - Otherwise take the lowest slot below `bench_capacity` not reserved in
      this room by another resident class that still has students to seat.
    - When every slot is taken, fall back to slot 0.
    """
    if len(sorted_class_ids) == 2 and bench_capacity > 2:
        first, second = sorted_class_ids
        if class_id == first:
            return TWO_CLASS_SLOTS[0]
        if class_id == second:
            return TWO_CLASS_SLOTS[1]

    reserved: set[int] = set()
    for other_id in sorted_class_ids:
        if other_id == class_id:
            continue
        other = states[other_id]
        if (
            other.current_room_id == room_id
            and other.remaining_count > 0
            and other.preferred_slot is not None
        ):
            reserved.add(other.preferred_slot)

    for slot in range(bench_capacity):
        if slot not in reserved:
            return slot
    return 0
