# seatplan/engine.py
from __future__ import annotations

from typing import Mapping, Sequence

from seatplan.ordering import order_class_ids, order_seats
from seatplan.preference import (
    ClassAssignmentState,
    lookahead_bench_capacity,
    resolve_preferred_slot,
)
from seatplan.result_types import AllocationResult
from seatplan.roster import Student
from seatplan.seat import Seat


def init_states(
    class_ids: Sequence[str], students_by_class: Mapping[str, Sequence[Student]]
) -> dict[str, ClassAssignmentState]:
    return {
        cid: ClassAssignmentState(remaining_count=len(students_by_class[cid]))
        for cid in class_ids
    }


def aggregate(
    assignment: dict[str, Student],
    states: Mapping[str, ClassAssignmentState],
) -> AllocationResult:
    """Final engine state -> (assignment, unseated counts in class order)."""
    unseated = {
        cid: state.remaining_count
        for cid, state in states.items()
        if state.remaining_count > 0
    }
    return AllocationResult(assignment=assignment, unseated=unseated)


def allocate(
    room_seats: Mapping[str, Sequence[Seat]],
    students_by_class: Mapping[str, Sequence[Student]],
) -> AllocationResult:
    """
    Seat students with one forward pass over the globally ordered seats.

    For every available seat, classes are tried in digit-aware id order. A
    class is skipped when it has nobody left to seat or when its previous
    student sits on this same bench. On entering a new room a class reserves
    one bench slot for its stay there; it only takes seats in that slot. The
    first class that matches takes the seat. Seats nobody matches stay empty.

    Never raises on degenerate input; malformed coordinates simply never
    match.
    """
    seats = order_seats(room_seats)
    class_ids = order_class_ids(students_by_class.keys())
    states = init_states(class_ids, students_by_class)
    assignment: dict[str, Student] = {}

    for pointer, seat in enumerate(seats):
        bench_key = seat.bench_key
        slot = seat.slot_index

        for cid in class_ids:
            state = states[cid]
            if state.remaining_count == 0:
                continue
            if bench_key == state.last_bench_key:
                continue

            if state.current_room_id != seat.room_id:
                capacity = lookahead_bench_capacity(seats, pointer)
                state.preferred_slot = resolve_preferred_slot(
                    cid, seat.room_id, capacity, class_ids, states
                )
                state.current_room_id = seat.room_id

            if slot is not None and state.preferred_slot == slot:
                roster = students_by_class[cid]
                assignment[seat.key] = roster[len(roster) - state.remaining_count]
                state.last_bench_key = bench_key
                state.remaining_count -= 1
                break

    return aggregate(assignment, states)
