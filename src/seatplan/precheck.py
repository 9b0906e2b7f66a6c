# seatplan/precheck.py
from __future__ import annotations

from dataclasses import dataclass, field

from seatplan.input_data import InputData


@dataclass(frozen=True)
class PrecheckSummary:
    """Capacity bounds computed before allocating."""

    available_seats: int
    demand: int
    bench_count: int
    # class id -> students beyond the one-seat-per-bench bound (only when > 0)
    per_class_shortfall: dict[str, int] = field(default_factory=dict)
    invalid_rooms: list[str] = field(default_factory=list)

    @property
    def ok_seats(self) -> bool:
        return self.available_seats >= self.demand

    @property
    def ok(self) -> bool:
        return self.ok_seats and not self.per_class_shortfall


def _room_counts(data: InputData) -> tuple[int, int]:
    """(available seats, benches with at least one available seat)."""
    seats_total = 0
    benches: set[tuple[str, str]] = set()
    for seats in data.room_seats.values():
        for seat in seats:
            if seat.is_available:
                seats_total += 1
                benches.add(seat.bench_key)
    return seats_total, len(benches)


def precheck_capacity(data: InputData) -> PrecheckSummary:
    """
    Quick, allocation-free capacity bounds.

    A class takes at most one seat per bench, so any class bigger than the
    number of benches holding a free seat is bound to leave students unseated
    no matter how the pass goes. Total seats against total students is the
    coarser check. Neither bound is tight: the pass may still leave students
    unseated when both pass.
    """
    seats_total, benches = _room_counts(data)
    shortfall = {
        g.class_id: g.student_count - benches
        for g in data.roster.classes
        if g.student_count > benches
    }
    return PrecheckSummary(
        available_seats=seats_total,
        demand=data.roster.total_students(),
        bench_count=benches,
        per_class_shortfall=shortfall,
        invalid_rooms=data.catalog.invalid_rooms(),
    )


def print_precheck(summary: PrecheckSummary) -> None:
    print("\nPre-check:")
    print(f"  available seats : {summary.available_seats}")
    print(f"  students        : {summary.demand}")
    print(f"  usable benches  : {summary.bench_count}")
    if summary.invalid_rooms:
        print(f"  skipped rooms (invalid geometry): {', '.join(summary.invalid_rooms)}")
    if not summary.ok_seats:
        short = summary.demand - summary.available_seats
        print(f"  ⚠️ demand exceeds available seats by {short}")
    for cid, n in summary.per_class_shortfall.items():
        print(f"  ⚠️ class {cid}: {n} student(s) beyond one seat per bench")
