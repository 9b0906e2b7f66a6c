from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class RoomOccupancy:
    """How one room was used by the allocation."""

    room_id: str
    total_seats: int
    available_seats: int
    assigned_seats: int
    classes: tuple[str, ...]

    @property
    def utilisation(self) -> float:
        if self.available_seats == 0:
            return 0.0
        return self.assigned_seats / self.available_seats


@dataclass(frozen=True)
class ClassPlacement:
    """Seated/unseated split for one class and where it ended up."""

    class_id: str
    total_students: int
    seated: int
    unseated: int
    rooms: tuple[str, ...]


@dataclass(frozen=True)
class AllocationMetrics:
    """Key totals summarising assigned seats vs demand."""

    total_students: int
    seated: int
    unseated: int
    available_seats: int
    empty_available_seats: int
    bench_conflicts: int  # (class, bench) pairs holding more than one student
    conservation_ok: bool  # seated + unseated == students for every class

    @property
    def seat_utilisation(self) -> float:
        if self.available_seats == 0:
            return 0.0
        return self.seated / self.available_seats
