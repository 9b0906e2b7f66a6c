from __future__ import annotations

from dataclasses import dataclass
from typing import Literal, Optional

from seatplan.seat_key import format_seat_key

SeatStatus = Literal["available", "unavailable"]
BenchKey = tuple[str, str]

AVAILABLE: SeatStatus = "available"
UNAVAILABLE: SeatStatus = "unavailable"


def make_coordinate(row: int, col: int, slot: int) -> str:
    return f"{row}-{col}-{slot}"


def _parse_index(value: str) -> Optional[int]:
    text = value.strip()
    if not text.isdecimal():
        return None
    return int(text)


@dataclass(frozen=True, slots=True)
class Seat:
    """
    A single addressable seat. Coordinates are kept in their textual
    "row-col-slot" form; the parsed parts are None when a component is
    malformed so that callers can treat such seats as non-matching.
    """

    seat_number: int
    coordinate: str
    status: SeatStatus = AVAILABLE
    room_id: str = ""

    @property
    def is_available(self) -> bool:
        return self.status == AVAILABLE

    def _part(self, idx: int) -> Optional[str]:
        parts = self.coordinate.split("-")
        if len(parts) != 3:
            return None
        return parts[idx]

    @property
    def row(self) -> Optional[int]:
        part = self._part(0)
        return None if part is None else _parse_index(part)

    @property
    def col(self) -> Optional[int]:
        part = self._part(1)
        return None if part is None else _parse_index(part)

    @property
    def slot_index(self) -> Optional[int]:
        part = self._part(2)
        return None if part is None else _parse_index(part)

    @property
    def bench_key(self) -> BenchKey:
        """(room_id, "row-col"); seats on one bench share it."""
        parts = self.coordinate.split("-")
        return (self.room_id, "-".join(parts[:2]))

    @property
    def key(self) -> str:
        return format_seat_key(self.seat_number, self.room_id, self.coordinate)
