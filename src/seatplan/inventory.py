# seatplan/inventory.py
from __future__ import annotations

from typing import Iterable, Mapping

from seatplan.room import Room
from seatplan.seat import AVAILABLE, UNAVAILABLE, Seat, make_coordinate


def build_room_seats(room: Room, unavailable: Iterable[str] = ()) -> list[Seat]:
    """
    Flatten one room into seats, row by row, bench by bench, slot by slot.

    A seat is available only if the room is available and its coordinate is
    not in `unavailable`. Rooms with non-positive dimensions yield no seats.
    """
    if not room.has_valid_geometry:
        return []

    disabled = set(unavailable)
    seats: list[Seat] = []
    seat_number = 0
    for row in range(room.rows):
        for col in range(room.cols):
            for slot in range(room.bench_type):
                coordinate = make_coordinate(row, col, slot)
                ok = room.available and coordinate not in disabled
                seats.append(
                    Seat(
                        seat_number=seat_number,
                        coordinate=coordinate,
                        status=AVAILABLE if ok else UNAVAILABLE,
                        room_id=room.room_id,
                    )
                )
                seat_number += 1
    return seats


def build_seat_inventory(
    rooms: Iterable[Room],
    unavailable_by_room: Mapping[str, Iterable[str]] | None = None,
) -> dict[str, list[Seat]]:
    """Seats for every room, keyed by room id in catalog order."""
    unavailable_by_room = unavailable_by_room or {}
    return {
        room.room_id: build_room_seats(room, unavailable_by_room.get(room.room_id, ()))
        for room in rooms
    }
