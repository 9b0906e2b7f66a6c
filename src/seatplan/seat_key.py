"""
Textual seat keys used by the assignment map.

Keys look like ``seat{seat_number}:{room_id}:{row}-{col}-{slot}``. Export and
storage consumers split them on ``:`` and then on ``-``, so the layout must
stay exactly as produced here.
"""

from __future__ import annotations

from typing import NamedTuple

SEAT_PREFIX = "seat"


class SeatKeyParts(NamedTuple):
    seat_number: int
    room_id: str
    row: int
    col: int
    slot_index: int

    @property
    def bench(self) -> str:
        return f"{self.row}-{self.col}"

    @property
    def coordinate(self) -> str:
        return f"{self.row}-{self.col}-{self.slot_index}"


def format_seat_key(seat_number: int, room_id: str, coordinate: str) -> str:
    return f"{SEAT_PREFIX}{seat_number}:{room_id}:{coordinate}"


def _to_index(value: str, field: str, key: str) -> int:
    text = value.strip()
    if not text.isdecimal():
        raise ValueError(f"Seat key {key!r} has a non-numeric {field}: {value!r}")
    return int(text)


def parse_seat_key(key: str) -> SeatKeyParts:
    """
    Split a seat key back into its components.

    The seat number is taken up to the first ':' and the coordinate after the
    last ':', so room ids containing ':' still round-trip.
    """
    if not isinstance(key, str):
        raise TypeError("Seat keys must be strings.")
    head, sep, rest = key.partition(":")
    room_id, sep2, coordinate = rest.rpartition(":")
    if not sep or not sep2:
        raise ValueError(f"Seat key {key!r} must look like 'seatN:ROOM:row-col-slot'.")
    if not head.startswith(SEAT_PREFIX):
        raise ValueError(f"Seat key {key!r} must start with '{SEAT_PREFIX}'.")

    seat_number = _to_index(head[len(SEAT_PREFIX) :], "seat number", key)
    coord_parts = coordinate.split("-")
    if len(coord_parts) != 3:
        raise ValueError(f"Seat key {key!r} has a malformed coordinate {coordinate!r}.")
    row, col, slot = (
        _to_index(coord_parts[0], "row", key),
        _to_index(coord_parts[1], "col", key),
        _to_index(coord_parts[2], "slot index", key),
    )
    return SeatKeyParts(seat_number, room_id, row, col, slot)
