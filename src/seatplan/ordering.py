# seatplan/ordering.py
from __future__ import annotations

import re
from typing import Iterable, Mapping, Sequence

from seatplan.seat import Seat

_CHUNKS = re.compile(r"(\d+)")
_DIGITS = re.compile(r"\d")

NaturalKey = tuple[tuple[tuple[int, int, str], ...], str]


def natural_key(text: str) -> NaturalKey:
    """
    Digit-aware sort key that does not depend on the platform locale.

    Digit runs compare numerically and sort before text; text runs compare
    case-insensitively. The raw string breaks remaining ties so the order is
    total.
    """
    parts: list[tuple[int, int, str]] = []
    # split() with a capture group puts digit runs at odd positions
    for i, chunk in enumerate(_CHUNKS.split(text)):
        if not chunk:
            continue
        if i % 2:
            parts.append((0, int(chunk), ""))
        else:
            parts.append((1, 0, chunk.casefold()))
    return tuple(parts), text


def room_number(room_id: str) -> int:
    """Digits embedded in a room id read as one integer; 0 when there are none."""
    digits = "".join(_DIGITS.findall(room_id))
    return int(digits) if digits else 0


def seat_sort_key(seat: Seat) -> tuple[int, NaturalKey, int, NaturalKey]:
    return (
        room_number(seat.room_id),
        natural_key(seat.room_id),
        seat.seat_number,
        natural_key(seat.coordinate),
    )


def order_seats(room_seats: Mapping[str, Sequence[Seat]]) -> list[Seat]:
    """
    Available seats from every room in global visiting order.

    Each seat is re-tagged with the room id it was supplied under. With
    catalog numbering the result keeps rooms contiguous, benches contiguous,
    and slots increasing within a bench.
    """
    tagged: list[Seat] = []
    for room_id, seats in room_seats.items():
        for seat in seats:
            if not seat.is_available:
                continue
            if seat.room_id != room_id:
                seat = Seat(
                    seat_number=seat.seat_number,
                    coordinate=seat.coordinate,
                    status=seat.status,
                    room_id=room_id,
                )
            tagged.append(seat)
    return sorted(tagged, key=seat_sort_key)


def order_class_ids(class_ids: Iterable[str]) -> list[str]:
    return sorted(class_ids, key=natural_key)
