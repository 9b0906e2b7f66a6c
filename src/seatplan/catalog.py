from __future__ import annotations

from dataclasses import replace
from typing import Iterable, Mapping, Sequence

from seatplan.inventory import build_seat_inventory
from seatplan.room import Room
from seatplan.seat import Seat


class RoomCatalog:
    """
    Rooms available for seating plus any seats switched off by hand.

    `seat_snapshot()` is what the allocator consumes; the catalog itself may
    keep changing between runs.
    """

    def __init__(
        self,
        rooms: Iterable[Room],
        unavailable_seats: Mapping[str, Iterable[str]] | None = None,
    ) -> None:
        self.rooms: list[Room] = list(rooms)
        ids = [r.room_id for r in self.rooms]
        if len(ids) != len(set(ids)):
            raise ValueError("Room ids must be unique within a catalog.")
        self._unavailable: dict[str, set[str]] = {r.room_id: set() for r in self.rooms}
        for room_id, coords in (unavailable_seats or {}).items():
            self._require(room_id)
            self._unavailable[room_id].update(coords)

    def __len__(self) -> int:
        return len(self.rooms)

    @property
    def room_ids(self) -> list[str]:
        return [r.room_id for r in self.rooms]

    def _require(self, room_id: str) -> None:
        if room_id not in self._unavailable:
            raise KeyError(f"Unknown room id {room_id!r}")

    def room(self, room_id: str) -> Room:
        for r in self.rooms:
            if r.room_id == room_id:
                return r
        raise KeyError(f"Unknown room id {room_id!r}")

    def unavailable_seats(self, room_id: str) -> set[str]:
        self._require(room_id)
        return set(self._unavailable[room_id])

    def toggle_seat(self, room_id: str, coordinate: str) -> bool:
        """Flip one seat; returns True when the seat is now available."""
        self._require(room_id)
        disabled = self._unavailable[room_id]
        if coordinate in disabled:
            disabled.remove(coordinate)
            return True
        disabled.add(coordinate)
        return False

    def set_room_available(self, room_id: str, available: bool) -> None:
        self.room(room_id).available = bool(available)

    def select(self, room_ids: Sequence[str]) -> RoomCatalog:
        """Catalog restricted to `room_ids` (catalog order, toggles kept)."""
        wanted = set(room_ids)
        unknown = wanted - set(self.room_ids)
        if unknown:
            raise KeyError(f"Unknown room ids: {sorted(unknown)}")
        rooms = [replace(r) for r in self.rooms if r.room_id in wanted]
        return RoomCatalog(
            rooms, {r.room_id: set(self._unavailable[r.room_id]) for r in rooms}
        )

    def invalid_rooms(self) -> list[str]:
        return [r.room_id for r in self.rooms if not r.has_valid_geometry]

    def seat_snapshot(self) -> dict[str, tuple[Seat, ...]]:
        inventory = build_seat_inventory(self.rooms, self._unavailable)
        return {room_id: tuple(seats) for room_id, seats in inventory.items()}
