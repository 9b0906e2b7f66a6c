from __future__ import annotations

from dataclasses import dataclass


def _positive_int(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and value > 0


@dataclass(slots=True)
class Room:
    """
    Geometry of one room: `rows x cols` benches with `bench_type` seats each.
    """

    room_id: str
    rows: int
    cols: int
    bench_type: int
    available: bool = True
    room_name: str = ""

    def __repr__(self) -> str:
        state = "available" if self.available else "unavailable"
        return (
            f"Room(id='{self.room_id}', name='{self.room_name}', "
            f"{self.rows}x{self.cols}, bench={self.bench_type}, {state})"
        )

    def __post_init__(self) -> None:
        self.room_id = str(self.room_id)
        if not self.room_name:
            self.room_name = self.room_id

    @property
    def has_valid_geometry(self) -> bool:
        return all(_positive_int(v) for v in (self.rows, self.cols, self.bench_type))

    @property
    def bench_count(self) -> int:
        return self.rows * self.cols if self.has_valid_geometry else 0

    @property
    def capacity(self) -> int:
        return self.bench_count * self.bench_type if self.has_valid_geometry else 0
