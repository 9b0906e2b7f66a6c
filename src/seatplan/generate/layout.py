# seatplan/generate/layout.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

import numpy as np
import pandas as pd

from seatplan.catalog import RoomCatalog
from seatplan.config import Config
from seatplan.room import Room
from seatplan.roster import ClassGroup, ClassRoster
from seatplan.seat import make_coordinate


# ----------------------------
# Configuration container
# ----------------------------
@dataclass(slots=True)
class LayoutGenConfig:
    """
    Configuration for generation of synthetic rooms and classes.
    """

    n_rooms: int = 3
    n_classes: int = 3

    # Room geometry ranges (inclusive)
    rows: Tuple[int, int] = (3, 6)
    cols: Tuple[int, int] = (2, 4)
    bench_types: Tuple[int, ...] = (2, 3, 4)

    # Class size range (inclusive)
    class_size: Tuple[int, int] = (10, 30)

    # Per-seat probability of being switched off by hand
    unavailable_rate: float = 0.05

    # RNG seed
    seed: Optional[int] = 7

    def validate(self) -> None:
        if self.n_rooms < 0 or self.n_classes < 0:
            raise ValueError("n_rooms and n_classes must be >= 0.")
        for name in ("rows", "cols", "class_size"):
            lo, hi = getattr(self, name)
            floor = 0 if name == "class_size" else 1
            if not (floor <= lo <= hi):
                raise ValueError(f"{name} must be an increasing range >= {floor}.")
        if not self.bench_types or any(b <= 0 for b in self.bench_types):
            raise ValueError("bench_types must be positive integers.")
        if not (0.0 <= self.unavailable_rate < 1.0):
            raise ValueError("unavailable_rate must be in [0,1).")
        if self.seed is not None and not isinstance(self.seed, int):
            raise ValueError("seed must be an int or None.")

    @classmethod
    def from_config(cls, cfg: Config, seed: Optional[int] = None) -> LayoutGenConfig:
        return cls(
            n_rooms=cfg.N_ROOMS,
            n_classes=cfg.N_CLASSES,
            rows=(cfg.MIN_ROWS, cfg.MAX_ROWS),
            cols=(cfg.MIN_COLS, cfg.MAX_COLS),
            bench_types=tuple(int(b) for b in cfg.BENCH_TYPES),
            class_size=(cfg.MIN_CLASS_SIZE, cfg.MAX_CLASS_SIZE),
            unavailable_rate=cfg.UNAVAILABLE_SEAT_RATE,
            seed=seed if seed is not None else cfg.SEED,
        )


# ----------------------------
# Generation helpers
# ----------------------------
def _rng(seed: Optional[int]) -> np.random.Generator:
    return np.random.default_rng(seed) if seed is not None else np.random.default_rng()


def create_rooms(cfg: LayoutGenConfig) -> list[Room]:
    cfg.validate()
    g = _rng(cfg.seed)
    rows = g.integers(cfg.rows[0], cfg.rows[1], size=cfg.n_rooms, endpoint=True)
    cols = g.integers(cfg.cols[0], cfg.cols[1], size=cfg.n_rooms, endpoint=True)
    benches = g.choice(np.array(cfg.bench_types, dtype=int), size=cfg.n_rooms)

    return [
        Room(
            room_id=f"R{i + 101}",
            room_name=f"Room {i + 101}",
            rows=int(rows[i]),
            cols=int(cols[i]),
            bench_type=int(benches[i]),
        )
        for i in range(cfg.n_rooms)
    ]


def create_classes(cfg: LayoutGenConfig) -> list[ClassGroup]:
    cfg.validate()
    # offset so room and class draws are independent for the same seed
    g = _rng(None if cfg.seed is None else cfg.seed + 1)
    sizes = g.integers(
        cfg.class_size[0], cfg.class_size[1], size=cfg.n_classes, endpoint=True
    )
    return [
        ClassGroup(class_id=f"C{i + 1}", student_count=int(sizes[i]))
        for i in range(cfg.n_classes)
    ]


def disable_random_seats(
    catalog: RoomCatalog, rate: float, seed: Optional[int] = 7
) -> int:
    """
    Toggle a random subset of seats to unavailable. Returns how many were
    switched off.
    """
    if not (0.0 <= rate <= 1.0):
        raise ValueError("rate must be in [0,1].")
    g = _rng(seed)
    switched = 0
    for room in catalog.rooms:
        if not room.has_valid_geometry:
            continue
        mask = g.random((room.rows, room.cols, room.bench_type)) < rate
        for row, col, slot in np.argwhere(mask):
            coordinate = make_coordinate(int(row), int(col), int(slot))
            if coordinate not in catalog.unavailable_seats(room.room_id):
                catalog.toggle_seat(room.room_id, coordinate)
                switched += 1
    return switched


def create_layout(
    cfg: LayoutGenConfig, student_id_prefix: str = "S"
) -> tuple[RoomCatalog, ClassRoster]:
    catalog = RoomCatalog(create_rooms(cfg))
    if cfg.unavailable_rate > 0:
        disable_random_seats(catalog, cfg.unavailable_rate, seed=cfg.seed)
    roster = ClassRoster(create_classes(cfg), student_id_prefix=student_id_prefix)
    return catalog, roster


def rooms_to_dataframe(catalog: RoomCatalog) -> pd.DataFrame:
    """Convert the catalog to a tidy pandas DataFrame."""
    rows = []
    for r in catalog.rooms:
        disabled = catalog.unavailable_seats(r.room_id)
        rows.append(
            {
                "room_id": r.room_id,
                "room_name": r.room_name,
                "rows": r.rows,
                "cols": r.cols,
                "bench_type": r.bench_type,
                "available": r.available,
                "capacity": r.capacity,
                "disabled_seats": len(disabled),
            }
        )
    return pd.DataFrame(rows)
