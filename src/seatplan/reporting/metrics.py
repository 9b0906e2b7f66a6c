from __future__ import annotations

from typing import Any, Sequence

import numpy as np
import pandas as pd

from seatplan.input_data import InputData
from seatplan.ordering import order_class_ids

from .adapters import ResultAdapter
from .data_models import AllocationMetrics, ClassPlacement, RoomOccupancy

# Cell codes used by room_seat_grid
UNAVAILABLE_CELL = -2
EMPTY_CELL = -1


def room_occupancy(
    data: InputData, res: Any, adapter: ResultAdapter
) -> list[RoomOccupancy]:
    """One RoomOccupancy per catalog room, in catalog order."""
    df = adapter.df_assignment(res)
    out: list[RoomOccupancy] = []
    for room_id, seats in data.room_seats.items():
        in_room = df[df["room_id"] == room_id] if not df.empty else df
        classes = tuple(order_class_ids(set(in_room["class_id"]))) if len(in_room) else ()
        out.append(
            RoomOccupancy(
                room_id=room_id,
                total_seats=len(seats),
                available_seats=sum(1 for s in seats if s.is_available),
                assigned_seats=int(len(in_room)),
                classes=classes,
            )
        )
    return out


def class_placement(
    data: InputData, res: Any, adapter: ResultAdapter
) -> list[ClassPlacement]:
    """One ClassPlacement per roster class, in allocation priority order."""
    df = adapter.df_assignment(res)
    unseated = adapter.unseated(res)
    totals = {g.class_id: g.student_count for g in data.roster.classes}

    out: list[ClassPlacement] = []
    for cid in order_class_ids(totals):
        mine = df[df["class_id"] == cid] if not df.empty else df
        rooms = tuple(dict.fromkeys(mine["room_id"])) if len(mine) else ()
        out.append(
            ClassPlacement(
                class_id=cid,
                total_students=totals[cid],
                seated=int(len(mine)),
                unseated=int(unseated.get(cid, 0)),
                rooms=rooms,
            )
        )
    return out


def bench_conflicts(res: Any, adapter: ResultAdapter) -> pd.DataFrame:
    """(class, room, bench) groups holding more than one student of the class."""
    df = adapter.df_assignment(res)
    cols = ["class_id", "room_id", "bench", "students"]
    if df.empty:
        return pd.DataFrame(columns=cols)
    counts = (
        df.groupby(["class_id", "room_id", "bench"], sort=False)
        .size()
        .reset_index(name="students")
    )
    return counts[counts["students"] > 1].reset_index(drop=True)[cols]


def compute_allocation_metrics(
    data: InputData, res: Any, adapter: ResultAdapter
) -> AllocationMetrics:
    placements = class_placement(data, res, adapter)
    rooms = room_occupancy(data, res, adapter)
    seated = sum(p.seated for p in placements)
    available = sum(r.available_seats for r in rooms)
    return AllocationMetrics(
        total_students=sum(p.total_students for p in placements),
        seated=seated,
        unseated=sum(p.unseated for p in placements),
        available_seats=available,
        empty_available_seats=available - sum(r.assigned_seats for r in rooms),
        bench_conflicts=int(len(bench_conflicts(res, adapter))),
        conservation_ok=all(
            p.seated + p.unseated == p.total_students for p in placements
        ),
    )


def room_seat_grid(
    data: InputData,
    res: Any,
    adapter: ResultAdapter,
    room_id: str,
    class_order: Sequence[str],
) -> np.ndarray:
    """
    Seat map of one room as a (rows, cols * bench_type) int array.

    Cells hold the index of the seated class in `class_order`, EMPTY_CELL for
    free seats or UNAVAILABLE_CELL for seats that cannot be used.
    """
    room = data.catalog.room(room_id)
    if not room.has_valid_geometry:
        return np.zeros((0, 0), dtype=int)

    grid = np.full((room.rows, room.cols * room.bench_type), EMPTY_CELL, dtype=int)
    for seat in data.room_seats[room_id]:
        if not seat.is_available:
            grid[seat.row, seat.col * room.bench_type + seat.slot_index] = (
                UNAVAILABLE_CELL
            )

    class_idx = {cid: i for i, cid in enumerate(class_order)}
    df = adapter.df_assignment(res)
    if not df.empty:
        for r in df[df["room_id"] == room_id].itertuples(index=False):
            if r.class_id not in class_idx:
                continue
            if 0 <= r.row < room.rows and 0 <= r.col < room.cols:
                if 0 <= r.slot_index < room.bench_type:
                    grid[r.row, r.col * room.bench_type + r.slot_index] = class_idx[
                        r.class_id
                    ]
    return grid
