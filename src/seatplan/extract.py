# seatplan/extract.py
from __future__ import annotations

import pandas as pd

from seatplan.ordering import natural_key, room_number
from seatplan.result_types import AllocationResult
from seatplan.seat_key import parse_seat_key

ASSIGNMENT_COLUMNS = [
    "seat_key",
    "student_id",
    "class_id",
    "room_id",
    "seat_number",
    "row",
    "col",
    "slot_index",
    "bench",
]


def assignment_frame(res: AllocationResult) -> pd.DataFrame:
    """Return one row per seated student, in seat visiting order."""
    rows: list[dict] = []
    for key, student in res.assignment.items():
        try:
            parts = parse_seat_key(key)
        except ValueError:
            continue
        rows.append(
            {
                "seat_key": key,
                "student_id": student.student_id,
                "class_id": student.class_id,
                "room_id": parts.room_id,
                "seat_number": parts.seat_number,
                "row": parts.row,
                "col": parts.col,
                "slot_index": parts.slot_index,
                "bench": parts.bench,
            }
        )
    if not rows:
        return pd.DataFrame(columns=ASSIGNMENT_COLUMNS)

    rows.sort(
        key=lambda r: (
            room_number(r["room_id"]),
            natural_key(r["room_id"]),
            r["seat_number"],
        )
    )
    return pd.DataFrame(rows, columns=ASSIGNMENT_COLUMNS).reset_index(drop=True)


def unseated_frame(res: AllocationResult) -> pd.DataFrame:
    if not res.unseated:
        return pd.DataFrame(columns=["class_id", "unseated"])
    return pd.DataFrame(
        [{"class_id": cid, "unseated": int(n)} for cid, n in res.unseated.items()]
    )
