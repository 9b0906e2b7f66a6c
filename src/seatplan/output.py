from __future__ import annotations

from pathlib import Path
from typing import Optional

import pandas as pd

from seatplan.config import Config
from seatplan.result_types import AllocationResult
from seatplan.seat_key import parse_seat_key

CSV_HEADERS = ["Student ID", "Class ID", "Room ID", "Bench Number", "Seat Index"]


def assignment_table(res: AllocationResult) -> pd.DataFrame:
    """
    Tabular export of the assignment map, one row per seat key in map order.

    Keys are read with `parse_seat_key`, so room ids containing ':' are kept;
    keys that do not parse are dropped.
    """
    rows: list[list[str]] = []
    for seat_key, student in res.assignment.items():
        try:
            parts = parse_seat_key(seat_key)
        except ValueError:
            continue
        rows.append(
            [
                student.student_id,
                student.class_id,
                parts.room_id,
                parts.bench,
                str(parts.slot_index),
            ]
        )
    return pd.DataFrame(rows, columns=CSV_HEADERS)


def export_csv(res: AllocationResult, path: str | Path) -> Optional[Path]:
    """Write the assignment table to `path`; nothing is written when empty."""
    if not res.assignment:
        print("No seat assignments to export.")
        return None
    out_path = Path(path)
    out_path.parent.mkdir(parents=True, exist_ok=True)
    assignment_table(res).to_csv(out_path, index=False)
    return out_path


def produce_outputs(res: AllocationResult, cfg: Config) -> Optional[Path]:
    """Persist the seat assignment CSV under cfg.OUTPUT_DIR."""
    if not cfg.EXPORT_CSV:
        return None
    out_path = export_csv(res, cfg.csv_path)
    if out_path is not None:
        print(f"Seat assignments written to {out_path}")
    return out_path
