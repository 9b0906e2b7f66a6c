from __future__ import annotations

import numpy as np

from seatplan.engine import allocate
from seatplan.input_data import InputData
from seatplan.reporting import metrics
from seatplan.reporting.adapters import PandasResultAdapter
from seatplan.result_types import AllocationResult
from seatplan.roster import Student


def _allocate(data: InputData) -> AllocationResult:
    return allocate(data.room_seats, data.students_by_class)


def test_room_occupancy_counts_seats_per_room(small_data):
    res = _allocate(small_data)
    rooms = metrics.room_occupancy(small_data, res, PandasResultAdapter())

    counts = [
        (r.room_id, r.total_seats, r.available_seats, r.assigned_seats) for r in rooms
    ]
    assert counts == [("R1", 12, 11, 10), ("R2", 8, 8, 2)]
    assert rooms[0].classes == ("C1", "C2", "C10")
    assert rooms[1].classes == ("C1", "C2")
    assert rooms[1].utilisation == 0.25


def test_class_placement_follows_class_order(small_data):
    res = _allocate(small_data)
    placements = metrics.class_placement(small_data, res, PandasResultAdapter())

    assert [p.class_id for p in placements] == ["C1", "C2", "C10"]
    assert [p.seated for p in placements] == [5, 4, 3]
    assert all(p.unseated == 0 for p in placements)
    assert placements[0].rooms == ("R1", "R2")
    assert placements[2].rooms == ("R1",)


def test_compute_allocation_metrics_totals(small_data):
    res = _allocate(small_data)
    m = metrics.compute_allocation_metrics(small_data, res, PandasResultAdapter())

    assert (m.total_students, m.seated, m.unseated) == (12, 12, 0)
    assert m.available_seats == 19
    assert m.empty_available_seats == 7
    assert m.bench_conflicts == 0
    assert m.conservation_ok


def test_bench_conflicts_flags_shared_benches():
    res = AllocationResult(
        assignment={
            "seat0:R1:0-0-0": Student("S1", "C1"),
            "seat1:R1:0-0-1": Student("S2", "C1"),
            "seat2:R1:0-1-0": Student("S1", "C2"),
        }
    )
    df = metrics.bench_conflicts(res, PandasResultAdapter())

    assert df.to_dict("records") == [
        {"class_id": "C1", "room_id": "R1", "bench": "0-0", "students": 2}
    ]
    assert metrics.bench_conflicts(AllocationResult(), PandasResultAdapter()).empty


def test_conservation_detects_mismatch(small_data):
    # drop one seated student without recording them as unseated
    res = _allocate(small_data)
    first = next(iter(res.assignment))
    del res.assignment[first]

    m = metrics.compute_allocation_metrics(small_data, res, PandasResultAdapter())
    assert not m.conservation_ok


def test_room_seat_grid_marks_classes_and_blocked_seats(small_data):
    res = _allocate(small_data)
    grid = metrics.room_seat_grid(
        small_data, res, PandasResultAdapter(), "R1", ["C1", "C2", "C10"]
    )

    assert grid.shape == (2, 6)
    assert grid[0, 0] == 0  # C1
    assert grid[0, 1] == metrics.UNAVAILABLE_CELL
    assert grid[0, 2] == 2  # C10
    assert grid[1, 5] == metrics.EMPTY_CELL
    assert np.count_nonzero(grid >= 0) == 10
