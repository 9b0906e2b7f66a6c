from __future__ import annotations

from collections import Counter

import pytest

from seatplan.catalog import RoomCatalog
from seatplan.engine import aggregate, allocate
from seatplan.generate.layout import LayoutGenConfig, create_layout
from seatplan.inventory import build_room_seats
from seatplan.preference import ClassAssignmentState
from seatplan.room import Room
from seatplan.roster import ClassGroup, ClassRoster, Student
from seatplan.seat import Seat
from seatplan.seat_key import parse_seat_key


def _students(class_id: str, n: int) -> list[Student]:
    return [Student(student_id=f"S{i + 1}", class_id=class_id) for i in range(n)]


def _seats(room: Room, unavailable: tuple[str, ...] = ()) -> list[Seat]:
    return build_room_seats(room, unavailable)


def test_two_classes_on_one_wide_bench_take_slots_zero_and_two() -> None:
    room_seats = {"R": _seats(Room(room_id="R", rows=1, cols=1, bench_type=4))}
    students = {"C1": _students("C1", 2), "C2": _students("C2", 2)}

    res = allocate(room_seats, students)

    assert res.assignment == {
        "seat0:R:0-0-0": Student("S1", "C1"),
        "seat2:R:0-0-2": Student("S1", "C2"),
    }
    assert res.unseated == {"C1": 1, "C2": 1}


def test_single_class_gets_one_seat_per_bench() -> None:
    room_seats = {"R": _seats(Room(room_id="R", rows=1, cols=1, bench_type=2))}
    res = allocate(room_seats, {"C1": _students("C1", 2)})

    assert res.assignment == {"seat0:R:0-0-0": Student("S1", "C1")}
    assert res.unseated == {"C1": 1}


def test_single_class_moves_on_to_the_next_bench() -> None:
    room_seats = {"R": _seats(Room(room_id="R", rows=1, cols=2, bench_type=2))}
    res = allocate(room_seats, {"C1": _students("C1", 2)})

    assert res.assignment == {
        "seat0:R:0-0-0": Student("S1", "C1"),
        "seat2:R:0-1-0": Student("S2", "C1"),
    }
    assert res.unseated == {}


def test_class_whose_slot_is_missing_in_first_room_is_seated_in_next_room() -> None:
    room_seats = {
        "R1": _seats(Room(room_id="R1", rows=1, cols=1, bench_type=2), ("0-0-0",)),
        "R2": _seats(Room(room_id="R2", rows=1, cols=1, bench_type=2)),
    }
    res = allocate(room_seats, {"C1": _students("C1", 1)})

    assert res.assignment == {"seat0:R2:0-0-0": Student("S1", "C1")}
    assert res.unseated == {}


def test_preferred_slot_recomputed_on_room_change() -> None:
    room_seats = {
        "R1": _seats(Room(room_id="R1", rows=1, cols=1, bench_type=2)),
        "R2": _seats(Room(room_id="R2", rows=1, cols=1, bench_type=3)),
    }
    students = {
        "C1": _students("C1", 2),
        "C2": _students("C2", 2),
        "C3": _students("C3", 2),
    }

    res = allocate(room_seats, students)

    # C2 used slot 1 in R1 but re-resolves to slot 0 in R2 (C1 is exhausted
    # there), so C3 takes slot 1 and C2 finds no seat.
    assert res.assignment == {
        "seat0:R1:0-0-0": Student("S1", "C1"),
        "seat1:R1:0-0-1": Student("S1", "C2"),
        "seat0:R2:0-0-0": Student("S2", "C1"),
        "seat1:R2:0-0-1": Student("S1", "C3"),
    }
    assert res.unseated == {"C2": 1, "C3": 1}


def test_two_class_rule_repeats_on_every_wide_bench() -> None:
    room_seats = {"R": _seats(Room(room_id="R", rows=1, cols=2, bench_type=4))}
    students = {"C1": _students("C1", 3), "C2": _students("C2", 3)}

    res = allocate(room_seats, students)

    assert list(res.assignment) == [
        "seat0:R:0-0-0",
        "seat2:R:0-0-2",
        "seat4:R:0-1-0",
        "seat6:R:0-1-2",
    ]
    assert res.unseated == {"C1": 1, "C2": 1}


def test_class_priority_uses_digit_aware_order() -> None:
    room_seats = {"R": _seats(Room(room_id="R", rows=1, cols=1, bench_type=3))}
    students = {"C10": _students("C10", 1), "C2": _students("C2", 1)}

    res = allocate(room_seats, students)

    assert res.assignment["seat0:R:0-0-0"].class_id == "C2"
    assert res.assignment["seat2:R:0-0-2"].class_id == "C10"


def test_rooms_visited_by_embedded_number() -> None:
    bench = dict(rows=1, cols=1, bench_type=1)
    room_seats = {
        "R10": _seats(Room(room_id="R10", **bench)),
        "R2": _seats(Room(room_id="R2", **bench)),
    }
    res = allocate(room_seats, {"C1": _students("C1", 1)})

    assert list(res.assignment) == ["seat0:R2:0-0-0"]
    assert res.unseated == {}


def test_unavailable_room_seats_nobody() -> None:
    room = Room(room_id="R1", rows=2, cols=2, bench_type=2, available=False)
    res = allocate({"R1": _seats(room)}, {"C1": _students("C1", 3)})

    assert res.assignment == {}
    assert res.unseated == {"C1": 3}


@pytest.mark.parametrize(
    "room_seats, students",
    [
        ({}, {}),
        ({"R1": []}, {}),
        ({}, {"C1": _students("C1", 2)}),
        ({"R1": _seats(Room(room_id="R1", rows=1, cols=1, bench_type=2))}, {}),
        ({"R1": _seats(Room(room_id="R1", rows=0, cols=3, bench_type=2))}, {"C1": []}),
    ],
)
def test_degenerate_inputs_return_well_formed_output(room_seats, students) -> None:
    res = allocate(room_seats, students)

    assert res.assignment == {}
    assert res.unseated == {
        cid: len(members) for cid, members in students.items() if members
    }


def test_zero_student_class_is_never_selected_nor_reported() -> None:
    room_seats = {"R": _seats(Room(room_id="R", rows=1, cols=2, bench_type=2))}
    res = allocate(room_seats, {"C0": [], "C1": _students("C1", 1)})

    assert res.assignment == {"seat0:R:0-0-0": Student("S1", "C1")}
    assert "C0" not in res.unseated


def test_malformed_coordinates_never_match() -> None:
    room_seats = {
        "R": [
            Seat(seat_number=0, coordinate="a-b-c"),
            Seat(seat_number=1, coordinate="0-0"),
            Seat(seat_number=2, coordinate="0-1-x"),
        ]
    }
    res = allocate(room_seats, {"C1": _students("C1", 2)})

    assert res.assignment == {}
    assert res.unseated == {"C1": 2}


def test_seats_are_tagged_with_the_room_they_were_supplied_under() -> None:
    seats = [Seat(seat_number=0, coordinate="0-0-0", room_id="elsewhere")]
    res = allocate({"R7": seats}, {"C1": _students("C1", 1)})

    assert list(res.assignment) == ["seat0:R7:0-0-0"]


def test_students_are_consumed_in_roster_order() -> None:
    room_seats = {"R": _seats(Room(room_id="R", rows=3, cols=1, bench_type=1))}
    roster = [Student("zed", "C1"), Student("amy", "C1"), Student("bob", "C1")]

    res = allocate(room_seats, {"C1": roster})

    assert [s.student_id for s in res.assignment.values()] == ["zed", "amy", "bob"]


def _generated(seed: int) -> tuple[dict, dict]:
    catalog, roster = create_layout(
        LayoutGenConfig(
            n_rooms=4,
            n_classes=5,
            rows=(2, 5),
            cols=(2, 4),
            bench_types=(1, 2, 3, 4),
            class_size=(0, 25),
            unavailable_rate=0.1,
            seed=seed,
        )
    )
    return catalog.seat_snapshot(), roster.students_by_class()


@pytest.mark.parametrize("seed", [0, 1, 7, 42])
def test_allocation_properties_hold_on_generated_layouts(seed: int) -> None:
    room_seats, students = _generated(seed)
    res = allocate(room_seats, students)

    available = {s.key for seats in room_seats.values() for s in seats if s.is_available}
    assert set(res.assignment) <= available

    # conservation
    seated = Counter(s.class_id for s in res.assignment.values())
    for cid, members in students.items():
        assert seated[cid] + res.unseated.get(cid, 0) == len(members)
    assert all(n > 0 for n in res.unseated.values())

    # each student seated at most once, and only real roster members
    placed = list(res.assignment.values())
    assert len(placed) == len(set(placed))
    for student in placed:
        assert student in students[student.class_id]

    # bench exclusivity
    benches = Counter(
        (s.class_id, parse_seat_key(k).room_id, parse_seat_key(k).bench)
        for k, s in res.assignment.items()
    )
    assert all(n == 1 for n in benches.values())

    # students taken strictly in roster order
    for cid, members in students.items():
        mine = [s for s in placed if s.class_id == cid]
        assert mine == members[: len(mine)]


@pytest.mark.parametrize("seed", [3, 11])
def test_allocation_is_deterministic(seed: int) -> None:
    room_seats, students = _generated(seed)

    first = allocate(room_seats, students)
    second = allocate(room_seats, students)

    assert list(first.assignment.items()) == list(second.assignment.items())
    assert list(first.unseated.items()) == list(second.unseated.items())


def test_engine_output_keys_round_trip() -> None:
    catalog = RoomCatalog([Room(room_id="Hall-7", rows=2, cols=2, bench_type=3)])
    roster = ClassRoster([ClassGroup("A", 4), ClassGroup("B", 4)])
    snapshot = catalog.seat_snapshot()

    res = allocate(snapshot, roster.students_by_class())

    by_key = {s.key: s for s in snapshot["Hall-7"]}
    assert res.assignment
    for key in res.assignment:
        parts = parse_seat_key(key)
        seat = by_key[key]
        assert parts == (
            seat.seat_number,
            "Hall-7",
            seat.row,
            seat.col,
            seat.slot_index,
        )


def test_aggregate_keeps_only_positive_remainders() -> None:
    states = {
        "C1": ClassAssignmentState(remaining_count=0),
        "C2": ClassAssignmentState(remaining_count=3),
    }
    res = aggregate({}, states)

    assert res.unseated == {"C2": 3}
    assert res.assignment == {}
