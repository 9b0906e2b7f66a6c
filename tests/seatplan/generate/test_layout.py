from __future__ import annotations

import pytest

from seatplan.catalog import RoomCatalog
from seatplan.config import Config
from seatplan.generate.layout import (
    LayoutGenConfig,
    create_classes,
    create_layout,
    create_rooms,
    disable_random_seats,
    rooms_to_dataframe,
)
from seatplan.room import Room


def test_create_rooms_respects_ranges():
    cfg = LayoutGenConfig(n_rooms=5, rows=(2, 3), cols=(1, 2), bench_types=(2, 4))
    rooms = create_rooms(cfg)

    assert [r.room_id for r in rooms] == ["R101", "R102", "R103", "R104", "R105"]
    assert rooms[0].room_name == "Room 101"
    for r in rooms:
        assert 2 <= r.rows <= 3
        assert 1 <= r.cols <= 2
        assert r.bench_type in (2, 4)
        assert r.available


def test_create_classes_respects_size_range():
    classes = create_classes(LayoutGenConfig(n_classes=4, class_size=(5, 6)))
    assert [c.class_id for c in classes] == ["C1", "C2", "C3", "C4"]
    assert all(5 <= c.student_count <= 6 for c in classes)


def test_generation_is_seeded():
    cfg = LayoutGenConfig(seed=11)
    assert [repr(r) for r in create_rooms(cfg)] == [repr(r) for r in create_rooms(cfg)]
    assert create_classes(cfg) == create_classes(cfg)


def test_disable_random_seats_switches_off_everything_at_rate_one():
    catalog = RoomCatalog(
        [
            Room(room_id="A", rows=1, cols=2, bench_type=2),
            Room(room_id="BAD", rows=0, cols=2, bench_type=2),
        ]
    )
    assert disable_random_seats(catalog, rate=1.0, seed=0) == 4
    assert not any(s.is_available for s in catalog.seat_snapshot()["A"])
    # already switched off seats are left alone
    assert disable_random_seats(catalog, rate=1.0, seed=0) == 0
    assert disable_random_seats(catalog, rate=0.0, seed=0) == 0

    with pytest.raises(ValueError):
        disable_random_seats(catalog, rate=1.5)


def test_create_layout_without_unavailable_seats():
    catalog, roster = create_layout(
        LayoutGenConfig(n_rooms=2, n_classes=3, unavailable_rate=0.0),
        student_id_prefix="P",
    )
    assert len(catalog) == 2
    assert all(catalog.unavailable_seats(rid) == set() for rid in catalog.room_ids)
    assert roster.student_id_prefix == "P"
    assert len(roster) == 3


def test_rooms_to_dataframe():
    catalog = RoomCatalog(
        [Room(room_id="A", rows=2, cols=2, bench_type=3)],
        unavailable_seats={"A": ["0-0-0", "1-1-2"]},
    )
    df = rooms_to_dataframe(catalog)
    assert df.iloc[0]["capacity"] == 12
    assert df.iloc[0]["disabled_seats"] == 2


@pytest.mark.parametrize(
    "kwargs",
    [
        {"n_rooms": -1},
        {"rows": (3, 2)},
        {"cols": (0, 2)},
        {"class_size": (-1, 3)},
        {"bench_types": ()},
        {"bench_types": (2, 0)},
        {"unavailable_rate": 1.0},
    ],
)
def test_layout_config_validation(kwargs):
    with pytest.raises(ValueError):
        LayoutGenConfig(**kwargs).validate()


def test_from_config_copies_fields_and_seed_override():
    cfg = Config(N_ROOMS=2, MIN_ROWS=1, MAX_ROWS=2, BENCH_TYPES=[3], SEED=9)
    gen = LayoutGenConfig.from_config(cfg)
    assert gen.n_rooms == 2
    assert gen.rows == (1, 2)
    assert gen.bench_types == (3,)
    assert gen.seed == 9
    assert LayoutGenConfig.from_config(cfg, seed=1).seed == 1
