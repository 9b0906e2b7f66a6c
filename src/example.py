"""
Module with example code for running the seat allocator.

There are three ways to run the code:

1. Run the code with default options. This will generate
    synthetic rooms and classes from the config and allocate them.
2. Run the code with custom rooms and classes defined via code.
3. Run the code with a layout pre-defined in a JSON file.

Usage via cli:
    python3 -m src.example --option 1
"""

from __future__ import annotations

import argparse
from pathlib import Path

from seatplan import Config, InputData, layout_from_json, run_allocation
from seatplan.catalog import RoomCatalog
from seatplan.main import default_input_builder
from seatplan.reporting import Reporter
from seatplan.room import Room
from seatplan.roster import ClassGroup, ClassRoster

cfg = Config(
    N_ROOMS=3,
    N_CLASSES=4,
    MIN_ROWS=4,
    MAX_ROWS=5,
    MIN_COLS=3,
    MAX_COLS=4,
    BENCH_TYPES=[2, 3],
    MIN_CLASS_SIZE=15,
    MAX_CLASS_SIZE=25,
    UNAVAILABLE_SEAT_RATE=0.05,
    SEED=11,
)


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Run seat allocation examples.")
    parser.add_argument(
        "--option",
        type=int,
        default=3,
        choices=(1, 2, 3),
        help="Example scenario to run (default: 3).",
    )
    return parser.parse_args()


def run_option(option: int) -> None:
    print(f"Running example code with option {option}")

    # Run the code with default options. This will generate
    # synthetic rooms and classes from the config and allocate them.
    if option == 1:

        # The parameters below are defaults, with the exception of config,
        # they can be omitted i.e. the below is equivalent to:
        # run_allocation(cfg)
        run_allocation(
            config=cfg,
            validate_config=True,
            input_builder=default_input_builder,
            reporter=Reporter(cfg),
            enable_reporting=True,
        )

    # Run the code with custom rooms and classes defined via code.
    elif option == 2:

        catalog = RoomCatalog(
            [
                Room(room_id="R1", room_name="Hall A", rows=4, cols=3, bench_type=3),
                Room(room_id="R2", room_name="Hall B", rows=3, cols=3, bench_type=2),
                Room(room_id="R10", rows=2, cols=2, bench_type=2, available=False),
            ],
            unavailable_seats={"R1": ["0-0-1", "2-1-0"]},
        )
        roster = ClassRoster(
            [
                ClassGroup(class_id="C1", student_count=12),
                ClassGroup(class_id="C2", student_count=10),
                ClassGroup(class_id="C10", student_count=6),
            ]
        )
        run_allocation(cfg, data=InputData(catalog=catalog, roster=roster))

    # Run the code with a layout defined via JSON. Typical production use.
    elif option == 3:

        data = layout_from_json(Path("src/example_layout.json"))
        res = run_allocation(cfg, data=data)
        if res.unseated:
            print(f"Unseated: {res.unseated}")
    else:
        raise SystemExit(f"Unknown option {option}")


def main() -> None:
    args = parse_args()
    run_option(args.option)


if __name__ == "__main__":
    main()
