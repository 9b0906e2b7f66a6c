from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Mapping, Sequence

from seatplan.catalog import RoomCatalog
from seatplan.config import Config
from seatplan.generate.layout import LayoutGenConfig, create_layout
from seatplan.room import Room
from seatplan.roster import ClassGroup, ClassRoster, Student
from seatplan.seat import Seat

DEFAULT_LAYOUT_JSON = Path(__file__).resolve().parents[1] / "example_layout.json"


@dataclass
class InputData:
    catalog: RoomCatalog
    roster: ClassRoster

    @property
    def room_seats(self) -> dict[str, tuple[Seat, ...]]:
        return self.catalog.seat_snapshot()

    @property
    def students_by_class(self) -> dict[str, list[Student]]:
        return self.roster.students_by_class()

    def select(
        self,
        room_ids: Sequence[str] | None = None,
        class_ids: Sequence[str] | None = None,
    ) -> InputData:
        """Restrict the input to a subset of rooms and/or classes."""
        catalog = self.catalog.select(room_ids) if room_ids is not None else self.catalog
        roster = self.roster.select(class_ids) if class_ids is not None else self.roster
        return InputData(catalog=catalog, roster=roster)


def build_input(cfg: Config, seed: int | None = None) -> InputData:
    """
    Build a synthetic InputData object from a Config.

    Parameters:
    cfg (Config): the configuration to use
    seed (int, optional): overrides cfg.SEED when given

    Returns:
    InputData: the generated rooms and classes
    """
    gen_cfg = LayoutGenConfig.from_config(cfg, seed=seed)
    gen_cfg.validate()
    catalog, roster = create_layout(gen_cfg, student_id_prefix=cfg.STUDENT_ID_PREFIX)
    return InputData(catalog=catalog, roster=roster)


def _pick(raw: Mapping[str, Any], *names: str, default: Any = None) -> Any:
    for name in names:
        if name in raw:
            return raw[name]
    return default


def _to_int(value: Any, field: str) -> int:
    if isinstance(value, bool):
        raise TypeError(f"Field '{field}' must be an integer, not a boolean.")
    if isinstance(value, float) and not value.is_integer():
        raise TypeError(f"Field '{field}' must be a whole number (got {value!r}).")
    try:
        return int(value)
    except (TypeError, ValueError) as exc:
        raise ValueError(f"Field '{field}' must be an integer (got {value!r}).") from exc


def _to_bool(value: Any, field: str) -> bool:
    if not isinstance(value, bool):
        raise TypeError(f"Field '{field}' must be true or false (got {value!r}).")
    return value


def _entries(data: Mapping[str, Any], key: str) -> Sequence[Any]:
    entries = data.get(key, [])
    if isinstance(entries, (str, bytes, bytearray)) or not isinstance(
        entries, Sequence
    ):
        raise TypeError(f"'{key}' must be a list of objects.")
    return entries


def layout_from_json(
    path: str | Path | None = None, student_id_prefix: str = "S"
) -> InputData:
    """
    Load rooms and classes from a JSON file on disk.

    The file holds an object with `rooms` and `classes` arrays. Keys may be
    camelCase (`roomId`, `benchType`, `studentCount`, `unavailableSeats`) or
    snake_case. If `path` is omitted, `src/example_layout.json` is read.
    """
    file_path = Path(path) if path is not None else DEFAULT_LAYOUT_JSON
    file_path = file_path.expanduser()

    if file_path.suffix.lower() != ".json":
        raise ValueError("layout_from_json expects a path to a .json file.")
    if not file_path.exists():
        raise FileNotFoundError(f"Layout JSON file not found: {file_path}")

    try:
        data = json.loads(file_path.read_text())
    except json.JSONDecodeError as exc:
        raise ValueError(f"Invalid JSON in {file_path}") from exc

    if not isinstance(data, Mapping):
        raise TypeError("Layout JSON must be an object with 'rooms' and 'classes'.")

    rooms: list[Room] = []
    unavailable: dict[str, list[str]] = {}
    for raw in _entries(data, "rooms"):
        if not isinstance(raw, Mapping):
            raise TypeError("Each room entry must be an object/dict.")
        room_id = _pick(raw, "roomId", "room_id", "id")
        if room_id in (None, ""):
            raise ValueError("Each room needs a 'roomId'.")
        room = Room(
            room_id=str(room_id),
            room_name=str(_pick(raw, "roomName", "room_name", "name", default="")),
            rows=_to_int(_pick(raw, "rows", default=0), "rows"),
            cols=_to_int(_pick(raw, "cols", default=0), "cols"),
            bench_type=_to_int(
                _pick(raw, "benchType", "bench_type", default=0), "benchType"
            ),
            available=_to_bool(_pick(raw, "available", default=True), "available"),
        )
        rooms.append(room)
        seats = _pick(raw, "unavailableSeats", "unavailable_seats", default=[])
        if isinstance(seats, str) or not isinstance(seats, Sequence):
            raise TypeError("'unavailableSeats' must be a list of coordinates.")
        if seats:
            unavailable[room.room_id] = [str(s) for s in seats]

    classes: list[ClassGroup] = []
    for raw in _entries(data, "classes"):
        if not isinstance(raw, Mapping):
            raise TypeError("Each class entry must be an object/dict.")
        class_id = _pick(raw, "classId", "class_id", "id")
        if class_id in (None, ""):
            raise ValueError("Each class needs a 'classId'.")
        classes.append(
            ClassGroup(
                class_id=str(class_id),
                student_count=_to_int(
                    _pick(raw, "studentCount", "student_count", default=0),
                    "studentCount",
                ),
            )
        )

    return InputData(
        catalog=RoomCatalog(rooms, unavailable),
        roster=ClassRoster(classes, student_id_prefix=student_id_prefix),
    )
