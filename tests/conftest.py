# tests/conftest.py
from __future__ import annotations

import os
import random
from pathlib import Path

import matplotlib
import numpy as np
import pytest

matplotlib.use("Agg", force=True)

from seatplan.catalog import RoomCatalog  # noqa: E402
from seatplan.input_data import InputData  # noqa: E402
from seatplan.room import Room  # noqa: E402
from seatplan.roster import ClassGroup, ClassRoster  # noqa: E402


# -----------------------------
# Global, deterministic seeding
# -----------------------------
@pytest.fixture(autouse=True, scope="session")
def _seed_everything() -> None:
    """
    Make tests deterministic across runs. If you need a different seed in a test,
    override locally.
    """
    seed = int(os.environ.get("PYTEST_SEED", "1234"))
    os.environ["PYTHONHASHSEED"] = str(seed)
    random.seed(seed)
    np.random.seed(seed)


# -----------------------------
# Path helpers
# -----------------------------
@pytest.fixture(scope="session")
def project_root() -> Path:
    """Repository root (where pyproject.toml lives)."""
    return Path(__file__).resolve().parents[1]


# -----------------------------
# Small layouts
# -----------------------------
@pytest.fixture
def small_data() -> InputData:
    """Two rooms, three classes; one seat switched off in R1."""
    catalog = RoomCatalog(
        [
            Room(room_id="R1", rows=2, cols=2, bench_type=3),
            Room(room_id="R2", rows=2, cols=2, bench_type=2),
        ],
        unavailable_seats={"R1": ["0-0-1"]},
    )
    roster = ClassRoster(
        [
            ClassGroup(class_id="C1", student_count=5),
            ClassGroup(class_id="C2", student_count=4),
            ClassGroup(class_id="C10", student_count=3),
        ]
    )
    return InputData(catalog=catalog, roster=roster)
