from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional


@dataclass
class Config:

    ### SYNTHETIC LAYOUT ###

    # Rooms
    N_ROOMS: int = 3
    MIN_ROWS: int = 3
    MAX_ROWS: int = 6
    MIN_COLS: int = 2
    MAX_COLS: int = 4
    BENCH_TYPES: list[int] = field(default_factory=lambda: [2, 3, 4])

    # Fraction of seats toggled unavailable at random
    UNAVAILABLE_SEAT_RATE: float = 0.05

    # Classes
    N_CLASSES: int = 3
    MIN_CLASS_SIZE: int = 10
    MAX_CLASS_SIZE: int = 30

    STUDENT_ID_PREFIX: str = "S"

    ### OUTPUTS ###

    OUTPUT_DIR: Path = Path("outputs")
    CSV_FILENAME: str = "seat_assignments.csv"
    REPORT_FILENAME: str = "report.pdf"
    EXPORT_CSV: bool = True

    # Reporting
    ENABLE_PLOTS: bool = True
    NUM_PRINT_EXAMPLES: int = 6

    # Ask before allocating when demand exceeds available seats
    CONFIRM_ON_SHORTFALL: bool = True

    # RANDOM SEED
    SEED: Optional[int] = None

    def validate(self):
        """
        Validate the Config object has sensible values before allocating.
        """
        if self.N_ROOMS < 0 or self.N_CLASSES < 0:
            raise ValueError("N_ROOMS and N_CLASSES must be non-negative.")
        if not (0 < self.MIN_ROWS <= self.MAX_ROWS):
            raise ValueError("Require 0 < MIN_ROWS <= MAX_ROWS.")
        if not (0 < self.MIN_COLS <= self.MAX_COLS):
            raise ValueError("Require 0 < MIN_COLS <= MAX_COLS.")
        if not self.BENCH_TYPES or any(int(b) <= 0 for b in self.BENCH_TYPES):
            raise ValueError("BENCH_TYPES must list positive seats-per-bench values.")
        if not (0 <= self.MIN_CLASS_SIZE <= self.MAX_CLASS_SIZE):
            raise ValueError("Require 0 <= MIN_CLASS_SIZE <= MAX_CLASS_SIZE.")
        if not (0.0 <= self.UNAVAILABLE_SEAT_RATE < 1.0):
            raise ValueError("UNAVAILABLE_SEAT_RATE must be within [0, 1).")
        if not self.STUDENT_ID_PREFIX:
            raise ValueError("STUDENT_ID_PREFIX must be a non-empty string.")
        if self.NUM_PRINT_EXAMPLES < 0:
            raise ValueError("NUM_PRINT_EXAMPLES must be non-negative.")
        for attr in ("CSV_FILENAME", "REPORT_FILENAME"):
            if not str(getattr(self, attr)).strip():
                raise ValueError(f"{attr} must be a non-empty file name.")

    @property
    def csv_path(self) -> Path:
        return Path(self.OUTPUT_DIR) / self.CSV_FILENAME

    @property
    def report_path(self) -> Path:
        return Path(self.OUTPUT_DIR) / self.REPORT_FILENAME


cfg = Config(
    N_ROOMS=4,
    N_CLASSES=3,
    MIN_ROWS=4,
    MAX_ROWS=6,
    MIN_COLS=3,
    MAX_COLS=4,
    BENCH_TYPES=[2, 3],
    UNAVAILABLE_SEAT_RATE=0.05,
    MIN_CLASS_SIZE=20,
    MAX_CLASS_SIZE=40,
    SEED=3,
)
