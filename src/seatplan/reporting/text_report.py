from __future__ import annotations

from pathlib import Path
from typing import Any, Optional

import matplotlib.pyplot as plt
import pandas as pd
from matplotlib.backends.backend_pdf import PdfPages

from seatplan.input_data import InputData

from .adapters import ResultAdapter
from .metrics import (
    bench_conflicts,
    class_placement,
    compute_allocation_metrics,
    room_occupancy,
)


class ReportDocument:
    def __init__(self, path: Path) -> None:
        self.path = path
        self.lines: list[str] = []
        self.figures: list[plt.Figure] = []

    def add_text(self, text: str) -> None:
        self.lines.append(text)

    def add_figure(self, fig: plt.Figure) -> None:
        self.figures.append(fig)

    def write(self) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        with PdfPages(self.path) as pdf:
            if self.lines:
                fig, ax = plt.subplots(figsize=(8.27, 11.69))
                ax.axis("off")
                text = "\n".join(self.lines)
                ax.text(
                    0.01,
                    0.99,
                    text,
                    ha="left",
                    va="top",
                    fontsize=8,
                    family="monospace",
                )
                pdf.savefig(fig, bbox_inches="tight")
                plt.close(fig)
            elif not self.figures:
                fig, ax = plt.subplots(figsize=(8.27, 11.69))
                ax.axis("off")
                ax.text(
                    0.5,
                    0.5,
                    "Report contains no data.",
                    ha="center",
                    va="center",
                    fontsize=12,
                )
                pdf.savefig(fig, bbox_inches="tight")
                plt.close(fig)
            for fig in self.figures:
                pdf.savefig(fig, bbox_inches="tight")
                plt.close(fig)


_ACTIVE_REPORT: Optional[ReportDocument] = None


def set_active_report(doc: Optional[ReportDocument]) -> None:
    global _ACTIVE_REPORT
    _ACTIVE_REPORT = doc


def get_active_report() -> Optional[ReportDocument]:
    return _ACTIVE_REPORT


def _log_print(*args, **kwargs) -> None:
    from io import StringIO

    buf = StringIO()
    kwargs_copy = kwargs.copy()
    kwargs_copy["file"] = buf
    print(*args, **kwargs_copy)
    print(*args, **kwargs)
    if _ACTIVE_REPORT is not None:
        _ACTIVE_REPORT.add_text(buf.getvalue().rstrip("\n"))


def _fmt_pct(x: float | None, nd: int = 1) -> str:
    if x is None or pd.isna(x):
        return "nan"
    return f"{100 * float(x):.{nd}f}%"


def _print_class_table(data: InputData, res: Any, adapter: ResultAdapter) -> None:
    placements = class_placement(data, res, adapter)
    if not placements:
        _log_print("\nClasses: (none)")
        return
    _log_print("\nPer-class placement:")
    _log_print(f"  {'class':<10} {'students':>8} {'seated':>7} {'unseated':>9}  rooms")
    for p in placements:
        rooms = ", ".join(p.rooms) if p.rooms else "-"
        _log_print(
            f"  {p.class_id:<10} {p.total_students:>8} {p.seated:>7} "
            f"{p.unseated:>9}  {rooms}"
        )


def _print_room_table(data: InputData, res: Any, adapter: ResultAdapter) -> None:
    rooms = room_occupancy(data, res, adapter)
    if not rooms:
        _log_print("\nRooms: (none)")
        return
    _log_print("\nRoom occupancy:")
    for r in rooms:
        bar = "█" * int(round(20 * r.utilisation))
        classes = ", ".join(r.classes) if r.classes else "-"
        _log_print(
            f"  {r.room_id:<8} {r.assigned_seats:>4}/{r.available_seats:<4} "
            f"{_fmt_pct(r.utilisation):>7}  {bar:<20}  [{classes}]"
        )


def render_text_report(
    cfg: Any,
    adapter: ResultAdapter,
    res: Any,
    data: InputData,
    *,
    num_print_examples: int = 6,
) -> None:
    m = compute_allocation_metrics(data, res, adapter)

    _log_print(
        f"Allocation: {m.seated}/{m.total_students} students seated, "
        f"{m.unseated} unseated"
    )
    _log_print(
        f"Seat utilisation: {_fmt_pct(m.seat_utilisation)} "
        f"({m.empty_available_seats} available seats left empty)"
    )
    if not m.conservation_ok:
        _log_print("⚠️ Seated + unseated does not match the roster for some classes.")
    if m.bench_conflicts:
        _log_print(f"⚠️ {m.bench_conflicts} bench(es) hold two students of one class:")
        _log_print(bench_conflicts(res, adapter).to_string(index=False))

    _print_class_table(data, res, adapter)
    _print_room_table(data, res, adapter)

    df = adapter.df_assignment(res)
    if not df.empty and num_print_examples > 0:
        _log_print(f"\nSample assignments (first {num_print_examples}):")
        cols = ["seat_key", "student_id", "class_id"]
        _log_print(df[cols].head(num_print_examples).to_string(index=False))

    unseated = adapter.unseated(res)
    if unseated:
        _log_print("\nUnseated students by class:")
        for cid, n in unseated.items():
            _log_print(f"  {cid}: {n}")
    else:
        _log_print("\nAll students seated.")
