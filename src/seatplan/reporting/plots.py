from __future__ import annotations

import math
from pathlib import Path
from typing import Any

import matplotlib.pyplot as plt
from matplotlib.colors import BoundaryNorm, ListedColormap
from matplotlib.patches import Patch

from seatplan.input_data import InputData
from seatplan.ordering import order_class_ids

from .adapters import ResultAdapter
from .metrics import EMPTY_CELL, UNAVAILABLE_CELL, class_placement, room_seat_grid
from .text_report import get_active_report

CLASS_PALETTE = [
    "#1abc9c",
    "#3498db",
    "#9b59b6",
    "#e67e22",
    "#f1c40f",
    "#e74c3c",
    "#2ecc71",
    "#34495e",
    "#fd79a8",
    "#e84393",
    "#f368e0",
    "#00cec9",
]
UNAVAILABLE_COLOR = "#ef4444"
EMPTY_COLOR = "#f1f5f9"


def _save_and_show(fig: plt.Figure, filename: str, out_dir: Path | None = None) -> None:
    """Persist the plot under outputs/ and show it."""
    out_dir = Path(out_dir) if out_dir is not None else Path("outputs")
    out_dir.mkdir(parents=True, exist_ok=True)
    fig.savefig(out_dir / filename, dpi=fig.dpi, bbox_inches="tight")
    plt.show()


def class_colors(class_ids: list[str]) -> dict[str, str]:
    return {cid: CLASS_PALETTE[i % len(CLASS_PALETTE)] for i, cid in enumerate(class_ids)}


def show_room_seat_maps(
    cfg: Any,
    res: Any,
    data: InputData,
    adapter: ResultAdapter,
    enable_plot: bool = True,
) -> None:
    """Draw every room as a seat grid coloured by the class sitting there."""
    if not enable_plot:
        return
    rooms = [r for r in data.catalog.rooms if r.has_valid_geometry]
    if not rooms:
        return

    class_ids = order_class_ids(data.roster.class_ids)
    colors = class_colors(class_ids)
    # codes run UNAVAILABLE_CELL, EMPTY_CELL, 0..n-1
    cmap = ListedColormap(
        [UNAVAILABLE_COLOR, EMPTY_COLOR] + [colors[c] for c in class_ids]
    )
    bounds = [c - 0.5 for c in range(UNAVAILABLE_CELL, len(class_ids) + 1)]
    norm = BoundaryNorm(bounds, cmap.N)

    ncols = min(3, len(rooms))
    nrows = math.ceil(len(rooms) / ncols)
    fig, axes = plt.subplots(
        nrows, ncols, figsize=(4.0 * ncols, 3.2 * nrows), dpi=150, squeeze=False
    )
    for ax in axes.flat[len(rooms) :]:
        ax.axis("off")

    for ax, room in zip(axes.flat, rooms):
        grid = room_seat_grid(data, res, adapter, room.room_id, class_ids)
        ax.imshow(grid, cmap=cmap, norm=norm, aspect="auto", interpolation="none")
        # bench separators
        for c in range(1, room.cols):
            ax.axvline(c * room.bench_type - 0.5, color="white", linewidth=3)
        for r in range(1, room.rows):
            ax.axhline(r - 0.5, color="white", linewidth=1)
        state = "" if room.available else " (unavailable)"
        ax.set_title(f"{room.room_name}{state}", fontsize=9)
        ax.set_xticks([])
        ax.set_yticks(range(room.rows))
        ax.set_ylabel("Row", fontsize=8)

    legend_handles = [Patch(facecolor=colors[c], label=c) for c in class_ids]
    legend_handles.append(Patch(facecolor=EMPTY_COLOR, label="Empty seat"))
    legend_handles.append(Patch(facecolor=UNAVAILABLE_COLOR, label="Unavailable"))
    fig.legend(
        handles=legend_handles,
        loc="upper center",
        ncol=min(len(legend_handles), 6),
        frameon=False,
    )
    fig.tight_layout(rect=(0, 0, 1, 0.9))
    _save_and_show(fig, "room_seat_maps.png", getattr(cfg, "OUTPUT_DIR", None))
    report = get_active_report()
    if report is not None:
        report.add_figure(fig)


def show_class_placement(
    cfg: Any,
    res: Any,
    data: InputData,
    adapter: ResultAdapter,
    enable_plot: bool = True,
) -> None:
    """Stacked bars of seated vs unseated students per class."""
    if not enable_plot:
        return
    placements = class_placement(data, res, adapter)
    if not placements:
        return

    labels = [p.class_id for p in placements]
    seated = [p.seated for p in placements]
    unseated = [p.unseated for p in placements]
    colors = class_colors(labels)

    fig, ax = plt.subplots(figsize=(7.5, 4), dpi=150)
    ax.set_title("Seated vs unseated students by class", pad=20)
    ax.bar(labels, seated, color=[colors[c] for c in labels], label="Seated")
    ax.bar(
        labels,
        unseated,
        bottom=seated,
        color="#cbd5e1",
        hatch="//",
        edgecolor="white",
        label="Unseated",
    )
    ax.set_xlabel("Class")
    ax.set_ylabel("Students")
    ax.spines["top"].set_visible(False)
    ax.spines["right"].set_visible(False)
    ax.legend(frameon=False)
    fig.tight_layout()
    _save_and_show(fig, "class_placement.png", getattr(cfg, "OUTPUT_DIR", None))
    report = get_active_report()
    if report is not None:
        report.add_figure(fig)
