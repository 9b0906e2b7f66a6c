from __future__ import annotations

import sys
from pathlib import Path
from typing import Any

from seatplan.input_data import InputData
from seatplan.precheck import precheck_capacity, print_precheck
from seatplan.reporting.adapters import PandasResultAdapter, ResultAdapter
from seatplan.reporting.plots import show_class_placement, show_room_seat_maps
from seatplan.reporting.text_report import (
    ReportDocument,
    render_text_report,
    set_active_report,
)
from seatplan.result_types import AllocationResult


class Reporter:
    """High-level orchestrator: runs pre-check confirmations and renders reports."""

    def __init__(
        self,
        cfg: Any,
        adapter: ResultAdapter | None = None,
        num_print_examples: int | None = None,
        enable_plots: bool | None = None,
    ) -> None:
        """
        cfg may expose:
          - NUM_PRINT_EXAMPLES / ENABLE_PLOTS (defaults for the arguments)
          - CONFIRM_ON_SHORTFALL
          - report_path
        """
        self.cfg = cfg
        self.adapter: ResultAdapter = adapter or PandasResultAdapter()
        self.num_print_examples = (
            num_print_examples
            if num_print_examples is not None
            else int(getattr(cfg, "NUM_PRINT_EXAMPLES", 6))
        )
        self.enable_plots = (
            enable_plots
            if enable_plots is not None
            else bool(getattr(cfg, "ENABLE_PLOTS", True))
        )

    def pre_allocate(self, data: InputData) -> None:
        """
        Print the capacity pre-check. When demand cannot be met and the config
        asks for confirmation, prompt before continuing.
        """
        summary = precheck_capacity(data)
        print_precheck(summary)
        if summary.ok_seats or not getattr(self.cfg, "CONFIRM_ON_SHORTFALL", False):
            return
        proceed = self._prompt_yes_no_default_yes(
            "Pre-check shows more students than seats. Continue anyway?"
        )
        if not proceed:
            raise SystemExit("Stopped by user after failed pre-check.")

    def render_text_report(self, res: object, data: object) -> None:
        """Public entry point for callers that want text reporting only."""
        render_text_report(
            self.cfg,
            self.adapter,
            res,
            data,  # type: ignore[arg-type]
            num_print_examples=self.num_print_examples,
        )

    def post_allocate(self, res: AllocationResult, data: InputData) -> None:
        """Render textual report (and optional plots) after allocating."""
        report_path = getattr(self.cfg, "report_path", Path("outputs/report.pdf"))
        report_doc = ReportDocument(Path(report_path))
        set_active_report(report_doc)
        try:
            self.render_text_report(res, data)
            if not self.enable_plots:
                return
            show_room_seat_maps(self.cfg, res, data, self.adapter)
            show_class_placement(self.cfg, res, data, self.adapter)
        finally:
            set_active_report(None)
            report_doc.write()

    # ---------- helpers ----------

    def _prompt_yes_no_default_yes(self, msg: str) -> bool:
        """Prompt '[Y/n]' and return True for yes (default)."""
        try:
            if not sys.stdin or not sys.stdin.isatty():
                print(f"{msg} [Y/n] (non-interactive -> default: Y)")
                return True

            while True:
                resp = input(f"{msg} [Y/n]: ").strip().lower()
                if resp in ("", "y", "yes"):
                    return True
                if resp in ("n", "no"):
                    return False
                print("Please type 'y' or 'n'.")
        except (EOFError, KeyboardInterrupt):
            print("\nAborted by user.")
            return False
