from __future__ import annotations

from typing import Any, Protocol

import pandas as pd

from seatplan.extract import assignment_frame, unseated_frame
from seatplan.result_types import AllocationResult
from seatplan.roster import Student


class ResultAdapter(Protocol):
    """Minimal interface the Reporter needs to work with any allocation result."""

    def assignment(self, res: Any) -> dict[str, Student]: ...
    def unseated(self, res: Any) -> dict[str, int]: ...

    def df_assignment(self, res: Any) -> pd.DataFrame: ...
    def df_unseated(self, res: Any) -> pd.DataFrame: ...


class PandasResultAdapter:
    """Default adapter for the shipped AllocationResult dataclass."""

    def assignment(self, res: Any) -> dict[str, Student]:
        value = getattr(res, "assignment", None)
        return dict(value) if isinstance(value, dict) else {}

    def unseated(self, res: Any) -> dict[str, int]:
        value = getattr(res, "unseated", None)
        if not isinstance(value, dict):
            return {}
        return {str(k): int(v) for k, v in value.items() if int(v) > 0}

    def df_assignment(self, res: Any) -> pd.DataFrame:
        return assignment_frame(
            AllocationResult(assignment=self.assignment(res), unseated={})
        )

    def df_unseated(self, res: Any) -> pd.DataFrame:
        return unseated_frame(
            AllocationResult(assignment={}, unseated=self.unseated(res))
        )
