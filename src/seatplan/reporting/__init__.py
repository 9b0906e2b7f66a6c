from __future__ import annotations

from .adapters import PandasResultAdapter, ResultAdapter
from .data_models import AllocationMetrics, ClassPlacement, RoomOccupancy
from .reporter import Reporter

__all__ = [
    "Reporter",
    "ResultAdapter",
    "PandasResultAdapter",
    "AllocationMetrics",
    "ClassPlacement",
    "RoomOccupancy",
]
