from .cache import AllocationCache
from .config import Config, cfg
from .engine import allocate
from .input_data import InputData, build_input, layout_from_json
from .main import run_allocation
from .result_types import AllocationResult

__all__ = [
    "Config",
    "cfg",
    "allocate",
    "AllocationCache",
    "AllocationResult",
    "InputData",
    "build_input",
    "layout_from_json",
    "run_allocation",
]
