from __future__ import annotations

from typing import Callable

from seatplan.cache import AllocationCache
from seatplan.config import Config, cfg
from seatplan.engine import allocate
from seatplan.input_data import InputData, build_input
from seatplan.output import produce_outputs
from seatplan.reporting import Reporter
from seatplan.result_types import AllocationResult

InputBuilder = Callable[[Config], InputData]


def default_input_builder(config: Config) -> InputData:
    """Build synthetic input data using the project's helper."""
    seed = config.SEED if config.SEED is not None else 42
    return build_input(config, seed=seed)


def run_allocation(
    config: Config | None = None,
    data: InputData | None = None,
    input_builder: InputBuilder | None = None,
    reporter: Reporter | None = None,
    validate_config: bool = True,
    enable_reporting: bool = True,
    export_outputs: bool = True,
    cache: AllocationCache | None = None,
) -> AllocationResult:
    """
    Build inputs, allocate seats, and optionally report on and export the result.

    Parameters
    ----------
    config:
        The configuration for the run. Defaults to `seatplan.config.cfg` when omitted.
    validate_config:
        Toggle to run `Config.validate()` before building inputs.
    data:
        Pre-built `InputData`. When omitted then `input_builder` (or the default synthetic
        builder) is used to construct data from the given config.
    input_builder:
        Optional callable that accepts a `Config` and returns `InputData`. Ignored when
        `data` is supplied.
    reporter:
        Custom reporter instance. When `enable_reporting` is True and no reporter is
        provided, the default `Reporter` is used. Set `enable_reporting=False` to skip
        pre/post allocation hooks entirely.
    enable_reporting:
        When False, skips reporter pre/post hooks even if a reporter is provided.
    export_outputs:
        When False, no CSV is written regardless of `Config.EXPORT_CSV`.
    cache:
        Optional `AllocationCache`; repeated runs over unchanged inputs reuse
        the memoized seating.

    Returns
    -------
    AllocationResult
        The seat assignment and the per-class unseated counts.
    """
    cfg_obj = config or cfg

    if validate_config:
        cfg_obj.validate()

    input_data = data
    if input_data is None:
        builder = input_builder or default_input_builder
        input_data = builder(cfg_obj)

    active_reporter = reporter if enable_reporting else None
    if active_reporter is None and enable_reporting:
        active_reporter = Reporter(cfg_obj)

    if active_reporter is not None:
        active_reporter.pre_allocate(input_data)

    allocate_fn = cache.allocate if cache is not None else allocate
    result = allocate_fn(input_data.room_seats, input_data.students_by_class)

    if active_reporter is not None:
        active_reporter.post_allocate(result, input_data)

    if export_outputs:
        produce_outputs(result, cfg_obj)

    return result


def main() -> AllocationResult:
    """CLI entry point: synthetic layout with the default config."""
    return run_allocation(
        config=cfg,
        validate_config=True,
        input_builder=default_input_builder,
        reporter=Reporter(cfg),
        enable_reporting=True,
    )


if __name__ == "__main__":
    main()
