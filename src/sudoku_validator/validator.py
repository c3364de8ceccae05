"""Public facade: validate a completed grid."""

from __future__ import annotations

import time
from typing import Any, Callable, Dict, List, Optional, Tuple

from . import checks
from .errors import (
    InvalidSolutionError,
    ValidationIssue,
    ValidationReport,
    cell_path,
    make_error,
)
from .events import CollectingReporter, Reporter, fanout
from .grid import Grid, ensure_shape
from .profiles import ProfileConfig, get_profile
from .settings import resolve_profile_name

STAGES = ("rows", "columns", "submatrices")


def _choose_profile(profile: str | ProfileConfig | None) -> ProfileConfig:
    if isinstance(profile, ProfileConfig):
        return profile
    return get_profile(resolve_profile_name(profile))


def _stage_plan(profile: ProfileConfig) -> List[Tuple[str, Callable[..., bool], Dict[str, Any]]]:
    return [
        ("rows", checks.rows_ok, {}),
        ("columns", checks.columns_ok, {"check_range": profile.range_in_columns}),
        ("submatrices", checks.submatrices_ok, {"check_range": profile.range_in_submatrices}),
    ]


def _issue_from_event(event: Dict[str, Any]) -> ValidationIssue:
    path = cell_path(event["row"], event["col"]) if "row" in event and "col" in event else "$"
    return make_error(event["event"], event["message"], path)


def validate(
    grid: Grid,
    *,
    reporter: Reporter | None = None,
    profile: str | ProfileConfig | None = None,
) -> bool:
    """Return ``True`` if *grid* is a complete, valid Sudoku solution.

    Rows are checked first, then columns, then the nine sub-blocks; the first
    failing pass ends the run.  Raises :class:`GridShapeError` for anything
    that is not a 9x9 matrix of integers.
    """

    ensure_shape(grid)
    profile_cfg = _choose_profile(profile)
    for _stage, check, options in _stage_plan(profile_cfg):
        if not check(grid, reporter=reporter, **options):
            return False
    return True


def check(
    grid: Grid,
    *,
    reporter: Reporter | None = None,
    profile: str | ProfileConfig | None = None,
) -> ValidationReport:
    """Like :func:`validate` but report the failing stage and issue."""

    ensure_shape(grid)
    profile_cfg = _choose_profile(profile)
    collector = CollectingReporter()
    sink: Reporter = fanout(collector, reporter) if reporter is not None else collector
    timings: Dict[str, int] = {stage: 0 for stage in STAGES}

    failed_stage: Optional[str] = None
    for stage, check_fn, options in _stage_plan(profile_cfg):
        start = time.perf_counter()
        passed = check_fn(grid, reporter=sink, **options)
        timings[stage] = round((time.perf_counter() - start) * 1000)
        if not passed:
            failed_stage = stage
            break

    issues = [_issue_from_event(event) for event in collector.failures()]
    return ValidationReport(ok=failed_stage is None, stage=failed_stage, issues=issues, timings_ms=timings)


def assert_valid(
    grid: Grid,
    *,
    reporter: Reporter | None = None,
    profile: str | ProfileConfig | None = None,
) -> None:
    report = check(grid, reporter=reporter, profile=profile)
    if report.ok:
        return
    detail = "; ".join(issue.msg for issue in report.issues)
    raise InvalidSolutionError(f"Grid failed the {report.stage} check: {detail}", report)


__all__ = ["STAGES", "assert_valid", "check", "validate"]
