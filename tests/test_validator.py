from __future__ import annotations

import pytest

from sudoku_validator import (
    GridShapeError,
    InvalidSolutionError,
    assert_valid,
    check,
    columns_ok,
    rows_ok,
    validate,
)
from sudoku_validator.events import CollectingReporter
from sudoku_validator.grid import grid_copy
from sudoku_validator.samples import ALMOST, SHIFTED, SOLVED


def test_shifted_grid_fails_only_at_submatrices() -> None:
    reporter = CollectingReporter()
    assert rows_ok(SHIFTED, reporter=CollectingReporter()) is True
    assert columns_ok(SHIFTED, reporter=CollectingReporter()) is True
    assert validate(SHIFTED, reporter=reporter) is False
    assert reporter.failures()[0]["event"] == "submatrix.repeat"


def test_row_duplicate_names_row_and_value() -> None:
    reporter = CollectingReporter()
    assert validate(ALMOST, reporter=reporter) is False
    assert reporter.failures()[0]["message"] == "Row 6 has a repeat value: 3"
    # later passes never ran
    assert not any(name.startswith(("column.", "submatrix.")) for name in reporter.names())


def test_solved_grid_is_valid() -> None:
    reporter = CollectingReporter()
    assert validate(SOLVED, reporter=reporter) is True
    assert reporter.failures() == []
    assert len(reporter.events) == 27


def test_zero_cell_fails_rows() -> None:
    grid = grid_copy(SOLVED)
    grid[5][7] = 0
    reporter = CollectingReporter()
    assert rows_ok(grid, reporter=CollectingReporter()) is False
    assert validate(grid, reporter=reporter) is False
    assert reporter.failures()[0]["message"] == "Row 5 has an invalid value: 0"


def test_fifteen_cell_fails_rows() -> None:
    grid = grid_copy(SOLVED)
    grid[0][0] = 15
    assert rows_ok(grid, reporter=CollectingReporter()) is False
    assert validate(grid, reporter=CollectingReporter()) is False


def test_column_stage_failure_skips_submatrices() -> None:
    grid = grid_copy(SOLVED)
    grid[0][0], grid[0][1] = grid[0][1], grid[0][0]
    reporter = CollectingReporter()
    assert validate(grid, reporter=reporter) is False
    assert "submatrix.ok" not in reporter.names()
    assert reporter.names().count("row.ok") == 9


def test_validate_is_repeatable() -> None:
    results = {validate(SHIFTED, reporter=CollectingReporter()) for _ in range(5)}
    assert results == {False}
    results = {validate(SOLVED, reporter=CollectingReporter()) for _ in range(5)}
    assert results == {True}


def test_validate_accepts_tuples() -> None:
    frozen = tuple(tuple(row) for row in SOLVED)
    assert validate(frozen, reporter=CollectingReporter()) is True


@pytest.mark.parametrize(
    "grid",
    [
        SOLVED[:8],
        [row[:8] for row in SOLVED],
        [row[:] for row in SOLVED[:8]] + [[1, 2, 3, 4, 5, 6, 7, 8, "9"]],
        [row[:] for row in SOLVED[:8]] + [[1, 2, 3, 4, 5, 6, 7, 8, True]],
        "827154396" * 9,
        None,
    ],
)
def test_malformed_shape_raises(grid) -> None:
    with pytest.raises(GridShapeError):
        validate(grid)


def test_check_reports_stage_and_issue() -> None:
    report = check(ALMOST, reporter=CollectingReporter())
    assert report.ok is False
    assert report.stage == "rows"
    assert len(report.issues) == 1
    issue = report.issues[0]
    assert issue.code == "row.repeat"
    assert issue.path == "$[6][4]"
    assert issue.severity == "ERROR"
    assert set(report.timings_ms) == {"rows", "columns", "submatrices"}
    assert all(isinstance(value, int) and value >= 0 for value in report.timings_ms.values())


def test_check_submatrix_stage() -> None:
    report = check(SHIFTED)
    assert report.stage == "submatrices"
    assert report.issues[0].code == "submatrix.repeat"
    assert report.issues[0].path == "$[1][0]"


def test_check_ok_report() -> None:
    report = check(SOLVED)
    assert report.ok is True
    assert report.stage is None
    assert report.issues == []


def test_check_forwards_events_to_reporter() -> None:
    reporter = CollectingReporter()
    check(SHIFTED, reporter=reporter)
    assert reporter.names()[-1] == "submatrix.repeat"


def test_assert_valid() -> None:
    assert_valid(SOLVED, reporter=CollectingReporter())
    with pytest.raises(InvalidSolutionError) as excinfo:
        assert_valid(SHIFTED, reporter=CollectingReporter())
    assert excinfo.value.report.stage == "submatrices"
    assert "submatrices" in str(excinfo.value)


def test_classic_profile_trusts_rows_for_range() -> None:
    grid = grid_copy(SOLVED)
    grid[3][3] = 0
    assert columns_ok(grid, reporter=CollectingReporter()) is True
    assert validate(grid, reporter=CollectingReporter(), profile="classic") is False


def test_profile_is_read_from_environment(monkeypatch) -> None:
    monkeypatch.setenv("SUDOKU_VALIDATION_PROFILE", "bogus")
    with pytest.raises(ValueError):
        validate(SOLVED, reporter=CollectingReporter())

    monkeypatch.setenv("SUDOKU_VALIDATION_PROFILE", "strict")
    assert validate(SOLVED, reporter=CollectingReporter()) is True
    assert check(SHIFTED).stage == "submatrices"


def test_unknown_profile_raises() -> None:
    with pytest.raises(ValueError):
        validate(SOLVED, profile="lenient")
