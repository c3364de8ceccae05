"""Row, column and sub-block checks.

Each check scans in a fixed order and stops at the first bad cell.  Only the
row pass rejects out-of-range values by default: every cell sits in some row,
so once rows pass the other two passes just look for repeats.  Pass
``check_range=True`` to range check columns or sub-blocks called on their own.
"""

from __future__ import annotations

from typing import Set

from .events import Reporter, emit
from .grid import BLOCK, BLOCK_STARTS, MAX_DIGIT, MIN_DIGIT, SIZE, Grid

__all__ = ["columns_ok", "rows_ok", "submatrices_ok", "submatrix_ok"]


def _in_range(value: int) -> bool:
    return MIN_DIGIT <= value <= MAX_DIGIT


def rows_ok(grid: Grid, *, reporter: Reporter | None = None) -> bool:
    """Return ``True`` when every row holds distinct values in 1..9."""

    for row in range(SIZE):
        seen: Set[int] = set()
        for col in range(SIZE):
            value = grid[row][col]
            if not _in_range(value):
                emit(
                    reporter,
                    "row.out_of_range",
                    f"Row {row} has an invalid value: {value}",
                    row=row,
                    col=col,
                    value=value,
                )
                return False
            if value in seen:
                emit(
                    reporter,
                    "row.repeat",
                    f"Row {row} has a repeat value: {value}",
                    row=row,
                    col=col,
                    value=value,
                )
                return False
            seen.add(value)
        emit(reporter, "row.ok", f"Row {row} is OK.", row=row)
    return True


def columns_ok(grid: Grid, *, reporter: Reporter | None = None, check_range: bool = False) -> bool:
    """Return ``True`` when no column repeats a value."""

    for col in range(SIZE):
        seen: Set[int] = set()
        for row in range(SIZE):
            value = grid[row][col]
            if check_range and not _in_range(value):
                emit(
                    reporter,
                    "column.out_of_range",
                    f"Col {col} has an invalid value: {value}",
                    row=row,
                    col=col,
                    value=value,
                )
                return False
            if value in seen:
                emit(
                    reporter,
                    "column.repeat",
                    f"Col {col} has a repeat value: {value}",
                    row=row,
                    col=col,
                    value=value,
                )
                return False
            seen.add(value)
        emit(reporter, "column.ok", f"Col {col} is OK.", col=col)
    return True


def submatrix_ok(
    grid: Grid,
    start_row: int,
    stop_row: int,
    start_col: int,
    stop_col: int,
    *,
    reporter: Reporter | None = None,
    check_range: bool = False,
) -> bool:
    """Check the region ``[start_row..stop_row] x [start_col..stop_col]``.

    Bounds are inclusive and always span a 3x3 block.
    """

    if stop_row - start_row != BLOCK - 1 or stop_col - start_col != BLOCK - 1:
        raise ValueError(
            f"sub-block bounds must span {BLOCK}x{BLOCK}: "
            f"rows {start_row}..{stop_row}, cols {start_col}..{stop_col}"
        )

    label = f"Submatrix with starting row {start_row} and starting column {start_col}"
    seen: Set[int] = set()
    for row in range(start_row, stop_row + 1):
        for col in range(start_col, stop_col + 1):
            value = grid[row][col]
            if check_range and not _in_range(value):
                emit(
                    reporter,
                    "submatrix.out_of_range",
                    f"{label} has an invalid value: {value}",
                    start_row=start_row,
                    start_col=start_col,
                    row=row,
                    col=col,
                    value=value,
                )
                return False
            if value in seen:
                emit(
                    reporter,
                    "submatrix.repeat",
                    f"{label} has a repeat value: {value}",
                    start_row=start_row,
                    start_col=start_col,
                    row=row,
                    col=col,
                    value=value,
                )
                return False
            seen.add(value)
    emit(reporter, "submatrix.ok", f"{label} is OK.", start_row=start_row, start_col=start_col)
    return True


def submatrices_ok(grid: Grid, *, reporter: Reporter | None = None, check_range: bool = False) -> bool:
    """Check the nine 3x3 blocks in row-major block order."""

    for start_row in BLOCK_STARTS:
        for start_col in BLOCK_STARTS:
            if not submatrix_ok(
                grid,
                start_row,
                start_row + BLOCK - 1,
                start_col,
                start_col + BLOCK - 1,
                reporter=reporter,
                check_range=check_range,
            ):
                return False
    return True
