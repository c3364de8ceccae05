"""Completed Sudoku grid validator."""

from __future__ import annotations

from .checks import columns_ok, rows_ok, submatrices_ok, submatrix_ok
from .errors import (
    GridFormatError,
    GridShapeError,
    InvalidSolutionError,
    ValidationIssue,
    ValidationReport,
)
from .events import CollectingReporter, JsonlReporter, LoggingReporter
from .profiles import ProfileConfig, get_profile
from .validator import assert_valid, check, validate

__all__ = [
    "CollectingReporter",
    "GridFormatError",
    "GridShapeError",
    "InvalidSolutionError",
    "JsonlReporter",
    "LoggingReporter",
    "ProfileConfig",
    "ValidationIssue",
    "ValidationReport",
    "assert_valid",
    "check",
    "columns_ok",
    "get_profile",
    "rows_ok",
    "submatrices_ok",
    "submatrix_ok",
    "validate",
]
