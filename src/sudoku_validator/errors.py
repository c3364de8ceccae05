"""Shared error types for the grid validator."""

from __future__ import annotations


from dataclasses import dataclass, field
from typing import Dict, List, Optional

SEVERITY_ERROR = "ERROR"


@dataclass(frozen=True)
class ValidationIssue:
    """Single finding produced by a row, column or sub-block check."""

    code: str
    msg: str
    path: str
    severity: str = SEVERITY_ERROR


@dataclass(frozen=True)
class ValidationReport:
    """Aggregate result of one validation pass."""

    ok: bool
    stage: Optional[str]
    issues: List[ValidationIssue] = field(default_factory=list)
    # whole milliseconds per stage; an 81-cell pass usually rounds to 0
    timings_ms: Dict[str, int] = field(default_factory=dict)


class GridShapeError(ValueError):
    """Raised when a grid is not a 9x9 matrix of integers."""


class GridFormatError(ValueError):
    """Raised when a grid document does not match its schema."""


class InvalidSolutionError(Exception):
    """Raised by :func:`assert_valid` when the grid is not a valid solution."""

    def __init__(self, message: str, report: ValidationReport) -> None:
        super().__init__(message)
        self.report = report


def make_error(code: str, msg: str, path: str) -> ValidationIssue:
    """Construct an error-level :class:`ValidationIssue`."""

    return ValidationIssue(code=code, msg=msg, path=path, severity=SEVERITY_ERROR)


def cell_path(row: int, col: int) -> str:
    return f"$[{row}][{col}]"


__all__ = [
    "SEVERITY_ERROR",
    "GridFormatError",
    "GridShapeError",
    "InvalidSolutionError",
    "ValidationIssue",
    "ValidationReport",
    "cell_path",
    "make_error",
]
