"""Grid constants, shape guard and codecs."""

from __future__ import annotations

import json
from collections import abc
from pathlib import Path
from typing import Any, Dict, Iterable, List, Sequence

import jsonschema
import jsonschema.validators

from .errors import GridFormatError, GridShapeError

SIZE = 9
BLOCK = 3
MIN_DIGIT = 1
MAX_DIGIT = 9
BLOCK_STARTS = (0, 3, 6)

Grid = Sequence[Sequence[int]]

GRID_DOCUMENT_SCHEMA: Dict[str, Any] = {
    "$schema": "https://json-schema.org/draft/2020-12/schema",
    "type": "object",
    "required": ["grids"],
    "properties": {
        "grids": {
            "type": "array",
            "items": {
                "type": "array",
                "minItems": SIZE,
                "maxItems": SIZE,
                "items": {
                    "type": "array",
                    "minItems": SIZE,
                    "maxItems": SIZE,
                    "items": {"type": "integer"},
                },
            },
        }
    },
}


def _is_strict_integer(_checker: Any, instance: Any) -> bool:
    return isinstance(instance, int) and not isinstance(instance, bool)


# JSON Schema counts 1.0 as an integer; grid cells must be real ints.
_GridDocumentValidator = jsonschema.validators.extend(
    jsonschema.Draft202012Validator,
    type_checker=jsonschema.Draft202012Validator.TYPE_CHECKER.redefine("integer", _is_strict_integer),
)


def ensure_shape(grid: Any) -> None:
    """Raise :class:`GridShapeError` unless *grid* is a 9x9 matrix of ints."""

    if isinstance(grid, (str, bytes)) or not isinstance(grid, abc.Sequence):
        raise GridShapeError("grid must be a sequence of rows")
    if len(grid) != SIZE:
        raise GridShapeError(f"grid has {len(grid)} rows, expected {SIZE}")
    for row_idx, row in enumerate(grid):
        if isinstance(row, (str, bytes)) or not isinstance(row, abc.Sequence):
            raise GridShapeError(f"row {row_idx} is not a sequence")
        if len(row) != SIZE:
            raise GridShapeError(f"row {row_idx} has {len(row)} cells, expected {SIZE}")
        for col_idx, value in enumerate(row):
            # bool is an int subclass but never a digit
            if isinstance(value, bool) or not isinstance(value, int):
                raise GridShapeError(f"cell ({row_idx}, {col_idx}) is not an integer: {value!r}")


def grid_copy(grid: Grid) -> List[List[int]]:
    return [list(row) for row in grid]


def to_string(grid: Grid) -> str:
    return "".join(str(grid[r][c]) for r in range(SIZE) for c in range(SIZE))


def from_string(text: str) -> List[List[int]]:
    """Parse 81 digits in row-major order; whitespace is ignored."""

    cleaned = "".join(text.split())
    if len(cleaned) != SIZE * SIZE:
        raise GridShapeError(f"expected {SIZE * SIZE} digits, got {len(cleaned)}")
    if not cleaned.isdigit():
        raise GridShapeError("grid text must contain digits only")
    return [[int(cleaned[r * SIZE + c]) for c in range(SIZE)] for r in range(SIZE)]


def format_grid(grid: Grid) -> str:
    lines = []
    for r in range(SIZE):
        if r % BLOCK == 0:
            lines.append("+-------+-------+-------+")
        parts = []
        for c in range(SIZE):
            if c % BLOCK == 0:
                parts.append("|")
            parts.append(str(grid[r][c]))
        parts.append("|")
        lines.append(" ".join(parts))
    lines.append("+-------+-------+-------+")
    return "\n".join(lines)


def _iter_text_grids(text: str) -> Iterable[List[List[int]]]:
    for line in text.splitlines():
        value = line.strip()
        if not value or value.startswith("#"):
            continue
        yield from_string(value)


def _schema_path(exc: jsonschema.ValidationError) -> str:
    components: List[str] = ["$"]
    for part in exc.absolute_path:
        if isinstance(part, int):
            components.append(f"[{part}]")
        else:
            components.append(f".{part}")
    return "".join(components)


def load_grids(path: str | Path) -> List[List[List[int]]]:
    """Load grids from a ``.json`` document or a text file of 81-digit lines."""

    source = Path(path)
    text = source.read_text(encoding="utf-8")
    if source.suffix.lower() != ".json":
        return list(_iter_text_grids(text))

    try:
        document = json.loads(text)
    except json.JSONDecodeError as exc:
        raise GridFormatError(f"{source.name}: not valid JSON: {exc}") from exc
    try:
        _GridDocumentValidator(GRID_DOCUMENT_SCHEMA).validate(document)
    except jsonschema.ValidationError as exc:
        raise GridFormatError(f"{source.name}: {_schema_path(exc)}: {exc.message}") from exc
    return [grid_copy(grid) for grid in document["grids"]]


__all__ = [
    "BLOCK",
    "BLOCK_STARTS",
    "GRID_DOCUMENT_SCHEMA",
    "Grid",
    "MAX_DIGIT",
    "MIN_DIGIT",
    "SIZE",
    "ensure_shape",
    "format_grid",
    "from_string",
    "grid_copy",
    "load_grids",
    "to_string",
]
