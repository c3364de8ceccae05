from __future__ import annotations

import json

import pytest

from sudoku_validator.errors import GridFormatError, GridShapeError
from sudoku_validator.grid import format_grid, from_string, load_grids, to_string
from sudoku_validator.samples import ALMOST, SOLVED

SOLVED_TEXT = (
    "827154396"
    "965327148"
    "341689752"
    "593468271"
    "472513689"
    "618972435"
    "786235914"
    "154796823"
    "239841567"
)


def test_string_codec_matches_sample() -> None:
    assert to_string(SOLVED) == SOLVED_TEXT
    assert from_string(SOLVED_TEXT) == SOLVED


def test_from_string_ignores_whitespace() -> None:
    spaced = "\n".join(" ".join(SOLVED_TEXT[i : i + 9]) for i in range(0, 81, 9))
    assert from_string(spaced) == SOLVED


@pytest.mark.parametrize("text", [SOLVED_TEXT[:80], SOLVED_TEXT + "1", SOLVED_TEXT[:80] + "x"])
def test_from_string_rejects_bad_text(text: str) -> None:
    with pytest.raises(GridShapeError):
        from_string(text)


def test_format_grid_draws_block_borders() -> None:
    rendered = format_grid(SOLVED).splitlines()
    assert len(rendered) == 13
    assert rendered[0] == "+-------+-------+-------+"
    assert rendered[1] == "| 8 2 7 | 1 5 4 | 3 9 6 |"


def test_load_grids_from_text(tmp_path) -> None:
    path = tmp_path / "grids.txt"
    path.write_text(f"# demo\n{SOLVED_TEXT}\n\n{to_string(ALMOST)}\n", encoding="utf-8")
    assert load_grids(path) == [SOLVED, ALMOST]


def test_load_grids_from_json(tmp_path) -> None:
    path = tmp_path / "grids.json"
    path.write_text(json.dumps({"grids": [SOLVED, ALMOST]}), encoding="utf-8")
    assert load_grids(path) == [SOLVED, ALMOST]


def test_load_grids_rejects_malformed_json(tmp_path) -> None:
    bad = [row[:] for row in SOLVED]
    bad[2] = bad[2][:8]
    path = tmp_path / "grids.json"
    path.write_text(json.dumps({"grids": [bad]}), encoding="utf-8")
    with pytest.raises(GridFormatError) as excinfo:
        load_grids(path)
    assert "$.grids[0][2]" in str(excinfo.value)


def test_load_grids_rejects_broken_json(tmp_path) -> None:
    path = tmp_path / "grids.json"
    path.write_text('{"grids": [', encoding="utf-8")
    with pytest.raises(GridFormatError) as excinfo:
        load_grids(path)
    assert "not valid JSON" in str(excinfo.value)


def test_load_grids_rejects_float_cells(tmp_path) -> None:
    grid = [row[:] for row in SOLVED]
    grid[4][4] = 1.0
    path = tmp_path / "grids.json"
    path.write_text(json.dumps({"grids": [grid]}), encoding="utf-8")
    with pytest.raises(GridFormatError) as excinfo:
        load_grids(path)
    assert "$.grids[0][4][4]" in str(excinfo.value)
