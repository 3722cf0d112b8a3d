# tests/test_sudoku_tools.py
import pytest

from conftest import EASY_ROWS, SOLVED
from deduction.errors import IllegalPlacement, InvalidInput
from deduction.sudoku_tools import (
    apply_move, compute_candidates_tool, next_moves, sanity_check, solve_tool, uniqueness_tool,
)


def test_naked_hidden_singles_basic():
    cand = compute_candidates_tool(EASY_ROWS)["candidates"]
    assert cand["r1c3"] == [1, 2, 4]
    result = next_moves(EASY_ROWS, cand, max_moves=3, chain=True)
    seq = result["moves"]
    assert 1 <= len(seq) <= 3
    m0 = seq[0]
    assert m0["type"] in ("placement", "elimination")
    # If the first move is a placement, it must have "cell" and "digit"
    if m0["type"] == "placement":
        assert "cell" in m0 and "digit" in m0
    assert m0["index"] == 1
    assert m0["explanation"]["why"]


def test_next_moves_without_chaining_reports_one_step():
    result = next_moves(EASY_ROWS, techniques=["HiddenSingles"], max_moves=5, chain=False)
    assert len(result["moves"]) == 1
    placed = result["moves"][0]
    assert placed["technique"] == "HiddenSingles"
    r, c = int(placed["cell"][1]) - 1, int(placed["cell"][3]) - 1
    assert result["snapshot"]["current"][r][c] == placed["digit"]


def test_next_moves_honors_given_candidates():
    cand = compute_candidates_tool(EASY_ROWS)["candidates"]
    cand["r1c3"] = [4]
    result = next_moves(EASY_ROWS, cand, techniques=["NakedSingles"], max_moves=1)
    assert {"cell": "r1c3", "digit": 4}.items() <= result["moves"][0].items()


def test_sanity_check_flags_duplicates_and_overwrites():
    current = [row[:] for row in EASY_ROWS]
    current[0][2] = 3  # duplicate of r1c2 in row 1 and box 1
    current[0][0] = 9  # overwrites the given 5
    report = sanity_check(EASY_ROWS, current)
    assert not report["ok"]
    kinds = {(i["type"], i.get("unit")) for i in report["issues"]}
    assert ("given_overwritten", None) in kinds
    assert ("duplicate", "r1") in kinds and ("duplicate", "b1") in kinds
    assert sanity_check(EASY_ROWS, EASY_ROWS)["ok"]


def test_apply_move_placement_and_elimination():
    out = apply_move(EASY_ROWS, {"type": "placement", "cell": "r1c3", "digit": 4})
    assert out["current"][0][2] == 4
    assert "r1c3" not in out["candidates"]
    assert 4 not in out["candidates"]["r1c4"]

    out = apply_move(EASY_ROWS, {"type": "elimination", "digit": 2, "eliminate": ["r1c3"]})
    assert out["candidates"]["r1c3"] == [1, 4]
    with pytest.raises(IllegalPlacement):
        apply_move(EASY_ROWS, {"type": "placement", "cell": "r1c3", "digit": 3})


def test_solve_tool_payload():
    payload = solve_tool(EASY_ROWS)
    assert payload["status"] == "solved"
    assert payload["grid"] == SOLVED
    assert payload["steps"] == sum(payload["techniques"].values())
    assert all(m["type"] in ("placement", "elimination") for m in payload["moves"])


def test_uniqueness_tool():
    assert uniqueness_tool(EASY_ROWS) == {"solutions": 1, "unique": True}
    empty = [[0] * 9 for _ in range(9)]
    assert uniqueness_tool(empty) == {"solutions": 2, "unique": False}


def test_conflicting_rows_are_rejected():
    bad = [row[:] for row in EASY_ROWS]
    bad[0][2] = 3
    with pytest.raises(InvalidInput):
        compute_candidates_tool(bad)


@pytest.mark.parametrize("move", [
    {"type": "placement", "cell": "r0c3", "digit": 4},
    {"type": "placement", "cell": "x1", "digit": 4},
    {"type": "placement", "digit": 4},
    {"type": "placement", "cell": "r1c3", "digit": 10},
    {"type": "elimination", "digit": 2, "eliminate": ["r1c10"]},
])
def test_apply_move_rejects_malformed_moves(move):
    with pytest.raises(InvalidInput):
        apply_move(EASY_ROWS, move)
