# tests/test_api.py
from fastapi.testclient import TestClient

from apps.api.sudoku_tool_api import app
from conftest import EASY_ROWS, SOLVED

client = TestClient(app)


def test_compute_candidates():
    resp = client.post("/compute_candidates", json={"grid": EASY_ROWS})
    assert resp.status_code == 200
    assert resp.json()["candidates"]["r1c3"] == [1, 2, 4]


def test_sanity_check():
    resp = client.post("/sanity_check", json={"original": EASY_ROWS, "current": EASY_ROWS})
    assert resp.json() == {"ok": True, "issues": []}


def test_next_moves_and_apply():
    resp = client.post("/next_moves", json={"current": EASY_ROWS, "max_moves": 2})
    moves = resp.json()["moves"]
    assert 1 <= len(moves) <= 2
    first = moves[0]
    resp = client.post("/apply_move", json={"current": EASY_ROWS, "move": first})
    assert resp.status_code == 200
    assert resp.json()["current"] != EASY_ROWS or first["type"] == "elimination"


def test_solve_and_unique():
    resp = client.post("/solve", json={"current": EASY_ROWS})
    assert resp.json()["grid"] == SOLVED
    resp = client.post("/unique", json={"grid": EASY_ROWS})
    assert resp.json()["unique"] is True


def test_engine_errors_map_to_422():
    bad = [row[:] for row in EASY_ROWS]
    bad[0][2] = 3
    resp = client.post("/compute_candidates", json={"grid": bad})
    assert resp.status_code == 422
    assert resp.json()["error"] == "InvalidInput"
    resp = client.post("/solve", json={"current": EASY_ROWS, "techniques": ["Guessing"]})
    assert resp.status_code == 422
    assert resp.json()["error"] == "ConfigError"


def test_bad_cell_keys_map_to_422():
    resp = client.post("/apply_move", json={
        "current": EASY_ROWS, "move": {"type": "elimination", "digit": 2, "eliminate": ["r10c1"]},
    })
    assert resp.status_code == 422
    assert resp.json()["error"] == "InvalidInput"
    resp = client.post("/apply_move", json={"current": EASY_ROWS, "move": {"type": "placement", "digit": 4}})
    assert resp.status_code == 422
    assert resp.json()["error"] == "InvalidInput"
    resp = client.post("/next_moves", json={"current": EASY_ROWS, "candidates": {"x1": [1, 2]}})
    assert resp.status_code == 422
    assert resp.json()["error"] == "InvalidInput"
