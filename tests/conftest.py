# tests/conftest.py
import sys
from pathlib import Path

import pytest

# Add project root to sys.path so "deduction", "apps" and "types_sudoku" can be imported in tests
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from deduction.grid_core import Grid  # noqa: E402

EASY_ROWS = [
    [5, 3, 0, 0, 7, 0, 0, 0, 0],
    [6, 0, 0, 1, 9, 5, 0, 0, 0],
    [0, 9, 8, 0, 0, 0, 0, 6, 0],
    [8, 0, 0, 0, 6, 0, 0, 0, 3],
    [4, 0, 0, 8, 0, 3, 0, 0, 1],
    [7, 0, 0, 0, 2, 0, 0, 0, 6],
    [0, 6, 0, 0, 0, 0, 2, 8, 0],
    [0, 0, 0, 4, 1, 9, 0, 0, 5],
    [0, 0, 0, 0, 8, 0, 0, 7, 9],
]

SOLVED = "534678912672195348198342567859761423426853791713924856961537284287419635345286179"
MEDUSA_GRID = "300052000250300010004607523093200805570000030408035060005408300030506084840023056"
XWING_GRID = "093004560060003140004608309981345000347286951652070483406002890000400010029800034"

# technique order for the pointing-pair and Medusa scenarios on MEDUSA_GRID
SCENARIO_ORDER = [
    "HiddenSingles", "NakedSingles", "NakedPairs", "HiddenPairs", "Intersections", "XWing",
    "SinglesChains", "YWing", "Swordfish", "Jellyfish", "Medusa3D", "BowmansBingo",
]


def keep_only(grid, cells, digits):
    """Strip every candidate except `digits` from each cell."""
    for r, c in cells:
        for d in range(1, 10):
            if d not in digits:
                grid.eliminate(r, c, d)


def remove_digit(grid, cells, digit):
    for r, c in cells:
        grid.eliminate(r, c, digit)


@pytest.fixture
def empty_grid():
    return Grid.empty()


@pytest.fixture
def easy_grid():
    return Grid.from_rows(EASY_ROWS)
