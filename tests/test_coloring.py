# tests/test_coloring.py
from conftest import SOLVED, keep_only, remove_digit
from deduction.actions import EliminateCandidate
from deduction.coloring import MEDUSA_RULES, find_medusa_3d, find_singles_chains
from deduction.grid_core import Grid


def _trap_grid():
    # digit 6: r1c1 = r1c9 = r9c9 = r9c2
    g = Grid.empty()
    remove_digit(g, [(0, c) for c in range(1, 8)], 6)
    remove_digit(g, [(r, 8) for r in range(1, 8)], 6)
    remove_digit(g, [(8, c) for c in range(9) if c not in (1, 8)], 6)
    return g


TRAPPED = {EliminateCandidate(r, c, 6) for r, c in [(1, 1), (2, 1), (6, 0), (7, 0)]}


def test_color_trap():
    res = find_singles_chains(_trap_grid())
    assert res.justification.title == "Singles Chains: Color Trap"
    assert set(res.actions) == TRAPPED


def test_color_wrap(empty_grid):
    # digit 1: r1c2 = r1c1 = r2c1, so r1c2 and r2c1 share a color inside box 1
    remove_digit(empty_grid, [(0, c) for c in range(2, 9)], 1)
    remove_digit(empty_grid, [(r, 0) for r in range(2, 9)], 1)
    res = find_singles_chains(empty_grid)
    assert res.justification.title == "Singles Chains: Color Wrap"
    assert set(res.actions) == {EliminateCandidate(0, 1, 1), EliminateCandidate(1, 0, 1)}


def _twice_in_unit_grid():
    g = Grid.empty()
    keep_only(g, [(0, 0), (4, 0)], {1, 2})
    # 2 in column 1 only at r1c1 and r5c1
    remove_digit(g, [(r, 0) for r in range(9) if r not in (0, 4)], 2)
    # 1 in box 4 only at r4c1 and r5c1
    remove_digit(g, [(r, c) for r in range(3, 6) for c in range(3) if (r, c) not in ((3, 0), (4, 0))], 1)
    return g


def test_medusa_twice_in_a_unit():
    res = find_medusa_3d(_twice_in_unit_grid())
    assert res.justification.title == "3D Medusa: Twice in a Unit"
    assert set(res.actions) == {
        EliminateCandidate(0, 0, 1), EliminateCandidate(3, 0, 1), EliminateCandidate(4, 0, 2),
    }


def test_medusa_rule_order():
    names = [name for name, _ in MEDUSA_RULES]
    assert names == [
        "Twice in a Cell", "Twice in a Unit", "Two Colours in a Cell",
        "Two Colours Elsewhere", "Two Colours Unit + Cell", "Cell Emptied by Color",
    ]


def test_nothing_on_solved_grid():
    g = Grid.from_string(SOLVED)
    assert find_singles_chains(g) is None
    assert find_medusa_3d(g) is None


def test_medusa_twice_in_a_cell(empty_grid):
    g = empty_grid
    # r1c1 -1- r5c1 {1,3} -3- r5c5 and r1c1 -1- r1c5 {1,5} -5- r5c5
    remove_digit(g, [(r, 0) for r in range(9) if r not in (0, 4)], 1)
    remove_digit(g, [(0, c) for c in range(9) if c not in (0, 4)], 1)
    keep_only(g, [(4, 0)], {1, 3})
    keep_only(g, [(0, 4)], {1, 5})
    remove_digit(g, [(4, c) for c in range(9) if c not in (0, 4)], 3)
    remove_digit(g, [(r, 4) for r in range(9) if r not in (0, 4)], 5)
    res = find_medusa_3d(g)
    assert res.justification.title == "3D Medusa: Twice in a Cell"
    assert set(res.actions) == {
        EliminateCandidate(0, 4, 1), EliminateCandidate(4, 0, 1),
        EliminateCandidate(4, 4, 3), EliminateCandidate(4, 4, 5),
    }


def test_medusa_two_colours_in_a_cell(empty_grid):
    g = empty_grid
    # r5c5 holds 1 and 2 in opposite colors through r5c1, r1c1 {1,2} and r1c5
    keep_only(g, [(0, 0)], {1, 2})
    remove_digit(g, [(4, c) for c in range(9) if c not in (0, 4)], 1)
    remove_digit(g, [(r, 0) for r in range(9) if r not in (0, 4)], 1)
    remove_digit(g, [(0, c) for c in range(9) if c not in (0, 4)], 2)
    remove_digit(g, [(r, 4) for r in range(9) if r not in (0, 4)], 2)
    res = find_medusa_3d(g)
    assert res.justification.title == "3D Medusa: Two Colours in a Cell"
    assert set(res.actions) == {EliminateCandidate(4, 4, d) for d in range(3, 10)}


def test_medusa_two_colours_elsewhere():
    res = find_medusa_3d(_trap_grid())
    assert res.justification.title == "3D Medusa: Two Colours Elsewhere"
    assert set(res.actions) == TRAPPED


def test_medusa_two_colours_unit_and_cell(empty_grid):
    g = empty_grid
    # r1c5's 3 shares a color with r1c1's 1; r1c5's 2 sees the opposite-colored 2 in r1c1
    keep_only(g, [(0, 0)], {1, 2})
    keep_only(g, [(4, 0)], {1, 3})
    remove_digit(g, [(r, 0) for r in range(9) if r not in (0, 4)], 1)
    remove_digit(g, [(4, c) for c in range(9) if c not in (0, 4)], 3)
    remove_digit(g, [(r, 4) for r in range(9) if r not in (0, 4)], 3)
    res = find_medusa_3d(g)
    assert res.justification.title == "3D Medusa: Two Colours Unit + Cell"
    assert res.actions == [EliminateCandidate(0, 4, 2)]


def test_medusa_cell_emptied_by_color(empty_grid):
    g = empty_grid
    # r5c5 {1,2} sees r5c1's 1 and r1c5's 2, both the same color
    keep_only(g, [(0, 0)], {2, 3})
    keep_only(g, [(4, 0)], {1, 3})
    keep_only(g, [(4, 4)], {1, 2})
    remove_digit(g, [(0, c) for c in range(9) if c not in (0, 4)], 2)
    remove_digit(g, [(r, 0) for r in range(9) if r not in (0, 4)], 3)
    res = find_medusa_3d(g)
    assert res.justification.title == "3D Medusa: Cell Emptied by Color"
    assert set(res.actions) == {
        EliminateCandidate(0, 0, 3), EliminateCandidate(0, 4, 2), EliminateCandidate(4, 0, 1),
    }
