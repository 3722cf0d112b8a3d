# tests/test_wings.py
from conftest import keep_only
from deduction.actions import EliminateCandidate
from deduction.wings import find_xyz_wing, find_y_wing


def test_y_wing(empty_grid):
    keep_only(empty_grid, [(0, 0)], {1, 2})  # hinge
    keep_only(empty_grid, [(0, 4)], {1, 3})
    keep_only(empty_grid, [(4, 0)], {2, 3})
    res = find_y_wing(empty_grid)
    assert res.actions == [EliminateCandidate(4, 4, 3)]
    assert set(res.justification.cells()) >= {(0, 0), (0, 4), (4, 0)}


def test_y_wing_needs_wings_that_do_not_see_each_other(empty_grid):
    keep_only(empty_grid, [(0, 0)], {1, 2})
    keep_only(empty_grid, [(0, 4)], {1, 3})
    keep_only(empty_grid, [(0, 7)], {2, 3})
    assert find_y_wing(empty_grid) is None


def test_xyz_wing(empty_grid):
    keep_only(empty_grid, [(0, 0)], {1, 2, 3})  # hinge
    keep_only(empty_grid, [(1, 1)], {1, 3})
    keep_only(empty_grid, [(0, 5)], {2, 3})
    res = find_xyz_wing(empty_grid)
    assert set(res.actions) == {EliminateCandidate(0, 1, 3), EliminateCandidate(0, 2, 3)}
    assert res.justification.technique == "XYZWing"


def test_xyz_wing_absent_without_trio(empty_grid):
    keep_only(empty_grid, [(1, 1)], {1, 3})
    keep_only(empty_grid, [(0, 5)], {2, 3})
    assert find_xyz_wing(empty_grid) is None
