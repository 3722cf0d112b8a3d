"""Locked candidates: pointing (box -> line) and box-line reduction (line -> box)."""

# intersections.py

from __future__ import annotations

from .actions import TechniqueResult, eliminations, result
from .grid_core import DIGITS, Grid, UnitType, cells_in_unit_containing, contained_units, unit_label, units_of_type, which_box


def find_pointing(grid: Grid) -> TechniqueResult | None:
    """If in a box a digit's candidates lie in one row (or column), eliminate it
    from the rest of that row (or column) outside the box."""
    for b, box_cells in enumerate(units_of_type(UnitType.BOX)):
        for d in DIGITS:
            locs = grid.cells_with(d, box_cells)
            if len(locs) < 2:
                continue
            for line in contained_units(locs):
                if line is UnitType.BOX:
                    continue
                elim = [
                    (r, c, d)
                    for r, c in grid.cells_with(d, cells_in_unit_containing(line, locs[0]))
                    if (r, c) not in box_cells
                ]
                if not elim:
                    continue
                idx = locs[0][0] if line is UnitType.ROW else locs[0][1]
                res = result(
                    "Intersections",
                    eliminations(elim),
                    f"In box {b + 1}, digit {d}'s candidates lie only in {unit_label(line, idx)}. "
                    f"Eliminate {d} from {unit_label(line, idx)} outside this box.",
                    title="Pointing",
                )
                res.justification.color_candidates((r, c, d) for r, c in locs)
                return res
    return None


def find_box_line_reduction(grid: Grid) -> TechniqueResult | None:
    """If in a row/column a digit's candidates are confined to one box, eliminate
    it from the other cells of that box."""
    for kind in (UnitType.ROW, UnitType.COL):
        for i, line_cells in enumerate(units_of_type(kind)):
            for d in DIGITS:
                locs = grid.cells_with(d, line_cells)
                if len(locs) < 2:
                    continue
                boxes = {which_box(r, c) for r, c in locs}
                if len(boxes) != 1:
                    continue
                elim = [
                    (r, c, d)
                    for r, c in grid.cells_with(d, cells_in_unit_containing(UnitType.BOX, locs[0]))
                    if (r, c) not in line_cells
                ]
                if not elim:
                    continue
                b = boxes.pop()
                res = result(
                    "Intersections",
                    eliminations(elim),
                    f"In {unit_label(kind, i)}, digit {d}'s candidates are confined to box {b + 1}. "
                    f"Eliminate {d} from other cells in box {b + 1}.",
                    title="Box/Line Reduction",
                )
                res.justification.color_candidates((r, c, d) for r, c in locs)
                return res
    return None


def find_intersections(grid: Grid) -> TechniqueResult | None:
    return find_pointing(grid) or find_box_line_reduction(grid)
