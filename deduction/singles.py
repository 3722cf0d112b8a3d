"""Naked and hidden singles."""

# singles.py

from __future__ import annotations

from .actions import PlaceDigit, TechniqueResult, result
from .grid_core import DIGITS, Grid, all_units, cell_key, unit_label


def find_naked_singles(grid: Grid) -> TechniqueResult | None:
    """Place every unsolved cell that has a single candidate left."""
    actions = []
    for r, c in grid.unsolved_cells():
        opts = grid.candidates_of(r, c)
        if len(opts) == 1:
            actions.append(PlaceDigit(r, c, next(iter(opts))))
    if not actions:
        return None
    placed = ", ".join(str(a) for a in actions)
    return result(
        "NakedSingles",
        actions,
        f"Only one candidate fits each of these cells: {placed}.",
    )


def find_hidden_singles(grid: Grid) -> TechniqueResult | None:
    """First unit (boxes, then rows, then columns) where a digit has one place."""
    for kind, i, cells in all_units():
        solved = grid.solved_in(cells)
        for d in DIGITS:
            if d in solved:
                continue
            holders = grid.cells_with(d, cells)
            if len(holders) != 1:
                continue
            r, c = holders[0]
            res = result(
                "HiddenSingles",
                [PlaceDigit(r, c, d)],
                f"Digit {d} appears in only one cell in {kind.value} {unit_label(kind, i)}: {cell_key((r, c))}.",
            )
            res.justification.color_cells(cells)
            return res
    return None
