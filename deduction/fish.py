"""Basic fish: X-Wing (n=2), Swordfish (n=3) and Jellyfish (n=4)."""

# fish.py

from __future__ import annotations

from itertools import combinations
from typing import Iterable

from .actions import TechniqueResult, eliminations, result
from .grid_core import DIGITS, Cell, Grid, UnitType, unit_label, units_of_type

_FISH_NAMES = {2: "XWing", 3: "Swordfish", 4: "Jellyfish"}
_COVER = {UnitType.ROW: UnitType.COL, UnitType.COL: UnitType.ROW}


def _positions(grid: Grid, digit: int, axis: UnitType, line: int) -> set[int]:
    """Cross-axis indexes where `digit` is still a candidate in one line."""
    cells = units_of_type(axis)[line]
    return {c if axis is UnitType.ROW else r for r, c in grid.cells_with(digit, cells)}


def _cell(axis: UnitType, line: int, pos: int) -> Cell:
    return (line, pos) if axis is UnitType.ROW else (pos, line)


def fish_eliminations(grid: Grid, digit: int, axis: UnitType, base_lines: Iterable[int]) -> list[Cell]:
    """Cells outside the base lines that lose `digit` when the base lines'
    candidates are covered by the same number of cross lines.

    Returns [] when the base lines do not form a fish.
    """
    base = sorted(set(base_lines))
    cover = set().union(*(_positions(grid, digit, axis, line) for line in base))
    if len(cover) != len(base):
        return []
    out = []
    for pos in sorted(cover):
        for line in range(9):
            if line in base:
                continue
            r, c = _cell(axis, line, pos)
            if grid.is_unsolved(r, c) and grid.has_candidate(r, c, digit):
                out.append((r, c))
    return sorted(out)


def find_fish(grid: Grid, n: int) -> TechniqueResult | None:
    """n lines whose candidates for a digit fit in n cross lines; rows first, then columns."""
    name = _FISH_NAMES[n]
    for axis in (UnitType.ROW, UnitType.COL):
        for d in DIGITS:
            lines = [
                line
                for line in range(9)
                if 2 <= len(_positions(grid, d, axis, line)) <= n
            ]
            for base in combinations(lines, n):
                elim = fish_eliminations(grid, d, axis, base)
                if not elim:
                    continue
                cover = sorted(set().union(*(_positions(grid, d, axis, line) for line in base)))
                bases = ", ".join(unit_label(axis, line) for line in base)
                covers = ", ".join(unit_label(_COVER[axis], pos) for pos in cover)
                res = result(
                    name,
                    eliminations((r, c, d) for r, c in elim),
                    f"Digit {d} in {bases} is confined to {covers}; "
                    f"remove {d} from the rest of {covers}.",
                )
                res.justification.color_candidates(
                    (*_cell(axis, line, pos), d)
                    for line in base
                    for pos in sorted(_positions(grid, d, axis, line))
                )
                return res
    return None


def find_x_wing(grid: Grid) -> TechniqueResult | None:
    return find_fish(grid, 2)


def find_swordfish(grid: Grid) -> TechniqueResult | None:
    return find_fish(grid, 3)


def find_jellyfish(grid: Grid) -> TechniqueResult | None:
    return find_fish(grid, 4)
