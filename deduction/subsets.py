"""Naked and hidden subsets (pairs, triples, quads)."""

# subsets.py

from __future__ import annotations

from itertools import combinations

from .actions import TechniqueResult, eliminations, result
from .grid_core import DIGITS, Grid, all_units, cell_key, cells_in_unit_containing, contained_units, unit_label

_SIZE_NAMES = {2: "Pairs", 3: "Triples", 4: "Quads"}


def find_naked_subset(grid: Grid, k: int) -> TechniqueResult | None:
    """k cells of a unit whose candidates together are exactly k digits.

    Those digits are removed from every other cell of every unit the k cells share.
    """
    for kind, i, cells in all_units():
        pool = [
            (r, c)
            for r, c in cells
            if grid.is_unsolved(r, c) and 2 <= len(grid.candidates_of(r, c)) <= k
        ]
        for combo in combinations(pool, k):
            digits = set().union(*(grid.candidates_of(r, c) for r, c in combo))
            if len(digits) != k:
                continue
            elim = []
            for shared in contained_units(combo):
                for r, c in cells_in_unit_containing(shared, combo[0]):
                    if (r, c) in combo or not grid.is_unsolved(r, c):
                        continue
                    elim += [(r, c, d) for d in grid.candidates_of(r, c) & digits]
            if not elim:
                continue
            actions = eliminations(elim)
            keys = ", ".join(cell_key(cell) for cell in combo)
            res = result(
                f"Naked{_SIZE_NAMES[k]}",
                actions,
                f"Cells {keys} in {unit_label(kind, i)} hold only {sorted(digits)}; "
                f"those digits are removed from the rest of their shared units.",
            )
            res.justification.color_candidates(
                (r, c, d) for r, c in combo for d in sorted(grid.candidates_of(r, c))
            )
            return res
    return None


def find_hidden_subset(grid: Grid, k: int) -> TechniqueResult | None:
    """k digits of a unit confined to the same k cells: strip every other digit from them."""
    for kind, i, cells in all_units():
        solved = grid.solved_in(cells)
        places = {}
        for d in DIGITS:
            if d in solved:
                continue
            holders = grid.cells_with(d, cells)
            if 2 <= len(holders) <= k:
                places[d] = holders
        for combo in combinations(sorted(places), k):
            spots = sorted(set().union(*(places[d] for d in combo)))
            if len(spots) != k:
                continue
            keep = set(combo)
            elim = [
                (r, c, d)
                for r, c in spots
                for d in grid.candidates_of(r, c) - keep
            ]
            if not elim:
                continue
            actions = eliminations(elim)
            keys = ", ".join(cell_key(cell) for cell in spots)
            res = result(
                f"Hidden{_SIZE_NAMES[k]}",
                actions,
                f"Digits {list(combo)} in {unit_label(kind, i)} only fit in {keys}; "
                f"other candidates are removed from those cells.",
            )
            res.justification.color_candidates(
                (r, c, d) for r, c in spots for d in combo if grid.has_candidate(r, c, d)
            )
            return res
    return None


def find_naked_pairs(grid: Grid) -> TechniqueResult | None:
    return find_naked_subset(grid, 2)


def find_naked_triples(grid: Grid) -> TechniqueResult | None:
    return find_naked_subset(grid, 3)


def find_naked_quads(grid: Grid) -> TechniqueResult | None:
    return find_naked_subset(grid, 4)


def find_hidden_pairs(grid: Grid) -> TechniqueResult | None:
    return find_hidden_subset(grid, 2)


def find_hidden_triples(grid: Grid) -> TechniqueResult | None:
    return find_hidden_subset(grid, 3)


def find_hidden_quads(grid: Grid) -> TechniqueResult | None:
    return find_hidden_subset(grid, 4)
