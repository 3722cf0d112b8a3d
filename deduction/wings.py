"""Y-Wing and XYZ-Wing."""

# wings.py

from __future__ import annotations

from itertools import combinations

from .actions import TechniqueResult, eliminations, result
from .grid_core import Grid, cell_key, cells_see_each_other, common_peers, peers


def find_y_wing(grid: Grid) -> TechniqueResult | None:
    """Hinge {a,b} with wings {a,c} and {b,c}: c goes from every cell both wings see."""
    bivalue = set(grid.bivalue_cells())
    for hinge in sorted(bivalue):
        a, b = sorted(grid.candidates_of(*hinge))
        wings = [p for p in sorted(peers(*hinge)) if p in bivalue]
        for w1, w2 in combinations(wings, 2):
            if cells_see_each_other(w1, w2):
                continue
            c1 = grid.candidates_of(*w1)
            c2 = grid.candidates_of(*w2)
            if len(c1 & {a, b}) != 1 or len(c2 & {a, b}) != 1 or c1 & c2 & {a, b}:
                continue
            shared = (c1 & c2) - {a, b}
            if len(shared) != 1:
                continue
            z = next(iter(shared))
            elim = [
                (r, c, z)
                for r, c in sorted(common_peers([w1, w2]) - {hinge})
                if grid.is_unsolved(r, c) and grid.has_candidate(r, c, z)
            ]
            if not elim:
                continue
            res = result(
                "YWing",
                eliminations(elim),
                f"Hinge {cell_key(hinge)} {{{a},{b}}} with wings {cell_key(w1)} and {cell_key(w2)}: "
                f"one wing must be {z}, so {z} goes from cells seeing both wings.",
            )
            res.justification.color_cells([hinge, w1, w2])
            return res
    return None


def find_xyz_wing(grid: Grid) -> TechniqueResult | None:
    """Hinge {x,y,z} with wings {x,z} and {y,z}: z goes from cells seeing all three."""
    bivalue = set(grid.bivalue_cells())
    for hinge in grid.unsolved_cells():
        trio = grid.candidates_of(*hinge)
        if len(trio) != 3:
            continue
        wings = [
            p for p in sorted(peers(*hinge))
            if p in bivalue and grid.candidates_of(*p) <= trio
        ]
        for w1, w2 in combinations(wings, 2):
            if cells_see_each_other(w1, w2):
                continue
            c1 = grid.candidates_of(*w1)
            c2 = grid.candidates_of(*w2)
            if c1 == c2:
                continue
            z = next(iter(c1 & c2))
            elim = [
                (r, c, z)
                for r, c in sorted(common_peers([hinge, w1, w2]))
                if grid.is_unsolved(r, c) and grid.has_candidate(r, c, z)
            ]
            if not elim:
                continue
            res = result(
                "XYZWing",
                eliminations(elim),
                f"Hinge {cell_key(hinge)} {sorted(trio)} with wings {cell_key(w1)} and {cell_key(w2)}: "
                f"one of the three holds {z}, so {z} goes from cells seeing all of them.",
            )
            res.justification.color_cells([hinge, w1, w2])
            return res
    return None
