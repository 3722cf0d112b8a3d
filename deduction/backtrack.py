"""Backtracking search used to certify uniqueness and to generate puzzles.

Never used as a solving technique. Cells are chosen by fewest candidates (MRV),
values by how few peers they would constrain (LCV). Branches are explored with
`Grid.place` and rolled back with the grid's undo trail.
"""

# backtrack.py

from __future__ import annotations

import logging
import random
from typing import Optional

from .errors import UnsolvableBranch
from .grid_core import DIGITS, Cell, Grid, peers

log = logging.getLogger(__name__)


def order_unassigned(grid: Grid) -> Optional[Cell]:
    """Unsolved cell with the fewest candidates, or None when the grid is full."""
    best = None
    best_n = 10
    for r, c in grid.unsolved_cells():
        n = len(grid.candidates_of(r, c))
        if n < best_n:
            best, best_n = (r, c), n
            if n == 0:
                break
    return best


def order_domain_values(grid: Grid, cell: Cell) -> list[int]:
    """Candidates of `cell`, least constraining first."""
    r, c = cell

    def cost(d: int) -> int:
        return sum(1 for pr, pc in peers(r, c) if grid.is_unsolved(pr, pc) and grid.has_candidate(pr, pc, d))

    return sorted(grid.candidates_of(r, c), key=lambda d: (cost(d), d))


def _search(grid: Grid, limit: int, found: list[Grid]) -> None:
    cell = order_unassigned(grid)
    if cell is None:
        found.append(grid.clone())
        return
    if not grid.candidates_of(*cell):
        return
    for d in order_domain_values(grid, cell):
        mark = grid.mark()
        if grid.place(d, *cell):
            _search(grid, limit, found)
        grid.undo(mark)
        if len(found) >= limit:
            return


def find_solutions(grid: Grid, limit: int = 2) -> list[Grid]:
    """Up to `limit` solutions consistent with the grid's current candidates."""
    work = grid.clone()
    found: list[Grid] = []
    _search(work, limit, found)
    return found


def count_solutions(grid: Grid, limit: int = 2) -> int:
    return len(find_solutions(grid, limit))


def has_unique_solution(grid: Grid) -> bool:
    return count_solutions(grid, 2) == 1


def solve(grid: Grid) -> Optional[Grid]:
    """First solution found, as a new grid, or None."""
    found = find_solutions(grid, 1)
    return found[0] if found else None


def random_filled_grid(rng: random.Random | None = None) -> Grid:
    """A random complete grid: shuffled diagonal boxes, the rest by search."""
    rng = rng or random.Random()
    grid = Grid.empty()
    for b in (0, 4, 8):
        digits = list(DIGITS)
        rng.shuffle(digits)
        r0 = c0 = 3 * (b // 3)
        for k, d in enumerate(digits):
            grid.place(d, r0 + k // 3, c0 + k % 3)
    full = solve(grid)
    if full is None:
        raise UnsolvableBranch("diagonal boxes did not extend to a full grid")
    return full


def create_puzzle(removals: int, rng: random.Random | None = None) -> Grid:
    """Remove up to `removals` givens from a random full grid, keeping only the
    removals that leave the solution unique."""
    rng = rng or random.Random()
    digits = [int(ch) for ch in random_filled_grid(rng).to_string()]
    order = list(range(81))
    rng.shuffle(order)
    removed = 0
    for i in order:
        if removed >= removals:
            break
        keep = digits[i]
        digits[i] = 0
        if has_unique_solution(Grid.from_string("".join(map(str, digits)))):
            removed += 1
        else:
            digits[i] = keep
    log.debug("removed %d of %d requested givens", removed, removals)
    return Grid.from_string("".join(map(str, digits)))
