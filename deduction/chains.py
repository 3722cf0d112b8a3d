"""Alternating-link chains: X-Chain (one digit) and XY-Chain (bivalue cells).

A chain starts and ends on a strong link, so one of its two end candidates is
true. Any candidate of the end digit seen by both ends is false.

Searches are depth-first, shortest chains first, and stop after a fixed
number of node expansions.
"""

# chains.py

from __future__ import annotations

import logging

from .actions import TechniqueResult, eliminations, result
from .grid_core import DIGITS, Cell, Grid, Node, cell_key, cells_see_each_other, common_peers
from .link_graph import LinkGraph, conjugate_pairs

log = logging.getLogger(__name__)

DEFAULT_SEARCH_BUDGET = 100_000


class _Budget:
    def __init__(self, limit: int):
        self.left = limit

    def spend(self) -> bool:
        self.left -= 1
        return self.left >= 0

    @property
    def exhausted(self) -> bool:
        return self.left < 0


def _end_eliminations(grid: Grid, start: Node, end: Node, digit: int, chain_cells) -> list[Node]:
    return [
        (r, c, digit)
        for r, c in sorted(common_peers([start[:2], end[:2]]))
        if (r, c) not in chain_cells and grid.is_unsolved(r, c) and grid.has_candidate(r, c, digit)
    ]


def _describe(path: list[Node]) -> str:
    return " - ".join(f"{cell_key(n[:2])}({n[2]})" for n in path)


# X-Chain


def _x_dfs(grid: Grid, strong: LinkGraph, path: list[Node], target: int, budget: _Budget):
    if not budget.spend():
        return None
    links = len(path) - 1
    if links == target:
        d = path[0][2]
        elim = _end_eliminations(grid, path[0], path[-1], d, {n[:2] for n in path})
        return (list(path), elim) if elim else None
    cur = path[-1]
    if links % 2 == 0:
        nexts = strong.neighbors(cur)
    else:
        nexts = [n for n in strong.nodes() if cells_see_each_other(n[:2], cur[:2])]
    for nxt in nexts:
        if nxt in path:
            continue
        path.append(nxt)
        hit = _x_dfs(grid, strong, path, target, budget)
        path.pop()
        if hit or budget.exhausted:
            return hit
    return None


def find_x_chain(
    grid: Grid,
    min_links: int = 3,
    max_links: int = 9,
    budget: int = DEFAULT_SEARCH_BUDGET,
) -> TechniqueResult | None:
    """Single-digit chain of strong (conjugate) and weak (shared unit) links with
    an odd number of links between min_links and max_links."""
    search = _Budget(budget)
    first = min_links if min_links % 2 else min_links + 1
    graphs = {d: conjugate_pairs(grid, d) for d in DIGITS}
    for target in range(first, max_links + 1, 2):
        for d in DIGITS:
            strong = graphs[d]
            for start in strong.nodes():
                hit = _x_dfs(grid, strong, [start], target, search)
                if not hit:
                    if search.exhausted:
                        log.debug("x-chain search budget of %d expansions used up", budget)
                        return None
                    continue
                path, elim = hit
                res = result(
                    "XChain",
                    eliminations(elim),
                    f"Digit {d} chain {_describe(path)}: one end is {d}, "
                    f"so cells seeing both ends cannot be {d}.",
                    title=f"X-Chain ({target} links)",
                )
                res.justification.chain(path)
                return res
    return None


# XY-Chain


def _xy_dfs(grid: Grid, bivalue: list[Cell], path: list[Node], n_cells: int, budget: _Budget):
    if not budget.spend():
        return None
    x = path[0][2]
    r, c, exit_digit = path[-1]
    used = {n[:2] for n in path}
    if len(used) == n_cells:
        if exit_digit != x:
            return None
        elim = _end_eliminations(grid, path[0], path[-1], x, used)
        return (list(path), elim) if elim else None
    for nxt in bivalue:
        if nxt in used or not cells_see_each_other((r, c), nxt):
            continue
        cands = grid.candidates_of(*nxt)
        if exit_digit not in cands:
            continue
        other = next(iter(cands - {exit_digit}))
        path += [(*nxt, exit_digit), (*nxt, other)]
        hit = _xy_dfs(grid, bivalue, path, n_cells, budget)
        del path[-2:]
        if hit or budget.exhausted:
            return hit
    return None


def find_xy_chain(
    grid: Grid,
    max_links: int = 9,
    budget: int = DEFAULT_SEARCH_BUDGET,
) -> TechniqueResult | None:
    """Chain of bivalue cells: strong inside each cell, weak between peers.

    Both ends carry the same digit x, which is removed from cells seeing both.
    """
    search = _Budget(budget)
    bivalue = grid.bivalue_cells()
    max_cells = (max_links + 1) // 2
    for n_cells in range(2, max_cells + 1):
        for start in bivalue:
            for x in sorted(grid.candidates_of(*start)):
                y = next(iter(grid.candidates_of(*start) - {x}))
                hit = _xy_dfs(grid, bivalue, [(*start, x), (*start, y)], n_cells, search)
                if not hit:
                    if search.exhausted:
                        log.debug("xy-chain search budget of %d expansions used up", budget)
                        return None
                    continue
                path, elim = hit
                res = result(
                    "XYChain",
                    eliminations(elim),
                    f"Chain {_describe(path)} starts and ends on {x}; "
                    f"cells seeing both ends cannot be {x}.",
                    title=f"XY-Chain ({2 * n_cells - 1} links)",
                )
                res.justification.chain(path)
                return res
    return None
