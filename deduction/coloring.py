"""Coloring techniques: singles chains (one digit) and 3D Medusa (all digits).

Each connected component of a strong-link graph is split into two colors;
exactly one color is true. The rules below either prove a color false or find
candidates that are false whichever color is true.
"""

# coloring.py

from __future__ import annotations

import logging
from itertools import combinations
from typing import Callable, Optional

from .actions import Colors, TechniqueResult, eliminations, result
from .grid_core import DIGITS, Grid, Node, cell_key, cells_see_each_other, peers
from .link_graph import BiColor, bicolor_components, conjugate_pairs, medusa_graph

log = logging.getLogger(__name__)

Coloring = dict[Node, BiColor]

_PAINT = {BiColor.RED: Colors.CHAIN_RED, BiColor.BLUE: Colors.CHAIN_BLUE}


def _nodes_of(comp: Coloring, color: BiColor) -> list[Node]:
    return sorted(n for n, col in comp.items() if col is color)


def _painted(res: TechniqueResult, comp: Coloring) -> TechniqueResult:
    for node in sorted(comp):
        res.justification.color_candidates([node], _PAINT[comp[node]])
    return res


# singles chains


def find_singles_chains(grid: Grid) -> TechniqueResult | None:
    for d in DIGITS:
        for comp in bicolor_components(conjugate_pairs(grid, d)):
            # a color that sees itself is false
            for color in BiColor:
                nodes = _nodes_of(comp, color)
                clash = next(
                    ((a, b) for a, b in combinations(nodes, 2) if cells_see_each_other(a[:2], b[:2])),
                    None,
                )
                if clash:
                    a, b = clash
                    return _painted(
                        result(
                            "SinglesChains",
                            eliminations(nodes),
                            f"{cell_key(a[:2])} and {cell_key(b[:2])} share a color and a unit for digit {d}; "
                            f"every {color.value} {d} is false.",
                            title="Singles Chains: Color Wrap",
                        ),
                        comp,
                    )
            # an uncolored cell that sees both colors loses the digit
            red = [n[:2] for n in _nodes_of(comp, BiColor.RED)]
            blue = [n[:2] for n in _nodes_of(comp, BiColor.BLUE)]
            elim = []
            for r, c in grid.unsolved_cells():
                if (r, c, d) in comp or not grid.has_candidate(r, c, d):
                    continue
                ps = peers(r, c)
                if any(cell in ps for cell in red) and any(cell in ps for cell in blue):
                    elim.append((r, c, d))
            if elim:
                return _painted(
                    result(
                        "SinglesChains",
                        eliminations(elim),
                        f"These cells see both colors of a digit-{d} chain, so they cannot hold {d}.",
                        title="Singles Chains: Color Trap",
                    ),
                    comp,
                )
    return None


# 3D Medusa
#
# Each rule takes (grid, component) and returns (eliminated nodes, description)
# or None. Rules run in order over every component; the first hit wins.

RuleHit = Optional[tuple[list[Node], str]]


def _twice_in_cell(grid: Grid, comp: Coloring) -> RuleHit:
    for color in BiColor:
        nodes = _nodes_of(comp, color)
        for a, b in combinations(nodes, 2):
            if a[:2] == b[:2]:
                return nodes, (
                    f"{cell_key(a[:2])} has two {color.value} candidates ({a[2]} and {b[2]}); "
                    f"{color.value} is false."
                )
    return None


def _twice_in_unit(grid: Grid, comp: Coloring) -> RuleHit:
    for color in BiColor:
        nodes = _nodes_of(comp, color)
        for a, b in combinations(nodes, 2):
            if a[2] == b[2] and cells_see_each_other(a[:2], b[:2]):
                return nodes, (
                    f"{color.value} {a[2]} appears at both {cell_key(a[:2])} and {cell_key(b[:2])} "
                    f"in one unit; {color.value} is false."
                )
    return None


def _two_colours_in_cell(grid: Grid, comp: Coloring) -> RuleHit:
    cells: dict = {}
    for (r, c, d), color in comp.items():
        cells.setdefault((r, c), set()).add(color)
    elim = []
    for (r, c), colors in sorted(cells.items()):
        if len(colors) < 2:
            continue
        elim += [(r, c, d) for d in grid.candidates_of(r, c) if (r, c, d) not in comp]
    if not elim:
        return None
    return elim, "A cell holding both colors keeps only its colored candidates."


def _two_colours_elsewhere(grid: Grid, comp: Coloring) -> RuleHit:
    elim = []
    for r, c in grid.unsolved_cells():
        ps = peers(r, c)
        for d in sorted(grid.candidates_of(r, c)):
            if (r, c, d) in comp:
                continue
            seen = {comp[n] for n in comp if n[2] == d and n[:2] in ps}
            if len(seen) == 2:
                elim.append((r, c, d))
    if not elim:
        return None
    return elim, "These candidates see the same digit in both colors."


def _two_colours_unit_cell(grid: Grid, comp: Coloring) -> RuleHit:
    elim = []
    for r, c in grid.unsolved_cells():
        in_cell = {comp[(r, c, d)] for d in grid.candidates_of(r, c) if (r, c, d) in comp}
        if len(in_cell) != 1:
            continue
        color = in_cell.pop()
        ps = peers(r, c)
        for d in sorted(grid.candidates_of(r, c)):
            if (r, c, d) in comp:
                continue
            if any(
                n[2] == d and n[:2] in ps and col is color.opposite
                for n, col in comp.items()
            ):
                elim.append((r, c, d))
    if not elim:
        return None
    return elim, (
        "These candidates share a cell with one color and see their own digit "
        "in the other color."
    )


def _cell_emptied_by_color(grid: Grid, comp: Coloring) -> RuleHit:
    for r, c in grid.unsolved_cells():
        cands = grid.candidates_of(r, c)
        if not cands or any((r, c, d) in comp for d in cands):
            continue
        ps = peers(r, c)
        for color in BiColor:
            if all(
                any(n[2] == d and n[:2] in ps and col is color for n, col in comp.items())
                for d in cands
            ):
                return _nodes_of(comp, color), (
                    f"If {color.value} were true, {cell_key((r, c))} would have no candidates; "
                    f"{color.value} is false."
                )
    return None


MEDUSA_RULES: list[tuple[str, Callable[[Grid, Coloring], RuleHit]]] = [
    ("Twice in a Cell", _twice_in_cell),
    ("Twice in a Unit", _twice_in_unit),
    ("Two Colours in a Cell", _two_colours_in_cell),
    ("Two Colours Elsewhere", _two_colours_elsewhere),
    ("Two Colours Unit + Cell", _two_colours_unit_cell),
    ("Cell Emptied by Color", _cell_emptied_by_color),
]


def find_medusa_3d(grid: Grid) -> TechniqueResult | None:
    components = bicolor_components(medusa_graph(grid))
    for rule_name, rule in MEDUSA_RULES:
        for comp in components:
            hit = rule(grid, comp)
            if not hit:
                continue
            nodes, why = hit
            actions = eliminations(n for n in nodes if grid.has_candidate(*n))
            if not actions:
                continue
            log.debug("medusa rule %r fired on a %d-node component", rule_name, len(comp))
            return _painted(
                result("Medusa3D", actions, why, title=f"3D Medusa: {rule_name}"),
                comp,
            )
    return None
