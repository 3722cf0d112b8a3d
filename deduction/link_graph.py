"""Strong-link graphs over candidate nodes and their two-coloring.

Edges join two (row, col, digit) nodes of which exactly one is true: the only
two places for a digit in a unit (conjugate pair), or the two candidates of a
bivalue cell.
"""

# link_graph.py

from __future__ import annotations

from collections import deque
from enum import Enum
from typing import Iterator

from .errors import GraphNotBipartite
from .grid_core import DIGITS, Grid, Node, UnitType, all_units

# Conjugate pairs are collected box first, then column, then row.
_PAIR_ORDER = (UnitType.BOX, UnitType.COL, UnitType.ROW)


class LinkGraph:
    """Undirected graph; nodes and neighbors keep insertion order."""

    def __init__(self) -> None:
        self._adj: dict[Node, dict[Node, None]] = {}

    def add_node(self, node: Node) -> None:
        self._adj.setdefault(node, {})

    def add_edge(self, a: Node, b: Node) -> None:
        if a == b:
            return
        self._adj.setdefault(a, {})[b] = None
        self._adj.setdefault(b, {})[a] = None

    def has_edge(self, a: Node, b: Node) -> bool:
        return b in self._adj.get(a, ())

    def neighbors(self, node: Node) -> list[Node]:
        return list(self._adj.get(node, ()))

    def nodes(self) -> list[Node]:
        return list(self._adj)

    def unique_pairs(self) -> Iterator[tuple[Node, Node]]:
        """Each edge once, as (first-seen node, other)."""
        seen = set()
        for a, nbrs in self._adj.items():
            for b in nbrs:
                if b not in seen:
                    yield a, b
            seen.add(a)

    def merge(self, other: "LinkGraph") -> "LinkGraph":
        out = LinkGraph()
        for g in (self, other):
            for node in g._adj:
                out.add_node(node)
            for a, b in g.unique_pairs():
                out.add_edge(a, b)
        return out

    def __contains__(self, node: object) -> bool:
        return node in self._adj

    def __len__(self) -> int:
        return len(self._adj)

    def __repr__(self) -> str:
        return f"LinkGraph(nodes={len(self._adj)}, edges={sum(1 for _ in self.unique_pairs())})"


def conjugate_pairs(grid: Grid, digit: int) -> LinkGraph:
    """Strong links for one digit: units where exactly two unsolved cells hold it."""
    graph = LinkGraph()
    for _kind, _i, cells in all_units(_PAIR_ORDER):
        holders = grid.cells_with(digit, cells)
        if len(holders) == 2:
            (r1, c1), (r2, c2) = holders
            graph.add_edge((r1, c1, digit), (r2, c2, digit))
    return graph


def merge_on_bivalue(graph: LinkGraph, other: LinkGraph, grid: Grid) -> LinkGraph:
    """Merge two graphs and link the two candidates of every bivalue cell."""
    out = graph.merge(other)
    for r, c in grid.bivalue_cells():
        a, b = sorted(grid.candidates_of(r, c))
        out.add_edge((r, c, a), (r, c, b))
    return out


def medusa_graph(grid: Grid) -> LinkGraph:
    """All digits' conjugate pairs plus bivalue-cell links."""
    graph = LinkGraph()
    for d in DIGITS:
        graph = graph.merge(conjugate_pairs(grid, d))
    return merge_on_bivalue(graph, LinkGraph(), grid)


class BiColor(Enum):
    RED = "red"
    BLUE = "blue"

    @property
    def opposite(self) -> "BiColor":
        return BiColor.BLUE if self is BiColor.RED else BiColor.RED


def bicolor_components(graph: LinkGraph) -> list[dict[Node, BiColor]]:
    """Two-color each connected component by BFS from its first uncolored node.

    Raises GraphNotBipartite when a node meets a neighbor of its own color.
    """
    colored: dict[Node, BiColor] = {}
    components = []
    for start in graph.nodes():
        if start in colored:
            continue
        comp = {start: BiColor.RED}
        colored[start] = BiColor.RED
        queue = deque([start])
        while queue:
            node = queue.popleft()
            color = comp[node]
            for nbr in graph.neighbors(node):
                if nbr not in comp:
                    comp[nbr] = color.opposite
                    colored[nbr] = color.opposite
                    queue.append(nbr)
                elif comp[nbr] is color:
                    raise GraphNotBipartite(node, nbr)
        components.append(comp)
    return components
