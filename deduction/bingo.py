"""Bowman's Bingo: assume a candidate, follow the forced consequences, and
eliminate the assumption if they contradict each other."""

# bingo.py

from __future__ import annotations

import logging
from collections import deque
from enum import Enum

from .actions import Colors, EliminateCandidate, TechniqueResult, result
from .errors import UnsolvableBranch
from .grid_core import Grid, Node, cell_key, peers

log = logging.getLogger(__name__)


class NodeState(Enum):
    AVAILABLE = "available"
    FORCED = "forced"  # queued, consequences not yet applied
    ENFORCED = "enforced"  # consequences applied
    DISABLED = "disabled"


_TRUE = (NodeState.FORCED, NodeState.ENFORCED)


def propagate(grid: Grid, seed: Node, forced: list[Node] | None = None) -> dict[Node, NodeState]:
    """Force `seed` and run to a fixed point.

    Forcing a node disables the rest of its cell and its digit in every peer.
    A peer cell left with a single available candidate is forced in turn.
    Raises UnsolvableBranch when a forced node gets disabled or a peer cell
    loses every candidate. `forced` collects nodes in the order they were forced.
    """
    if forced is None:
        forced = []
    state = {n: NodeState.AVAILABLE for n in grid.candidate_nodes()}

    def disable(node: Node) -> None:
        if state[node] in _TRUE:
            raise UnsolvableBranch(
                f"{cell_key(node[:2])}={node[2]} would be both forced and excluded"
            )
        state[node] = NodeState.DISABLED

    state[seed] = NodeState.FORCED
    forced.append(seed)
    queue = deque([seed])
    while queue:
        node = queue.popleft()
        r, c, d = node
        state[node] = NodeState.ENFORCED
        for other in sorted(grid.candidates_of(r, c) - {d}):
            disable((r, c, other))
        touched = []
        for pr, pc in sorted(peers(r, c)):
            if (pr, pc, d) in state:
                disable((pr, pc, d))
                touched.append((pr, pc))
        for pr, pc in touched:
            live = [
                (pr, pc, x)
                for x in sorted(grid.candidates_of(pr, pc))
                if state[(pr, pc, x)] is not NodeState.DISABLED
            ]
            if any(state[n] in _TRUE for n in live):
                continue
            if not live:
                raise UnsolvableBranch(f"{cell_key((pr, pc))} has no candidates left")
            if len(live) == 1:
                state[live[0]] = NodeState.FORCED
                forced.append(live[0])
                queue.append(live[0])
    return state


def find_bowmans_bingo(grid: Grid) -> TechniqueResult | None:
    """Try seeds from the most constrained cells first; the first seed that
    leads to a contradiction is eliminated."""
    seeds = sorted(
        grid.candidate_nodes(),
        key=lambda n: (len(grid.candidates_of(n[0], n[1])), n),
    )
    for seed in seeds:
        forced: list[Node] = []
        try:
            propagate(grid, seed, forced)
        except UnsolvableBranch as exc:
            r, c, d = seed
            log.debug("bingo seed %s=%d fails after %d forced nodes", cell_key((r, c)), d, len(forced))
            res = result(
                "BowmansBingo",
                [EliminateCandidate(r, c, d)],
                f"Assuming {cell_key((r, c))}={d} forces {len(forced) - 1} more placements "
                f"and then fails: {exc}. So {cell_key((r, c))} cannot be {d}.",
                title="Bowman's Bingo",
            )
            res.justification.color_candidates(forced, Colors.CHAIN_COLOR)
            return res
    return None
