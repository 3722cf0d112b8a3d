"""Technique registry: names to finder functions, and the default priority order."""

# techniques.py

from __future__ import annotations

from dataclasses import dataclass
from functools import partial
from typing import TYPE_CHECKING, Callable, Iterable, Optional

from .actions import TechniqueResult
from .bingo import find_bowmans_bingo
from .chains import find_x_chain, find_xy_chain
from .coloring import find_medusa_3d, find_singles_chains
from .errors import ConfigError
from .fish import find_jellyfish, find_swordfish, find_x_wing
from .grid_core import Grid
from .intersections import find_intersections
from .singles import find_hidden_singles, find_naked_singles
from .subsets import (
    find_hidden_pairs, find_hidden_quads, find_hidden_triples,
    find_naked_pairs, find_naked_quads, find_naked_triples,
)
from .wings import find_xyz_wing, find_y_wing

if TYPE_CHECKING:
    from .config import SolverConfig

Finder = Callable[[Grid], Optional[TechniqueResult]]


@dataclass(frozen=True)
class Technique:
    name: str
    apply: Finder

    def __call__(self, grid: Grid) -> Optional[TechniqueResult]:
        return self.apply(grid)


def _chain_finder(fn, **kw) -> Callable[["SolverConfig | None"], Finder]:
    def build(cfg):
        if cfg is None:
            return fn
        args = {name: getattr(cfg, attr) for name, attr in kw.items()}
        return partial(fn, **args)
    return build


def _plain(fn: Finder) -> Callable[["SolverConfig | None"], Finder]:
    return lambda cfg: fn


# name -> builder(config) -> finder
REGISTRY: dict[str, Callable[["SolverConfig | None"], Finder]] = {
    "NakedSingles": _plain(find_naked_singles),
    "HiddenSingles": _plain(find_hidden_singles),
    "NakedPairs": _plain(find_naked_pairs),
    "HiddenPairs": _plain(find_hidden_pairs),
    "NakedTriples": _plain(find_naked_triples),
    "HiddenTriples": _plain(find_hidden_triples),
    "NakedQuads": _plain(find_naked_quads),
    "HiddenQuads": _plain(find_hidden_quads),
    "Intersections": _plain(find_intersections),
    "XWing": _plain(find_x_wing),
    "Swordfish": _plain(find_swordfish),
    "Jellyfish": _plain(find_jellyfish),
    "YWing": _plain(find_y_wing),
    "XYZWing": _plain(find_xyz_wing),
    "SinglesChains": _plain(find_singles_chains),
    "Medusa3D": _plain(find_medusa_3d),
    "XChain": _chain_finder(
        find_x_chain,
        min_links="x_chain_min_links",
        max_links="x_chain_max_links",
        budget="chain_search_budget",
    ),
    "XYChain": _chain_finder(
        find_xy_chain,
        max_links="xy_chain_max_links",
        budget="chain_search_budget",
    ),
    "BowmansBingo": _plain(find_bowmans_bingo),
}

DEFAULT_ORDER = (
    "NakedSingles",
    "HiddenSingles",
    "NakedPairs",
    "HiddenPairs",
    "Intersections",
    "NakedTriples",
    "HiddenTriples",
    "NakedQuads",
    "HiddenQuads",
    "XWing",
    "SinglesChains",
    "YWing",
    "Swordfish",
    "XYZWing",
    "Jellyfish",
    "XChain",
    "XYChain",
    "Medusa3D",
    "BowmansBingo",
)


def get_technique(name: str, config: "SolverConfig | None" = None) -> Technique:
    try:
        builder = REGISTRY[name]
    except KeyError:
        raise ConfigError(f"unknown technique {name!r}") from None
    return Technique(name, builder(config))


def build_techniques(names: Iterable[str] | None = None, config: "SolverConfig | None" = None) -> list[Technique]:
    """Techniques in the given order; defaults to the config's order, then DEFAULT_ORDER."""
    if names is None:
        names = config.techniques if config is not None else DEFAULT_ORDER
    return [get_technique(name, config) for name in names]
