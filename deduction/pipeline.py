"""Ordered technique pipeline: one deduction per step until nothing fires."""

# pipeline.py

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterable, Optional

from .actions import Action, Justification, PlaceDigit
from .backtrack import has_unique_solution
from .errors import IllegalPlacement, InternalConsistencyError
from .grid_core import Grid
from .techniques import Technique, build_techniques

log = logging.getLogger(__name__)


@dataclass
class AppliedStep:
    index: int
    technique: str
    actions: list[Action]
    justification: Justification


@dataclass
class SolveReport:
    status: str  # "solved" or "stuck"
    steps: list[AppliedStep] = field(default_factory=list)
    grid: str = ""

    @property
    def solved(self) -> bool:
        return self.status == "solved"

    def technique_counts(self) -> dict[str, int]:
        out: dict[str, int] = {}
        for s in self.steps:
            out[s.technique] = out.get(s.technique, 0) + 1
        return out


class SolverPipeline:
    """Owns a grid and applies the first technique that fires, one step at a time.

    With `check_uniqueness` on, every step is followed by a backtracking check
    that the grid still has exactly one solution.
    """

    def __init__(self, grid: Grid, techniques: Optional[Iterable[Technique]] = None, check_uniqueness: bool = False):
        self._grid = grid
        self._techniques: list[Technique] = []
        self.check_uniqueness = check_uniqueness
        self.history: list[AppliedStep] = []
        if techniques is None:
            techniques = build_techniques()
        self.register_techniques(techniques)

    @property
    def grid(self) -> Grid:
        return self._grid

    @property
    def techniques(self) -> list[Technique]:
        return list(self._techniques)

    def register_technique(self, technique: Technique) -> None:
        """Append a technique at the lowest priority so far."""
        self._techniques.append(technique)

    def register_techniques(self, techniques: Iterable[Technique]) -> None:
        for t in techniques:
            self.register_technique(t)

    def is_solved(self) -> bool:
        return self._grid.is_solved()

    def step(self) -> bool:
        """Apply one deduction. Returns False when no technique fires."""
        snapshot = self._grid.clone()
        for technique in self._techniques:
            found = technique(snapshot)
            if found is None or not found.actions:
                continue
            self._apply(technique.name, found.actions)
            applied = AppliedStep(len(self.history) + 1, technique.name, list(found.actions), found.justification)
            self.history.append(applied)
            log.debug(
                "step %d: %s -> %s",
                applied.index, technique.name, ", ".join(str(a) for a in found.actions),
            )
            return True
        return False

    def _apply(self, name: str, actions: list[Action]) -> None:
        unique_before = self.check_uniqueness and has_unique_solution(self._grid)
        mark = self._grid.mark()
        for a in actions:
            if isinstance(a, PlaceDigit):
                if not self._grid.place(a.digit, a.row, a.col):
                    self._grid.undo(mark)
                    raise IllegalPlacement(a.row, a.col, a.digit, technique=name)
            else:
                self._grid.eliminate(a.row, a.col, a.digit)
        if unique_before and not has_unique_solution(self._grid):
            self._grid.undo(mark)
            raise InternalConsistencyError(name, ", ".join(str(a) for a in actions))

    def solve(self, max_steps: Optional[int] = None) -> SolveReport:
        """Step until solved, stuck, or `max_steps` deductions have been applied."""
        start = len(self.history)
        while not self.is_solved():
            if max_steps is not None and len(self.history) - start >= max_steps:
                break
            if not self.step():
                break
        status = "solved" if self.is_solved() else "stuck"
        log.info("%s after %d steps", status, len(self.history) - start)
        return SolveReport(status, self.history[start:], self._grid.to_string())
