"""Tool-friendly wrappers around the engine: sanity checks, candidates, next moves,
applying a move and full solves, all over plain 9x9 rows and 'r1c1' keys.
Used by the HTTP API and the demo CLI."""

# sudoku_tools.py

from __future__ import annotations

from typing import Dict, List, Optional, Sequence

from types_sudoku import Candidates, Grid as Rows, Move, SolvePayload

from .actions import PlaceDigit
from .backtrack import count_solutions
from .config import SolverConfig
from .errors import IllegalPlacement, InvalidInput
from .grid_core import DIGITS, Grid, all_units, cell_key, in_bounds, key_to_rc, unit_label
from .pipeline import AppliedStep, SolverPipeline
from .techniques import build_techniques


def sanity_check(original: Rows, current: Rows) -> Dict:
    """Report overwritten givens and duplicate digits per unit."""
    issues = []
    for r in range(9):
        for c in range(9):
            given = original[r][c]
            if given and current[r][c] not in (0, given):
                issues.append({"type": "given_overwritten", "cell": cell_key((r, c)),
                               "given": given, "found": current[r][c]})
    for kind, i, cells in all_units():
        seen: Dict[int, int] = {}
        for r, c in cells:
            v = current[r][c]
            if v:
                seen[v] = seen.get(v, 0) + 1
        dups = sorted(d for d, n in seen.items() if n > 1)
        if dups:
            bad = [cell_key((r, c)) for r, c in cells if current[r][c] in dups]
            issues.append({"type": "duplicate", "unit": unit_label(kind, i),
                           "digits": dups, "cells": bad})
    return {"ok": len(issues) == 0, "issues": issues}


def _cell(key: str) -> tuple[int, int]:
    """0-based cell for a display key on the board."""
    r, c = key_to_rc(key)
    if not in_bounds(r - 1, c - 1):
        raise InvalidInput(f"cell key off the board: {key!r}")
    return r - 1, c - 1


def _load(current: Rows, candidates: Optional[Candidates] = None) -> Grid:
    """Grid from rows, optionally narrowed to the caller's pencil marks."""
    grid = Grid.from_rows(current)
    if candidates:
        for key, digits in candidates.items():
            r, c = _cell(key)
            for d in DIGITS:
                if d not in digits:
                    grid.eliminate(r, c, d)
    return grid


def compute_candidates_tool(current: Rows) -> Dict:
    """Compute candidate digits for each empty cell in the current grid. Returns a dict like {'r1c2':[1,2,5], ...}."""
    return {"candidates": Grid.from_rows(current).candidates_map()}


def step_to_moves(step: AppliedStep) -> List[Move]:
    """Placements become one move each; eliminations are grouped by digit."""
    explanation = {"title": step.justification.title, "why": step.justification.description}
    highlights = {"cells": [cell_key(cell) for cell in step.justification.cells()]}
    moves: List[Move] = []
    by_digit: Dict[int, List[str]] = {}
    for a in step.actions:
        if isinstance(a, PlaceDigit):
            moves.append({
                "index": step.index, "technique": step.technique, "type": "placement",
                "cell": cell_key((a.row, a.col)), "digit": a.digit,
                "explanation": explanation, "highlights": highlights,
            })
        else:
            by_digit.setdefault(a.digit, []).append(cell_key((a.row, a.col)))
    for d in sorted(by_digit):
        moves.append({
            "index": step.index, "technique": step.technique, "type": "elimination",
            "digit": d, "eliminate": by_digit[d],
            "explanation": explanation, "highlights": highlights,
        })
    return moves


def next_moves(
    current: Rows,
    candidates: Candidates | None = None,
    techniques: Sequence[str] | None = None,
    max_moves: int = 5,
    chain: bool = True,
    config: SolverConfig | None = None,
) -> Dict:
    """Run pipeline steps and return up to `max_moves` moves.

    With `chain=True` each step is applied before searching for the next, so
    follow-up deductions show up; otherwise only the first step is reported.
    """
    grid = _load(current, candidates)
    pipeline = SolverPipeline(grid, build_techniques(techniques, config))
    out: List[Move] = []
    while len(out) < max_moves and not pipeline.is_solved():
        if not pipeline.step():
            break
        out += step_to_moves(pipeline.history[-1])
        if not chain:
            break
    return {
        "moves": out[:max_moves],
        "snapshot": {"current": grid.to_rows(), "candidates": grid.candidates_map()},
    }


def apply_move(current: Rows, move: Dict, candidates: Candidates | None = None) -> Dict:
    """Apply one placement or elimination move and return the new rows and candidates."""
    grid = _load(current, candidates)
    digit = move.get("digit")
    if isinstance(digit, bool) or digit not in DIGITS:
        raise InvalidInput(f"move digit must be 1-9, got {digit!r}")
    if move.get("type", "placement") == "placement":
        if not move.get("cell"):
            raise InvalidInput("placement move needs a cell")
        r, c = _cell(move["cell"])
        if not grid.place(digit, r, c):
            raise IllegalPlacement(r, c, digit)
    else:
        for key in move.get("eliminate") or []:
            r, c = _cell(key)
            grid.eliminate(r, c, digit)
    return {"current": grid.to_rows(), "candidates": grid.candidates_map()}


def solve_tool(
    current: Rows,
    techniques: Sequence[str] | None = None,
    check_uniqueness: bool = False,
    max_steps: int | None = None,
    config: SolverConfig | None = None,
) -> SolvePayload:
    """Solve as far as the technique library allows."""
    if config is not None:
        check_uniqueness = check_uniqueness or config.check_uniqueness
        max_steps = max_steps if max_steps is not None else config.max_steps
    pipeline = SolverPipeline(Grid.from_rows(current), build_techniques(techniques, config), check_uniqueness)
    report = pipeline.solve(max_steps)
    moves: List[Move] = []
    for step in report.steps:
        moves += step_to_moves(step)
    return {
        "status": report.status,
        "grid": report.grid,
        "steps": len(report.steps),
        "techniques": report.technique_counts(),
        "moves": moves,
    }


def uniqueness_tool(current: Rows) -> Dict:
    n = count_solutions(Grid.from_rows(current), limit=2)
    return {"solutions": n, "unique": n == 1}
