# types_sudoku.py
from __future__ import annotations

from typing import Any, TypedDict

Grid = list[list[int]]
"""A 9x9 Sudoku grid as rows of integers (0 = empty)."""

Candidates = dict[str, list[int]]
"""Map from cell key (e.g., 'r1c1') to a list of candidate digits (1..9)."""


class Explanation(TypedDict, total=False):
    title: str  # e.g. '3D Medusa: Twice in a Unit'
    why: str  # human-readable reason


class Move(TypedDict, total=False):
    """One deduction in tool payloads; a technique step may produce several."""

    index: int  # 1-based pipeline step the move came from
    technique: str  # registry name, e.g. 'HiddenSingles', 'XWing', 'BowmansBingo'
    type: str  # 'placement' or 'elimination'
    digit: int  # the digit being placed or eliminated
    cell: str  # for placements, target cell (e.g., 'r4c7')
    eliminate: list[str]  # for eliminations, cells losing that digit
    explanation: Explanation
    highlights: dict[str, Any]  # cells the justification colors


class SolvePayload(TypedDict):
    status: str  # 'solved' or 'stuck'
    grid: str  # 81-char result
    steps: int
    techniques: dict[str, int]  # how often each technique fired
    moves: list[Move]
