"""Actions proposed by techniques and the data-only justification records that explain them.

A renderer may replay the justification events (titles, colored cells and
candidates, chains); nothing in the engine depends on how they are drawn.
"""

# actions.py

from __future__ import annotations

from dataclasses import dataclass, field
from typing import NamedTuple, Union

from .grid_core import Cell, Node, cell_key

RGB = tuple[int, int, int]


class Colors:
    SOLVED_DIGIT: RGB = (0, 0, 255)
    CANDIDATE_MARKED_FOR_REMOVAL: RGB = (255, 0, 0)
    CELL_USED_TO_DETERMINE_SOLUTION: RGB = (255, 255, 0)
    DIGIT_USED_TO_DETERMINE_SOLUTION: RGB = (0, 128, 0)
    CELL_MARKED_FOR_CANDIDATE_REMOVAL: RGB = (255, 200, 200)
    CHAIN_COLOR: RGB = (128, 0, 128)
    CHAIN_RED: RGB = (255, 102, 102)
    CHAIN_BLUE: RGB = (102, 178, 255)
    CHAIN_STRONG: RGB = (0, 0, 0)
    CHAIN_WEAK: RGB = (160, 160, 160)


@dataclass(frozen=True)
class PlaceDigit:
    row: int
    col: int
    digit: int

    def __str__(self) -> str:
        return f"{cell_key((self.row, self.col))}={self.digit}"


@dataclass(frozen=True)
class EliminateCandidate:
    row: int
    col: int
    digit: int

    def __str__(self) -> str:
        return f"{cell_key((self.row, self.col))}<>{self.digit}"


Action = Union[PlaceDigit, EliminateCandidate]


def eliminations(nodes) -> list[EliminateCandidate]:
    """Sorted, de-duplicated eliminations for an iterable of (row, col, digit)."""
    return [EliminateCandidate(r, c, d) for r, c, d in sorted(set(nodes))]


# justification events


@dataclass(frozen=True)
class SetTitle:
    title: str


@dataclass(frozen=True)
class SetDescription:
    text: str


@dataclass(frozen=True)
class ColorCell:
    cell: Cell
    color: RGB


@dataclass(frozen=True)
class ColorDigit:
    cell: Cell
    color: RGB


@dataclass(frozen=True)
class ColorCandidate:
    node: Node
    color: RGB


@dataclass(frozen=True)
class HighlightBackgroundCandidate:
    node: Node
    color: RGB


@dataclass(frozen=True)
class CreateChain:
    start: Node
    end: Node
    color: RGB


Event = Union[
    SetTitle,
    SetDescription,
    ColorCell,
    ColorDigit,
    ColorCandidate,
    HighlightBackgroundCandidate,
    CreateChain,
]


@dataclass
class Justification:
    technique: str
    title: str = ""
    description: str = ""
    events: list[Event] = field(default_factory=list)

    def __post_init__(self):
        if not self.title:
            self.title = self.technique
        self.events.insert(0, SetTitle(self.title))

    def describe(self, text: str) -> "Justification":
        self.description = text
        self.events.append(SetDescription(text))
        return self

    def color_cells(self, cells, color: RGB = Colors.CELL_USED_TO_DETERMINE_SOLUTION):
        for cell in cells:
            self.events.append(ColorCell(tuple(cell), color))
        return self

    def color_candidates(self, nodes, color: RGB = Colors.DIGIT_USED_TO_DETERMINE_SOLUTION):
        for node in nodes:
            self.events.append(ColorCandidate(tuple(node), color))
        return self

    def mark_removals(self, actions) -> "Justification":
        for a in actions:
            if isinstance(a, EliminateCandidate):
                self.events.append(
                    ColorCell((a.row, a.col), Colors.CELL_MARKED_FOR_CANDIDATE_REMOVAL)
                )
                self.events.append(
                    HighlightBackgroundCandidate(
                        (a.row, a.col, a.digit), Colors.CANDIDATE_MARKED_FOR_REMOVAL
                    )
                )
            else:
                self.events.append(ColorDigit((a.row, a.col), Colors.SOLVED_DIGIT))
        return self

    def chain(self, nodes, strong_first: bool = True) -> "Justification":
        """Draw links between consecutive nodes, alternating strong and weak."""
        strong = strong_first
        for a, b in zip(nodes, nodes[1:]):
            color = Colors.CHAIN_STRONG if strong else Colors.CHAIN_WEAK
            self.events.append(CreateChain(tuple(a), tuple(b), color))
            strong = not strong
        return self

    def cells(self) -> list[Cell]:
        """Cells touched by any event, in first-seen order."""
        seen: dict[Cell, None] = {}
        for ev in self.events:
            if isinstance(ev, (ColorCell, ColorDigit)):
                seen.setdefault(ev.cell, None)
            elif isinstance(ev, (ColorCandidate, HighlightBackgroundCandidate)):
                seen.setdefault(ev.node[:2], None)
        return list(seen)


class TechniqueResult(NamedTuple):
    actions: list[Action]
    justification: Justification


def result(technique: str, actions: list[Action], description: str, title: str = "") -> TechniqueResult:
    """Bundle actions with a justification that already marks their cells."""
    just = Justification(technique, title=title).describe(description)
    just.mark_removals(actions)
    return TechniqueResult(actions, just)
