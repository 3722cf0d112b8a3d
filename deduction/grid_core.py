"""Grid model used by every technique: unit geometry, peers, and the candidate state with its two mutators (place/eliminate) plus an undo trail."""

# grid_core.py
# Cells are (row, col) tuples, 0-based. Display keys ("r1c1") are 1-based.
# Digits are 1..9; 0 marks an unsolved cell.

from __future__ import annotations

import re
from enum import Enum
from typing import Iterable, Iterator, Sequence

from .errors import InvalidInput


Cell = tuple[int, int]
Node = tuple[int, int, int]  # (row, col, digit)

DIGITS = range(1, 10)
ALL_DIGITS = frozenset(DIGITS)

_KEY_RE = re.compile(r"r([0-9]+)c([0-9]+)")


class UnitType(Enum):
    ROW = "row"
    COL = "col"
    BOX = "box"


def in_bounds(r: int, c: int) -> bool:
    return 0 <= r <= 8 and 0 <= c <= 8


def rc_to_key(r: int, c: int) -> str:
    """1-based row/col to a display key, e.g. (1, 2) -> 'r1c2'."""
    return f"r{r}c{c}"


def key_to_rc(key: str) -> Cell:
    """Display key to a 1-based (row, col). Raises InvalidInput on a malformed key."""
    m = _KEY_RE.fullmatch(key) if isinstance(key, str) else None
    if m is None:
        raise InvalidInput(f"bad cell key {key!r}")
    return (int(m.group(1)), int(m.group(2)))


def cell_key(cell: Cell) -> str:
    """0-based cell to its display key."""
    return rc_to_key(cell[0] + 1, cell[1] + 1)


def which_box(r: int, c: int) -> int:
    return 3 * (r // 3) + (c // 3)


def unit_cells_row(r: int) -> tuple[Cell, ...]:
    return tuple((r, c) for c in range(9))


def unit_cells_col(c: int) -> tuple[Cell, ...]:
    return tuple((r, c) for r in range(9))


def unit_cells_box(b: int) -> tuple[Cell, ...]:
    r0 = 3 * (b // 3)
    c0 = 3 * (b % 3)
    return tuple((r0 + i, c0 + j) for i in range(3) for j in range(3))


_UNITS: dict[UnitType, tuple[tuple[Cell, ...], ...]] = {
    UnitType.ROW: tuple(unit_cells_row(i) for i in range(9)),
    UnitType.COL: tuple(unit_cells_col(i) for i in range(9)),
    UnitType.BOX: tuple(unit_cells_box(i) for i in range(9)),
}


def _unit_index(kind: UnitType, cell: Cell) -> int:
    r, c = cell
    if kind is UnitType.ROW:
        return r
    if kind is UnitType.COL:
        return c
    return which_box(r, c)


def _build_peers() -> dict[Cell, frozenset[Cell]]:
    out = {}
    for r in range(9):
        for c in range(9):
            ps = set()
            for kind in UnitType:
                ps.update(_UNITS[kind][_unit_index(kind, (r, c))])
            ps.discard((r, c))
            out[(r, c)] = frozenset(ps)
    return out


_PEERS = _build_peers()


def units_of_type(kind: UnitType) -> tuple[tuple[Cell, ...], ...]:
    """All nine units of one kind, each an ordered tuple of nine cells."""
    return _UNITS[kind]


def all_units(order: Sequence[UnitType] = (UnitType.BOX, UnitType.ROW, UnitType.COL)) -> Iterator[tuple[UnitType, int, tuple[Cell, ...]]]:
    """Yield (kind, index, cells) for every unit, kinds in the given order."""
    for kind in order:
        for i, cells in enumerate(_UNITS[kind]):
            yield kind, i, cells


def cells_in_unit_containing(kind: UnitType, cell: Cell) -> tuple[Cell, ...]:
    return _UNITS[kind][_unit_index(kind, cell)]


def unit_label(kind: UnitType, index: int) -> str:
    """Display label for a unit, e.g. 'r3', 'c7', 'b5' (1-based)."""
    prefix = {UnitType.ROW: "r", UnitType.COL: "c", UnitType.BOX: "b"}[kind]
    return f"{prefix}{index + 1}"


def peers(r: int, c: int) -> frozenset[Cell]:
    """The 20 cells sharing a row, column or box with (r, c)."""
    return _PEERS[(r, c)]


def cells_seen_from(cell: Cell) -> frozenset[Cell]:
    """Peers of a cell plus the cell itself."""
    return _PEERS[cell] | {cell}


def cells_see_each_other(a: Cell, b: Cell) -> bool:
    return a != b and b in _PEERS[a]


def common_peers(cells: Iterable[Cell]) -> frozenset[Cell]:
    """Cells seen by every cell in `cells` (none of the given cells included)."""
    cells = list(cells)
    if not cells:
        return frozenset()
    out = set(_PEERS[cells[0]])
    for cell in cells[1:]:
        out &= _PEERS[cell]
    return frozenset(out - set(cells))


def contained_units(cells: Iterable[Cell]) -> list[UnitType]:
    """Unit kinds that hold every cell of the group, in row/col/box order."""
    cells = list(cells)
    if not cells:
        return []
    return [
        kind
        for kind in (UnitType.ROW, UnitType.COL, UnitType.BOX)
        if len({_unit_index(kind, cell) for cell in cells}) == 1
    ]


class Grid:
    """9x9 digits and candidate sets.

    Only `place` and `eliminate` change the state. Every change is written to a
    trail so `undo(mark)` can revert to an earlier `mark()`.
    """

    def __init__(self) -> None:
        self._digits: list[int] = [0] * 81
        self._cands: list[set[int]] = [set(ALL_DIGITS) for _ in range(81)]
        # ("c", index, digit): candidate removed; ("d", index, old): digit changed
        self._trail: list[tuple[str, int, int]] = []

    # construction -----------------------------------------------------------

    @classmethod
    def empty(cls) -> "Grid":
        return cls()

    @classmethod
    def from_string(cls, text: str) -> "Grid":
        """Parse 81 characters, row-major, '0' or '.' for blanks."""
        text = text.strip()
        if len(text) != 81:
            raise InvalidInput(f"expected 81 characters, got {len(text)}")
        digits = []
        for i, ch in enumerate(text):
            if ch == ".":
                digits.append(0)
            elif ch in "0123456789":
                digits.append(int(ch))
            else:
                raise InvalidInput(f"bad character {ch!r} at {cell_key(divmod(i, 9))}")
        return cls._from_digits(digits)

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[int]]) -> "Grid":
        """Build from a 9x9 list of rows (0 = empty)."""
        if len(rows) != 9 or any(len(row) != 9 for row in rows):
            raise InvalidInput("expected 9 rows of 9 digits")
        digits = []
        for row in rows:
            for v in row:
                if isinstance(v, bool) or not isinstance(v, int) or not 0 <= v <= 9:
                    raise InvalidInput(f"digit out of range: {v!r}")
                digits.append(v)
        return cls._from_digits(digits)

    @classmethod
    def _from_digits(cls, digits: list[int]) -> "Grid":
        grid = cls()
        grid._digits = list(digits)
        for i, d in enumerate(digits):
            if not d:
                continue
            cell = divmod(i, 9)
            for p in _PEERS[cell]:
                if grid._digits[p[0] * 9 + p[1]] == d:
                    raise InvalidInput(
                        f"digit {d} at {cell_key(cell)} conflicts with {cell_key(p)}"
                    )
        grid.regenerate_candidates()
        return grid

    def regenerate_candidates(self) -> None:
        """Recompute every candidate set from the digits alone. Clears the trail."""
        for i in range(81):
            d = self._digits[i]
            if d:
                self._cands[i] = {d}
                continue
            used = {self._digits[p[0] * 9 + p[1]] for p in _PEERS[divmod(i, 9)]}
            self._cands[i] = set(ALL_DIGITS - used)
        self._trail.clear()

    def clone(self) -> "Grid":
        other = Grid.__new__(Grid)
        other._digits = list(self._digits)
        other._cands = [set(s) for s in self._cands]
        other._trail = []
        return other

    # queries ----------------------------------------------------------------

    def digit(self, r: int, c: int) -> int:
        return self._digits[r * 9 + c]

    def candidates_of(self, r: int, c: int) -> frozenset[int]:
        return frozenset(self._cands[r * 9 + c])

    def has_candidate(self, r: int, c: int, d: int) -> bool:
        return d in self._cands[r * 9 + c]

    def is_unsolved(self, r: int, c: int) -> bool:
        return self._digits[r * 9 + c] == 0

    def unsolved_cells(self) -> list[Cell]:
        return [divmod(i, 9) for i in range(81) if not self._digits[i]]

    def bivalue_cells(self) -> list[Cell]:
        return [
            divmod(i, 9)
            for i in range(81)
            if not self._digits[i] and len(self._cands[i]) == 2
        ]

    def cells_with(self, d: int, cells: Iterable[Cell]) -> list[Cell]:
        """Unsolved cells among `cells` still carrying candidate d."""
        return [
            (r, c)
            for r, c in cells
            if not self._digits[r * 9 + c] and d in self._cands[r * 9 + c]
        ]

    def candidate_nodes(self) -> list[Node]:
        """Every (row, col, digit) candidate of every unsolved cell."""
        return [
            (r, c, d)
            for r, c in self.unsolved_cells()
            for d in sorted(self._cands[r * 9 + c])
        ]

    def solved_in(self, cells: Iterable[Cell]) -> set[int]:
        return {self._digits[r * 9 + c] for r, c in cells} - {0}

    def is_solved(self) -> bool:
        return all(self._digits)

    # mutation ---------------------------------------------------------------

    def place(self, digit: int, r: int, c: int) -> bool:
        """Solve (r, c) with `digit` and remove it from every peer.

        Returns False and leaves the grid untouched when the digit is not a
        candidate or when some peer would be left without candidates.
        """
        i = r * 9 + c
        if self._digits[i] == digit:
            return True
        if self._digits[i] or digit not in self._cands[i]:
            return False
        for pr, pc in _PEERS[(r, c)]:
            j = pr * 9 + pc
            if not self._digits[j] and self._cands[j] == {digit}:
                return False

        self._trail.append(("d", i, self._digits[i]))
        self._digits[i] = digit
        for other in sorted(self._cands[i] - {digit}):
            self._cands[i].discard(other)
            self._trail.append(("c", i, other))
        for pr, pc in _PEERS[(r, c)]:
            j = pr * 9 + pc
            if digit in self._cands[j]:
                self._cands[j].discard(digit)
                self._trail.append(("c", j, digit))
        return True

    def eliminate(self, r: int, c: int, d: int) -> bool:
        """Remove one candidate. Never fails; may leave a cell with no candidates.

        Returns True if the candidate was present. A solved cell keeps its digit.
        """
        i = r * 9 + c
        if self._digits[i] or d not in self._cands[i]:
            return False
        self._cands[i].discard(d)
        self._trail.append(("c", i, d))
        return True

    def mark(self) -> int:
        return len(self._trail)

    def undo(self, mark: int) -> None:
        """Revert every change recorded after `mark`."""
        while len(self._trail) > mark:
            kind, i, value = self._trail.pop()
            if kind == "c":
                self._cands[i].add(value)
            else:
                self._digits[i] = value

    # serialization ----------------------------------------------------------

    def to_string(self) -> str:
        return "".join(str(d) for d in self._digits)

    def to_rows(self) -> list[list[int]]:
        return [self._digits[r * 9:(r + 1) * 9] for r in range(9)]

    def candidates_map(self) -> dict[str, list[int]]:
        """Candidates of unsolved cells keyed like 'r1c2'."""
        return {
            cell_key((r, c)): sorted(self._cands[r * 9 + c])
            for r, c in self.unsolved_cells()
        }

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Grid):
            return NotImplemented
        return self._digits == other._digits and self._cands == other._cands

    def __repr__(self) -> str:
        return f"Grid({self.to_string()!r})"

    def __str__(self) -> str:
        # Each cell is drawn as a 3x3 block: candidates in keypad order, or the
        # solved digit in the centre.
        lines = []
        bar = "+".join(["-" * 11] * 3)
        for r in range(9):
            if r and r % 3 == 0:
                lines.append(bar)
            for sub in range(3):
                blocks = []
                for c in range(9):
                    d = self._digits[r * 9 + c]
                    if d:
                        text = f" {d} " if sub == 1 else "   "
                    else:
                        text = "".join(
                            str(x) if x in self._cands[r * 9 + c] else "."
                            for x in range(sub * 3 + 1, sub * 3 + 4)
                        )
                    blocks.append(text)
                lines.append(
                    "|".join(" ".join(blocks[b * 3:(b + 1) * 3]) for b in range(3))
                )
            if r % 3 != 2:
                lines.append("")
        return "\n".join(lines)
