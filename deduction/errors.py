"""Exception types raised by the deduction engine."""

# errors.py


class DeductionError(Exception):
    """Base class for every error raised by the engine."""


class InvalidInput(DeductionError):
    """Malformed puzzle text or rows, out-of-range digits, or conflicting givens."""


class IllegalPlacement(DeductionError):
    """A placement would break a peer. `Grid.place` reports this with False;
    the pipeline raises it after rolling the step back."""

    def __init__(self, row: int, col: int, digit: int, technique: str | None = None):
        self.row = row
        self.col = col
        self.digit = digit
        self.technique = technique
        where = f" (from {technique})" if technique else ""
        super().__init__(f"cannot place {digit} at r{row + 1}c{col + 1}{where}")


class GraphNotBipartite(DeductionError):
    """Two linked candidate nodes received the same color."""

    def __init__(self, node, neighbor):
        self.node = node
        self.neighbor = neighbor
        super().__init__(f"odd cycle through {node} and {neighbor}")


class UnsolvableBranch(DeductionError):
    """A cell ran out of candidates during speculation."""


class InternalConsistencyError(DeductionError):
    """A technique's actions destroyed the grid's unique solution."""

    def __init__(self, technique: str, detail: str = ""):
        self.technique = technique
        msg = f"{technique} broke the unique solution"
        super().__init__(f"{msg}: {detail}" if detail else msg)


class ConfigError(DeductionError):
    """Unknown technique name or invalid configuration value."""
