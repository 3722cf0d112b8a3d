"""Logical Sudoku deduction engine: grid model, technique library, pipeline and backtracking oracle."""

from .actions import EliminateCandidate, Justification, PlaceDigit, TechniqueResult
from .config import SolverConfig
from .errors import (
    ConfigError, DeductionError, GraphNotBipartite, IllegalPlacement,
    InternalConsistencyError, InvalidInput, UnsolvableBranch,
)
from .grid_core import Grid, UnitType
from .pipeline import SolveReport, SolverPipeline
from .techniques import DEFAULT_ORDER, Technique, build_techniques

__all__ = [
    "ConfigError",
    "DEFAULT_ORDER",
    "DeductionError",
    "EliminateCandidate",
    "GraphNotBipartite",
    "Grid",
    "IllegalPlacement",
    "InternalConsistencyError",
    "InvalidInput",
    "Justification",
    "PlaceDigit",
    "SolveReport",
    "SolverConfig",
    "SolverPipeline",
    "Technique",
    "TechniqueResult",
    "UnitType",
    "build_techniques",
    "UnsolvableBranch",
]
