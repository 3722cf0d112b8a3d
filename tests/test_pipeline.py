# tests/test_pipeline.py
import pytest

from conftest import MEDUSA_GRID, SCENARIO_ORDER, XWING_GRID
from deduction.actions import EliminateCandidate, PlaceDigit, TechniqueResult, result
from deduction.backtrack import solve
from deduction.coloring import MEDUSA_RULES
from deduction.errors import IllegalPlacement, InternalConsistencyError
from deduction.grid_core import Grid
from deduction.pipeline import SolverPipeline
from deduction.techniques import DEFAULT_ORDER, Technique, build_techniques


def _fixed(name, actions):
    def apply(grid):
        return result(name, list(actions), "test")
    return Technique(name, apply)


def test_easy_grid_is_solved(easy_grid):
    answer = solve(easy_grid)
    pipeline = SolverPipeline(easy_grid)
    report = pipeline.solve()
    assert report.status == "solved" and report.solved
    assert pipeline.is_solved()
    assert pipeline.grid.to_string() == answer.to_string()
    assert report.steps and report.steps[0].index == 1
    assert sum(report.technique_counts().values()) == len(report.steps)


@pytest.mark.parametrize("text", [MEDUSA_GRID, XWING_GRID])
def test_full_library_keeps_unique_solution(text):
    grid = Grid.from_string(text)
    answer = solve(grid)
    pipeline = SolverPipeline(grid, check_uniqueness=True)
    report = pipeline.solve()
    assert report.status in ("solved", "stuck")
    for got, want in zip(report.grid, answer.to_string()):
        assert got == "0" or got == want


def test_medusa_scenario_library_is_consistent():
    grid = Grid.from_string(MEDUSA_GRID)
    answer = solve(grid)
    pipeline = SolverPipeline(grid, build_techniques(SCENARIO_ORDER), check_uniqueness=True)
    report = pipeline.solve()
    assert report.status in ("solved", "stuck")
    for got, want in zip(report.grid, answer.to_string()):
        assert got == "0" or got == want
    assert "Intersections" in report.technique_counts()
    medusa = [s.justification.title for s in report.steps if s.technique == "Medusa3D"]
    assert medusa, "3D Medusa never fired on the scenario grid"
    assert medusa[0] == "3D Medusa: Two Colours Unit + Cell"
    assert "3D Medusa: Two Colours Elsewhere" in medusa
    rules = {f"3D Medusa: {name}" for name, _ in MEDUSA_RULES}
    assert set(medusa) <= rules


def test_stuck_is_reported():
    pipeline = SolverPipeline(Grid.from_string(MEDUSA_GRID), build_techniques(["NakedSingles"]))
    assert not pipeline.step()
    report = pipeline.solve()
    assert report.status == "stuck" and not report.solved
    assert report.steps == []


def test_max_steps(easy_grid):
    report = SolverPipeline(easy_grid).solve(max_steps=2)
    assert len(report.steps) == 2
    assert report.status == "stuck"


def test_register_technique_appends(easy_grid):
    pipeline = SolverPipeline(easy_grid, [])
    assert not pipeline.step()
    pipeline.register_technique(build_techniques(["HiddenSingles"])[0])
    pipeline.register_techniques(build_techniques(["NakedSingles"]))
    assert [t.name for t in pipeline.techniques] == ["HiddenSingles", "NakedSingles"]
    assert pipeline.step()
    assert pipeline.history[0].technique == "HiddenSingles"


def test_failed_placement_rolls_back(easy_grid):
    before = easy_grid.clone()
    bad = _fixed("Bad", [PlaceDigit(0, 2, 2), PlaceDigit(0, 3, 2)])
    pipeline = SolverPipeline(easy_grid, [bad])
    with pytest.raises(IllegalPlacement):
        pipeline.step()
    assert pipeline.grid == before
    assert pipeline.history == []


def test_uniqueness_check_catches_a_wrong_elimination(easy_grid):
    answer = solve(easy_grid)
    r, c = easy_grid.unsolved_cells()[0]
    wrong = _fixed("Wrong", [EliminateCandidate(r, c, answer.digit(r, c))])
    before = easy_grid.clone()
    pipeline = SolverPipeline(easy_grid, [wrong], check_uniqueness=True)
    with pytest.raises(InternalConsistencyError):
        pipeline.step()
    assert pipeline.grid == before

    unchecked = SolverPipeline(easy_grid, [wrong])
    assert unchecked.step()
    assert not easy_grid.has_candidate(r, c, answer.digit(r, c))


def test_empty_result_does_not_count(easy_grid):
    quiet = Technique("Quiet", lambda grid: TechniqueResult([], result("Quiet", [], "").justification))
    assert not SolverPipeline(easy_grid, [quiet]).step()


def test_default_order_names():
    assert DEFAULT_ORDER[0] == "NakedSingles"
    assert DEFAULT_ORDER[-1] == "BowmansBingo"
    assert len(build_techniques()) == len(DEFAULT_ORDER)
