"""Command-line demo: solve one puzzle with the configured techniques and print the steps as JSON."""

# demo_cli.py
# - Reads an 81-char puzzle ('0' or '.' for blanks) from --puzzle or --puzzle-file
# - Loads technique order and search limits from an optional YAML config
# - Runs the pipeline and prints a JSON payload of applied moves
#
# Usage:
#   python apps/cli/demo_cli.py --puzzle 0030... --config configs/solver.yaml --verbose

import argparse
import json
import logging
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[2]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from deduction.config import SolverConfig, merge_overrides, load_yaml  # noqa: E402
from deduction.errors import DeductionError  # noqa: E402
from deduction.grid_core import Grid  # noqa: E402
from deduction.sudoku_tools import solve_tool, uniqueness_tool  # noqa: E402

log = logging.getLogger("demo_cli")


def build_config(args) -> SolverConfig:
    cfg = dict(load_yaml(args.config)) if args.config else {}
    techniques = args.techniques.split(",") if args.techniques else None
    merge_overrides(
        cfg,
        techniques=techniques,
        max_steps=args.max_steps,
        check_uniqueness=True if args.check_uniqueness else None,
    )
    return SolverConfig.from_mapping(cfg)


def read_puzzle(args) -> str:
    if args.puzzle:
        return args.puzzle
    text = Path(args.puzzle_file).read_text(encoding="utf-8")
    return "".join(text.split())


def main(args) -> int:
    try:
        cfg = build_config(args)
        grid = Grid.from_string(read_puzzle(args))
        rows = grid.to_rows()
        unique = uniqueness_tool(rows)
        if not unique["unique"]:
            log.warning("puzzle has %s solutions", "no" if unique["solutions"] == 0 else "several")
        result = solve_tool(rows, config=cfg)
    except DeductionError as exc:
        log.error("%s", exc)
        return 2
    payload = {
        "puzzle": grid.to_string(),
        "unique": unique["unique"],
        "status": result["status"],
        "grid": result["grid"],
        "techniques": result["techniques"],
        "moves": result["moves"],
    }
    print(json.dumps(payload, indent=2))
    if args.show:
        print(Grid.from_string(result["grid"]), file=sys.stderr)
    return 0 if result["status"] == "solved" else 1


if __name__ == "__main__":
    ap = argparse.ArgumentParser()
    src = ap.add_mutually_exclusive_group(required=True)
    src.add_argument("--puzzle", type=str, help="81-char puzzle string")
    src.add_argument("--puzzle-file", type=str, help="file holding the puzzle (whitespace ignored)")
    ap.add_argument("--config", type=str, default=None, help="YAML solver config")
    ap.add_argument("--techniques", type=str, default=None, help="comma-separated technique order")
    ap.add_argument("--max-steps", type=int, default=None)
    ap.add_argument("--check-uniqueness", action="store_true", help="verify each step keeps a unique solution")
    ap.add_argument("--show", action="store_true", help="print the final board to stderr")
    ap.add_argument("--verbose", action="store_true")
    args = ap.parse_args()
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )
    sys.exit(main(args))
