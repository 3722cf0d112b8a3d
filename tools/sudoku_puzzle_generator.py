"""
Sudoku puzzle generator (unique-solution puzzles)

Usage (from your repo root):
  python tools/sudoku_puzzle_generator.py --out puzzles.txt --num 10 --removals 55 --seed 42

Options:
  --out <path>          Output file, one 81-char puzzle per line (stdout if omitted)
  --num N               Number of puzzles
  --removals R          Givens to try removing from each full grid
  --rate                Also report which techniques the puzzle needs and whether the library solves it
  --seed S              Random seed
"""
import argparse
import json
import logging
import random
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from deduction.backtrack import create_puzzle  # noqa: E402
from deduction.sudoku_tools import solve_tool  # noqa: E402

log = logging.getLogger("sudoku_puzzle_generator")


def generate(num: int, removals: int, seed: int, rate: bool = False):
    rng = random.Random(seed)
    for k in range(num):
        grid = create_puzzle(removals, rng)
        givens = sum(1 for ch in grid.to_string() if ch != "0")
        log.info("puzzle %d: %d givens", k + 1, givens)
        entry = {"puzzle": grid.to_string(), "givens": givens}
        if rate:
            res = solve_tool(grid.to_rows())
            entry["status"] = res["status"]
            entry["techniques"] = res["techniques"]
        yield entry


def main():
    ap = argparse.ArgumentParser()
    ap.add_argument("--out", type=str, default=None, help="Output file (one puzzle per line)")
    ap.add_argument("--num", type=int, default=1, help="Number of puzzles")
    ap.add_argument("--removals", type=int, default=55)
    ap.add_argument("--rate", action="store_true")
    ap.add_argument("--seed", type=int, default=0)
    ap.add_argument("--verbose", action="store_true")
    args = ap.parse_args()
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO,
                        format="%(levelname)s %(name)s: %(message)s")

    lines = []
    for entry in generate(args.num, args.removals, args.seed, args.rate):
        lines.append(json.dumps(entry) if args.rate else entry["puzzle"])
    text = "\n".join(lines) + "\n"
    if args.out:
        Path(args.out).write_text(text, encoding="utf-8")
        print(f"[OK] wrote {len(lines)} puzzles to {args.out}")
    else:
        sys.stdout.write(text)


if __name__ == "__main__":
    main()
