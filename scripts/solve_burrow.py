#!/usr/bin/env python3
"""
Найти минимальную стоимость сортировки амфиподов.

Примеры:
    python scripts/solve_burrow.py --rows BCBD ADCA
    python scripts/solve_burrow.py --rows BCBD ADCA --unfold --verbose
    python scripts/solve_burrow.py --instance data/burrow.json --show-moves
"""
from __future__ import annotations

import argparse
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
for path in (ROOT, SRC):
    if str(path) not in sys.path:
        sys.path.insert(0, str(path))

from core.astar import BurrowAStar
from core.errors import BurrowError
from strategies.heuristics.misplaced_cost import MisplacedCostHeuristic
from strategies.heuristics.zero import ZeroHeuristic
from strategies.open_policy.deepest_first import DeepestFirstOpen
from strategies.open_policy.heap import HeapOpen
from utils.burrow_loader import burrow_from_rows, load_burrow, unfold_burrow


HEURISTICS = {
    "misplaced": MisplacedCostHeuristic,
    "zero": ZeroHeuristic,
}

OPEN_POLICIES = {
    "heap": HeapOpen,
    "deepest": DeepestFirstOpen,
}


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="A* для задачи о норе амфиподов")
    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument("--instance", type=Path, help="JSON с полем rows (и необязательными hallway/unfold)")
    source.add_argument("--rows", nargs="+", help="Строки слотов от входа вглубь, например BCBD ADCA")
    parser.add_argument("--unfold", action="store_true", help="Вставить строки DCBA/DBAC (нора глубины 4)")
    parser.add_argument("--heuristic", choices=sorted(HEURISTICS), default="misplaced", help="Оценка остатка")
    parser.add_argument("--open", choices=sorted(OPEN_POLICIES), default="heap", help="Tie-break в Open")
    parser.add_argument("--max-expansions", type=int, default=None, help="Лимит раскрытий узлов")
    parser.add_argument("--show-moves", action="store_true", help="Печатать найденную последовательность ходов")
    parser.add_argument("--verbose", action="store_true", help="Печатать прогресс поиска")
    return parser.parse_args()


def main() -> int:
    args = parse_args()

    try:
        if args.instance is not None:
            burrow = load_burrow(args.instance)
        else:
            burrow = burrow_from_rows(args.rows)
        if args.unfold:
            burrow = unfold_burrow(burrow)

        print(burrow)
        search = BurrowAStar(
            start=burrow,
            heuristic=HEURISTICS[args.heuristic](),
            open_policy=OPEN_POLICIES[args.open](),
            max_expansions=args.max_expansions,
            verbose=args.verbose,
        )
        result = search.run()
    except BurrowError as exc:
        print(f"❌ {exc}", file=sys.stderr)
        return 1

    if args.show_moves:
        for step, (move, state) in enumerate(zip(result.moves, result.path[1:]), 1):
            print(f"\nШаг {step}: {move!r}")
            print(state)

    print(f"\nМинимальная стоимость: {result.cost}")
    print(f"Раскрыто узлов: {result.metrics['expanded']}, "
          f"время: {result.metrics['runtime_seconds']:.2f} с")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
