#!/usr/bin/env python3
"""
Generate random burrow instances as JSON files.

Example:
    python scripts/generate_random_burrows.py \
        --count 10 \
        --rooms 4 \
        --depth 2 \
        --seed 42 \
        --output-dir data/random
"""
from __future__ import annotations

import argparse
from pathlib import Path

import sys

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
for path in (ROOT, SRC):
    if str(path) not in sys.path:
        sys.path.insert(0, str(path))

from core.layout import BurrowLayout
from utils.burrow_loader import burrow_to_rows, generate_random_burrow, save_burrow


def main():
    parser = argparse.ArgumentParser(description="Generate random amphipod burrow instances.")
    parser.add_argument("--count", type=int, default=10, help="Number of instances")
    parser.add_argument("--rooms", type=int, default=4, help="Number of rooms (1..4)")
    parser.add_argument("--depth", type=int, default=2, help="Slots per room")
    parser.add_argument("--seed", type=int, default=0, help="Base RNG seed")
    parser.add_argument("--output-dir", required=True, help="Directory for JSON files")
    args = parser.parse_args()

    layout = BurrowLayout(num_rooms=args.rooms, depth=args.depth)
    out_dir = Path(args.output_dir)
    out_dir.mkdir(parents=True, exist_ok=True)

    for i in range(args.count):
        burrow = generate_random_burrow(layout, seed=args.seed + i)
        out_path = out_dir / f"burrow_r{args.rooms}_d{args.depth}_{i:03d}.json"
        save_burrow(burrow, out_path)
        print(f"{out_path}: {' '.join(burrow_to_rows(burrow))}")


if __name__ == "__main__":
    main()
