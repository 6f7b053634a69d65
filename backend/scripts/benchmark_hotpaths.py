#!/usr/bin/env python3
from __future__ import annotations

import argparse
import json
import sys
import time
import tracemalloc
from pathlib import Path

BACKEND_DIR = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(BACKEND_DIR))

from crusader_board.bot import self_play
from crusader_board.core import RulesConfig, legal_attacks, legal_moves
from crusader_board.notation import parse_board

# a crowded mid-game board so every ability has work to do
CROWDED = "l1l1l1l1/1l1l1l1l/2H2H2/8/3hL3/2H2H2/HlH1H1H1/1H1H1H1H"


def run_calculator(repeat: int, enhanced: bool) -> dict[str, float | int]:
    board = parse_board(CROWDED)
    rules = RulesConfig(enhanced_light_movement=enhanced)
    units = list(board)
    calls = 0
    start = time.perf_counter()
    tracemalloc.start()
    for _ in range(repeat):
        for u in units:
            legal_moves(board, u, rules)
            legal_attacks(board, u)
            calls += 2
    _, peak = tracemalloc.get_traced_memory()
    tracemalloc.stop()
    elapsed = time.perf_counter() - start
    return {
        "repeat": repeat,
        "calls": calls,
        "seconds": elapsed,
        "calls_per_sec": 0.0 if elapsed <= 0 else calls / elapsed,
        "peak_alloc_bytes": peak,
    }


def run_self_play(games: int, max_turns: int) -> dict[str, float | int]:
    turns = 0
    finished = 0
    start = time.perf_counter()
    for i in range(games):
        final, played = self_play(seed=1000 + i, max_turns=max_turns)
        turns += played
        finished += int(final.is_over)
    elapsed = time.perf_counter() - start
    return {
        "games": games,
        "finished": finished,
        "turns": turns,
        "seconds": elapsed,
        "turns_per_sec": 0.0 if elapsed <= 0 else turns / elapsed,
    }


def check_thresholds(results: dict[str, dict[str, float | int]], thresholds_path: Path) -> int:
    if not thresholds_path.exists():
        return 0
    thresholds = json.loads(thresholds_path.read_text())
    status = 0
    for bench_name, limits in thresholds.items():
        values = results.get(bench_name)
        if values is None:
            continue
        for metric, expected in limits.items():
            if metric.endswith("_min"):
                base_metric = metric[:-4]
                current = float(values.get(base_metric, 0.0))
                if current < float(expected):
                    print(f"THRESHOLD FAIL {bench_name}.{base_metric}: {current} < {expected}")
                    status = 1
            elif metric.endswith("_max"):
                base_metric = metric[:-4]
                current = float(values.get(base_metric, 0.0))
                if current > float(expected):
                    print(f"THRESHOLD FAIL {bench_name}.{base_metric}: {current} > {expected}")
                    status = 1
    return status


def main() -> int:
    parser = argparse.ArgumentParser(description="Benchmark the move calculator and self-play hot paths")
    parser.add_argument("--calc-repeat", type=int, default=2000)
    parser.add_argument("--games", type=int, default=20)
    parser.add_argument("--max-turns", type=int, default=300)
    parser.add_argument(
        "--thresholds",
        type=Path,
        default=Path(__file__).with_name("benchmark_thresholds.json"),
    )
    parser.add_argument("--check-thresholds", action="store_true")
    args = parser.parse_args()

    results = {
        "calculator": run_calculator(repeat=args.calc_repeat, enhanced=False),
        "calculator_enhanced": run_calculator(repeat=args.calc_repeat, enhanced=True),
        "self_play": run_self_play(games=args.games, max_turns=args.max_turns),
    }
    print(json.dumps(results, indent=2, sort_keys=True))

    if args.check_thresholds:
        return check_thresholds(results, args.thresholds)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
