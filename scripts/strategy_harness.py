#!/usr/bin/env python3
import argparse
import statistics
import time
from collections import Counter
from typing import List

from navalbattle.domain.errors import GenerationFailed
from navalbattle.generation import SELECTORS, generate_fleet, new_rng, stable_seed
from navalbattle.layouts import builtin_fleets, find_fleet


def _resolve_strategies(raw: str) -> List[str]:
    if not raw or raw.strip().lower() in {"all", "*"}:
        return sorted(SELECTORS)
    keys = [k.strip() for k in raw.split(",") if k.strip()]
    for key in keys:
        if key not in SELECTORS:
            raise ValueError(f"Unknown strategy '{key}'.")
    return keys


def main() -> None:
    parser = argparse.ArgumentParser(description="Compare placement strategies on single-shot generation.")
    parser.add_argument("--fleet", default="reference", choices=[f.fleet_id for f in builtin_fleets()])
    parser.add_argument("--strategies", default="all")
    parser.add_argument("--runs", type=int, default=500)
    parser.add_argument("--seed", type=int, default=0)
    args = parser.parse_args()

    fleet = find_fleet(args.fleet)
    for strategy in _resolve_strategies(args.strategies):
        selector = SELECTORS[strategy]
        failures: Counter = Counter()
        timings: List[float] = []
        for i in range(args.runs):
            rng = new_rng(stable_seed(args.seed, strategy, i))
            start = time.perf_counter()
            try:
                generate_fleet(fleet, rng, selector)
            except GenerationFailed as exc:
                failures[exc.ship_index] += 1
            timings.append(time.perf_counter() - start)

        failed = sum(failures.values())
        rate = 100.0 * failed / max(1, args.runs)
        mean_ms = statistics.mean(timings) * 1000.0 if timings else 0.0
        by_ship = ", ".join(f"#{idx}: {n}" for idx, n in sorted(failures.items())) or "none"
        print(f"{strategy:>10}: failures {failed}/{args.runs} ({rate:.2f}%), mean {mean_ms:.2f} ms, by ship {by_ship}")


if __name__ == "__main__":
    main()
