import argparse
import csv
from datetime import datetime
import logging
import os
from typing import Any

from statesearch.astar import AStar
from statesearch.core.params import SearchParams
from statesearch.idastar import IDAStar
from statesearch.logging import get_logger
from statesearch.scenarios import Scenario, default_suite

ENGINES = {"astar": AStar, "idastar": IDAStar}

KEYS = [
    "scenario",
    "kind",
    "algo",
    "weight",
    "found",
    "cost",
    "expansions",
    "generated",
    "rounds",
    "runtime_ms",
    "path_len",
]


def run_one(sc: Scenario, algo: str, params: SearchParams, logger: Any) -> dict[str, Any]:
    eng = ENGINES[algo](sc.start, sc.goal, params=params, logger=logger)
    path, cost, found = eng.run()
    st = eng.stats
    return {
        "scenario": sc.name,
        "kind": sc.meta["kind"],
        "algo": algo,
        "weight": params.weight,
        "found": found,
        "cost": (cost if found else None),
        "expansions": st.expansions,
        "generated": st.generated,
        "rounds": getattr(st, "rounds", None),
        "runtime_ms": round(st.runtime_ms, 3),
        "path_len": (len(path) if found else None),
    }


def main():
    p = argparse.ArgumentParser(description="Benchmark A* and IDA* over the scenario suite")
    p.add_argument("--weights", type=str, default="1.0,1.5")
    p.add_argument("--algos", type=str, default="astar,idastar")
    p.add_argument("--seeds", type=str, default="0")
    p.add_argument("--max_expansions", type=int, default=None)
    p.add_argument("--max_runtime_ms", type=float, default=None)
    p.add_argument("--out", type=str, default=None)
    p.add_argument("--verbose", action="store_true")
    args = p.parse_args()

    logger = get_logger(
        "statesearch.benchmark", level=(logging.DEBUG if args.verbose else logging.INFO)
    )
    weights = [float(x.strip()) for x in args.weights.split(",") if x.strip() != ""]
    algos = [a.strip() for a in args.algos.split(",") if a.strip() != ""]
    for algo in algos:
        if algo not in ENGINES:
            p.error(f"unknown algo {algo!r}; choose from {', '.join(ENGINES)}")
    seeds = [int(s.strip()) for s in args.seeds.split(",") if s.strip() != ""]

    rows = []
    for seed in seeds:
        for sc in default_suite(seed):
            for weight in weights:
                params = SearchParams(
                    weight=weight,
                    max_expansions=args.max_expansions,
                    max_runtime_ms=args.max_runtime_ms,
                )
                for algo in algos:
                    rows.append(run_one(sc, algo, params, logger))

    out_path = args.out or os.path.join(
        "results", f"benchmark_{datetime.now().strftime('%Y%m%d_%H%M%S')}.csv"
    )
    os.makedirs(os.path.dirname(out_path) or ".", exist_ok=True)
    with open(out_path, "w", newline="", encoding="utf-8") as f:
        w = csv.DictWriter(f, fieldnames=KEYS)
        w.writeheader()
        w.writerows(rows)
    print(out_path)
    print(",".join(KEYS))
    for row in rows[:15]:
        print(",".join(str(row[k]) for k in KEYS))


if __name__ == "__main__":
    main()
