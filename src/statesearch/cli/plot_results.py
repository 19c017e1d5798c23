import argparse
from collections import defaultdict
import csv
import importlib
from typing import Any

PLT: Any | None
IMPORT_ERROR: Exception | None
try:
    PLT = importlib.import_module("matplotlib.pyplot")
except ImportError as exc:  # pragma: no cover
    PLT = None
    IMPORT_ERROR = exc
else:
    IMPORT_ERROR = None

ALGO_COLORS = {"astar": "tab:blue", "idastar": "tab:orange"}


def load_rows(path: str) -> list[dict[str, str]]:
    with open(path, newline="", encoding="utf-8") as f:
        return list(csv.DictReader(f))


def _num(value: str) -> float:
    return float(value) if value not in ("", "None") else 0.0


def series_by_algo(rows: list[dict[str, str]]) -> dict[str, list[tuple[float, float, str]]]:
    """Group one scenario's rows into ``algo -> [(expansions, runtime_ms, weight)]``."""
    series: dict[str, list[tuple[float, float, str]]] = defaultdict(list)
    for r in rows:
        series[r["algo"]].append((_num(r["expansions"]), _num(r["runtime_ms"]), r["weight"]))
    return dict(series)


def main():
    if PLT is None:
        assert IMPORT_ERROR is not None
        raise RuntimeError("matplotlib is required to plot results") from IMPORT_ERROR
    p = argparse.ArgumentParser(
        description="Plot benchmark CSV: A* vs IDA* runtime against expansions per scenario"
    )
    p.add_argument("csv", help="CSV file from statesearch-benchmark")
    p.add_argument("--logx", action="store_true", help="log-scale the expansions axis")
    args = p.parse_args()
    rows = load_rows(args.csv)
    for sc in sorted(set(r["scenario"] for r in rows)):
        fig, ax = PLT.subplots()
        for algo, points in sorted(series_by_algo([r for r in rows if r["scenario"] == sc]).items()):
            xs = [pt[0] for pt in points]
            ys = [pt[1] for pt in points]
            ax.plot(xs, ys, "o-", color=ALGO_COLORS.get(algo), label=algo)
            for x, y, weight in points:
                ax.annotate(f"w={weight}", (x, y), fontsize=8)
        if args.logx:
            ax.set_xscale("log")
        ax.set_xlabel("Expansions")
        ax.set_ylabel("Runtime (ms)")
        ax.set_title(sc)
        ax.legend()
        out_png = args.csv.replace(".csv", f"_{sc}.png")
        fig.savefig(out_png, bbox_inches="tight")
        PLT.close(fig)
        print(out_png)


if __name__ == "__main__":
    main()
