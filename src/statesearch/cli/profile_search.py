import argparse
import cProfile
import io
import pstats

from statesearch.astar import AStar
from statesearch.core.params import SearchParams
from statesearch.idastar import IDAStar
from statesearch.scenarios import scenario_grid, scenario_puzzle


def main():
    p = argparse.ArgumentParser(description="cProfile for a heavy scenario")
    p.add_argument("--algo", choices=["astar", "idastar"], default="astar")
    p.add_argument("--weight", type=float, default=1.0)
    p.add_argument("--seed", type=int, default=0)
    args = p.parse_args()

    if args.algo == "astar":
        sc = scenario_grid(256, 256, seed=args.seed)
        eng = AStar(sc.start, sc.goal, params=SearchParams(weight=args.weight))
    else:
        sc = scenario_puzzle(steps=40, seed=args.seed)
        eng = IDAStar(sc.start, sc.goal, params=SearchParams(weight=args.weight))
    pr = cProfile.Profile()
    pr.enable()
    eng.run()
    pr.disable()
    s = io.StringIO()
    ps = pstats.Stats(pr, stream=s).sort_stats("tottime")
    ps.print_stats(30)
    print(s.getvalue())


if __name__ == "__main__":
    main()
