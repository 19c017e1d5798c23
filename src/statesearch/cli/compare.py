import argparse
import sys

from statesearch.astar import AStar
from statesearch.core.params import SearchParams
from statesearch.grid import GridWorld, path_directions
from statesearch.idastar import IDAStar


def main():
    p = argparse.ArgumentParser(description="Solve one grid world with A* and IDA*")
    p.add_argument("world", help="world file, '-' for stdin, or an inline world string")
    p.add_argument("--weight", type=float, default=1.0)
    args = p.parse_args()

    if args.world == "-":
        text = sys.stdin.read()
    else:
        try:
            with open(args.world, encoding="utf-8") as f:
                text = f.read()
        except OSError:
            text = args.world.replace("\\n", "\n")
    try:
        world, start, goal = GridWorld.parse(text)
    except ValueError as exc:
        p.error(str(exc))
    if start is None or goal is None:
        p.error("world needs both a start '@' and a goal '*'")

    params = SearchParams(weight=args.weight)
    for name, eng in [
        ("A*", AStar(start, goal, params=params)),
        ("IDA*", IDAStar(start, goal, params=params)),
    ]:
        path, cost, found = eng.run()
        st = eng.stats
        if not found:
            print(f"{name}: no path, expansions={st.expansions}")
            continue
        print(
            f"{name}: cost={cost}, moves={path_directions(path)}, "
            f"expansions={st.expansions}, runtime_ms={st.runtime_ms:.3f}"
        )
        print(world.render(path))


if __name__ == "__main__":
    main()
