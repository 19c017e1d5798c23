from statesearch.astar import AStar
from statesearch.core.params import SearchParams
from statesearch.grid import GridWorld, path_directions
from statesearch.idastar import IDAStar

WORLD = """
@..2..2....2...
.2.2..22.2...2.
.2.........2...
..2.222222..222
2.........2...*
"""

if __name__ == "__main__":
    world, start, goal = GridWorld.parse(WORLD)

    for name, eng in [
        ("A*", AStar(start, goal)),
        ("A*(w=2)", AStar(start, goal, params=SearchParams(weight=2.0))),
        ("IDA*", IDAStar(start, goal)),
    ]:
        path, cost, found = eng.run()
        print(f"{name}: found={found}, cost={cost}, expansions={eng.stats.expansions}")
        print(f"  moves: {path_directions(path)}")
    print(world.render(AStar(start, goal).run().path))
