import unittest

from statesearch.astar import search
from statesearch.cli.plot_results import series_by_algo
from statesearch.grid import IMPASSABLE, GridWorld, random_world, walled_world
from statesearch.scenarios import (
    GOAL_8,
    PuzzleState,
    default_suite,
    generate_maze,
    scenario_maze,
    scramble_puzzle,
)


class TestGridWorld(unittest.TestCase):
    def test_parse_costs_and_endpoints(self):
        world, start, goal = GridWorld.parse("@.5\n#.*")
        self.assertEqual(world.costs, [[1, 1, 5], [IMPASSABLE, 1, 1]])
        self.assertEqual((world.width, world.height), (3, 2))
        self.assertEqual((start.x, start.y), (0, 0))
        self.assertEqual((goal.x, goal.y), (2, 1))
        self.assertEqual(start.estimate_cost(goal), 3.0)

    def test_parse_rejects_bad_input(self):
        with self.assertRaises(ValueError):
            GridWorld.parse("@.x\n..*")
        with self.assertRaises(ValueError):
            GridWorld.parse("@..\n.*")

    def test_parse_accepts_only_ascii_costs_from_one(self):
        with self.assertRaisesRegex(ValueError, "zero-cost"):
            GridWorld.parse("@0*")
        with self.assertRaisesRegex(ValueError, "unknown cell"):
            GridWorld.parse("@²*")
        world, _, _ = GridWorld.parse("@19*")
        self.assertEqual(world.costs, [[1, 1, 9, 1]])

    def test_successors_skip_walls_and_edges(self):
        world, start, _ = GridWorld.parse("@#\n3.")
        edges = list(start.successors())
        self.assertEqual(len(edges), 1)
        self.assertEqual(edges[0].transition, "V")
        self.assertEqual(edges[0].cost, 3.0)
        self.assertEqual(edges[0].state, world.cell(0, 1))

    def test_cells_hash_by_position(self):
        world, _, _ = GridWorld.parse("...\n...")
        self.assertEqual(world.cell(1, 1), world.cell(1, 1))
        self.assertEqual(len({world.cell(1, 1), world.cell(1, 1), world.cell(0, 1)}), 2)

    def test_render_marks_path(self):
        world, start, goal = GridWorld.parse("@.4.*\n..9..\n.....")
        path, _, _ = search(start, goal)
        self.assertEqual(world.render(path), "> > > > 1\n1 1 9 1 1\n1 1 1 1 1")

    def test_generated_worlds(self):
        world = random_world(4, 3, seed=1, max_cost=5)
        self.assertEqual((world.width, world.height), (4, 3))
        self.assertTrue(all(1 <= c <= 5 for row in world.costs for c in row))
        walled = walled_world(10, 10, density=0.5, seed=2)
        _, cost, found = search(walled.cell(0, 0), walled.cell(9, 9))
        self.assertTrue(found)
        self.assertEqual(cost, 18.0)


class TestScenarios(unittest.TestCase):
    def test_maze_reachability(self):
        sc = scenario_maze(15, 15, seed=5)
        path, cost, found = search(sc.start, sc.goal)
        self.assertTrue(found)
        self.assertGreater(len(path), 1)
        self.assertGreaterEqual(cost, 28.0)

    def test_even_sized_mazes_are_solvable(self):
        for width, height in [(8, 8), (8, 9), (9, 8), (10, 6)]:
            with self.subTest(width=width, height=height):
                sc = scenario_maze(width, height, seed=4)
                _, cost, found = search(sc.start, sc.goal)
                self.assertTrue(found)
                self.assertGreaterEqual(cost, float(width + height - 2))

    def test_maze_keeps_corners_open(self):
        world = generate_maze(11, 11, seed=3)
        self.assertEqual(world.costs[0][0], 1)
        self.assertEqual(world.costs[10][10], 1)

    def test_puzzle_state(self):
        goal = PuzzleState(GOAL_8)
        self.assertEqual(goal.estimate_cost(goal), 0.0)
        center = PuzzleState((1, 2, 3, 4, 0, 5, 6, 7, 8))
        self.assertEqual(len(list(center.successors())), 4)
        self.assertEqual(scramble_puzzle(0), goal)
        start = scramble_puzzle(6, seed=2)
        path, cost, found = search(start, goal)
        self.assertTrue(found)
        self.assertLessEqual(cost, 6.0)
        self.assertTrue(all(step.transition in range(1, 9) for step in path))

    def test_default_suite_is_solvable(self):
        for sc in default_suite(seed=0):
            with self.subTest(scenario=sc.name):
                _, _, found = search(sc.start, sc.goal)
                self.assertTrue(found)


class TestPlotSeries(unittest.TestCase):
    def test_rows_grouped_per_engine(self):
        rows = [
            {"algo": "astar", "expansions": "10", "runtime_ms": "1.5", "weight": "1.0"},
            {"algo": "idastar", "expansions": "40", "runtime_ms": "3.0", "weight": "1.0"},
            {"algo": "astar", "expansions": "6", "runtime_ms": "", "weight": "2.0"},
        ]
        self.assertEqual(
            series_by_algo(rows),
            {
                "astar": [(10.0, 1.5, "1.0"), (6.0, 0.0, "2.0")],
                "idastar": [(40.0, 3.0, "1.0")],
            },
        )


if __name__ == "__main__":
    unittest.main()
