import random
import unittest

from statesearch.frontier import Frontier, SearchNode


def node(state, f):
    return SearchNode(state, cost_from_start=f, estimated_total_cost=f)


class TestFrontier(unittest.TestCase):
    def test_extract_in_priority_order(self):
        frontier = Frontier()
        rng = random.Random(7)
        costs = [rng.randint(0, 50) for _ in range(200)]
        for i, c in enumerate(costs):
            frontier.insert(node(i, float(c)))
        out = []
        while frontier:
            out.append(frontier.extract_min().estimated_total_cost)
        self.assertEqual(out, sorted(float(c) for c in costs))

    def test_empty_frontier_returns_none(self):
        frontier = Frontier()
        self.assertTrue(frontier.empty())
        self.assertIsNone(frontier.extract_min())
        self.assertIsNone(frontier.peek())
        frontier.insert(node("a", 1.0))
        frontier.extract_min()
        self.assertIsNone(frontier.extract_min())

    def test_ties_are_fifo(self):
        frontier = Frontier()
        for name in "abcde":
            frontier.insert(node(name, 3.0))
        frontier.insert(node("z", 1.0))
        order = [frontier.extract_min().state for _ in range(6)]
        self.assertEqual(order, ["z", "a", "b", "c", "d", "e"])

    def test_decrease_priority_in_place(self):
        frontier = Frontier()
        nodes = {name: node(name, f) for name, f in [("a", 5.0), ("b", 3.0), ("c", 8.0)]}
        for n in nodes.values():
            frontier.insert(n)
        c = nodes["c"]
        c.estimated_total_cost = 1.0
        frontier.decrease_priority(c)
        self.assertIs(frontier.peek(), c)
        self.assertEqual(len(frontier), 3)
        self.assertEqual([frontier.extract_min().state for _ in range(3)], ["c", "b", "a"])

    def test_decrease_to_tie_sorts_after_existing(self):
        frontier = Frontier()
        a, b = node("a", 2.0), node("b", 4.0)
        frontier.insert(a)
        frontier.insert(b)
        b.estimated_total_cost = 2.0
        frontier.decrease_priority(b)
        self.assertEqual([frontier.extract_min().state for _ in range(2)], ["a", "b"])

    def test_membership_tracks_positions(self):
        frontier = Frontier()
        nodes = [node(i, float(10 - i)) for i in range(10)]
        for n in nodes:
            frontier.insert(n)
        for n in nodes:
            self.assertIn(n, frontier)
            self.assertTrue(n.open)
            self.assertIs(frontier._heap[n.index], n)  # pylint: disable=protected-access
        top = frontier.extract_min()
        self.assertEqual(top.state, 9)
        self.assertNotIn(top, frontier)
        self.assertFalse(top.open)
        self.assertEqual(top.index, -1)

    def test_decrease_unknown_node_rejected(self):
        frontier = Frontier()
        frontier.insert(node("a", 1.0))
        with self.assertRaises(AssertionError):
            frontier.decrease_priority(node("b", 0.0))


if __name__ == "__main__":
    unittest.main()
