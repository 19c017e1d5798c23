"""Weighted grid worlds implementing the state contract.

World strings use one character per cell:

- ``.``  a cell costing 1 to enter
- ``@``  the start (cost 1)
- ``*``  the goal (cost 1)
- ``#``  impassable
- ``1``-``9``  a cell costing that much to enter

Zero-cost cells are rejected: every move costs at least 1, which keeps the
Manhattan estimate admissible.
"""
from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
import random

from .core.types import StateTransition

PATH_ONE = "."
PATH_START = "@"
PATH_GOAL = "*"
PATH_IMPASSABLE = "#"
IMPASSABLE = -1
COST_DIGITS = "123456789"

DIRECTIONS: dict[str, tuple[int, int]] = {
    "^": (0, -1),
    ">": (1, 0),
    "V": (0, 1),
    "<": (-1, 0),
}


@dataclass(frozen=True)
class Cell:
    x: int
    y: int
    world: GridWorld = field(compare=False, repr=False)

    def successors(self) -> Iterable[StateTransition[Cell]]:
        out: list[StateTransition[Cell]] = []
        for label, (dx, dy) in DIRECTIONS.items():
            nx, ny = self.x + dx, self.y + dy
            if not self.world.in_bounds(nx, ny):
                continue
            cost = self.world.costs[ny][nx]
            if cost < 0:
                continue
            out.append(StateTransition(Cell(nx, ny, self.world), label, float(cost)))
        return out

    def estimate_cost(self, target: Cell) -> float:
        # every enterable cell costs at least 1, so Manhattan distance is consistent
        return float(abs(target.x - self.x) + abs(target.y - self.y))


@dataclass(eq=False)
class GridWorld:
    costs: list[list[int]]

    @property
    def height(self) -> int:
        return len(self.costs)

    @property
    def width(self) -> int:
        return len(self.costs[0]) if self.costs else 0

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= y < self.height and 0 <= x < self.width

    def cell(self, x: int, y: int) -> Cell:
        assert self.in_bounds(x, y), f"({x}, {y}) is outside the world"
        return Cell(x, y, self)

    @classmethod
    def parse(cls, text: str) -> tuple[GridWorld, Cell | None, Cell | None]:
        """Parse a world string; returns the world and its start and goal cells."""
        rows = [row.strip() for row in text.strip().splitlines()]
        world = cls([])
        start = goal = None
        for y, row in enumerate(rows):
            line: list[int] = []
            for x, ch in enumerate(row):
                if ch in (PATH_ONE, PATH_START, PATH_GOAL):
                    line.append(1)
                    if ch == PATH_START:
                        start = Cell(x, y, world)
                    elif ch == PATH_GOAL:
                        goal = Cell(x, y, world)
                elif ch == PATH_IMPASSABLE:
                    line.append(IMPASSABLE)
                elif ch in COST_DIGITS:
                    line.append(int(ch))
                elif ch == "0":
                    raise ValueError(f"zero-cost cell at ({x}, {y}); costs start at 1")
                else:
                    raise ValueError(f"unknown cell {ch!r} at ({x}, {y})")
            world.costs.append(line)
        if len({len(line) for line in world.costs}) > 1:
            raise ValueError("world rows must all have the same width")
        return world, start, goal

    def render(self, path: Iterable[StateTransition[Cell]] = ()) -> str:
        """Draw the cost grid with the moves of ``path`` over it."""
        steps = {(step.state.x, step.state.y): str(step.transition) for step in path}
        lines = []
        for y, row in enumerate(self.costs):
            cells = []
            for x, value in enumerate(row):
                if (x, y) in steps:
                    cells.append(steps[(x, y)])
                elif value < 0:
                    cells.append(PATH_IMPASSABLE)
                else:
                    cells.append(str(value))
            lines.append(" ".join(cells))
        return "\n".join(lines)


def random_world(width: int, height: int, seed: int = 0, max_cost: int = 9) -> GridWorld:
    rng = random.Random(seed)
    return GridWorld([[rng.randint(1, max_cost) for _ in range(width)] for _ in range(height)])


def walled_world(width: int, height: int, density: float, seed: int = 0) -> GridWorld:
    """Unit-cost world with random walls.

    A random right/down staircase from the top-left to the bottom-right corner
    is kept open, so the corners are always connected.
    """
    rng = random.Random(seed)
    costs = [
        [IMPASSABLE if rng.random() < density else 1 for _ in range(width)] for _ in range(height)
    ]
    x = y = 0
    costs[0][0] = 1
    while (x, y) != (width - 1, height - 1):
        if y == height - 1 or (x < width - 1 and rng.random() < 0.5):
            x += 1
        else:
            y += 1
        costs[y][x] = 1
    return GridWorld(costs)


def path_directions(path: Iterable[StateTransition[Cell]]) -> str:
    return "".join(str(step.transition) for step in path)
