from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
import random
from typing import Any

from .core.types import StateTransition
from .grid import IMPASSABLE, GridWorld, random_world, walled_world


@dataclass
class Scenario:
    name: str
    start: Any
    goal: Any
    meta: dict[str, Any]


def scenario_grid(width: int, height: int, seed: int = 0, max_cost: int = 9) -> Scenario:
    world = random_world(width, height, seed=seed, max_cost=max_cost)
    return Scenario(
        name=f"grid_{width}x{height}_c{max_cost}_s{seed}",
        start=world.cell(0, 0),
        goal=world.cell(width - 1, height - 1),
        meta={"kind": "grid", "max_cost": max_cost, "seed": seed},
    )


def scenario_walls(width: int, height: int, density: float, seed: int = 0) -> Scenario:
    world = walled_world(width, height, density, seed=seed)
    return Scenario(
        name=f"walls_{width}x{height}_d{density}_s{seed}",
        start=world.cell(0, 0),
        goal=world.cell(width - 1, height - 1),
        meta={"kind": "walls", "density": density, "seed": seed},
    )


def generate_maze(width: int, height: int, seed: int = 0) -> GridWorld:
    """Carve a maze by randomized depth-first search from (0, 0).

    Passages run between even coordinates. For even sizes the bottom-right
    corner is joined to the nearest carved cell, so it is always reachable.
    """
    rng = random.Random(seed)
    walls = {(x, y) for x in range(width) for y in range(height)}
    start = (0, 0)
    stack = [start]
    visited = {start}
    walls.remove(start)

    def neighbor_cells(x: int, y: int):
        dirs = [(2, 0), (-2, 0), (0, 2), (0, -2)]
        rng.shuffle(dirs)
        for dx, dy in dirs:
            nx, ny = x + dx, y + dy
            if 0 <= nx < width and 0 <= ny < height:
                yield (nx, ny), (x + dx // 2, y + dy // 2)

    while stack:
        cx, cy = stack[-1]
        found = False
        for cell, between in neighbor_cells(cx, cy):
            if cell not in visited:
                visited.add(cell)
                stack.append(cell)
                walls.discard(between)
                walls.discard(cell)
                found = True
                break
        if not found:
            stack.pop()
    gx, gy = width - 1, height - 1
    walls.discard((gx, gy))
    if gx % 2 and gy % 2:
        # with both sides even the corner touches no carved cell
        walls.discard((gx - 1, gy))
    return GridWorld(
        [[IMPASSABLE if (x, y) in walls else 1 for x in range(width)] for y in range(height)]
    )


def scenario_maze(width: int, height: int, seed: int = 0) -> Scenario:
    world = generate_maze(width, height, seed=seed)
    return Scenario(
        name=f"maze_{width}x{height}_s{seed}",
        start=world.cell(0, 0),
        goal=world.cell(width - 1, height - 1),
        meta={"kind": "maze", "seed": seed},
    )


# 8-puzzle
GOAL_8: tuple[int, ...] = (1, 2, 3, 4, 5, 6, 7, 8, 0)
MOVES_8 = {
    0: [1, 3],
    1: [0, 2, 4],
    2: [1, 5],
    3: [0, 4, 6],
    4: [1, 3, 5, 7],
    5: [2, 4, 8],
    6: [3, 7],
    7: [4, 6, 8],
    8: [5, 7],
}


@dataclass(frozen=True)
class PuzzleState:
    """An 8-puzzle board read row by row; 0 is the blank.

    Transitions are labelled with the tile that slides into the blank.
    """

    tiles: tuple[int, ...]

    def successors(self) -> Iterable[StateTransition[PuzzleState]]:
        z = self.tiles.index(0)
        for nz in MOVES_8[z]:
            lst = list(self.tiles)
            lst[z], lst[nz] = lst[nz], lst[z]
            yield StateTransition(PuzzleState(tuple(lst)), self.tiles[nz], 1.0)

    def estimate_cost(self, target: PuzzleState) -> float:
        where = {val: idx for idx, val in enumerate(target.tiles)}
        dist = 0
        for idx, val in enumerate(self.tiles):
            if val == 0:
                continue
            goal_idx = where[val]
            dist += abs(idx % 3 - goal_idx % 3) + abs(idx // 3 - goal_idx // 3)
        return float(dist)


def scramble_puzzle(steps: int, seed: int = 0) -> PuzzleState:
    rng = random.Random(seed)
    s: tuple[int, ...] = GOAL_8
    for _ in range(steps):
        z = s.index(0)
        nz = rng.choice(MOVES_8[z])
        lst = list(s)
        lst[z], lst[nz] = lst[nz], lst[z]
        s = tuple(lst)
    return PuzzleState(s)


def scenario_puzzle(steps: int, seed: int = 0) -> Scenario:
    return Scenario(
        name=f"8p_{steps}_s{seed}",
        start=scramble_puzzle(steps, seed),
        goal=PuzzleState(GOAL_8),
        meta={"kind": "8p", "steps": steps, "seed": seed},
    )


def default_suite(seed: int = 0) -> list[Scenario]:
    """Scenarios small enough for both engines."""
    return [
        scenario_grid(6, 6, seed=seed, max_cost=3),
        scenario_walls(8, 8, density=0.2, seed=seed),
        scenario_maze(9, 9, seed=seed),
        scenario_puzzle(steps=14, seed=seed),
    ]
