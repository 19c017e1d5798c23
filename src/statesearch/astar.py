from __future__ import annotations

from dataclasses import dataclass
import math
import time
from typing import Any, Generic

from .core.params import SearchParams
from .core.types import HeuristicFn, S as State, SearchResult, StateTransition
from .frontier import Frontier, SearchNode
from .logging import get_logger as _get_logger, search_fields


@dataclass
class SearchStats:
    expansions: int = 0
    generated: int = 0
    runtime_ms: float = 0.0


class AStar(Generic[State]):  # pylint: disable=too-many-instance-attributes
    """Best-first (A*) search from ``start`` to ``goal``.

    Each ``run`` owns a fresh node registry and frontier. With an admissible,
    consistent heuristic and ``weight <= 1`` the returned cost is optimal.
    """

    def __init__(
        self,
        start: State,
        goal: State,
        *,
        params: SearchParams | None = None,
        logger: Any | None = None,
    ) -> None:
        cfg = params or SearchParams()
        self.start = start
        self.goal = goal
        self.h: HeuristicFn[Any] = cfg.heuristic_fn()
        self.w = float(cfg.weight)
        self.max_expansions = cfg.max_expansions
        self.max_runtime_ms = cfg.max_runtime_ms
        self.log_every = cfg.log_every
        self.logger = logger or _get_logger(__name__)
        self.nodes: dict[State, SearchNode[State]] = {}
        self.frontier: Frontier[State] = Frontier()
        self.stats = SearchStats()

    def _estimate(self, s: State) -> float:
        return float(self.h(s, self.goal)) * self.w

    def _reset(self) -> None:
        self.nodes = {}
        self.frontier = Frontier()
        self.stats = SearchStats()
        estimate = self._estimate(self.start)
        root = SearchNode(
            self.start, cost_from_start=0.0, estimated_total_cost=estimate, estimate=estimate
        )
        self.nodes[self.start] = root
        self.frontier.insert(root)

    def _reconstruct(self, node: SearchNode[State]) -> list[StateTransition[State]]:
        chain: list[SearchNode[State]] = []
        cur: SearchNode[State] | None = node
        while cur is not None:
            chain.append(cur)
            cur = cur.parent
        chain.reverse()
        path: list[StateTransition[State]] = []
        for prev, nxt in zip(chain, chain[1:]):
            edge = _cheapest_edge(prev.state, nxt.state)
            path.append(StateTransition(prev.state, edge.transition, edge.cost))
        return path

    def _fields(self, event: str) -> dict[str, object]:
        return search_fields(
            "astar",
            event,
            exp=self.stats.expansions,
            gen=self.stats.generated,
            open=len(self.frontier),
        )

    def _stop(self, t0: float) -> SearchResult:
        self.stats.runtime_ms += (time.perf_counter() - t0) * 1000.0
        return SearchResult([], math.inf, False)

    def run(self) -> SearchResult:
        t0 = time.perf_counter()
        if self.start == self.goal:
            self.stats = SearchStats()
            return SearchResult([], 0.0, True)
        self._reset()
        while True:
            if self.max_runtime_ms is not None:
                if (time.perf_counter() - t0) * 1000.0 > self.max_runtime_ms:
                    self.logger.info(
                        "max_runtime_ms reached; stopping search",
                        extra=self._fields("max_runtime_ms"),
                    )
                    return self._stop(t0)
            current = self.frontier.extract_min()
            if current is None:
                return self._stop(t0)
            if current.state == self.goal:
                self.stats.runtime_ms += (time.perf_counter() - t0) * 1000.0
                return SearchResult(self._reconstruct(current), current.cost_from_start, True)
            current.closed = True
            self.stats.expansions += 1
            if self.log_every and (self.stats.expansions % self.log_every == 0):
                fields = self._fields("progress")
                self.logger.info(
                    "expansions=%(exp)d, generated=%(gen)d, open=%(open)d", fields, extra=fields
                )
            if self.max_expansions is not None and self.stats.expansions >= self.max_expansions:
                self.logger.info(
                    "max_expansions reached; stopping search",
                    extra=self._fields("max_expansions"),
                )
                return self._stop(t0)
            self._expand(current)

    def _expand(self, current: SearchNode[State]) -> None:
        g_s = current.cost_from_start
        for edge in current.state.successors():
            self.stats.generated += 1
            node = self.nodes.get(edge.state)
            if node is not None and node.closed:
                continue
            new_g = g_s + float(edge.cost)
            if node is None:
                estimate = self._estimate(edge.state)
                node = SearchNode(edge.state, estimate=estimate)
                self.nodes[edge.state] = node
            elif new_g >= node.cost_from_start:
                continue
            node.cost_from_start = new_g
            node.estimated_total_cost = new_g + node.estimate
            node.parent = current
            if node.open:
                self.frontier.decrease_priority(node)
            else:
                self.frontier.insert(node)


def _cheapest_edge(source: Any, target: Any) -> StateTransition[Any]:
    best: StateTransition[Any] | None = None
    for edge in source.successors():
        if edge.state == target and (best is None or edge.cost < best.cost):
            best = edge
    assert best is not None, "successors changed during the search"
    return best


def search(
    start: Any,
    goal: Any,
    heuristic: HeuristicFn[Any] | None = None,
    weight: float = 1.0,
) -> SearchResult:
    """Return ``(path, cost, found)`` for the lowest-cost path from start to goal."""
    params = SearchParams(weight=weight, heuristic=heuristic)
    return AStar(start, goal, params=params).run()
