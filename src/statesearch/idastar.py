from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
import math
import time
from typing import Any, Generic

from .astar import SearchStats
from .core.params import SearchParams
from .core.types import HeuristicFn, S as State, SearchResult, StateTransition
from .logging import get_logger as _get_logger, search_fields


@dataclass
class IDAStarStats(SearchStats):
    rounds: int = 0
    max_depth: int = 0


class _GuardTripped(Exception):
    pass


class IDAStar(Generic[State]):  # pylint: disable=too-many-instance-attributes
    """Iterative-deepening A*.

    Repeats a depth-first search bounded by ``g + w * h``. After a failed
    round the bound rises to the smallest estimate that was pruned. Nothing
    survives between rounds except the bound, so memory is linear in the
    depth of the current path. States already on that path are skipped, and
    states reached by other paths may be expanded again.
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
        self.stats = IDAStarStats()
        self.bound = math.inf

    def _estimate(self, s: State) -> float:
        return float(self.h(s, self.goal)) * self.w

    def run(self) -> SearchResult:
        t0 = time.perf_counter()
        self.stats = IDAStarStats()
        if self.start == self.goal:
            self.bound = 0.0
            return SearchResult([], 0.0, True)
        self.bound = self._estimate(self.start)
        try:
            while True:
                self.stats.rounds += 1
                fields = self._fields("round")
                self.logger.debug(
                    "round=%(round)d bound=%(bound)s expansions=%(exp)d", fields, extra=fields
                )
                result, next_bound = self._bounded_dfs(t0)
                if result is not None:
                    return result
                if math.isinf(next_bound):
                    return SearchResult([], math.inf, False)
                self.bound = next_bound
        except _GuardTripped as exc:
            self.logger.info("%s reached; stopping search", exc, extra=self._fields(str(exc)))
            return SearchResult([], math.inf, False)
        finally:
            self.stats.runtime_ms += (time.perf_counter() - t0) * 1000.0

    def _fields(self, event: str) -> dict[str, object]:
        return search_fields(
            "idastar",
            event,
            round=self.stats.rounds,
            bound=self.bound,
            exp=self.stats.expansions,
            gen=self.stats.generated,
        )

    def _check_guards(self, t0: float) -> None:
        if self.max_expansions is not None and self.stats.expansions >= self.max_expansions:
            raise _GuardTripped("max_expansions")
        if self.max_runtime_ms is not None:
            if (time.perf_counter() - t0) * 1000.0 > self.max_runtime_ms:
                raise _GuardTripped("max_runtime_ms")

    def _bounded_dfs(self, t0: float) -> tuple[SearchResult | None, float]:
        """Run one round; return the result on success, else the next bound."""
        bound = self.bound
        f_start = self._estimate(self.start)
        if f_start > bound:
            return None, f_start
        # states[i] leaves through taken[i]; len(taken) == len(states) - 1
        states: list[State] = [self.start]
        taken: list[StateTransition[State]] = []
        on_path: set[State] = {self.start}
        g: list[float] = [0.0]
        pending: list[Iterator[StateTransition[State]]] = [self._open(self.start, t0)]
        minimum = math.inf
        while pending:
            edge = next(pending[-1], None)
            if edge is None:
                pending.pop()
                g.pop()
                on_path.discard(states.pop())
                if taken:
                    taken.pop()
                continue
            self.stats.generated += 1
            nxt = edge.state
            if nxt in on_path:
                continue
            cost = g[-1] + float(edge.cost)
            f = cost + self._estimate(nxt)
            if f > bound:
                if f < minimum:
                    minimum = f
                continue
            taken.append(edge)
            if nxt == self.goal:
                path = [
                    StateTransition(s, e.transition, e.cost) for s, e in zip(states, taken)
                ]
                return SearchResult(path, bound, True), bound
            states.append(nxt)
            on_path.add(nxt)
            g.append(cost)
            if len(taken) > self.stats.max_depth:
                self.stats.max_depth = len(taken)
            pending.append(self._open(nxt, t0))
        return None, minimum

    def _open(self, s: State, t0: float) -> Iterator[StateTransition[State]]:
        self._check_guards(t0)
        self.stats.expansions += 1
        if self.log_every and (self.stats.expansions % self.log_every == 0):
            fields = self._fields("progress")
            self.logger.info(
                "expansions=%(exp)d, generated=%(gen)d, bound=%(bound)s", fields, extra=fields
            )
        return iter(s.successors())


def iterative_search(
    start: Any,
    goal: Any,
    heuristic: HeuristicFn[Any] | None = None,
    weight: float = 1.0,
) -> SearchResult:
    """Same contract as ``astar.search`` using memory linear in the path depth."""
    params = SearchParams(weight=weight, heuristic=heuristic)
    return IDAStar(start, goal, params=params).run()
