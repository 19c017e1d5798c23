from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from .types import HeuristicFn, default_heuristic


@dataclass
class SearchParams:
    """Per-call settings shared by both engines.

    weight:
      scales the heuristic wherever it is evaluated; values above 1 trade
      optimality for speed, 0 turns A* into uniform-cost search.
    heuristic:
      overrides ``State.estimate_cost`` for every estimation in the call.
    max_expansions / max_runtime_ms:
      optional guards; when one trips the search reports not-found.
    """

    weight: float = 1.0
    heuristic: HeuristicFn[Any] | None = field(default=None, repr=False)
    max_expansions: int | None = None
    max_runtime_ms: float | None = None
    log_every: int | None = None

    def __post_init__(self) -> None:
        assert self.weight >= 0.0, "weight must be ≥ 0"
        assert self.max_expansions is None or self.max_expansions > 0
        assert self.max_runtime_ms is None or self.max_runtime_ms > 0.0

    def heuristic_fn(self) -> HeuristicFn[Any]:
        return self.heuristic if self.heuristic is not None else default_heuristic
