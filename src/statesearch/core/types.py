from __future__ import annotations

from collections.abc import Hashable, Iterable
from dataclasses import dataclass
from typing import Any, Generic, NamedTuple, Protocol, TypeVar

S = TypeVar("S", bound=Hashable)
_StateContra_contra = TypeVar("_StateContra_contra", bound=Hashable, contravariant=True)


@dataclass(frozen=True)
class StateTransition(Generic[S]):
    """An edge of the state graph.

    As a successor record ``state`` is the state being transitioned to. As an
    entry of a solution path ``state`` is the state the transition leaves from.
    """

    state: S
    transition: Any = None
    cost: float = 0.0


class State(Protocol):
    """A vertex of an implicit weighted state graph.

    Implementations must be hashable, and equal states must hash equally.
    Edge costs must be non-negative and ``estimate_cost`` must never
    overestimate the remaining cost; the engines do not check either.
    """

    def successors(self) -> Iterable[StateTransition[Any]]: ...

    def estimate_cost(self, target: Any) -> float: ...


class HeuristicFn(Protocol[_StateContra_contra]):
    def __call__(self, state: _StateContra_contra, target: _StateContra_contra) -> float: ...


def default_heuristic(state: Any, target: Any) -> float:
    return float(state.estimate_cost(target))


class SearchResult(NamedTuple):
    path: list[StateTransition[Any]]
    cost: float
    found: bool
