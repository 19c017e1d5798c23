"""statesearch: A* and IDA* shortest-path search over implicit weighted state graphs.

Public API:
- search / AStar (best-first, open/closed node set)
- iterative_search / IDAStar (iterative deepening, memory linear in path depth)
- State, StateTransition, SearchParams, SearchResult
- grid worlds and scenarios for tests and benchmarks
"""
from .astar import AStar, SearchStats, search
from .core.params import SearchParams
from .core.types import HeuristicFn, SearchResult, State, StateTransition
from .frontier import Frontier, SearchNode
from .idastar import IDAStar, IDAStarStats, iterative_search
from . import scenarios

__all__ = [
    "AStar", "IDAStar", "search", "iterative_search", "SearchParams", "SearchResult",
    "SearchStats", "IDAStarStats", "State", "StateTransition", "HeuristicFn", "Frontier",
    "SearchNode", "scenarios",
]

__version__ = "0.1.0"
