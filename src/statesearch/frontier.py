from __future__ import annotations

from dataclasses import dataclass, field
import math
from typing import Generic

from .core.types import S as State


@dataclass(eq=False)
class SearchNode(Generic[State]):
    """Bookkeeping for one discovered state during a best-first search."""

    state: State
    cost_from_start: float = math.inf
    estimated_total_cost: float = math.inf
    estimate: float = 0.0
    parent: SearchNode[State] | None = field(default=None, repr=False)
    open: bool = False
    closed: bool = False
    index: int = -1
    order: int = 0


class Frontier(Generic[State]):
    """Binary min-heap of nodes keyed by estimated total cost.

    Every node records its own heap position, so a lowered priority is
    repaired in place. Equal priorities come out in the order they were set
    (by ``insert`` or ``decrease_priority``).
    """

    def __init__(self) -> None:
        self._heap: list[SearchNode[State]] = []
        self._counter = 0

    def __len__(self) -> int:
        return len(self._heap)

    def __bool__(self) -> bool:
        return bool(self._heap)

    def __contains__(self, node: SearchNode[State]) -> bool:
        i = node.index
        return 0 <= i < len(self._heap) and self._heap[i] is node

    def empty(self) -> bool:
        return not self._heap

    def peek(self) -> SearchNode[State] | None:
        return self._heap[0] if self._heap else None

    def insert(self, node: SearchNode[State]) -> None:
        node.order = self._next_order()
        node.index = len(self._heap)
        node.open = True
        self._heap.append(node)
        self._sift_up(node.index)

    def extract_min(self) -> SearchNode[State] | None:
        if not self._heap:
            return None
        heap = self._heap
        top = heap[0]
        last = heap.pop()
        if heap:
            heap[0] = last
            last.index = 0
            self._sift_down(0)
        top.index = -1
        top.open = False
        return top

    def decrease_priority(self, node: SearchNode[State]) -> None:
        assert node in self, "node is not on the frontier"
        node.order = self._next_order()
        # an unchanged cost with a fresh order sorts later, so sift both ways
        self._sift_up(node.index)
        self._sift_down(node.index)

    def _next_order(self) -> int:
        self._counter += 1
        return self._counter

    @staticmethod
    def _less(a: SearchNode[State], b: SearchNode[State]) -> bool:
        if a.estimated_total_cost != b.estimated_total_cost:
            return a.estimated_total_cost < b.estimated_total_cost
        return a.order < b.order

    def _swap(self, i: int, j: int) -> None:
        heap = self._heap
        heap[i], heap[j] = heap[j], heap[i]
        heap[i].index = i
        heap[j].index = j

    def _sift_up(self, i: int) -> None:
        heap = self._heap
        while i > 0:
            parent = (i - 1) // 2
            if not self._less(heap[i], heap[parent]):
                break
            self._swap(i, parent)
            i = parent

    def _sift_down(self, i: int) -> None:
        heap = self._heap
        n = len(heap)
        while True:
            smallest = i
            for child in (2 * i + 1, 2 * i + 2):
                if child < n and self._less(heap[child], heap[smallest]):
                    smallest = child
            if smallest == i:
                return
            self._swap(i, smallest)
            i = smallest
