
from __future__ import annotations
import heapq
import itertools
from typing import List, Tuple

from core.search_node import SearchNode
from .base import OpenPolicy


class HeapOpen(OpenPolicy):
    """
    Open-список как двоичная куча по f.

    При равном f узлы извлекаются в порядке вставки (FIFO),
    поэтому порядок обхода детерминирован.
    """

    def __init__(self):
        self._heap: List[Tuple[int, int, SearchNode]] = []
        self._counter = itertools.count()

    def push(self, node: SearchNode) -> None:
        heapq.heappush(self._heap, (node.f, next(self._counter), node))

    def pop(self) -> SearchNode:
        return heapq.heappop(self._heap)[-1]

    def empty(self) -> bool:
        return len(self._heap) == 0

    def __len__(self) -> int:
        return len(self._heap)
