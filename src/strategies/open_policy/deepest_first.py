from __future__ import annotations
import heapq
import itertools
from typing import List, Tuple

from core.search_node import SearchNode
from .base import OpenPolicy


class DeepestFirstOpen(OpenPolicy):
    """
    Open-список с приоритетом по f, а при равном f — по наибольшему g.
    При равных f и g работает как стек (LIFO).

    Узлы с большим g ближе к цели при том же f, так что до цели
    обычно раскрывается меньше узлов.
    """

    def __init__(self):
        self._heap: List[Tuple[int, int, int, SearchNode]] = []
        self._counter = itertools.count()

    def push(self, node: SearchNode) -> None:
        # счётчик со знаком минус: позже вставленный извлекается раньше
        heapq.heappush(self._heap, (node.f, -node.g, -next(self._counter), node))

    def pop(self) -> SearchNode:
        return heapq.heappop(self._heap)[-1]

    def empty(self) -> bool:
        return len(self._heap) == 0

    def __len__(self) -> int:
        return len(self._heap)
