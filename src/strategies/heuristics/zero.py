# strategies/heuristics/zero.py
from __future__ import annotations

from core.burrow import Burrow

from .base import Heuristic


class ZeroHeuristic(Heuristic):
    """Нулевая оценка: A* вырождается в Dijkstra. Удобно для сверки оптимума."""

    def estimate(self, burrow: Burrow) -> int:
        return 0
