# strategies/heuristics/base.py
from __future__ import annotations
from typing import Protocol

from core.burrow import Burrow


class Heuristic(Protocol):
    """
    Интерфейс оценки оставшейся стоимости для A*.

    Где это используется:
        - BurrowAStar: приоритет узла = g + estimate(burrow)

    Для оптимальности A* оценка должна быть допустимой:
    никогда не превышать истинную стоимость до цели.
    """

    def estimate(self, burrow: Burrow) -> int:
        """Нижняя граница стоимости от burrow до целевой конфигурации."""
        ...
