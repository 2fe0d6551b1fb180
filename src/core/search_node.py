from __future__ import annotations
from dataclasses import dataclass
from typing import List, Optional

from .burrow import Burrow
from .move import Move


@dataclass(eq=False)
class SearchNode:
    """
    Узел A* поверх конфигураций норы.

    Содержит:
        burrow  : Burrow
            Конфигурация в этой точке поиска.

        g       : int
            Стоимость пути от старта на момент вставки в Open.

        f       : int
            Приоритет в Open: g + оценка эвристики.

        parent  : SearchNode | None
            Откуда пришли (для восстановления пути).

        move    : Move | None
            Ход из parent в этот узел. None только у корня.
    """

    burrow: Burrow
    g: int
    f: int
    parent: Optional["SearchNode"] = None
    move: Optional[Move] = None

    def is_goal(self) -> bool:
        return self.burrow.is_goal()

    def reconstruct_moves(self) -> List[Move]:
        """Ходы от корня до этого узла."""
        moves = []
        node = self
        while node.move is not None:
            moves.append(node.move)
            node = node.parent
        return list(reversed(moves))

    def reconstruct_path(self) -> List[Burrow]:
        """
        Полный путь конфигураций от корня до этого узла.
        Используется, когда A* нашёл цель.
        """
        path = []
        node = self
        while node is not None:
            path.append(node.burrow)
            node = node.parent
        return list(reversed(path))

    def depth(self) -> int:
        """Глубина узла (для статистики/отладки)."""
        d = 0
        node = self.parent
        while node is not None:
            d += 1
            node = node.parent
        return d

    def __repr__(self):
        return f"SearchNode(g={self.g}, f={self.f}, depth={self.depth()})"
