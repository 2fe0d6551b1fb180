from __future__ import annotations
from dataclasses import dataclass

from .amphipod import Amphipod
from .burrow import Burrow, Location


@dataclass(frozen=True)
class Move:
    """
    Одно ребро неявного графа конфигураций.

    Хранит:
        cost : int
            Стоимость хода = число пройденных клеток * стоимость шага вида.

        result : Burrow
            Конфигурация после хода.

        amphipod : Amphipod
            Кто ходит.

        src, dst : Location
            Откуда и куда.
    """

    cost: int
    result: Burrow
    amphipod: Amphipod
    src: Location
    dst: Location

    @property
    def steps(self) -> int:
        """Число пройденных клеток."""
        return self.cost // self.amphipod.step_cost

    def __repr__(self):
        return f"Move({self.amphipod.symbol}: {self.src!r} -> {self.dst!r}, cost={self.cost})"
