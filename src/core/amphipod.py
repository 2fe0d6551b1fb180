from __future__ import annotations
from enum import IntEnum
from typing import Dict


# Пустая клетка коридора / комнаты
EMPTY = 0


class Amphipod(IntEnum):
    """
    Вид амфипода.

    Значение вида совпадает с тегом клетки в Burrow (0 зарезервирован под EMPTY),
    а домашняя комната вида — комната с индексом value - 1.
    """

    AMBER = 1
    BRONZE = 2
    COPPER = 3
    DESERT = 4

    @property
    def symbol(self) -> str:
        return self.name[0]

    @property
    def home_room(self) -> int:
        return self.value - 1

    @property
    def step_cost(self) -> int:
        return STEP_COST[self]

    @classmethod
    def from_symbol(cls, ch: str) -> "Amphipod":
        for kind in cls:
            if kind.symbol == ch:
                return kind
        raise ValueError(f"Неизвестный вид амфипода: {ch!r}")


# Стоимость одного шага для каждого вида
STEP_COST: Dict[Amphipod, int] = {
    Amphipod.AMBER: 1,
    Amphipod.BRONZE: 10,
    Amphipod.COPPER: 100,
    Amphipod.DESERT: 1000,
}


def cell_symbol(tag: int) -> str:
    """Символ клетки для отрисовки: '.' для пустой, иначе буква вида."""
    if tag == EMPTY:
        return "."
    return Amphipod(tag).symbol
