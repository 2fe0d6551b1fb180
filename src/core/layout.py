from __future__ import annotations
from dataclasses import dataclass
from functools import cached_property
from typing import FrozenSet, Tuple

from .amphipod import Amphipod, STEP_COST
from .errors import InvalidBurrowError


@dataclass(frozen=True)
class BurrowLayout:
    """
    Геометрия норы: коридор + комнаты одинаковой глубины.

    ```
    #############
    #01234567890#
    ###0#0#0#0###
      #1#1#1#1#
      #########
    ```

    Комната r примыкает к клетке коридора 2 * (r + 1) ("дверной проём"),
    на проёме останавливаться нельзя. Слоты комнаты нумеруются от входа (0)
    к дальней стенке (depth - 1).
    """

    num_rooms: int = 4
    depth: int = 2

    def __post_init__(self):
        if not 1 <= self.num_rooms <= len(Amphipod):
            raise InvalidBurrowError(
                f"num_rooms должно быть в диапазоне 1..{len(Amphipod)}, получено {self.num_rooms}"
            )
        if self.depth < 1:
            raise InvalidBurrowError(f"depth должно быть >= 1, получено {self.depth}")
        for kind in self.kinds:
            if kind not in STEP_COST:
                raise InvalidBurrowError(f"Для вида {kind.name} не задана стоимость шага")

    @property
    def hallway_len(self) -> int:
        return 2 * self.num_rooms + 3

    @cached_property
    def kinds(self) -> Tuple[Amphipod, ...]:
        """Виды, участвующие в задаче (по одному на комнату)."""
        return tuple(Amphipod(r + 1) for r in range(self.num_rooms))

    @cached_property
    def doorways(self) -> FrozenSet[int]:
        return frozenset(self.doorway(r) for r in range(self.num_rooms))

    def doorway(self, room: int) -> int:
        """Клетка коридора перед входом в комнату room."""
        return 2 * (room + 1)

    def is_doorway(self, pos: int) -> bool:
        return pos % 2 == 0 and 2 <= pos <= 2 * self.num_rooms

    def home_kind(self, room: int) -> int:
        return room + 1


STANDARD_LAYOUT = BurrowLayout()
