from __future__ import annotations
from dataclasses import dataclass, field
from typing import Dict, Iterator, NamedTuple, Optional, Sequence, Tuple

import numpy as np

from .amphipod import Amphipod, EMPTY, cell_symbol
from .errors import InvalidBurrowError
from .layout import BurrowLayout, STANDARD_LAYOUT


class Location(NamedTuple):
    """
    Адрес клетки норы.

    room is None → клетка коридора с индексом index,
    иначе       → слот index комнаты room (0 — у входа).
    """

    room: Optional[int]
    index: int

    @property
    def in_hallway(self) -> bool:
        return self.room is None

    def __repr__(self) -> str:
        if self.room is None:
            return f"H{self.index}"
        return f"R{self.room}.{self.index}"


def hallway(pos: int) -> Location:
    return Location(None, pos)


def room_slot(room: int, slot: int) -> Location:
    return Location(room, slot)


@dataclass(frozen=True)
class Burrow:
    """
    Конфигурация норы: где стоит каждый амфипод в один момент времени.

    hallway[i]      — тег клетки коридора i (0 = пусто)
    rooms[r][s]     — тег слота s комнаты r, s = 0 у входа

    Immutable → можно безопасно класть в dict / set. Раскладка не участвует
    в сравнении и хэше: внутри одного поиска она одна.
    """

    hallway: Tuple[int, ...]
    rooms: Tuple[Tuple[int, ...], ...]
    layout: BurrowLayout = field(default=STANDARD_LAYOUT, compare=False, repr=False)

    # ------------------------------------------------------------
    # Конструкторы
    # ------------------------------------------------------------
    @classmethod
    def from_rooms(
        cls,
        rooms: Sequence[Sequence[int]],
        hallway: Optional[Sequence[int]] = None,
        layout: Optional[BurrowLayout] = None,
    ) -> Burrow:
        """
        Построить и проверить конфигурацию.

        rooms — список комнат, каждая от входа к дальней стенке.
        Если layout не задан, он выводится из формы rooms.
        """
        if layout is None:
            if not rooms:
                raise InvalidBurrowError("Нора без комнат")
            layout = BurrowLayout(num_rooms=len(rooms), depth=len(rooms[0]))
        if hallway is None:
            hallway = [EMPTY] * layout.hallway_len
        burrow = cls(
            hallway=tuple(int(v) for v in hallway),
            rooms=tuple(tuple(int(v) for v in room) for room in rooms),
            layout=layout,
        )
        burrow.validate()
        return burrow

    @classmethod
    def goal(cls, layout: BurrowLayout = STANDARD_LAYOUT) -> Burrow:
        """Единственная целевая конфигурация для раскладки."""
        return cls(
            hallway=(EMPTY,) * layout.hallway_len,
            rooms=tuple((layout.home_kind(r),) * layout.depth for r in range(layout.num_rooms)),
            layout=layout,
        )

    # ------------------------------------------------------------
    # Доступ к данным
    # ------------------------------------------------------------
    def cell(self, loc: Location) -> int:
        if loc.room is None:
            return self.hallway[loc.index]
        return self.rooms[loc.room][loc.index]

    def is_empty(self, loc: Location) -> bool:
        return self.cell(loc) == EMPTY

    def occupied(self) -> Iterator[Tuple[Location, int]]:
        """Все занятые клетки: сначала коридор, затем комнаты."""
        for pos, tag in enumerate(self.hallway):
            if tag != EMPTY:
                yield hallway(pos), tag
        for r, room in enumerate(self.rooms):
            for s, tag in enumerate(room):
                if tag != EMPTY:
                    yield room_slot(r, s), tag

    def kind_counts(self) -> Dict[Amphipod, int]:
        """Сколько амфиподов каждого вида стоит в норе."""
        tags = np.fromiter((tag for _, tag in self.occupied()), dtype=np.int64)
        counts = np.bincount(tags, minlength=len(Amphipod) + 1)
        return {kind: int(counts[kind]) for kind in Amphipod if counts[kind]}

    def is_goal(self) -> bool:
        if any(tag != EMPTY for tag in self.hallway):
            return False
        return all(
            all(tag == self.layout.home_kind(r) for tag in room)
            for r, room in enumerate(self.rooms)
        )

    # ------------------------------------------------------------
    # Изменение (copy-on-write)
    # ------------------------------------------------------------
    def moved(self, src: Location, dst: Location) -> Burrow:
        """
        Новая конфигурация, в которой амфипод из src переставлен в dst.
        Исходный объект не меняется.
        """
        tag = self.cell(src)
        hall = list(self.hallway)
        rooms = list(self.rooms)

        for loc, value in ((src, EMPTY), (dst, tag)):
            if loc.room is None:
                hall[loc.index] = value
            else:
                room = list(rooms[loc.room])
                room[loc.index] = value
                rooms[loc.room] = tuple(room)

        return Burrow(hallway=tuple(hall), rooms=tuple(rooms), layout=self.layout)

    # ------------------------------------------------------------
    # Проверка корректности
    # ------------------------------------------------------------
    def validate(self) -> None:
        """Бросает InvalidBurrowError, если конфигурация не соответствует раскладке."""
        layout = self.layout
        if len(self.hallway) != layout.hallway_len:
            raise InvalidBurrowError(
                f"Длина коридора {len(self.hallway)}, ожидалось {layout.hallway_len}"
            )
        if len(self.rooms) != layout.num_rooms:
            raise InvalidBurrowError(
                f"Комнат {len(self.rooms)}, ожидалось {layout.num_rooms}"
            )

        allowed = {EMPTY} | {int(k) for k in layout.kinds}
        for pos, tag in enumerate(self.hallway):
            if tag not in allowed:
                raise InvalidBurrowError(f"Недопустимый тег {tag} в коридоре, клетка {pos}")
            if tag != EMPTY and layout.is_doorway(pos):
                raise InvalidBurrowError(f"Амфипод стоит на дверном проёме {pos}")

        for r, room in enumerate(self.rooms):
            if len(room) != layout.depth:
                raise InvalidBurrowError(
                    f"Глубина комнаты {r} равна {len(room)}, ожидалось {layout.depth}"
                )
            seen_unit = False
            for s, tag in enumerate(room):
                if tag not in allowed:
                    raise InvalidBurrowError(f"Недопустимый тег {tag} в комнате {r}, слот {s}")
                if tag != EMPTY:
                    seen_unit = True
                elif seen_unit:
                    # пустой слот за занятым: амфипод "висит" над пустотой
                    raise InvalidBurrowError(f"Пустой слот {s} за занятым в комнате {r}")

        counts = self.kind_counts()
        for kind in layout.kinds:
            if counts.get(kind, 0) != layout.depth:
                raise InvalidBurrowError(
                    f"Амфиподов вида {kind.symbol}: {counts.get(kind, 0)}, ожидалось {layout.depth}"
                )

    # ------------------------------------------------------------
    # Отрисовка
    # ------------------------------------------------------------
    def render(self) -> str:
        """
        Человекочитаемая картинка норы:

        #############
        #...........#
        ###B#C#B#D###
          #A#D#C#A#
          #########
        """
        width = self.layout.hallway_len + 2
        lines = ["#" * width, "#" + "".join(cell_symbol(t) for t in self.hallway) + "#"]
        for s in range(self.layout.depth):
            row = "#".join(cell_symbol(room[s]) for room in self.rooms)
            if s == 0:
                lines.append("###" + row + "###")
            else:
                lines.append("  #" + row + "#")
        lines.append("  " + "#" * (width - 4))
        return "\n".join(lines)

    def __str__(self) -> str:
        return self.render()
