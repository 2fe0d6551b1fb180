from __future__ import annotations
from typing import Iterator, Optional

from core.amphipod import Amphipod, EMPTY
from core.burrow import Burrow, hallway, room_slot
from core.move import Move

from .base import MoveGenerator


class LegalMoveGenerator(MoveGenerator):
    """
    Генератор всех допустимых ходов по правилам норы.

    Бывает ровно два класса ходов:
    - коридор → своя комната:
        путь по коридору до проёма свободен, в комнате нет чужих,
        амфипод встаёт в самый дальний свободный слот;
    - комната → коридор:
        ходит только верхний (ближайший ко входу) амфипод комнаты,
        останавливаться можно на любой свободной клетке, кроме проёмов,
        пока сканирование влево/вправо не упрётся в занятую клетку.

    Переходов коридор → коридор и комната → комната напрямую нет.
    """

    def moves(self, burrow: Burrow) -> Iterator[Move]:
        yield from self._hallway_to_room(burrow)
        yield from self._room_to_hallway(burrow)

    # ------------------------------------------------------------
    # Коридор → комната
    # ------------------------------------------------------------
    def _hallway_to_room(self, burrow: Burrow) -> Iterator[Move]:
        layout = burrow.layout
        for start, tag in enumerate(burrow.hallway):
            if tag == EMPTY:
                continue
            kind = Amphipod(tag)
            room = kind.home_room
            door = layout.doorway(room)

            slot = self._settle_slot(burrow, room)
            if slot is None:
                continue

            # все клетки между start (не включая) и проёмом (включая) свободны
            if start < door:
                path = range(start + 1, door + 1)
            else:
                path = range(door, start)
            if any(burrow.hallway[pos] != EMPTY for pos in path):
                continue

            steps = abs(start - door) + slot + 1
            src, dst = hallway(start), room_slot(room, slot)
            yield Move(
                cost=steps * kind.step_cost,
                result=burrow.moved(src, dst),
                amphipod=kind,
                src=src,
                dst=dst,
            )

    @staticmethod
    def _settle_slot(burrow: Burrow, room: int) -> Optional[int]:
        """
        Слот, в который можно войти в комнату room, либо None.

        Вход закрыт, если вход в комнату занят или в ней остался чужой амфипод.
        Иначе — самый дальний свободный слот.
        """
        slots = burrow.rooms[room]
        if slots[0] != EMPTY:
            return None
        home = burrow.layout.home_kind(room)
        free = None
        for s, tag in enumerate(slots):
            if tag == EMPTY:
                free = s
            elif tag != home:
                return None
        return free

    # ------------------------------------------------------------
    # Комната → коридор
    # ------------------------------------------------------------
    def _room_to_hallway(self, burrow: Burrow) -> Iterator[Move]:
        layout = burrow.layout
        last = layout.hallway_len - 1
        for room, slots in enumerate(burrow.rooms):
            # верхний занятый слот
            slot = next((s for s, tag in enumerate(slots) if tag != EMPTY), None)
            if slot is None:
                continue

            kind = Amphipod(slots[slot])
            home = layout.home_kind(room)
            if kind == home and all(tag == home for tag in slots[slot:]):
                # уже на месте и никого чужого под собой не держит
                continue

            door = layout.doorway(room)
            src = room_slot(room, slot)
            exit_steps = slot + 1

            # влево и вправо независимо
            for scan in (range(door, -1, -1), range(door, last + 1)):
                steps = exit_steps
                for pos in scan:
                    if burrow.hallway[pos] != EMPTY:
                        break
                    if not layout.is_doorway(pos):
                        dst = hallway(pos)
                        yield Move(
                            cost=steps * kind.step_cost,
                            result=burrow.moved(src, dst),
                            amphipod=kind,
                            src=src,
                            dst=dst,
                        )
                    steps += 1
