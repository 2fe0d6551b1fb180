# strategies/heuristics/misplaced_cost.py
from __future__ import annotations

from core.amphipod import STEP_COST, Amphipod, EMPTY
from core.burrow import Burrow

from .base import Heuristic


class MisplacedCostHeuristic(Heuristic):
    """
    Сумма по всем "не дома" амфиподам стоимости пути до своей комнаты
    без учёта чужих амфиподов на пути.

    - в коридоре на клетке p:       cost * (|p - door_home| + 1)
    - в чужой комнате r, слот s:    cost * (|door_r - door_home| + (s + 1) + 1)
    - в своей комнате:              0

    Каждый такой амфипод обязан пройти хотя бы столько клеток, поэтому оценка
    допустима. На корректной конфигурации равна нулю ровно в цели.
    """

    def estimate(self, burrow: Burrow) -> int:
        layout = burrow.layout
        total = 0

        for pos, tag in enumerate(burrow.hallway):
            if tag == EMPTY:
                continue
            door = layout.doorway(tag - 1)
            total += STEP_COST[Amphipod(tag)] * (abs(pos - door) + 1)

        for room, slots in enumerate(burrow.rooms):
            door = layout.doorway(room)
            for slot, tag in enumerate(slots):
                if tag == EMPTY or tag - 1 == room:
                    continue
                home_door = layout.doorway(tag - 1)
                total += STEP_COST[Amphipod(tag)] * (abs(door - home_door) + slot + 2)

        return total
