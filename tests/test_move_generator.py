"""
Тесты генератора ходов.

Главная проверка: ходы LegalMoveGenerator совпадают с полным перебором
по явному графу клеток норы (BFS по свободным клеткам + правила входа/выхода).
"""

import os
import sys
from collections import deque
from itertools import permutations

sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", "src"))

import pytest

from core.amphipod import Amphipod, EMPTY, STEP_COST
from core.burrow import Burrow, Location, hallway, room_slot
from core.layout import BurrowLayout
from strategies.generators.legal_moves import LegalMoveGenerator
from utils.burrow_loader import burrow_from_rows


A, B, C, D = (int(k) for k in Amphipod)


def cell_graph(layout: BurrowLayout) -> dict:
    """Смежность клеток норы: коридор — цепочка, комната — цепочка от проёма вглубь."""
    adj = {}

    def link(u, v):
        adj.setdefault(u, []).append(v)
        adj.setdefault(v, []).append(u)

    for pos in range(layout.hallway_len - 1):
        link(hallway(pos), hallway(pos + 1))
    for r in range(layout.num_rooms):
        link(hallway(layout.doorway(r)), room_slot(r, 0))
        for s in range(layout.depth - 1):
            link(room_slot(r, s), room_slot(r, s + 1))
    return adj


def free_distances(burrow: Burrow, adj: dict, src: Location) -> dict:
    """BFS от src только по пустым клеткам: клетка → число шагов."""
    dist = {src: 0}
    q = deque([src])
    while q:
        u = q.popleft()
        for v in adj[u]:
            if v not in dist and burrow.is_empty(v):
                dist[v] = dist[u] + 1
                q.append(v)
    del dist[src]
    return dist


def brute_force_moves(burrow: Burrow) -> set:
    """Все допустимые (cost, result), найденные перебором пар (откуда, куда)."""
    layout = burrow.layout
    adj = cell_graph(layout)
    result = set()

    for src, tag in burrow.occupied():
        kind = Amphipod(tag)
        home = layout.home_kind(kind.home_room)
        for dst, steps in free_distances(burrow, adj, src).items():
            if src.in_hallway:
                # только в свою комнату
                if dst.in_hallway or dst.room != kind.home_room:
                    continue
                room = burrow.rooms[dst.room]
                if any(t not in (EMPTY, home) for t in room):
                    continue
                # глубже dst не должно остаться пустых слотов
                if any(t == EMPTY for t in room[dst.index + 1:]):
                    continue
            else:
                if not dst.in_hallway or layout.is_doorway(dst.index):
                    continue
                room = burrow.rooms[src.room]
                if src.room == kind.home_room and all(t == home for t in room[src.index:]):
                    continue
            result.add((steps * kind.step_cost, burrow.moved(src, dst)))
    return result


def reachable(start: Burrow, limit: int) -> list:
    """BFS по конфигурациям через LegalMoveGenerator, не больше limit штук."""
    gen = LegalMoveGenerator()
    seen = {start}
    order = [start]
    q = deque([start])
    while q and len(order) < limit:
        cur = q.popleft()
        for move in gen.moves(cur):
            if move.result not in seen:
                seen.add(move.result)
                order.append(move.result)
                q.append(move.result)
    return order


def example_burrow() -> Burrow:
    return burrow_from_rows(["BCBD", "ADCA"])


def test_example_start_moves():
    gen = LegalMoveGenerator()
    moves = list(gen.moves(example_burrow()))

    # четыре верхних амфипода, каждый может встать на любую из 7 клеток
    assert len(moves) == 4 * 7
    assert all(m.src.room is not None and m.src.index == 0 for m in moves)
    assert all(m.dst.in_hallway and m.dst.index not in (2, 4, 6, 8) for m in moves)

    by_target = {(m.src.room, m.dst.index): m.cost for m in moves}
    assert by_target[(0, 0)] == 3 * 10      # B: 1 шаг из комнаты + 2 по коридору
    assert by_target[(0, 10)] == 9 * 10
    assert by_target[(1, 3)] == 2 * 100     # C
    assert by_target[(3, 9)] == 2 * 1000    # D
    assert by_target[(3, 0)] == 9 * 1000


def test_moves_are_lazy_and_restartable():
    gen = LegalMoveGenerator()
    burrow = example_burrow()
    first = gen.moves(burrow)
    assert iter(first) is first
    assert list(first) == list(gen.moves(burrow))


def test_enter_empty_room_goes_to_back():
    burrow = burrow_from_rows([".BCD", ".BCD"], hallway="A.........A")
    moves = list(LegalMoveGenerator().moves(burrow))

    assert sorted((m.src.index, m.dst, m.cost) for m in moves) == [
        (0, room_slot(0, 1), 4),
        (10, room_slot(0, 1), 10),
    ]


def test_enter_above_correct_unit():
    burrow = burrow_from_rows([".BCD", "ABCD"], hallway="A..........")
    moves = list(LegalMoveGenerator().moves(burrow))

    assert len(moves) == 1
    assert moves[0].dst == room_slot(0, 0)
    assert moves[0].cost == 3
    assert moves[0].result.is_goal()


def test_enter_deep_room_above_two_correct_units():
    burrow = burrow_from_rows([".BC", "ABC", "ABC"], hallway="A........")
    assert burrow.layout == BurrowLayout(num_rooms=3, depth=3)
    moves = list(LegalMoveGenerator().moves(burrow))

    assert len(moves) == 1
    assert moves[0].dst == room_slot(0, 0)
    assert moves[0].cost == 3
    assert moves[0].result.is_goal()


def test_enter_deep_room_settles_in_deepest_empty_slot():
    burrow = burrow_from_rows([".BC", ".BC", "ABC"], hallway="A..A.....")
    moves = list(LegalMoveGenerator().moves(burrow))

    # обе A идут во второй слот: третий занят своей A, первый остаётся свободным
    assert sorted((m.src.index, m.dst, m.cost) for m in moves) == [
        (0, room_slot(0, 1), 4),
        (3, room_slot(0, 1), 3),
    ]


def test_closed_room_refuses_entry():
    # в дальнем слоте комнаты A сидит B
    burrow = burrow_from_rows([".CBD", "BDCA"], hallway="A..........")
    moves = list(LegalMoveGenerator().moves(burrow))

    assert moves
    assert not any(m.src == hallway(0) for m in moves)
    # B в комнате A обязан выйти
    assert any(m.src == room_slot(0, 1) for m in moves)


def test_blocked_hallway_path():
    burrow = burrow_from_rows(["..CD", "ABCD"], hallway="AB.........")
    moves = list(LegalMoveGenerator().moves(burrow))

    assert len(moves) == 1
    move = moves[0]
    assert move.amphipod is Amphipod.BRONZE
    assert move.src == hallway(1) and move.dst == room_slot(1, 0)
    assert move.cost == 4 * 10


def test_scan_stops_at_occupied_cell():
    burrow = burrow_from_rows([".CBD", "ADCA"], hallway="...B.......")
    gen = LegalMoveGenerator()
    from_room1 = [m for m in gen.moves(burrow) if m.src == room_slot(1, 0)]

    # влево упираемся в B на клетке 3, вправо — свободно до конца
    assert sorted(m.dst.index for m in from_room1) == [5, 7, 9, 10]


def test_settled_units_do_not_move():
    gen = LegalMoveGenerator()
    assert list(gen.moves(Burrow.goal())) == []

    # A у входа в свою комнату, но под ней чужой D: A должна выйти
    burrow = burrow_from_rows(["ABCA", "DBCD"])
    from_room0 = [m for m in gen.moves(burrow) if m.src.room == 0]
    assert from_room0 and all(m.amphipod is Amphipod.AMBER for m in from_room0)
    # B и C уже на месте
    assert not any(m.src.room in (1, 2) for m in gen.moves(burrow))


def _exit_room0_cost(kind: Amphipod) -> int:
    """Стоимость хода из комнаты 0 на клетку 0, когда в комнате 0 стоит kind."""
    layout = BurrowLayout(num_rooms=4, depth=1)
    others = [k for k in Amphipod if k is not kind]
    rooms = [[int(kind)]] + [[int(k)] for k in others]
    burrow = Burrow.from_rooms(rooms, layout=layout)

    move = next(
        m for m in LegalMoveGenerator().moves(burrow)
        if m.src == room_slot(0, 0) and m.dst == hallway(0)
    )
    assert move.steps == 3
    return move.cost


@pytest.mark.parametrize("kind", [Amphipod.COPPER, Amphipod.DESERT])
def test_move_cost_scales_with_kind(kind):
    base = _exit_room0_cost(Amphipod.BRONZE)
    cost = _exit_room0_cost(kind)
    assert base == 3 * STEP_COST[Amphipod.BRONZE]
    assert cost == 3 * STEP_COST[kind]
    assert cost * STEP_COST[Amphipod.BRONZE] == base * STEP_COST[kind]


def test_matches_brute_force_on_example_neighbourhood():
    gen = LegalMoveGenerator()
    for burrow in reachable(example_burrow(), limit=400):
        produced = [(m.cost, m.result) for m in gen.moves(burrow)]
        assert len(produced) == len(set(produced)), "генератор выдал дубликат"
        assert set(produced) == brute_force_moves(burrow)


@pytest.mark.parametrize("num_rooms,depth", [(2, 1), (2, 2), (3, 1), (3, 2), (2, 3), (2, 4)])
def test_matches_brute_force_on_small_layouts(num_rooms, depth):
    layout = BurrowLayout(num_rooms=num_rooms, depth=depth)
    units = [int(k) for k in layout.kinds for _ in range(depth)]
    gen = LegalMoveGenerator()

    starts = set()
    for perm in permutations(units):
        rooms = [list(perm[r * depth:(r + 1) * depth]) for r in range(num_rooms)]
        starts.add(Burrow.from_rooms(rooms, layout=layout))

    checked = set()
    for start in sorted(starts, key=lambda b: b.rooms)[:6]:
        for burrow in reachable(start, limit=300):
            if burrow in checked:
                continue
            checked.add(burrow)
            produced = {(m.cost, m.result) for m in gen.moves(burrow)}
            assert produced == brute_force_moves(burrow)
    assert checked


def test_moves_conserve_units_and_stay_valid():
    gen = LegalMoveGenerator()
    for burrow in reachable(example_burrow(), limit=300):
        counts = burrow.kind_counts()
        for move in gen.moves(burrow):
            assert move.result.kind_counts() == counts
            move.result.validate()
            assert not move.result.layout.is_doorway(move.dst.index) or not move.dst.in_hallway
            assert move.cost == move.steps * move.amphipod.step_cost
            # исходная конфигурация не изменилась
            assert burrow.cell(move.src) == int(move.amphipod)


if __name__ == "__main__":
    raise SystemExit(pytest.main([__file__]))
