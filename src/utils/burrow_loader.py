from __future__ import annotations

import json
from pathlib import Path
from typing import List, Sequence

import numpy as np

from core.amphipod import Amphipod, EMPTY, cell_symbol
from core.burrow import Burrow
from core.errors import InvalidBurrowError
from core.layout import BurrowLayout


# Строки, которые вставляются в каждую комнату при "разворачивании" норы
UNFOLD_ROWS = ("DCBA", "DBAC")

EMPTY_CHARS = {".", " "}


def _tag(ch: str) -> int:
    if ch in EMPTY_CHARS:
        return EMPTY
    try:
        return int(Amphipod.from_symbol(ch))
    except ValueError as exc:
        raise InvalidBurrowError(str(exc)) from exc


def burrow_from_rows(rows: Sequence[str], hallway: str | None = None) -> Burrow:
    """
    Собрать Burrow из строк слотов, по строке на уровень (от входа вглубь).

    Пример (стандартный пример задачи):
        burrow_from_rows(["BCBD", "ADCA"])

    Символы:
        'A'..'D'   – амфиподы
        '.' / ' '  – пустой слот
    """
    if not rows:
        raise InvalidBurrowError("Нет ни одной строки комнат")
    if not all(isinstance(row, str) for row in rows):
        raise InvalidBurrowError("Строки комнат должны быть строками")
    if hallway is not None and not isinstance(hallway, str):
        raise InvalidBurrowError("Коридор должен быть строкой")
    width = len(rows[0])
    for row in rows:
        if len(row) != width:
            raise InvalidBurrowError("Строки комнат разной длины")

    layout = BurrowLayout(num_rooms=width, depth=len(rows))
    rooms = [[_tag(row[r]) for row in rows] for r in range(width)]
    hall = None if hallway is None else [_tag(ch) for ch in hallway]
    return Burrow.from_rooms(rooms, hallway=hall, layout=layout)


def burrow_to_rows(burrow: Burrow) -> List[str]:
    """Обратное к burrow_from_rows: строки слотов от входа вглубь."""
    return [
        "".join(cell_symbol(room[s]) for room in burrow.rooms)
        for s in range(burrow.layout.depth)
    ]


def unfold_burrow(burrow: Burrow, rows: Sequence[str] = UNFOLD_ROWS) -> Burrow:
    """
    "Развернуть" нору: вставить rows между верхним слотом и остальными.

    Из стандартной норы глубины 2 получается нора глубины 4,
    как во второй части исходной задачи.
    """
    if any(tag != EMPTY for tag in burrow.hallway):
        raise InvalidBurrowError("Разворачивать можно только нору с пустым коридором")
    current = burrow_to_rows(burrow)
    return burrow_from_rows(current[:1] + list(rows) + current[1:])


def load_burrow(json_path: str | Path) -> Burrow:
    """
    Загрузить конфигурацию из JSON вида:

        {"rows": ["BCBD", "ADCA"], "hallway": "...........", "unfold": false}

    "hallway" и "unfold" необязательны.
    """
    try:
        data = json.loads(Path(json_path).read_text())
    except json.JSONDecodeError as exc:
        raise InvalidBurrowError(f"JSON {json_path} не читается: {exc}") from exc
    if not isinstance(data, dict):
        raise InvalidBurrowError(f"JSON {json_path} must be an object")

    rows = data.get("rows")
    if not rows or not isinstance(rows, list):
        raise InvalidBurrowError(f"JSON {json_path} does not contain 'rows' list")

    burrow = burrow_from_rows(rows, hallway=data.get("hallway"))
    if data.get("unfold", False):
        burrow = unfold_burrow(burrow)
    return burrow


def save_burrow(burrow: Burrow, json_path: str | Path) -> None:
    payload = {
        "rows": burrow_to_rows(burrow),
        "hallway": "".join(cell_symbol(tag) for tag in burrow.hallway),
    }
    Path(json_path).write_text(json.dumps(payload, indent=2))


def generate_random_burrow(layout: BurrowLayout | None = None, *, seed: int = 0) -> Burrow:
    """
    Случайная стартовая нора: коридор пуст, амфиподы перемешаны по слотам.

    Args:
        layout: раскладка (по умолчанию стандартная 4x2)
        seed: RNG seed for reproducibility

    Разрешимость не гарантируется: на глубоких раскладках встречаются
    тупиковые расстановки, тогда поиск бросит NoSolutionError.
    """
    if layout is None:
        layout = BurrowLayout()
    rng = np.random.default_rng(seed)

    units = np.repeat(np.array([int(k) for k in layout.kinds]), layout.depth)
    rng.shuffle(units)
    grid = units.reshape(layout.num_rooms, layout.depth)
    rooms = [[int(tag) for tag in grid[r]] for r in range(layout.num_rooms)]
    return Burrow.from_rooms(rooms, layout=layout)
