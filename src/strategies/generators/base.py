from __future__ import annotations
from typing import Iterator, Protocol

from core.burrow import Burrow
from core.move import Move


class MoveGenerator(Protocol):
    """
    Интерфейс генератора ходов для A*.

    Генератор отвечает за:
        - перечисление ВСЕХ допустимых ходов одного амфипода из конфигурации
        - проверку блокировок в коридоре и правил входа в комнату
        - подсчёт стоимости каждого хода

    Важно:
        moves() — чистая функция от Burrow: ничего не меняет, повторный вызов
        даёт ту же последовательность в том же порядке.
    """

    def moves(self, burrow: Burrow) -> Iterator[Move]:
        """
        Лениво перечислить ходы из burrow.

        Возвращает:
            итератор Move(cost, result, amphipod, src, dst)
        """
        ...
