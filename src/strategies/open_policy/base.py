
from __future__ import annotations
from typing import Protocol

from core.search_node import SearchNode


class OpenPolicy(Protocol):
    """
    Интерфейс управления Open-списком узлов A*.

    OpenPolicy определяет:
      - как добавлять узлы (push)
      - в каком порядке извлекать (pop): всегда минимальный node.f,
        а при равенстве f — на усмотрение стратегии
      - как проверять пустоту

    Это чистый Strategy Pattern.
    """

    def push(self, node: SearchNode) -> None:
        """Добавить узел в структуру."""
        ...

    def pop(self) -> SearchNode:
        """Удалить и вернуть узел с минимальным f."""
        ...

    def empty(self) -> bool:
        """True если Open-список пуст."""
        ...

    def __len__(self) -> int:
        """Число узлов в Open (включая устаревшие дубликаты)."""
        ...
