from __future__ import annotations
from dataclasses import dataclass, field
from typing import Dict, List, Optional
import time

from core.burrow import Burrow
from core.errors import NoSolutionError, SearchBudgetExceededError
from core.move import Move
from core.search_node import SearchNode

from strategies.generators.base import MoveGenerator
from strategies.generators.legal_moves import LegalMoveGenerator
from strategies.heuristics.base import Heuristic
from strategies.heuristics.misplaced_cost import MisplacedCostHeuristic
from strategies.open_policy.base import OpenPolicy
from strategies.open_policy.heap import HeapOpen


@dataclass
class SearchResult:
    """Итог поиска: оптимальная стоимость, ходы, путь и метрики."""

    cost: int
    moves: List[Move]
    path: List[Burrow]
    metrics: Dict[str, float]


@dataclass
class BurrowAStar:
    """
    A* по неявному графу конфигураций норы.

    Параметры:
        start           : Burrow         — стартовая конфигурация (проверяется при создании)
        generator       : MoveGenerator  — перечисление рёбер (ходов)
        heuristic       : Heuristic      — допустимая оценка остатка
        open_policy     : OpenPolicy     — структура Open (куча с тем или иным tie-break)
        max_expansions  : int | None     — лимит раскрытий, None = без лимита
        verbose         : bool           — печатать прогресс
        progress_every  : int            — как часто печатать прогресс (в раскрытиях)

    Главный метод:
        run() -> SearchResult
    """

    start: Burrow
    generator: MoveGenerator = field(default_factory=LegalMoveGenerator)
    heuristic: Heuristic = field(default_factory=MisplacedCostHeuristic)
    open_policy: OpenPolicy = field(default_factory=HeapOpen)
    max_expansions: Optional[int] = None
    verbose: bool = False
    progress_every: int = 10000

    def __post_init__(self):
        # некорректный вход — ошибка до начала поиска
        self.start.validate()
        assert self.progress_every > 0, "progress_every должен быть > 0"

        # лучшая известная стоимость пути от старта до конфигурации
        self._dist: Dict[Burrow, int] = {}
        self._metrics: Dict[str, float] = self._fresh_metrics()

    # ------------------------------------------------------------
    # Публичный интерфейс
    # ------------------------------------------------------------
    def run(self) -> SearchResult:
        """
        Запустить A*.

        Возвращает SearchResult с оптимальной стоимостью.
        Бросает NoSolutionError, если цель недостижима,
        и SearchBudgetExceededError при превышении max_expansions.

        Каждый вызов начинает поиск заново: Open, карта расстояний
        и метрики сбрасываются.
        """
        self._reset()
        start_time = time.time()
        metrics = self._metrics
        try:
            while not self.open_policy.empty():
                node = self.open_policy.pop()

                # устаревшая запись: конфигурацию уже нашли дешевле
                if node.g > self._dist[node.burrow]:
                    metrics['stale_skipped'] += 1
                    continue

                if node.is_goal():
                    if self.verbose:
                        print(f"\n✓ Цель достигнута: стоимость {node.g}, "
                              f"раскрыто {metrics['expanded']}, ходов {node.depth()}")
                    return SearchResult(
                        cost=node.g,
                        moves=node.reconstruct_moves(),
                        path=node.reconstruct_path(),
                        metrics=dict(metrics),
                    )

                if self.max_expansions is not None and metrics['expanded'] >= self.max_expansions:
                    if self.verbose:
                        print(f"\n⚠️  Лимит раскрытий {self.max_expansions} исчерпан")
                    raise SearchBudgetExceededError(metrics['expanded'], self.max_expansions)

                metrics['expanded'] += 1
                if self.verbose and metrics['expanded'] % self.progress_every == 0:
                    print(f"  Раскрыто {metrics['expanded']}: f={node.f}, g={node.g}, "
                          f"Open={len(self.open_policy)}, известно конфигураций {len(self._dist)}")

                self._expand(node)
                metrics['max_open'] = max(metrics['max_open'], len(self.open_policy))

            if self.verbose:
                print(f"\n⚠️  Open пуст после {metrics['expanded']} раскрытий")
            raise NoSolutionError(
                f"Цель недостижима: исследовано {len(self._dist)} конфигураций"
            )
        finally:
            metrics['runtime_seconds'] = time.time() - start_time

    @property
    def metrics(self) -> Dict[str, float]:
        return dict(self._metrics)

    def known_distance(self, burrow: Burrow) -> Optional[int]:
        """Лучшая найденная стоимость до burrow (None, если не встречалась)."""
        return self._dist.get(burrow)

    # ------------------------------------------------------------
    # Внутреннее
    # ------------------------------------------------------------
    @staticmethod
    def _fresh_metrics() -> Dict[str, float]:
        return {
            'expanded': 0,
            'generated': 0,
            'improved': 0,
            'stale_skipped': 0,
            'max_open': 1,
            'runtime_seconds': 0.0,
        }

    def _reset(self) -> None:
        # остатки прошлого запуска в переданной извне Open
        while not self.open_policy.empty():
            self.open_policy.pop()

        self._dist = {self.start: 0}
        self._metrics = self._fresh_metrics()
        root = SearchNode(
            burrow=self.start,
            g=0,
            f=self.heuristic.estimate(self.start),
        )
        self.open_policy.push(root)

    def _expand(self, node: SearchNode) -> None:
        for move in self.generator.moves(node.burrow):
            self._metrics['generated'] += 1
            next_g = node.g + move.cost

            old_g = self._dist.get(move.result)
            if old_g is not None and next_g >= old_g:
                continue
            if old_g is not None:
                self._metrics['improved'] += 1

            self._dist[move.result] = next_g
            child = SearchNode(
                burrow=move.result,
                g=next_g,
                f=next_g + self.heuristic.estimate(move.result),
                parent=node,
                move=move,
            )
            self.open_policy.push(child)


def solve(
    start: Burrow,
    heuristic: Optional[Heuristic] = None,
    open_policy: Optional[OpenPolicy] = None,
    max_expansions: Optional[int] = None,
    verbose: bool = False,
) -> int:
    """Минимальная суммарная стоимость сортировки норы start."""
    search = BurrowAStar(
        start=start,
        heuristic=heuristic if heuristic is not None else MisplacedCostHeuristic(),
        open_policy=open_policy if open_policy is not None else HeapOpen(),
        max_expansions=max_expansions,
        verbose=verbose,
    )
    return search.run().cost
