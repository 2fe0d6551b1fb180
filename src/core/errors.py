class BurrowError(Exception):
    """Базовое исключение решателя."""


class InvalidBurrowError(BurrowError, ValueError):
    """Некорректная конфигурация или раскладка (обнаруживается до поиска)."""


class NoSolutionError(BurrowError, RuntimeError):
    """Open-список исчерпан, а целевая конфигурация так и не достигнута."""


class SearchBudgetExceededError(BurrowError, RuntimeError):
    """Превышен лимит раскрытий узлов (max_expansions)."""

    def __init__(self, expanded: int, limit: int):
        super().__init__(f"Превышен лимит раскрытий: {expanded} >= {limit}")
        self.expanded = expanded
        self.limit = limit
