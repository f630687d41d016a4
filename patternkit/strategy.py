"""Strategy: a context delegates its work to an interchangeable strategy."""

from __future__ import annotations

from abc import ABC, abstractmethod

__all__ = ["StrategyInterface", "StrategyConcrete", "Context"]


class StrategyInterface(ABC):
    @abstractmethod
    def do_something(self, data: int) -> str | None:
        """Do the work on ``data`` in this strategy's way."""


class StrategyConcrete(StrategyInterface):
    PREFIX = "I'm the StrategyConcrete. I'll do in my way using: "

    def do_something(self, data: int) -> str:
        message = f"{self.PREFIX}{data}"
        print(message)
        return message


class Context:
    """Holds some data and applies the current strategy to it."""

    def __init__(self, strategy: StrategyInterface | None = None, data: int = 0) -> None:
        self._strategy = strategy
        self.data = data

    def set_strategy(self, strategy: StrategyInterface | None) -> None:
        self._strategy = strategy

    @property
    def strategy(self) -> StrategyInterface | None:
        return self._strategy

    def apply_strategy(self) -> str | None:
        if self._strategy is None:
            raise RuntimeError("context has no strategy")
        return self._strategy.do_something(self.data)