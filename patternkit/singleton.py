"""Singleton: one shared, thread-safely created instance per class."""

from __future__ import annotations

import threading
from typing import Any

__all__ = ["Singleton"]


class Singleton:
    """Created by the first ``get_instance`` call; later calls bump its counter."""

    _lock = threading.Lock()

    def __init__(self, counter: int = 0) -> None:
        self._counter = counter

    @classmethod
    def get_instance(cls, counter: int) -> Singleton:
        with cls._lock:
            instance = cls.__dict__.get("_instance")
            if instance is None:
                instance = cls(counter)
                cls._instance = instance
            else:
                instance._counter += 1
            return instance

    def print_counter(self) -> str:
        message = f"Counter value: {self._counter}"
        print(message)
        return message

    @property
    def counter(self) -> int:
        return self._counter

    def __copy__(self) -> Singleton:
        raise TypeError("a Singleton cannot be copied")

    def __deepcopy__(self, memo: dict[int, Any]) -> Singleton:
        raise TypeError("a Singleton cannot be copied")