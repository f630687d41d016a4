"""Iterator: walk an aggregate's items without exposing how they are stored."""

from __future__ import annotations

from collections.abc import Iterator as _PyIterator
from typing import Generic, TypeVar

__all__ = ["Aggregate", "Iterator"]

T = TypeVar("T")


class Aggregate(Generic[T]):
    """An ordered collection that hands out explicit iterators over itself."""

    def __init__(self) -> None:
        self._elements: list[T] = []

    def create_iterator(self) -> Iterator[T]:
        return Iterator(self)

    def add_item(self, item: T) -> None:
        self._elements.append(item)

    def __len__(self) -> int:
        return len(self._elements)

    def __getitem__(self, index: int) -> T:
        return self._elements[index]

    def __iter__(self) -> _PyIterator[T]:
        return iter(self._elements)


class Iterator(Generic[T]):
    """A cursor over an ``Aggregate`` with explicit first/next/done steps."""

    def __init__(self, aggregate: Aggregate[T]) -> None:
        self._aggregate = aggregate
        self._index = 0

    def first(self) -> None:
        self._index = 0

    def next(self) -> None:
        self._index += 1

    def is_done(self) -> bool:
        return self._index >= len(self._aggregate)

    def current_item(self) -> T:
        """Return the item under the cursor; IndexError once the walk is done."""
        if self.is_done():
            raise IndexError("iterator is past the last item")
        return self._aggregate[self._index]