"""Flyweight: characters share their intrinsic data through a pooled factory."""

from __future__ import annotations

from collections.abc import MutableSequence

__all__ = ["FlyweightShared", "FlyweightUnshared", "FlyweightFactory"]


class FlyweightShared:
    """Intrinsic state: the character, shared between all its occurrences."""

    __slots__ = ("_character",)

    MESSAGE = "I'm the FlyweightShared. Here the constructor."

    def __init__(self, code: int) -> None:
        if not 0 <= code <= 255:
            raise ValueError(f"character code out of range 0..255: {code}")
        print(self.MESSAGE)
        self._character = chr(code)

    @property
    def shared_data(self) -> str:
        return self._character


class FlyweightUnshared:
    """Extrinsic state: where one occurrence of a shared character sits."""

    __slots__ = ("position", "shared")

    MESSAGE = "I'm the FlyweightUnshared. Here the constructor."

    def __init__(self, position: int, shared: FlyweightShared) -> None:
        if position < 0:
            raise ValueError(f"position must not be negative: {position}")
        print(self.MESSAGE)
        self.position = position
        self.shared = shared

    def draw(self, canvas: MutableSequence[str]) -> None:
        """Write the shared character into ``canvas`` at this position."""
        canvas[self.position] = self.shared.shared_data


class FlyweightFactory:
    """Creates flyweights, pooling the shared part by character code."""

    MESSAGE = "I'm the Flyweight Factory. Do I have the element in the pool?"

    def __init__(self) -> None:
        self._pool: dict[int, FlyweightShared] = {}

    def create_flyweight(self, code: int, position: int) -> FlyweightUnshared:
        return FlyweightUnshared(position, self._shared(code))

    def _shared(self, code: int) -> FlyweightShared:
        print(self.MESSAGE)
        shared = self._pool.get(code)
        if shared is None:
            shared = FlyweightShared(code)
            self._pool[code] = shared
        return shared

    def __len__(self) -> int:
        return len(self._pool)