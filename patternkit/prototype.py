"""Prototype: new objects are made by cloning registered prototypes."""

from __future__ import annotations

from abc import ABC, abstractmethod

__all__ = ["Prototype", "PrototypeConcrete1", "PrototypeConcrete2", "PrototypeClient"]


class Prototype(ABC):
    @abstractmethod
    def clone(self) -> Prototype:
        """Return a new object equal to this one."""

    @abstractmethod
    def to_string(self) -> str:
        """Print and return a description of this object."""


class _StatefulPrototype(Prototype):
    PREFIX = "I'm a PrototypeConcrete"

    def __init__(self, state: int) -> None:
        self.state = state

    def clone(self) -> Prototype:
        return type(self)(self.state)

    def to_string(self) -> str:
        text = f"{self.PREFIX}{self.state}"
        print(text)
        return text

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self.state == other.state

    def __hash__(self) -> int:
        return hash((type(self), self.state))


class PrototypeConcrete1(_StatefulPrototype):
    def __init__(self, state: int = 1) -> None:
        super().__init__(state)

    def clone(self) -> PrototypeConcrete1:
        return PrototypeConcrete1(self.state)

    def to_string(self) -> str:
        return super().to_string()


class PrototypeConcrete2(_StatefulPrototype):
    def __init__(self, state: int = 2) -> None:
        super().__init__(state)

    def clone(self) -> PrototypeConcrete2:
        return PrototypeConcrete2(self.state)

    def to_string(self) -> str:
        return super().to_string()


class PrototypeClient:
    """Holds one prototype of each concrete kind."""

    def __init__(self) -> None:
        self._prototypes: tuple[Prototype, Prototype] = (
            PrototypeConcrete1(),
            PrototypeConcrete2(),
        )

    @property
    def prototypes(self) -> tuple[Prototype, Prototype]:
        return self._prototypes