"""Memento: save an originator's state and restore it later."""

from __future__ import annotations

from abc import ABC, abstractmethod

__all__ = [
    "Memento",
    "Originator",
    "MementoConcrete",
    "OriginatorConcrete",
    "CareTaker",
]


class Memento(ABC):
    @abstractmethod
    def restore(self) -> None:
        """Put the saved state back into its originator."""


class Originator(ABC):
    @abstractmethod
    def create_memento(self) -> Memento:
        """Capture the current state in a memento."""


class MementoConcrete(Memento):
    """Holds one saved state of an ``OriginatorConcrete``."""

    def __init__(self, originator: OriginatorConcrete, state: int) -> None:
        self._originator = originator
        self._state = state

    def restore(self) -> None:
        self._originator.set_state(self._state)

    @property
    def state(self) -> int:
        return self._state


class OriginatorConcrete(Originator):
    BORN_MESSAGE = "I'm the Originator. Just born."
    SET_MESSAGE = "I'm the Originator. Setting a new state."
    SHOW_PREFIX = "I'm the Originator. My state is "

    def __init__(self, state: int = 0) -> None:
        self._state = state
        print(self.BORN_MESSAGE)

    def create_memento(self) -> MementoConcrete:
        return MementoConcrete(self, self._state)

    def set_state(self, state: int) -> None:
        print(self.SET_MESSAGE)
        self._state = state

    def show_state(self) -> str:
        message = f"{self.SHOW_PREFIX}{self._state}"
        print(message)
        return message

    @property
    def state(self) -> int:
        return self._state


class CareTaker:
    """Keeps the mementos of an originator and restores the latest one."""

    BORN_MESSAGE = "I'm the CareTaker. Just born."
    BACKUP_MESSAGE = "I'm the Caretaker. Backing-up the Originator's state."
    UNDO_MESSAGE = "I'm the Caretaker. Undoing change on Originator's state."

    def __init__(self, originator: Originator) -> None:
        self._originator = originator
        self._history: list[Memento] = []
        print(self.BORN_MESSAGE)

    def backup(self) -> None:
        print(self.BACKUP_MESSAGE)
        self._history.append(self._originator.create_memento())

    def undo(self) -> None:
        """Restore the most recent backup; the backup stays in the history."""
        print(self.UNDO_MESSAGE)
        if not self._history:
            raise IndexError("no backup to undo to")
        self._history[-1].restore()

    def __len__(self) -> int:
        return len(self._history)