"""Observer: a subject notifies attached observers whenever its state changes."""

from __future__ import annotations

from abc import ABC, abstractmethod

__all__ = ["ObserverInterface", "SubjectInterface", "Subject", "Observer"]


class ObserverInterface(ABC):
    @abstractmethod
    def update(self) -> None:
        """Called by the subject after its state changed."""


class SubjectInterface:
    """Keeps a list of observers and notifies them in attach order."""

    def __init__(self) -> None:
        self._observers: list[ObserverInterface] = []

    def attach(self, observer: ObserverInterface) -> None:
        self._observers.append(observer)

    def detach(self, observer: ObserverInterface) -> None:
        """Remove the first attachment of ``observer``; do nothing if absent."""
        for index, attached in enumerate(self._observers):
            if attached is observer:
                del self._observers[index]
                break

    def notify(self) -> None:
        for observer in list(self._observers):
            observer.update()


class Subject(SubjectInterface):
    """A subject holding an integer state; setting it notifies observers."""

    def __init__(self) -> None:
        super().__init__()
        self._state = 0

    @property
    def state(self) -> int:
        return self._state

    @state.setter
    def state(self, value: int) -> None:
        self._state = value
        self.notify()


class Observer(ObserverInterface):
    """Attaches itself to a subject and mirrors its state."""

    UPDATE_PREFIX = "I'm the Observer. The new state is: "

    def __init__(self, subject: Subject) -> None:
        self._subject = subject
        self._state: int | None = None
        self._attached = True
        subject.attach(self)

    def update(self) -> None:
        self._state = self._subject.state
        print(f"{self.UPDATE_PREFIX}{self._state}")

    def close(self) -> None:
        """Detach from the subject; further calls do nothing."""
        if self._attached:
            self._subject.detach(self)
            self._attached = False

    @property
    def state(self) -> int | None:
        return self._state