"""Mediator: colleagues talk to each other only through a mediator."""

from __future__ import annotations

from abc import ABC, abstractmethod

__all__ = ["Mediator", "Colleague", "ColleagueA", "ColleagueB", "ConcreteMediator"]


class Mediator(ABC):
    """Receives notifications from colleagues and routes them."""

    @abstractmethod
    def notify(self, notification: str) -> None:
        """React to a notification sent by a colleague."""


class Colleague:
    """A participant that reaches the others only through its mediator."""

    SET_MESSAGE = "I'm a Colleague. Setting the moderator after the c'tor."

    def __init__(self) -> None:
        self._mediator: Mediator | None = None

    def set_mediator(self, mediator: Mediator | None) -> None:
        print(self.SET_MESSAGE)
        self._mediator = mediator

    @property
    def mediator(self) -> Mediator | None:
        return self._mediator

    def _notify(self, notification: str) -> None:
        if self._mediator is None:
            raise RuntimeError("colleague has no mediator")
        self._mediator.notify(notification)


class ColleagueA(Colleague):
    ACK_MESSAGE = "I'm ColleagueA. Just got ack from B."

    def operation_a1(self) -> None:
        self._notify("A1")

    def operation_a2(self) -> str:
        print(self.ACK_MESSAGE)
        return self.ACK_MESSAGE


class ColleagueB(Colleague):
    NOTIFIED_MESSAGE = "I'm ColleagueB. Just got notification from A."

    def operation_b1(self) -> None:
        print(self.NOTIFIED_MESSAGE)
        self.operation_b2()

    def operation_b2(self) -> None:
        self._notify("B2")


class ConcreteMediator(Mediator):
    """Routes A1 to colleague B and B2 back to colleague A."""

    def __init__(self, colleague_a: ColleagueA, colleague_b: ColleagueB) -> None:
        self.colleague_a = colleague_a
        self.colleague_b = colleague_b
        colleague_a.set_mediator(self)
        colleague_b.set_mediator(self)

    def notify(self, notification: str) -> None:
        if notification == "A1":
            self.colleague_b.operation_b1()
        elif notification == "B2":
            self.colleague_a.operation_a2()