"""Template method: a fixed algorithm whose steps subclasses fill in."""

from __future__ import annotations

from abc import ABC, abstractmethod

__all__ = ["AbstractClass", "ConcreteClass"]


class AbstractClass(ABC):
    """Runs operation 1, the hook, then operation 2, always in that order."""

    def template_method(self) -> list[str]:
        """Run the steps and return the messages of those that produced one."""
        results = [
            self.primitive_operation1(),
            self.hook(),
            self.primitive_operation2(),
        ]
        return [result for result in results if result is not None]

    @abstractmethod
    def primitive_operation1(self) -> str | None:
        """First required step."""

    def hook(self) -> str | None:
        """Optional step; does nothing unless overridden."""
        return None

    @abstractmethod
    def primitive_operation2(self) -> str | None:
        """Second required step."""


class ConcreteClass(AbstractClass):
    OPERATION1_MESSAGE = "I'm the ConcreteClass. I'm doing primitive operation 1."
    HOOK_MESSAGE = "I'm the ConcreteClass. I'm doing the hook."
    OPERATION2_MESSAGE = "I'm the ConcreteClass. I'm doing primitive operation 2."

    def primitive_operation1(self) -> str:
        print(self.OPERATION1_MESSAGE)
        return self.OPERATION1_MESSAGE

    def hook(self) -> str:
        print(self.HOOK_MESSAGE)
        return self.HOOK_MESSAGE

    def primitive_operation2(self) -> str:
        print(self.OPERATION2_MESSAGE)
        return self.OPERATION2_MESSAGE