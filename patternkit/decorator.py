"""Decorator: wrap a component to extend its behaviour transparently."""

from __future__ import annotations

from abc import ABC, abstractmethod

__all__ = ["Component", "ComponentConcrete", "Decorator", "DecoratorConcrete"]


class Component(ABC):
    @abstractmethod
    def behavior(self) -> str | None:
        """Perform the component's behaviour and return its description."""


class ComponentConcrete(Component):
    MESSAGE = "I'm the ComponentConcrete. This is my basic behavior."

    def behavior(self) -> str:
        print(self.MESSAGE)
        return self.MESSAGE


class Decorator(Component):
    """Wraps a component and, by default, only delegates to it."""

    def __init__(self, component: Component) -> None:
        self.component = component

    def behavior(self) -> str | None:
        return self.component.behavior()


class DecoratorConcrete(Decorator):
    """Runs the wrapped behaviour, then adds its own step after it."""

    MESSAGE = (
        "I'm the DecoratorConcrete. I'm enriching the Component's behavior "
        "with something after."
    )

    def behavior(self) -> str:
        inner = super().behavior()
        print(self.MESSAGE)
        return self.MESSAGE if not inner else f"{inner}\n{self.MESSAGE}"