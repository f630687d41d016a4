"""Bridge: shapes delegate their drawing to an independent colour hierarchy."""

from abc import ABC, abstractmethod

__all__ = ["Color", "Color1", "Shape", "Triangle"]


class Color(ABC):
    """Implementation side of the bridge."""

    @abstractmethod
    def draw(self) -> str:
        """Draw in this colour and return the description."""


class Color1(Color):
    MESSAGE = "This is a shape drawn in Color1."

    def draw(self) -> str:
        print(self.MESSAGE)
        return self.MESSAGE


class Shape(ABC):
    """Abstraction side of the bridge, holding a colour."""

    def __init__(self, color: Color) -> None:
        self.color = color

    @abstractmethod
    def draw(self) -> str:
        """Draw the shape and return the description."""


class Triangle(Shape):
    def draw(self) -> str:
        return self.color.draw()