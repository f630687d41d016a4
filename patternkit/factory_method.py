"""Factory method: a creator defers the choice of product to its subclasses."""

from __future__ import annotations

from abc import ABC, abstractmethod

__all__ = ["Product", "ConcreteProduct", "Creator", "ConcreteCreator"]


class Product(ABC):
    @abstractmethod
    def operation_x(self) -> str:
        """Run the product's operation and return its message."""


class ConcreteProduct(Product):
    CREATE_MESSAGE = "I'm the Concrete Product."
    OPERATION_MESSAGE = "I'm the Concrete Product. This is one of my operations."

    def __init__(self) -> None:
        print(self.CREATE_MESSAGE)

    def operation_x(self) -> str:
        print(self.OPERATION_MESSAGE)
        return self.OPERATION_MESSAGE


class Creator(ABC):
    """Runs logic on a product that subclasses create on first use."""

    LOGIC_MESSAGE = "I'm the Creator. I'll use the Product to do the logic."
    EXISTING_MESSAGE = "I'm the Creator. Product already created."

    def __init__(self) -> None:
        self._product: Product | None = None

    def do_the_logic(self) -> str:
        print(self.LOGIC_MESSAGE)
        if self._product is None:
            self._product = self.create_product()
        else:
            print(self.EXISTING_MESSAGE)
        return self._product.operation_x()

    @abstractmethod
    def create_product(self) -> Product:
        """The factory method."""

    @property
    def product(self) -> Product | None:
        return self._product


class ConcreteCreator(Creator):
    CREATE_MESSAGE = "I'm the Concrete Creator."

    def __init__(self) -> None:
        super().__init__()
        print(self.CREATE_MESSAGE)

    def create_product(self) -> Product:
        return ConcreteProduct()