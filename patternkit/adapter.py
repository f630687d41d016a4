"""Adapter: make a class with a foreign interface usable as an ``Animal``."""

from abc import ABC, abstractmethod

__all__ = ["Animal", "DogNonCompliant", "DogCompliant"]


class Animal(ABC):
    """The target interface clients expect."""

    @abstractmethod
    def speak(self) -> str:
        """Make the animal speak and return what it said."""


class DogNonCompliant:
    """A dog whose interface does not match ``Animal``."""

    MESSAGE = "I'm a Dog, non-compliant with the Target interface."

    def tell(self) -> str:
        print(self.MESSAGE)
        return self.MESSAGE


class DogCompliant(Animal):
    """Adapter exposing ``DogNonCompliant`` through the ``Animal`` interface."""

    def __init__(self) -> None:
        self._dog = DogNonCompliant()

    def speak(self) -> str:
        return self._dog.tell()