"""Facade: one simple entry point over several subsystem classes."""

from __future__ import annotations

__all__ = ["Class1", "Class2", "Facade"]


class Class1:
    MESSAGE = "I'm Class1. I'm doing something."

    def do_something(self) -> str:
        print(self.MESSAGE)
        return self.MESSAGE


class Class2:
    MESSAGE = "I'm Class2. I'm doing something else."

    def do_something_else(self) -> str:
        print(self.MESSAGE)
        return self.MESSAGE


class Facade:
    MESSAGE = "I'm the Facade. I'll do everythin for you."

    def do_everything(self) -> tuple[str, str, str]:
        """Run every subsystem step in order and return their messages."""
        print(self.MESSAGE)
        return (self.MESSAGE, Class1().do_something(), Class2().do_something_else())