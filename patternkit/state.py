"""State: a context changes behaviour by switching its current state object."""

from __future__ import annotations

from abc import ABC, abstractmethod

__all__ = ["Context", "StateInterface", "StateConcrete1", "StateConcrete2"]


class Context:
    """Forwards requests to its current state, which may replace itself."""

    def __init__(self, state: StateInterface | None = None) -> None:
        self._state = state

    def set_state(self, state: StateInterface | None) -> None:
        self._state = state

    def _current(self) -> StateInterface:
        if self._state is None:
            raise RuntimeError("context has no state")
        return self._state

    def do_something(self) -> str | None:
        return self._current().do_something()

    def do_something_else(self) -> str | None:
        return self._current().do_something_else()

    @property
    def state(self) -> StateInterface | None:
        return self._state


class StateInterface(ABC):
    """A state bound to the context it can switch."""

    def __init__(self, context: Context | None) -> None:
        self.context = context

    @abstractmethod
    def do_something(self) -> str | None:
        """Handle the first kind of request."""

    @abstractmethod
    def do_something_else(self) -> str | None:
        """Handle the second kind of request."""

    def _switch(self, state: StateInterface) -> None:
        if self.context is None:
            raise RuntimeError("state has no context to switch")
        self.context.set_state(state)


class StateConcrete1(StateInterface):
    STAY_MESSAGE = "I'm State1. This won't change the state."
    SWITCH_MESSAGE = "I'm State1. This will change the state to State2."

    def do_something(self) -> str:
        print(self.STAY_MESSAGE)
        return self.STAY_MESSAGE

    def do_something_else(self) -> str:
        print(self.SWITCH_MESSAGE)
        self._switch(StateConcrete2(self.context))
        return self.SWITCH_MESSAGE


class StateConcrete2(StateInterface):
    SWITCH_MESSAGE = "I'm State2. This will change the state to State2."
    STAY_MESSAGE = "I'm State2. This won't change the state."

    def do_something(self) -> str:
        print(self.SWITCH_MESSAGE)
        self._switch(StateConcrete1(self.context))
        return self.SWITCH_MESSAGE

    def do_something_else(self) -> str:
        print(self.STAY_MESSAGE)
        return self.STAY_MESSAGE