"""Proxy: defer opening an expensive resource until it is really accessed."""

from __future__ import annotations

from abc import ABC, abstractmethod
from types import TracebackType

__all__ = ["SubjectResource", "RealSubjectResource", "ProxyResource"]


class SubjectResource(ABC):
    """Common interface of the real resource and its proxy."""

    TRIVIAL_MESSAGE = "I'm the Subject. This request doesn't need to open the Resource."

    def __init__(self, url: str) -> None:
        self.url = url
        self.closed = False

    def trivial_request(self) -> str:
        print(self.TRIVIAL_MESSAGE)
        return self.TRIVIAL_MESSAGE

    @abstractmethod
    def access(self) -> str:
        """Access the resource and return the message describing it."""

    def close(self) -> None:
        self.closed = True

    def __enter__(self) -> SubjectResource:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()


class RealSubjectResource(SubjectResource):
    """The resource itself: opened as soon as it is created."""

    OPEN_MESSAGE = "I'm the RealSubject. I'm opening the Resource."
    RELEASE_MESSAGE = "I'm the RealSubject. I'm releasing the Resource."
    ACCESS_MESSAGE = "I'm the RealSubject. I'm accessing the Resource."

    def __init__(self, url: str) -> None:
        super().__init__(url)
        print(self.OPEN_MESSAGE)

    def access(self) -> str:
        print(self.ACCESS_MESSAGE)
        return self.ACCESS_MESSAGE

    def close(self) -> None:
        if self.closed:
            return
        print(self.RELEASE_MESSAGE)
        super().close()


class ProxyResource(SubjectResource):
    """Stands in for a ``RealSubjectResource`` and opens it lazily."""

    CREATE_MESSAGE = "I'm the Proxy. I don't need to open the Resource here."
    CLOSE_MESSAGE = "I'm the Proxy. I'm gonna delete the RealSubject if any."
    FORWARD_MESSAGE = "I'm the Proxy. I'm forwarding the request to the RealSubject."

    def __init__(self, url: str) -> None:
        super().__init__(url)
        self._real: RealSubjectResource | None = None
        print(self.CREATE_MESSAGE)

    def access(self) -> str:
        print(self.FORWARD_MESSAGE)
        if self._real is None:
            self._real = RealSubjectResource(self.url)
        return self._real.access()

    def close(self) -> None:
        if self.closed:
            return
        print(self.CLOSE_MESSAGE)
        if self._real is not None:
            self._real.close()
            self._real = None
        super().close()