"""Builder: a director assembles houses step by step through a builder."""

from __future__ import annotations

from dataclasses import dataclass

__all__ = [
    "ProductHouse",
    "HouseBuilder",
    "SmallHouseBuilder",
    "BigHouseBuilder",
    "HouseDirector",
]


@dataclass
class ProductHouse:
    walls: int = 0
    windows: int = 0
    doors: int = 0

    def describe(self) -> str:
        return (
            f"I'm a house with {self.walls} walls, {self.doors} doors, "
            f"{self.windows} windows."
        )

    def show(self) -> str:
        """Print the description and return it."""
        text = self.describe()
        print(text)
        return text


class HouseBuilder:
    """Root builder: every step does nothing unless a subclass overrides it."""

    def build_foundations(self) -> None:
        pass

    def build_walls(self) -> None:
        pass

    def build_doors(self) -> None:
        pass

    def build_windows(self) -> None:
        pass


def _require(house: ProductHouse | None) -> ProductHouse:
    if house is None:
        raise RuntimeError("the foundations have not been built yet")
    return house


class SmallHouseBuilder(HouseBuilder):
    def __init__(self) -> None:
        self._house: ProductHouse | None = None

    def build_foundations(self) -> None:
        self._house = ProductHouse()

    def build_walls(self) -> None:
        _require(self._house).walls = 4

    def build_doors(self) -> None:
        _require(self._house).doors = 1

    def build_windows(self) -> None:
        _require(self._house).windows = 4

    @property
    def house(self) -> ProductHouse:
        return _require(self._house)


class BigHouseBuilder(HouseBuilder):
    def __init__(self) -> None:
        self._house: ProductHouse | None = None

    def build_foundations(self) -> None:
        self._house = ProductHouse()

    def build_walls(self) -> None:
        _require(self._house).walls = 8

    def build_doors(self) -> None:
        _require(self._house).doors = 2

    def build_windows(self) -> None:
        _require(self._house).windows = 16

    @property
    def house(self) -> ProductHouse:
        return _require(self._house)


class HouseDirector:
    """Runs the building steps in a fixed order."""

    def __init__(self, builder: HouseBuilder) -> None:
        self._builder = builder

    def build_house(self) -> None:
        self._builder.build_foundations()
        self._builder.build_walls()
        self._builder.build_doors()
        self._builder.build_windows()