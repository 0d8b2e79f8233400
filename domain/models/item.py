"""
Menu items that can be added to a meal.

Every concrete item implements the Item interface directly. Packaging is
supplied by category through domain.models.packaging.packaging_for.
"""

from abc import ABC, abstractmethod

from domain.enums import ItemCategory
from domain.models.packaging import Packaging, packaging_for


class Item(ABC):
    """A single priced menu item"""

    @property
    @abstractmethod
    def name(self) -> str:
        ...

    @property
    @abstractmethod
    def packaging(self) -> Packaging:
        ...

    @property
    @abstractmethod
    def price(self) -> float:
        ...

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(name={self.name!r}, price={self.price!r})"


class VegBurger(Item):
    @property
    def name(self) -> str:
        return "Veggie burger"

    @property
    def packaging(self) -> Packaging:
        return packaging_for(ItemCategory.BURGER)

    @property
    def price(self) -> float:
        return 25.0


class ChickenBurger(Item):
    @property
    def name(self) -> str:
        return "Chicken burger"

    @property
    def packaging(self) -> Packaging:
        return packaging_for(ItemCategory.BURGER)

    @property
    def price(self) -> float:
        return 50.5


class Coke(Item):
    @property
    def name(self) -> str:
        return "Coke"

    @property
    def packaging(self) -> Packaging:
        return packaging_for(ItemCategory.COLD_DRINK)

    @property
    def price(self) -> float:
        return 30.0


class Pepsi(Item):
    @property
    def name(self) -> str:
        return "Pepsi"

    @property
    def packaging(self) -> Packaging:
        return packaging_for(ItemCategory.COLD_DRINK)

    @property
    def price(self) -> float:
        return 35.0
