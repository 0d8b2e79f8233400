"""
Packaging models and the per-category packaging helpers.
"""

from abc import ABC, abstractmethod

from domain.enums import ItemCategory


class Packaging(ABC):
    """How an item is handed over"""

    @abstractmethod
    def pack(self) -> str:
        ...


class Wrapper(Packaging):
    def pack(self) -> str:
        return "Wrapper"


class Bottle(Packaging):
    def pack(self) -> str:
        return "Bottle"


def burger_packaging() -> Packaging:
    return Wrapper()


def cold_drink_packaging() -> Packaging:
    return Bottle()


_PACKAGING_BY_CATEGORY = {
    ItemCategory.BURGER: burger_packaging,
    ItemCategory.COLD_DRINK: cold_drink_packaging,
}


def packaging_for(category: ItemCategory) -> Packaging:
    """Default packaging for an item category"""
    return _PACKAGING_BY_CATEGORY[category]()
