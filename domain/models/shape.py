"""
Shape models used by the abstract factory.
"""

from abc import ABC, abstractmethod


class Shape(ABC):
    """Anything a shape factory can produce"""

    @abstractmethod
    def describe(self) -> str:
        ...

    def draw(self) -> None:
        """Write the drawing description to stdout."""
        print(self.describe())


class RoundedRectangle(Shape):
    def describe(self) -> str:
        return "Drawing RoundedRectangle..."


class RoundedSquare(Shape):
    def describe(self) -> str:
        return "Drawing RoundedSquare..."


class Rectangle(Shape):
    def describe(self) -> str:
        return "Drawing Rectangle..."


class Square(Shape):
    def describe(self) -> str:
        return "Drawing Square..."
