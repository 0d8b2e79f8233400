"""
Domain models package - shapes, packaging, items and the meal aggregate.
"""

from domain.models.shape import Shape, RoundedRectangle, RoundedSquare, Rectangle, Square
from domain.models.packaging import (
    Packaging,
    Wrapper,
    Bottle,
    burger_packaging,
    cold_drink_packaging,
    packaging_for,
)
from domain.models.item import Item, VegBurger, ChickenBurger, Coke, Pepsi
from domain.models.meal import Meal

__all__ = [
    # Shapes
    "Shape",
    "RoundedRectangle",
    "RoundedSquare",
    "Rectangle",
    "Square",
    # Packaging
    "Packaging",
    "Wrapper",
    "Bottle",
    "burger_packaging",
    "cold_drink_packaging",
    "packaging_for",
    # Items
    "Item",
    "VegBurger",
    "ChickenBurger",
    "Coke",
    "Pepsi",
    # Meal
    "Meal",
]
