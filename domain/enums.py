"""
Domain enums for the creational pattern examples.
Contains the enumeration types used across the domain models.
"""

import enum
from typing import Optional


class ShapeKind(str, enum.Enum):
    """Shape kinds every shape factory understands"""

    SQUARE = "SQUARE"
    RECTANGLE = "RECTANGLE"

    @classmethod
    def parse(cls, value: str) -> Optional["ShapeKind"]:
        """Case-insensitive lookup; unknown values give None."""
        try:
            return cls(value.upper())
        except ValueError:
            return None


class ItemCategory(str, enum.Enum):
    """Menu item categories, each with its own default packaging"""

    BURGER = "burger"
    COLD_DRINK = "cold_drink"
