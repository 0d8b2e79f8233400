"""Services package - Pattern logic layer"""

from services.shape_factory import (
    AbstractShapeFactory,
    ShapeFactory,
    RoundedShapeFactory,
    FactoryProducer,
)
from services.meal_builder import MealBuilder

__all__ = [
    "AbstractShapeFactory",
    "ShapeFactory",
    "RoundedShapeFactory",
    "FactoryProducer",
    "MealBuilder",
]
