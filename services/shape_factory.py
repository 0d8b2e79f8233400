"""
Abstract factory for shapes.

Two shape families share one factory interface. FactoryProducer picks the
family, the chosen factory maps a shape type name to a Shape.
"""

import logging
from abc import ABC, abstractmethod
from typing import Optional

from domain.enums import ShapeKind
from domain.models import Shape, Square, Rectangle, RoundedSquare, RoundedRectangle

logger = logging.getLogger("gof.shapes")


class AbstractShapeFactory(ABC):
    """Creates shapes of one family"""

    @abstractmethod
    def get_shape(self, shape_type: str) -> Optional[Shape]:
        """
        Build a new shape for a type name.

        Args:
            shape_type: "SQUARE" or "RECTANGLE", any casing

        Returns:
            A new Shape, or None if the type is not recognized
        """


class ShapeFactory(AbstractShapeFactory):
    def get_shape(self, shape_type: str) -> Optional[Shape]:
        kind = ShapeKind.parse(shape_type)
        if kind == ShapeKind.SQUARE:
            return Square()
        if kind == ShapeKind.RECTANGLE:
            return Rectangle()
        logger.debug(f"Unknown shape type: {shape_type!r}")
        return None


class RoundedShapeFactory(AbstractShapeFactory):
    def get_shape(self, shape_type: str) -> Optional[Shape]:
        kind = ShapeKind.parse(shape_type)
        if kind == ShapeKind.SQUARE:
            return RoundedSquare()
        if kind == ShapeKind.RECTANGLE:
            return RoundedRectangle()
        logger.debug(f"Unknown rounded shape type: {shape_type!r}")
        return None


class FactoryProducer:
    """Selects the shape family."""

    @staticmethod
    def get_factory(rounded: bool) -> AbstractShapeFactory:
        """Return a new factory for the rounded or the plain family."""
        if rounded:
            logger.debug("Producing RoundedShapeFactory")
            return RoundedShapeFactory()
        logger.debug("Producing ShapeFactory")
        return ShapeFactory()
