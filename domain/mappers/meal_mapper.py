"""
Meal domain mappers.
Handles transformation between the Meal aggregate and snapshot DTOs.
"""

import logging

from pydantic import ValidationError

from app.exceptions import ServiceValidationError
from domain.models import Meal
from domain.schemas.meal_schemas import MealItemResponse, MealResponse

logger = logging.getLogger("gof.meals")


class MealMapper:
    """Mapper for meal transformations."""

    @staticmethod
    def to_response(meal: Meal) -> MealResponse:
        """
        Convert a Meal into a MealResponse DTO.

        Args:
            meal: Meal aggregate

        Returns:
            MealResponse with one entry per item, in insertion order

        Raises:
            ServiceValidationError: If an item carries an invalid value
                (e.g. a negative price)
        """
        try:
            items = [
                MealItemResponse(
                    name=item.name,
                    packaging=item.packaging.pack(),
                    price=item.price,
                )
                for item in meal.items
            ]
            return MealResponse(items=items, total_price=meal.get_total_price())
        except ValidationError as e:
            logger.error(f"Failed to build meal snapshot: {e}")
            raise ServiceValidationError(
                "Meal contains invalid items",
                details={"errors": e.errors(include_url=False)},
                code="invalid_meal_item",
            ) from e
