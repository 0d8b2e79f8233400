"""
Domain schemas package - Pydantic models for validation.
"""

from domain.schemas.meal_schemas import MealItemResponse, MealResponse

__all__ = [
    "MealItemResponse",
    "MealResponse",
]
