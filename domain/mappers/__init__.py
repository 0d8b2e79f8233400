"""
Domain mappers package - transformations between aggregates and DTOs.
"""

from domain.mappers.meal_mapper import MealMapper

__all__ = ["MealMapper"]
