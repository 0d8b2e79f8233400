import logging

from domain.models import Meal, VegBurger, ChickenBurger, Coke, Pepsi

logger = logging.getLogger("gof.meals")


class MealBuilder:
    """Prepares the predefined meals. Holds no state; every call builds a new Meal."""

    def prepare_veg_meal(self) -> Meal:
        meal = Meal()
        meal.add_item(VegBurger())
        meal.add_item(Coke())
        logger.info(f"Prepared veg meal with {len(meal)} items")
        return meal

    def prepare_non_veg_meal(self) -> Meal:
        meal = Meal()
        meal.add_item(ChickenBurger())
        meal.add_item(Pepsi())
        logger.info(f"Prepared non-veg meal with {len(meal)} items")
        return meal
