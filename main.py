"""
Creational pattern demo
Runs the abstract factory and builder examples and prints their output.
"""

import logging

from app.config import settings
from services import FactoryProducer, MealBuilder

_logger = logging.getLogger("gof.main")


def run_shape_demo() -> None:
    for rounded in (False, True):
        factory = FactoryProducer.get_factory(rounded=rounded)
        for shape_type in ("SQUARE", "RECTANGLE"):
            shape = factory.get_shape(shape_type)
            if shape is not None:
                shape.draw()


def run_meal_demo() -> None:
    builder = MealBuilder()

    veg_meal = builder.prepare_veg_meal()
    print("Veg meal:")
    veg_meal.show_items()
    print(f"Price: {veg_meal.get_total_price()}")

    non_veg_meal = builder.prepare_non_veg_meal()
    print("Non veg meal:")
    non_veg_meal.show_items()
    print(f"Price: {non_veg_meal.get_total_price()}")


def main() -> None:
    # Setup logging with configured level and format
    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper()), format=settings.log_format
    )
    _logger.info(f"Starting {settings.app_name} in {settings.environment.value} mode")
    run_shape_demo()
    run_meal_demo()


if __name__ == "__main__":
    main()
