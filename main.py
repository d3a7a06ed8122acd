"""
Teaching utility library – Main entry point.

Minimal bootstrap script that exercises each utility once and logs the results.
"""

import asyncio

from src.config.settings import get_settings
from src.data.schemas import Product, RatedItem
from src.models.vehicles import Car
from src.orchestration.deferred import square_async
from src.utils.log import setup_logger
from src.utils.sequences import (
    concatenate_arrays,
    filter_by_rating,
    get_most_expensive_product,
)
from src.utils.text import format_string, process_value
from src.utils.time import Day, get_day_type


def main() -> None:
    """Run each utility on a small example and log the outputs."""
    settings = get_settings()
    logger = setup_logger(level=settings.log_level)

    logger.info("format_string: %s", format_string("Hello World"))
    logger.info(
        "filter_by_rating: %s",
        filter_by_rating([RatedItem("Book A", 4.5), RatedItem("Book B", 3.2)]),
    )
    logger.info("concatenate_arrays: %s", concatenate_arrays([1, 2], [3], [], [4, 5]))

    car = Car("Toyota", 2020, "Corolla")
    logger.info("Car: %s / %s", car.describe(), car.describe_model())

    logger.info("process_value: %s, %s", process_value("hello"), process_value(10))
    logger.info(
        "get_most_expensive_product: %s",
        get_most_expensive_product([Product("A", 5), Product("B", 9), Product("C", 9)]),
    )
    logger.info("get_day_type(SATURDAY): %s", get_day_type(Day.SATURDAY))
    logger.info("square_async(5): %s", asyncio.run(square_async(5)))


if __name__ == "__main__":
    main()
