#!/usr/bin/env python3
"""
Basic Usage Example - snipkit

This script walks through every snipkit utility with small sample data:
- Case formatting and rating filters
- Sequence concatenation and price scans
- Vehicle display operations
- Value dispatch and weekday classification
- Deferred squaring on the asyncio event loop

Run: python examples/basic_usage.py
"""

import asyncio

from snipkit.calendar import Day, get_day_type
from snipkit.deferred import square_async
from snipkit.errors import NegativeNumberError
from snipkit.items import (
    concatenate_arrays, filter_by_rating, get_most_expensive_product,
    parse_priced_items, parse_rated_items
)
from snipkit.logging import configure_logging
from snipkit.text import format_string
from snipkit.values import process_value
from snipkit.vehicles import Car, print_info, print_model

BOOKS_JSON = """[
    {"title": "Book A", "rating": 4.5},
    {"title": "Book B", "rating": 3.2},
    {"title": "Book C", "rating": 5.0}
]"""

PRODUCTS_JSON = """[
    {"name": "Pen", "price": 10},
    {"name": "Notebook", "price": 25},
    {"name": "Bag", "price": 50}
]"""


async def demonstrate_deferred() -> None:
    """Run a successful and a failing deferred computation side by side."""
    results = await asyncio.gather(
        square_async(5, delay=0.1),
        square_async(-3, delay=0.1),
        return_exceptions=True,
    )
    for argument, result in zip((5, -3), results):
        if isinstance(result, NegativeNumberError):
            print(f"   square({argument}) failed: {result}")
        else:
            print(f"   square({argument}) = {result}")


def main():
    """Main demonstration function."""
    configure_logging(level="WARNING")

    print("snipkit - Basic Usage Demo")
    print("=" * 60)

    print("1. Formatting strings...")
    print(f"   {format_string('Hello')!r}, {format_string('Hello', True)!r}, "
          f"{format_string('Hello', False)!r}")
    print()

    print("2. Filtering books rated 4 or higher...")
    for book in filter_by_rating(parse_rated_items(BOOKS_JSON)):
        print(f"   {book.title}: {book.rating}")
    print()

    print("3. Concatenating arrays...")
    print(f"   {concatenate_arrays(['a', 'b'], ['c'])}")
    print(f"   {concatenate_arrays([1, 2], [3, 4], [5])}")
    print()

    print("4. Describing a car...")
    car = Car.create("Toyota", 2020, "Corolla")
    print_info(car)
    print_model(car)
    print()

    print("5. Processing values...")
    print(f"   'hello' -> {process_value('hello')}, 10 -> {process_value(10)}")
    print()

    print("6. Finding the most expensive product...")
    product = get_most_expensive_product(parse_priced_items(PRODUCTS_JSON))
    print(f"   {product}")
    print(f"   empty list -> {get_most_expensive_product([])}")
    print()

    print("7. Classifying days...")
    for day in Day:
        print(f"   {day.name.title()}: {get_day_type(day)}")
    print()

    print("8. Deferred squaring...")
    asyncio.run(demonstrate_deferred())


if __name__ == "__main__":
    main()
