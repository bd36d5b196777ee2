"""
Record types and collection utilities.

Rated and priced records plus the pure functions that filter, scan and
concatenate caller-supplied sequences of them.
"""

from .filters import filter_by_rating
from .models import PricedItem, RatedItem
from .parsers import parse_json_payload, parse_priced_items, parse_rated_items
from .pricing import get_most_expensive_product
from .sequences import concatenate_arrays

__all__ = [
    "RatedItem",
    "PricedItem",
    "filter_by_rating",
    "concatenate_arrays",
    "get_most_expensive_product",
    "parse_json_payload",
    "parse_rated_items",
    "parse_priced_items",
]
