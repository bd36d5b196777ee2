"""Pytest configuration and shared fixtures."""

import pytest
from typing import Any, Dict, List

from snipkit.items.models import PricedItem, RatedItem


@pytest.fixture
def sample_rated_items() -> List[RatedItem]:
    """Rated records straddling the default threshold."""
    return [
        RatedItem(title="Book A", rating=4.5),
        RatedItem(title="Book B", rating=3.2),
        RatedItem(title="Book C", rating=5.0),
        RatedItem(title="Book D", rating=4),
        RatedItem(title="Book E", rating=3.99),
    ]


@pytest.fixture
def sample_products() -> List[PricedItem]:
    """Priced records with a tie on the maximum price."""
    return [
        PricedItem(name="A", price=10),
        PricedItem(name="B", price=20),
        PricedItem(name="C", price=20),
    ]


@pytest.fixture
def sample_rated_payload() -> List[Dict[str, Any]]:
    """Decoded JSON payload of rated records."""
    return [
        {"title": "Book A", "rating": 4.5},
        {"title": "Book B", "rating": 3.2},
    ]
