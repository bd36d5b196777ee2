"""
Record models for rated and priced items.

Immutable records built once from caller data and never mutated.
"""

from dataclasses import dataclass
from typing import Any, Mapping

from ..errors import MalformedDataError


def _require_text(data: Mapping[str, Any], key: str, record: str) -> str:
    value = data.get(key)
    if not isinstance(value, str):
        raise MalformedDataError(
            f"{record}.{key} must be a string",
            raw_data=repr(value),
            expected_format="str",
            context={"field": key},
        )
    return value


def _require_number(data: Mapping[str, Any], key: str, record: str) -> float:
    value = data.get(key)
    # bool is an int subclass but never a valid rating or price
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise MalformedDataError(
            f"{record}.{key} must be a number",
            raw_data=repr(value),
            expected_format="int | float",
            context={"field": key},
        )
    return value


@dataclass(frozen=True)
class RatedItem:
    """An item with a title and a numeric rating."""
    title: str
    rating: float

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "RatedItem":
        """Build from a ``{"title": ..., "rating": ...}`` mapping."""
        if not isinstance(data, Mapping):
            raise MalformedDataError(
                "RatedItem must be built from a mapping",
                raw_data=repr(data),
                expected_format="object",
            )
        return cls(
            title=_require_text(data, "title", "RatedItem"),
            rating=_require_number(data, "rating", "RatedItem"),
        )


@dataclass(frozen=True)
class PricedItem:
    """A named product with a price."""
    name: str
    price: float

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "PricedItem":
        """Build from a ``{"name": ..., "price": ...}`` mapping."""
        if not isinstance(data, Mapping):
            raise MalformedDataError(
                "PricedItem must be built from a mapping",
                raw_data=repr(data),
                expected_format="object",
            )
        return cls(
            name=_require_text(data, "name", "PricedItem"),
            price=_require_number(data, "price", "PricedItem"),
        )
