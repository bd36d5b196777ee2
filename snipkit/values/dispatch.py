"""
Dispatch over a closed text-or-number value.

Value is a sum type of exactly two variants. Raw ``str`` and numeric
inputs are lifted into it with to_value; everything else is rejected
before dispatch.
"""

from dataclasses import dataclass
from typing import Any, Union


@dataclass(frozen=True)
class TextValue:
    """Text variant."""
    text: str


@dataclass(frozen=True)
class NumberValue:
    """Numeric variant."""
    number: Union[int, float]

    def __post_init__(self) -> None:
        if isinstance(self.number, bool) or not isinstance(self.number, (int, float)):
            raise TypeError(f"Expected int or float, got {type(self.number).__name__}")


Value = Union[TextValue, NumberValue]


def to_value(raw: Any) -> Value:
    """
    Lift a plain string or number into a Value.

    Raises:
        TypeError: For booleans and any other type
    """
    if isinstance(raw, (TextValue, NumberValue)):
        return raw
    if isinstance(raw, str):
        return TextValue(raw)
    if isinstance(raw, (int, float)) and not isinstance(raw, bool):
        return NumberValue(raw)
    raise TypeError(f"Expected str or number, got {type(raw).__name__}")


def process_value(value: Union[Value, str, int, float]) -> Union[int, float]:
    """
    Return the length of text, or double a number.

    Examples:
        >>> process_value("hello")
        5
        >>> process_value(10)
        20
    """
    value = to_value(value)
    if isinstance(value, TextValue):
        return len(value.text)
    return value.number * 2
