"""Tagged values and dispatch over them."""

from .dispatch import NumberValue, TextValue, Value, process_value, to_value

__all__ = ["TextValue", "NumberValue", "Value", "to_value", "process_value"]
