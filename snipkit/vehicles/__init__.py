"""Vehicle models and their display operations."""

from .models import Car, HasMakeYear, Vehicle, get_info, get_model, print_info, print_model

__all__ = [
    "Vehicle",
    "Car",
    "HasMakeYear",
    "get_info",
    "get_model",
    "print_info",
    "print_model",
]
