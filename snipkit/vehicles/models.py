"""
Vehicle data models.

A Car wraps a Vehicle rather than inheriting from it. Anything exposing
``make`` and ``year`` satisfies HasMakeYear, so the base display works
unchanged on both.
"""

import sys
from dataclasses import dataclass
from typing import Optional, Protocol, TextIO, runtime_checkable


@runtime_checkable
class HasMakeYear(Protocol):
    """Anything describable by make and year."""

    @property
    def make(self) -> str: ...

    @property
    def year(self) -> int: ...


@dataclass(frozen=True)
class Vehicle:
    """A vehicle identified by make and model year."""
    make: str
    year: int


@dataclass(frozen=True)
class Car:
    """A vehicle with a model name."""
    vehicle: Vehicle
    model: str

    @classmethod
    def create(cls, make: str, year: int, model: str) -> "Car":
        """Build a car and its underlying vehicle in one call."""
        return cls(vehicle=Vehicle(make=make, year=year), model=model)

    @property
    def make(self) -> str:
        return self.vehicle.make

    @property
    def year(self) -> int:
        return self.vehicle.year


def get_info(entity: HasMakeYear) -> str:
    """Describe a vehicle as ``Make: <make>, Year: <year>``."""
    return f"Make: {entity.make}, Year: {entity.year}"


def get_model(car: Car) -> str:
    """Describe a car as ``Model: <model>``."""
    return f"Model: {car.model}"


def _emit(line: str, stream: Optional[TextIO]) -> str:
    print(line, file=stream if stream is not None else sys.stdout)
    return line


def print_info(entity: HasMakeYear, stream: Optional[TextIO] = None) -> str:
    """Print the make/year line and return it."""
    return _emit(get_info(entity), stream)


def print_model(car: Car, stream: Optional[TextIO] = None) -> str:
    """Print the model line and return it."""
    return _emit(get_model(car), stream)
