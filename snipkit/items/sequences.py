"""Sequence concatenation."""

from typing import Iterable, TypeVar

T = TypeVar("T")


def concatenate_arrays(*arrays: Iterable[T]) -> list[T]:
    """Join any number of sequences into a new list, preserving order."""
    result: list[T] = []
    for array in arrays:
        result.extend(array)
    return result
