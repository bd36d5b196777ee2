"""Deferred computations settled by asyncio timers."""

from .square import schedule_square, square_async

__all__ = ["schedule_square", "square_async"]
