"""
Deferred squaring on the asyncio event loop.

Each call owns one future and one timer. When the timer fires the future
is settled exactly once, with the square on success or with
NegativeNumberError for negative input. Failures travel through the
future; nothing is raised at scheduling time for negative numbers.
"""

import asyncio
import math
from typing import Optional, Union

from ..config.defaults import get_default_config
from ..errors import NegativeNumberError
from ..logging import get_deferred_logger, log_settlement

logger = get_deferred_logger(__name__)

Number = Union[int, float]


def _resolve_delay(delay: Optional[float]) -> float:
    if delay is None:
        return get_default_config().deferred.delay_seconds
    if not math.isfinite(delay) or delay < 0:
        raise ValueError(f"delay must be a finite non-negative number, got {delay}")
    return delay


def _require_real(n: Number) -> Number:
    # Checked before scheduling so the timer callback cannot fail
    if isinstance(n, bool) or not isinstance(n, (int, float)):
        raise TypeError(f"Expected int or float, got {type(n).__name__}")
    return n


def _settle(future: "asyncio.Future[Number]", n: Number) -> None:
    # The future may have been cancelled while the timer was pending
    if future.done():
        log_settlement(logger, "square", "skipped", n)
        return

    if n < 0:
        error = NegativeNumberError(value=n, context={"argument": n})
        future.set_exception(error)
        log_settlement(logger, "square", "rejected", n, error=error)
    else:
        result = n * n
        future.set_result(result)
        log_settlement(logger, "square", "resolved", n, result=result)


def schedule_square(
    n: Number,
    delay: Optional[float] = None,
    loop: Optional[asyncio.AbstractEventLoop] = None
) -> "asyncio.Future[Number]":
    """
    Schedule the squaring of ``n`` after ``delay`` seconds.

    Must be called with a running event loop unless ``loop`` is given.

    Args:
        n: Number to square
        delay: Seconds before settling, defaults to the configured
            ``deferred.delay_seconds`` (1.0)
        loop: Event loop owning the timer, defaults to the running loop

    Returns:
        A future resolving to ``n * n``, or failing with
        NegativeNumberError when ``n`` is negative

    Raises:
        TypeError: If ``n`` is not an int or float
        ValueError: If ``delay`` is negative or not finite
    """
    n = _require_real(n)
    delay = _resolve_delay(delay)
    if loop is None:
        loop = asyncio.get_running_loop()

    future = loop.create_future()
    loop.call_later(delay, _settle, future, n)

    logger.debug("Scheduled deferred computation", operation="square", argument=n, delay=delay)
    return future


async def square_async(n: Number, delay: Optional[float] = None) -> Number:
    """
    Square ``n`` after a delay without blocking the caller's loop.

    Raises:
        NegativeNumberError: If ``n`` is negative
    """
    return await schedule_square(n, delay)
