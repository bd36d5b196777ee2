"""Tests for the deferred squaring computation."""

import asyncio
import time

import pytest

from snipkit.errors import DomainError, NegativeNumberError
from snipkit.deferred import schedule_square, square_async

FAST = 0.01


class TestSquareAsync:
    """Test square_async coroutine."""

    def test_resolves_to_square(self) -> None:
        assert asyncio.run(square_async(5, delay=FAST)) == 25

    def test_zero(self) -> None:
        assert asyncio.run(square_async(0, delay=FAST)) == 0

    def test_float(self) -> None:
        assert asyncio.run(square_async(1.5, delay=FAST)) == 2.25

    def test_negative_fails(self) -> None:
        with pytest.raises(NegativeNumberError) as exc_info:
            asyncio.run(square_async(-3, delay=FAST))

        error = exc_info.value
        assert str(error) == "Negative number not allowed"
        assert error.value == -3
        assert error.recoverable is False
        assert isinstance(error, DomainError)

    def test_negative_fails_every_time(self) -> None:
        for _ in range(3):
            with pytest.raises(NegativeNumberError):
                asyncio.run(square_async(-1, delay=0))

    def test_default_delay_is_one_second(self) -> None:
        start = time.monotonic()
        assert asyncio.run(square_async(3)) == 9
        assert time.monotonic() - start >= 0.9

    def test_negative_delay_rejected(self) -> None:
        with pytest.raises(ValueError):
            asyncio.run(square_async(2, delay=-1))

    def test_infinite_delay_rejected(self) -> None:
        with pytest.raises(ValueError):
            asyncio.run(square_async(2, delay=float("inf")))

    @pytest.mark.parametrize("n", ["3", 1j, None, True])
    def test_non_real_input_rejected_before_scheduling(self, n) -> None:
        """Bad input should raise at scheduling time instead of leaving the future pending."""
        async def scenario():
            with pytest.raises(TypeError):
                schedule_square(n, delay=0)
            return await asyncio.wait_for(square_async(2, delay=0), 0.5)

        assert asyncio.run(scenario()) == 4


class TestScheduleSquare:
    """Test schedule_square future semantics."""

    def test_caller_is_not_blocked(self) -> None:
        async def scenario():
            future = schedule_square(4, delay=FAST)
            pending_at_schedule = future.done()
            return pending_at_schedule, await future

        pending, result = asyncio.run(scenario())
        assert pending is False
        assert result == 16

    def test_concurrent_calls_are_independent(self) -> None:
        async def scenario():
            return await asyncio.gather(
                square_async(2, delay=FAST),
                square_async(-2, delay=FAST),
                square_async(3, delay=FAST),
                return_exceptions=True,
            )

        results = asyncio.run(scenario())
        assert results[0] == 4
        assert isinstance(results[1], NegativeNumberError)
        assert results[2] == 9

    def test_settles_exactly_once_after_cancel(self) -> None:
        """A cancelled future should stay cancelled when the timer fires."""
        async def scenario():
            future = schedule_square(4, delay=FAST)
            future.cancel()
            await asyncio.sleep(FAST * 5)
            return future

        future = asyncio.run(scenario())
        assert future.cancelled()

    def test_explicit_loop(self) -> None:
        loop = asyncio.new_event_loop()
        try:
            future = schedule_square(6, delay=0, loop=loop)
            assert loop.run_until_complete(future) == 36
        finally:
            loop.close()

    def test_requires_running_loop_without_explicit_loop(self) -> None:
        with pytest.raises(RuntimeError):
            schedule_square(1, delay=0)
