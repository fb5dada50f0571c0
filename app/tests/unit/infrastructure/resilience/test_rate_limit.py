"""Unit tests for the interval rate limiter."""

import pytest

from infrastructure.resilience.rate_limit import IntervalRateLimiter


class FakeClock:
    def __init__(self, now=0.0):
        self.now = now
        self.sleeps = []

    def __call__(self):
        return self.now

    def sleep(self, seconds):
        self.sleeps.append(seconds)
        self.now += seconds


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def limiter(clock):
    return IntervalRateLimiter(1.0, clock=clock, sleep=clock.sleep)


@pytest.mark.unit
class TestIntervalRateLimiter:
    def test_first_call_does_not_wait(self, limiter, clock):
        assert limiter.acquire() == 0.0
        assert clock.sleeps == []

    def test_back_to_back_calls_are_spaced(self, limiter, clock):
        for _ in range(3):
            with limiter:
                pass

        assert clock.sleeps == [1.0, 1.0]

    def test_interval_counts_from_completion(self, limiter, clock):
        with limiter:
            clock.now += 5.0  # slow call

        with limiter:
            pass

        assert clock.sleeps == [1.0]

    def test_idle_time_counts_towards_interval(self, limiter, clock):
        with limiter:
            pass
        clock.now += 0.25

        with limiter:
            pass

        assert clock.sleeps == [0.75]

    def test_zero_interval_never_sleeps(self, clock):
        limiter = IntervalRateLimiter(0.0, clock=clock, sleep=clock.sleep)

        for _ in range(3):
            with limiter:
                pass

        assert clock.sleeps == []

    def test_concurrent_reservations_queue_up(self, limiter, clock):
        # Three callers acquire before any of them completes.
        waits = [limiter.acquire() for _ in range(3)]

        assert waits == [0.0, 1.0, 1.0]

    def test_negative_interval_is_rejected(self):
        with pytest.raises(ValueError):
            IntervalRateLimiter(-1.0)

    def test_release_is_called_on_error(self, limiter, clock):
        with pytest.raises(RuntimeError):
            with limiter:
                clock.now += 3.0
                raise RuntimeError("call failed")

        with limiter:
            pass

        assert clock.sleeps == [1.0]
