"""
Tests for the non-blocking token bucket.
"""
import threading

import pytest

from framework.TokenBucketRateLimiter import TokenBucketRateLimiter


class FakeClock:

    def __init__(self, now: float = 1000.0):
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float):
        self.now += seconds


def drain(limiter: TokenBucketRateLimiter) -> int:
    granted = 0
    while limiter.acquire():
        granted += 1
    return granted


class TestTokenBucketRateLimiter:

    def test_starts_full_and_refuses_when_empty(self):
        limiter = TokenBucketRateLimiter(maxTokens=5, refillRate=1, refillPeriod=1.0, clock=FakeClock())

        assert drain(limiter) == 5
        assert limiter.acquire() is False

    @pytest.mark.parametrize('periods', [0, 1, 2, 3, 10])
    def test_grants_exactly_refilled_tokens_capped_at_max(self, periods):
        clock = FakeClock()
        limiter = TokenBucketRateLimiter(maxTokens=5, refillRate=2, refillPeriod=1.0, clock=clock)
        drain(limiter)

        clock.advance(periods * 1.0)

        assert drain(limiter) == min(5, periods * 2)

    def test_partial_periods_are_floored(self):
        clock = FakeClock()
        limiter = TokenBucketRateLimiter(maxTokens=10, refillRate=3, refillPeriod=2.0, clock=clock)
        drain(limiter)

        clock.advance(3.9)

        assert drain(limiter) == 3

    def test_refill_does_not_exceed_max_with_tokens_left(self):
        clock = FakeClock()
        limiter = TokenBucketRateLimiter(maxTokens=4, refillRate=1, refillPeriod=1.0, clock=clock)
        assert limiter.acquire()

        clock.advance(100.0)

        assert limiter.available() == 4

    @pytest.mark.parametrize('maxTokens,refillRate,refillPeriod', [(0, 1, 1.0), (1, 0, 1.0), (1, 1, 0)])
    def test_rejects_non_positive_settings(self, maxTokens, refillRate, refillPeriod):
        with pytest.raises(ValueError):
            TokenBucketRateLimiter(maxTokens, refillRate, refillPeriod)

    def test_concurrent_acquire_never_over_grants(self):
        limiter = TokenBucketRateLimiter(maxTokens=50, refillRate=1, refillPeriod=3600.0, clock=FakeClock())
        results = []
        lock = threading.Lock()

        def worker():
            granted = sum(1 for _ in range(20) if limiter.acquire())
            with lock:
                results.append(granted)

        threads = [threading.Thread(target=worker) for _ in range(8)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert sum(results) == 50
