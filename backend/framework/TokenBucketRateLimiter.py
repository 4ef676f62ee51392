"""
Non-blocking token bucket rate limiter.
"""
import logging
import threading
import time
from typing import Callable, Optional

from framework.RateLimitConfig import RateLimitConfig

logger = logging.getLogger(__name__)


class TokenBucketRateLimiter:
    """
    Token bucket that refills in whole periods and never blocks the caller.

    Each acquire() first credits floor(elapsed / refillPeriod) * refillRate
    tokens (capped at maxTokens), then takes one token if any remain.
    Callers that are refused are expected to back off on their own.
    """

    def __init__(
        self,
        maxTokens: int,
        refillRate: int,
        refillPeriod: float,
        clock: Optional[Callable[[], float]] = None
    ):
        if maxTokens <= 0 or refillRate <= 0 or refillPeriod <= 0:
            raise ValueError("maxTokens, refillRate and refillPeriod must be positive")

        self.maxTokens = maxTokens
        self.refillRate = refillRate
        self.refillPeriod = refillPeriod
        self._clock = clock or time.monotonic
        self._lock = threading.Lock()
        self.tokens = maxTokens
        self.lastRefill = self._clock()

    @classmethod
    def fromConfig(cls) -> 'TokenBucketRateLimiter':
        limiter = cls(
            maxTokens=RateLimitConfig.MAX_TOKENS,
            refillRate=RateLimitConfig.REFILL_RATE,
            refillPeriod=RateLimitConfig.REFILL_PERIOD_SECONDS
        )
        logger.info(
            "RATE_LIMITER :: Created token bucket | Max: %d | Refill: %d per %.2fs",
            limiter.maxTokens,
            limiter.refillRate,
            limiter.refillPeriod
        )
        return limiter

    def acquire(self) -> bool:
        """Take one token. Returns False without waiting when the bucket is empty."""
        with self._lock:
            self._refill()
            if self.tokens > 0:
                self.tokens -= 1
                return True
            return False

    def available(self) -> int:
        with self._lock:
            self._refill()
            return self.tokens

    def _refill(self) -> None:
        now = self._clock()
        elapsed = now - self.lastRefill
        if elapsed >= self.refillPeriod:
            periods = int(elapsed // self.refillPeriod)
            self.tokens = min(self.maxTokens, self.tokens + periods * self.refillRate)
            self.lastRefill = now
