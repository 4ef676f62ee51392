"""
Bounded exponential backoff with jitter for operations that may fail transiently.
"""
import logging
import random
import threading
import time
from dataclasses import dataclass
from typing import Callable, Optional, TypeVar

from tenacity import (
    RetryCallState,
    RetryError,
    Retrying,
    retry_if_exception,
    stop_after_attempt,
    wait_exponential,
)
from tenacity.wait import wait_base

from framework.APIErrors import CancellationError, RetryExhaustedError, isRetryable
from framework.RateLimitConfig import RateLimitConfig
from framework.RateLimitMetrics import RateLimitMetrics

logger = logging.getLogger(__name__)

T = TypeVar('T')


@dataclass
class RetryConfig:
    """
    Retry behaviour.

    maxRetries counts retries after the initial attempt, so an operation is
    invoked at most maxRetries + 1 times. Intervals are in seconds.
    """
    maxRetries: int = 3
    initialInterval: float = 0.1
    maxInterval: float = 2.0
    multiplier: float = 2.0
    jitterFraction: float = 0.1

    @classmethod
    def fromConfig(cls) -> 'RetryConfig':
        return cls(
            maxRetries=RateLimitConfig.MAX_RETRY_ATTEMPTS,
            initialInterval=RateLimitConfig.RETRY_INITIAL_INTERVAL_SECONDS,
            maxInterval=RateLimitConfig.RETRY_MAX_INTERVAL_SECONDS,
            multiplier=RateLimitConfig.RETRY_MULTIPLIER,
            jitterFraction=RateLimitConfig.RETRY_JITTER
        )


class ProportionalJitterWait(wait_base):
    """Adds up to `fraction` of the wrapped interval on top of it."""

    def __init__(self, base: wait_base, fraction: float, rng: Optional[random.Random] = None):
        self.base = base
        self.fraction = fraction
        self.rng = rng or random.Random()

    def __call__(self, retry_state: RetryCallState) -> float:
        interval = self.base(retry_state)
        if self.fraction <= 0 or interval <= 0:
            return interval
        return interval + self.rng.uniform(0, interval * self.fraction)


def _cancellableSleep(cancelEvent: Optional[threading.Event]) -> Callable[[float], None]:
    def sleep(seconds: float) -> None:
        if cancelEvent is None:
            time.sleep(seconds)
            return
        if cancelEvent.wait(seconds):
            raise CancellationError("operation cancelled while waiting to retry")
    return sleep


def _logBeforeSleep(label: str) -> Callable[[RetryCallState], None]:
    def beforeSleep(retry_state: RetryCallState) -> None:
        error = retry_state.outcome.exception() if retry_state.outcome else None
        delay = retry_state.next_action.sleep if retry_state.next_action else 0.0
        RateLimitMetrics.recordRetry(label, retry_state.attempt_number)
        logger.warning(
            "RETRY_POLICY :: Retrying | Op: %s | Attempt: %d | Wait: %.3fs | Error: %s",
            label,
            retry_state.attempt_number,
            delay,
            error
        )
    return beforeSleep


def withRetry(
    cancelEvent: Optional[threading.Event],
    config: Optional[RetryConfig],
    operation: Callable[[], T],
    label: str = "operation"
) -> T:
    """
    Run `operation` with bounded exponential backoff.

    Raises:
        CancellationError: cancelEvent fired before an attempt or during a sleep
        RetryExhaustedError: every attempt failed with a retryable error
        Exception: the first non-retryable error, unchanged
    """
    config = config or RetryConfig()

    def attempt() -> T:
        if cancelEvent is not None and cancelEvent.is_set():
            raise CancellationError("operation cancelled")
        return operation()

    retrying = Retrying(
        stop=stop_after_attempt(config.maxRetries + 1),
        wait=ProportionalJitterWait(
            wait_exponential(
                multiplier=config.initialInterval,
                exp_base=config.multiplier,
                max=config.maxInterval
            ),
            config.jitterFraction
        ),
        retry=retry_if_exception(isRetryable),
        sleep=_cancellableSleep(cancelEvent),
        before_sleep=_logBeforeSleep(label),
        reraise=False
    )

    try:
        return retrying(attempt)
    except RetryError as e:
        lastError = e.last_attempt.exception()
        logger.error(
            "RETRY_POLICY :: Max retries exceeded | Op: %s | Attempts: %d | Error: %s",
            label,
            e.last_attempt.attempt_number,
            lastError
        )
        raise RetryExhaustedError(lastError, e.last_attempt.attempt_number) from lastError
