"""
Per-request cancellation deadline.
"""
import threading
from contextlib import contextmanager
from typing import Iterator


@contextmanager
def cancelAfter(seconds: float) -> Iterator[threading.Event]:
    """Yield an event that is set once `seconds` elapse, unless the block finishes first."""
    cancelEvent = threading.Event()
    timer = threading.Timer(seconds, cancelEvent.set)
    timer.daemon = True
    timer.start()
    try:
        yield cancelEvent
    finally:
        timer.cancel()
