import asyncio
from typing import Awaitable, Callable, TypeVar

from utils import logging

T = TypeVar("T")


def always_retry(exc: Exception) -> bool:
    return True


async def retry(
    operation: Callable[[], Awaitable[T]],
    max_retries: int = 3,
    delay: float = 1.0,
    should_retry: Callable[[Exception], bool] = always_retry,
    sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
) -> T:
    """
    Run ``operation`` until it succeeds or ``max_retries`` attempts are used up.

    The wait between attempts starts at ``delay`` seconds and doubles after every
    failure. The last error is re-raised as is. ``should_retry`` decides per error
    whether another attempt is made at all.
    """
    if max_retries < 1:
        raise ValueError(f"max_retries must be at least 1, got {max_retries}")

    for attempt in range(1, max_retries + 1):
        try:
            return await operation()
        except Exception as e:
            if attempt == max_retries or not should_retry(e):
                raise
            logging.warning(f"Attempt {attempt} failed, retrying in {delay:g}s: {e!r}")
            await sleep(delay)
            delay *= 2

    # unreachable, the loop either returns or raises
    raise RuntimeError("Retry failed")
