# ABOUTME: Whole-run retry helper using tenacity library
# ABOUTME: Lets the caller of the pipeline re-run it after transport failures with exponential backoff

from collections.abc import Awaitable, Callable
from typing import TypeVar

import httpx
from tenacity import (
    AsyncRetrying,
    RetryCallState,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)

from dog_breeds.utils.logging import get_logger

T = TypeVar("T")

logger = get_logger(__name__)

# Failures worth running the whole pipeline again for
RETRYABLE_ERRORS: tuple[type[BaseException], ...] = (httpx.TransportError, httpx.HTTPStatusError)


def _log_retry(retry_state: RetryCallState) -> None:
    exc = retry_state.outcome.exception() if retry_state.outcome else None
    logger.warning(
        "Pipeline run failed, retrying",
        attempt=retry_state.attempt_number,
        error=str(exc),
        error_type=type(exc).__name__ if exc else None,
    )


async def run_with_retries(
    operation: Callable[[], Awaitable[T]],
    max_attempts: int = 1,
    min_wait: float = 1.0,
    max_wait: float = 30.0,
    multiplier: float = 2.0,
) -> T:
    """Run an async operation, starting it over on transport failures.

    Each attempt calls ``operation`` afresh, so a retried pipeline run never
    sees partial state from the failed one. The last error is re-raised
    unchanged once attempts are exhausted.

    Args:
        operation: Zero-argument factory returning the awaitable to run
        max_attempts: Total number of attempts (1 disables retrying)
        min_wait: Minimum backoff between attempts in seconds
        max_wait: Maximum backoff between attempts in seconds
        multiplier: Exponential backoff multiplier

    Returns:
        Result of the first successful attempt
    """
    if max_attempts < 1:
        raise ValueError("max_attempts must be at least 1")

    async for attempt in AsyncRetrying(
        stop=stop_after_attempt(max_attempts),
        wait=wait_exponential(multiplier=multiplier, min=min_wait, max=max_wait),
        retry=retry_if_exception_type(RETRYABLE_ERRORS),
        before_sleep=_log_retry,
        reraise=True,
    ):
        with attempt:
            return await operation()

    raise AssertionError("unreachable")  # pragma: no cover
