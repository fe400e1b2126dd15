"""Exponential-backoff retries for flaky async calls (Gemini, argon2)."""

from collections.abc import Awaitable, Callable
from logging import getLogger
from typing import ParamSpec, TypeVar

from tenacity import (
    RetryCallState,
    retry,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)

from app.configs import file_logger

logger = file_logger(getLogger(__name__))

P = ParamSpec("P")
T = TypeVar("T")

type ExceptionTypes = type[Exception] | tuple[type[Exception], ...]


def _warn_before_retry(attempts: int) -> Callable[[RetryCallState], None]:
    def before_sleep(state: RetryCallState) -> None:
        error = state.outcome.exception() if state.outcome else None
        delay = state.next_action.sleep if state.next_action else 0
        name = getattr(state.fn, "__qualname__", "call")
        logger.warning(
            f"{name} failed on attempt {state.attempt_number}/{attempts} ({error!r}), "
            f"retrying in {delay:.2f}s",
        )

    return before_sleep


def with_retry(
    exec_retry: ExceptionTypes,
    max_retries: int = 3,
    base_delay: float = 0.1,
    max_delay: float = 2.0,
) -> Callable[[Callable[P, Awaitable[T]]], Callable[P, Awaitable[T]]]:
    """
    Retry an async function with exponential backoff using Tenacity.

    Only ``exec_retry`` exceptions are retried; anything else propagates
    straight away. After the last attempt the original exception is re-raised.

    Args:
        exec_retry: Exception type(s) that trigger a retry.
        max_retries: Total number of attempts.
        base_delay: First delay in seconds, doubled on each attempt.
        max_delay: Upper bound for a single delay in seconds.

    Returns:
        Decorator applying the retry policy.
    """
    return retry(
        stop=stop_after_attempt(max_retries),
        wait=wait_exponential(multiplier=base_delay, min=base_delay, max=max_delay),
        retry=retry_if_exception_type(exec_retry),
        before_sleep=_warn_before_retry(max_retries),
        reraise=True,
    )
