r"""Shared core logic for the retry drivers.

This module provides helper functions used by both the synchronous and
the asynchronous retry drivers: normalizing operation results,
computing the next pause, bounding it by the deadline and building the
cancellation errors.
"""

from __future__ import annotations

__all__ = [
    "as_outcome",
    "compute_deadline",
    "create_cancel_error",
    "finish",
    "next_pause",
    "wait_budget",
]

import logging
from typing import TYPE_CHECKING

from abackoff.core.validation import validate_timeout
from abackoff.exceptions import RetryCanceledError, RetryDeadlineExceededError
from abackoff.retry.outcome import RetryOutcome

if TYPE_CHECKING:
    from abackoff.backoff.base import BaseBackoffStrategy

logger: logging.Logger = logging.getLogger(__name__)


def as_outcome(result: RetryOutcome | tuple[bool, BaseException | None]) -> RetryOutcome:
    """Normalize the value returned by an operation.

    Args:
        result: A RetryOutcome, or a ``(should_continue, error)`` tuple.

    Returns:
        The equivalent RetryOutcome.

    Raises:
        TypeError: If the result is neither a RetryOutcome nor a pair.
    """
    if isinstance(result, RetryOutcome):
        return result
    if isinstance(result, tuple) and len(result) == 2:
        should_continue, error = result
        return RetryOutcome(should_continue=bool(should_continue), error=error)
    msg = (
        "operation must return a RetryOutcome or a (should_continue, error) tuple, "
        f"got {type(result).__name__}"
    )
    raise TypeError(msg)


def finish(outcome: RetryOutcome, attempt: int) -> None:
    """End the sequence for an outcome that does not request a retry.

    Args:
        outcome: The outcome of the last attempt.
        attempt: The last attempt number (0-indexed).

    Raises:
        BaseException: The error carried by the outcome, unchanged.
    """
    if outcome.error is not None and not outcome.should_continue:
        logger.debug(
            f"Operation stopped on attempt {attempt} with {type(outcome.error).__name__}"
        )
        raise outcome.error
    logger.debug(f"Operation completed on attempt {attempt}")


def next_pause(strategy: BaseBackoffStrategy, outcome: RetryOutcome, attempt: int) -> float:
    """Compute the pause after a failed attempt.

    Args:
        strategy: The backoff strategy of the sequence.
        outcome: The outcome of the failed attempt.
        attempt: The failed attempt number (0-indexed).

    Returns:
        The pause in seconds.
    """
    if outcome.reset_attempt_to is not None:
        logger.debug(f"Operation reset the backoff at attempt {outcome.reset_attempt_to}")
        strategy.reset(outcome.reset_attempt_to)
    sleep_time = strategy.pause(attempt)
    logger.debug(
        f"Attempt {attempt} failed ({type(outcome.error).__name__}), "
        f"retrying in {sleep_time:.2f}s"
    )
    return sleep_time


def compute_deadline(timeout: float | None, start_time: float) -> float | None:
    """Compute the deadline of a sequence.

    Args:
        timeout: Optional maximum duration in seconds. Must be > 0.
        start_time: Monotonic clock reading when the sequence started.

    Returns:
        The deadline as a monotonic clock reading, or None.
    """
    if timeout is None:
        return None
    validate_timeout(timeout)
    return start_time + timeout


def wait_budget(sleep_time: float, deadline: float | None, now: float) -> tuple[float, bool]:
    """Bound a pause by the deadline.

    Args:
        sleep_time: The pause computed by the strategy.
        deadline: Optional deadline as a monotonic clock reading.
        now: The current monotonic clock reading.

    Returns:
        A tuple ``(wait_time, expires)`` where ``expires`` is True if
        the deadline is reached before the pause ends.
    """
    if deadline is None:
        return (sleep_time, False)
    remaining = max(deadline - now, 0.0)
    if remaining <= sleep_time:
        return (remaining, True)
    return (sleep_time, False)


def create_cancel_error(
    attempt: int,
    cause: BaseException | None,
    timeout: float | None = None,
) -> RetryCanceledError:
    """Create the error raised when a sequence is interrupted.

    Args:
        attempt: The last attempt number (0-indexed).
        cause: The error of the last attempt.
        timeout: The timeout if the deadline expired, None for an
            explicit cancellation.

    Returns:
        A RetryDeadlineExceededError if ``timeout`` is given,
        otherwise a RetryCanceledError.
    """
    if timeout is not None:
        logger.debug(f"Retry deadline of {timeout:.2f}s exceeded after {attempt + 1} attempts")
        return RetryDeadlineExceededError(
            f"retry deadline of {timeout:.2f}s exceeded after {attempt + 1} attempts",
            attempt=attempt + 1,
            cause=cause,
        )
    logger.debug(f"Retry canceled after {attempt + 1} attempts")
    return RetryCanceledError(
        f"retry canceled after {attempt + 1} attempts",
        attempt=attempt + 1,
        cause=cause,
    )
