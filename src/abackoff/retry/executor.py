r"""Synchronous retry driver.

This module provides the ``retry`` function that invokes an operation
until it stops requesting retries, pausing between attempts according
to a backoff strategy. The pause blocks the calling thread but is
preempted as soon as the cancellation event is set.
"""

from __future__ import annotations

__all__ = ["retry"]

import time
from typing import TYPE_CHECKING

from abackoff.callbacks import invoke_on_retry
from abackoff.retry.executor_core import (
    as_outcome,
    compute_deadline,
    create_cancel_error,
    finish,
    next_pause,
    wait_budget,
)

if TYPE_CHECKING:
    import threading
    from collections.abc import Callable

    from abackoff.backoff.base import BaseBackoffStrategy
    from abackoff.callbacks import RetryInfo
    from abackoff.retry.outcome import RetryOutcome


def retry(
    strategy: BaseBackoffStrategy,
    operation: Callable[[int], RetryOutcome | tuple[bool, BaseException | None]],
    *,
    cancel: threading.Event | None = None,
    timeout: float | None = None,
    on_retry: Callable[[RetryInfo], None] | None = None,
) -> None:
    """Invoke ``operation`` until it stops requesting retries.

    The operation receives the attempt number (0-indexed) and returns a
    RetryOutcome, or a ``(should_continue, error)`` tuple:

    - ``should_continue`` False: stop, raise the error if any.
    - ``should_continue`` True without error: stop, success.
    - ``should_continue`` True with an error: pause, then try again.

    Attempts are strictly sequential. Exceptions raised by the operation
    itself propagate immediately and are never retried.

    Args:
        strategy: The backoff strategy. It belongs to this sequence and
            must not be shared with a concurrent one.
        operation: The operation to invoke.
        cancel: Optional event that aborts the sequence. Setting it
            interrupts the pending pause; the operation is not invoked
            again.
        timeout: Optional maximum duration in seconds of the sequence.
            A pause that would end after the deadline is cut short and
            the sequence is aborted.
        on_retry: Optional callback invoked before each pause.

    Raises:
        BaseException: The error of the last attempt when the operation
            stops with an error.
        RetryCanceledError: If ``cancel`` is set during a pause.
        RetryDeadlineExceededError: If the deadline expires during a pause.
        ValueError: If ``timeout`` is not positive.

    Example:
        ```pycon
        >>> from abackoff import RetryOutcome, retry
        >>> from abackoff.backoff import ConstantBackoff
        >>> calls = []
        >>> def operation(attempt: int) -> RetryOutcome:
        ...     calls.append(attempt)
        ...     if attempt < 2:
        ...         return RetryOutcome.again(ConnectionError("refused"))
        ...     return RetryOutcome.done()
        ...
        >>> retry(ConstantBackoff(delay=0.0), operation)
        >>> calls
        [0, 1, 2]

        ```
    """
    start_time = time.monotonic()
    deadline = compute_deadline(timeout, start_time)

    attempt = 0
    while True:
        outcome = as_outcome(operation(attempt))
        if not outcome.is_retry:
            finish(outcome, attempt)
            return

        sleep_time = next_pause(strategy, outcome, attempt)
        now = time.monotonic()
        invoke_on_retry(
            on_retry,
            attempt=attempt,
            wait_time=sleep_time,
            error=outcome.error,
            total_time=now - start_time,
        )

        wait_time, expires = wait_budget(sleep_time, deadline, now)
        if cancel is None:
            time.sleep(wait_time)
        elif cancel.wait(wait_time):
            raise create_cancel_error(attempt, outcome.error) from outcome.error
        if expires:
            raise create_cancel_error(attempt, outcome.error, timeout) from outcome.error
        attempt += 1
