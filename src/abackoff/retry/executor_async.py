r"""Asynchronous retry driver.

This module provides the ``retry_async`` function, the asyncio
counterpart of ``retry``. The pause suspends the current task and races
against the cancellation event, so other tasks run during the wait.
"""

from __future__ import annotations

__all__ = ["retry_async", "wait_event"]

import asyncio
import inspect
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
    from collections.abc import Awaitable, Callable

    from abackoff.backoff.base import BaseBackoffStrategy
    from abackoff.callbacks import RetryInfo
    from abackoff.retry.outcome import RetryOutcome


async def wait_event(event: asyncio.Event, timeout: float) -> bool:
    """Wait until ``event`` is set or ``timeout`` elapses.

    Args:
        event: The event to wait for.
        timeout: Maximum time to wait in seconds.

    Returns:
        True if the event was set, False if the timeout elapsed first.
    """
    if event.is_set():
        return True
    try:
        await asyncio.wait_for(event.wait(), timeout=timeout)
    except asyncio.TimeoutError:
        return False
    return True


async def retry_async(
    strategy: BaseBackoffStrategy,
    operation: Callable[
        [int],
        Awaitable[RetryOutcome | tuple[bool, BaseException | None]]
        | RetryOutcome
        | tuple[bool, BaseException | None],
    ],
    *,
    cancel: asyncio.Event | None = None,
    timeout: float | None = None,
    on_retry: Callable[[RetryInfo], None] | None = None,
) -> None:
    """Invoke ``operation`` until it stops requesting retries.

    Same contract as ``retry``. The operation may be a coroutine
    function or a plain function. Cancelling the task running this
    coroutine raises ``asyncio.CancelledError`` as usual.

    Args:
        strategy: The backoff strategy. It belongs to this sequence and
            must not be shared with a concurrent one.
        operation: The operation to invoke.
        cancel: Optional event that aborts the sequence. Setting it
            interrupts the pending pause; the operation is not invoked
            again.
        timeout: Optional maximum duration in seconds of the sequence.
        on_retry: Optional callback invoked before each pause.

    Raises:
        BaseException: The error of the last attempt when the operation
            stops with an error.
        RetryCanceledError: If ``cancel`` is set during a pause.
        RetryDeadlineExceededError: If the deadline expires during a pause.
        ValueError: If ``timeout`` is not positive.

    Example:
        ```pycon
        >>> import asyncio
        >>> from abackoff import RetryOutcome, retry_async
        >>> from abackoff.backoff import ConstantBackoff
        >>> async def operation(attempt: int) -> RetryOutcome:
        ...     if attempt < 2:
        ...         return RetryOutcome.again(ConnectionError("refused"))
        ...     return RetryOutcome.done()
        ...
        >>> asyncio.run(retry_async(ConstantBackoff(delay=0.0), operation))

        ```
    """
    start_time = time.monotonic()
    deadline = compute_deadline(timeout, start_time)

    attempt = 0
    while True:
        result = operation(attempt)
        if inspect.isawaitable(result):
            result = await result
        outcome = as_outcome(result)
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
            await asyncio.sleep(wait_time)
        elif await wait_event(cancel, wait_time):
            raise create_cancel_error(attempt, outcome.error) from outcome.error
        if expires:
            raise create_cancel_error(attempt, outcome.error, timeout) from outcome.error
        attempt += 1
