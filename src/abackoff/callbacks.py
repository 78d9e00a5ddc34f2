r"""Callback types for observing a retry sequence.

The ``on_retry`` hook is called by the retry drivers after a pause has
been computed and before the driver starts waiting.

Example:
    ```pycon
    >>> from abackoff import RetryOutcome, retry
    >>> from abackoff.backoff import ConstantBackoff
    >>> from abackoff.callbacks import RetryInfo
    >>> def log_retry(retry_info: RetryInfo) -> None:
    ...     print(f"attempt {retry_info.attempt} failed, waiting {retry_info.wait_time}s")
    ...
    >>> def operation(attempt: int) -> RetryOutcome:
    ...     if attempt < 2:
    ...         return RetryOutcome.again(ValueError("not yet"))
    ...     return RetryOutcome.done()
    ...
    >>> retry(ConstantBackoff(delay=0.0), operation, on_retry=log_retry)
    attempt 0 failed, waiting 0.0s
    attempt 1 failed, waiting 0.0s

    ```
"""

from __future__ import annotations

__all__ = ["RetryInfo", "invoke_on_retry"]

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Callable


@dataclass
class RetryInfo:
    """Information passed to the on_retry callback.

    Attributes:
        attempt: The attempt that failed (0-indexed).
        wait_time: The pause in seconds before the next attempt.
        error: The error reported by the failed attempt.
        total_time: Time in seconds since the retry sequence started.
    """

    attempt: int
    wait_time: float
    error: BaseException | None
    total_time: float


def invoke_on_retry(
    on_retry: Callable[[RetryInfo], None] | None,
    *,
    attempt: int,
    wait_time: float,
    error: BaseException | None,
    total_time: float,
) -> None:
    """Invoke on_retry callback if provided.

    Args:
        on_retry: Optional callback to invoke before each pause.
        attempt: The attempt that failed (0-indexed).
        wait_time: The pause in seconds before the next attempt.
        error: The error reported by the failed attempt.
        total_time: Time in seconds since the retry sequence started.
    """
    if on_retry is not None:
        on_retry(
            RetryInfo(
                attempt=attempt,
                wait_time=wait_time,
                error=error,
                total_time=total_time,
            )
        )
