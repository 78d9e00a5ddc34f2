r"""abackoff - Exponential backoff with jitter and a cancelable retry
loop.

This package computes retry pauses for operations that may transiently
fail and drives a retry loop around them. The pause grows exponentially
up to a ceiling, is randomized to avoid synchronized retries, and
restarts from the base delay once the caller has been quiet for long
enough.

Key Features:
    - Exponential backoff with a ceiling and +/- jitter
    - Quiet-period reset of the attempt counter
    - Injectable random source and clock for reproducible pauses
    - Synchronous and asyncio retry drivers, preempted by cancellation
    - Optional deadline for a retry sequence
    - httpx adapters for transient HTTP failures

Example:
    ```pycon
    >>> import threading
    >>> from abackoff import BackoffConfig, RetryOutcome, retry
    >>> strategy = BackoffConfig(base_delay=0.01, jitter=0.0).build()
    >>> def operation(attempt: int) -> RetryOutcome:
    ...     if attempt == 0:
    ...         return RetryOutcome.again(ConnectionError("refused"))
    ...     return RetryOutcome.done()
    ...
    >>> retry(strategy, operation, cancel=threading.Event())

    ```
"""

from __future__ import annotations

__all__ = [
    "BackoffConfig",
    "BaseBackoffStrategy",
    "ConstantBackoff",
    "ExponentialBackoff",
    "HttpRequestError",
    "RetryCanceledError",
    "RetryDeadlineExceededError",
    "RetryOutcome",
    "__version__",
    "request_with_backoff",
    "request_with_backoff_async",
    "retry",
    "retry_async",
]

from importlib.metadata import PackageNotFoundError, version

from abackoff.backoff import BaseBackoffStrategy, ConstantBackoff, ExponentialBackoff
from abackoff.core import BackoffConfig
from abackoff.exceptions import (
    HttpRequestError,
    RetryCanceledError,
    RetryDeadlineExceededError,
)
from abackoff.http import request_with_backoff, request_with_backoff_async
from abackoff.retry import RetryOutcome, retry, retry_async

try:
    __version__ = version(__name__)
except PackageNotFoundError:  # pragma: no cover
    # Package is not installed, fallback if needed
    __version__ = "0.0.0"
