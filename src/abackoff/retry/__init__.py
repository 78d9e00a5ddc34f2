r"""Retry drivers.

This package provides the loop that invokes an operation, interprets
its outcome, waits the pause computed by a backoff strategy and stops
on success, on a terminal error or on cancellation.

Public API:
    - RetryOutcome: Result returned by a retried operation
    - retry: Synchronous retry driver
    - retry_async: Asynchronous retry driver
"""

from __future__ import annotations

__all__ = ["RetryOutcome", "retry", "retry_async"]

from abackoff.retry.executor import retry
from abackoff.retry.executor_async import retry_async
from abackoff.retry.outcome import RetryOutcome
