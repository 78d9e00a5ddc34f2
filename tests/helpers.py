r"""Shared test helpers for backoff strategies and retry drivers."""

from __future__ import annotations

__all__ = ["FakeClock", "always_retry", "fail_then_succeed"]

from abackoff.retry import RetryOutcome


class FakeClock:
    """Monotonic clock advanced manually by the tests."""

    def __init__(self, start: float = 0.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


def always_retry(attempt: int) -> RetryOutcome:  # noqa: ARG001
    """Operation that always fails and asks for another attempt."""
    return RetryOutcome.again(ConnectionError("connection refused"))


def fail_then_succeed(failures: int) -> list[RetryOutcome]:
    """Build the outcomes of an operation that fails ``failures`` times."""
    return [RetryOutcome.again(ConnectionError(f"failure {i}")) for i in range(failures)] + [
        RetryOutcome.done()
    ]
