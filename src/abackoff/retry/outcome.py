r"""Result type returned by an operation driven by the retry loop."""

from __future__ import annotations

__all__ = ["RetryOutcome"]

from dataclasses import dataclass


@dataclass(frozen=True)
class RetryOutcome:
    """Result of one invocation of a retried operation.

    The retry drivers interpret the outcome as follows:

    - ``should_continue`` is False: stop, raise ``error`` if set,
      otherwise return.
    - ``should_continue`` is True and ``error`` is None: stop and return,
      no more attempts are needed.
    - ``should_continue`` is True and ``error`` is set: wait the next
      backoff pause and invoke the operation again.

    Only ``should_continue`` decides whether to loop; the content of
    ``error`` is never inspected.

    Attributes:
        should_continue: Whether the operation may be attempted again.
        error: The error of this attempt, or None on success.
        reset_attempt_to: If set, the strategy treats this attempt number
            as attempt zero from now on. Use the current attempt to
            restart the backoff after partial progress.

    Example:
        ```pycon
        >>> from abackoff.retry import RetryOutcome
        >>> RetryOutcome.done()
        RetryOutcome(should_continue=True, error=None, reset_attempt_to=None)
        >>> outcome = RetryOutcome.again(ConnectionError("refused"))
        >>> outcome.should_continue
        True

        ```
    """

    should_continue: bool
    error: BaseException | None = None
    reset_attempt_to: int | None = None

    @classmethod
    def done(cls) -> RetryOutcome:
        """Return an outcome that ends the sequence successfully."""
        return cls(should_continue=True)

    @classmethod
    def stop(cls, error: BaseException | None = None) -> RetryOutcome:
        """Return an outcome that ends the sequence with ``error``.

        Args:
            error: The terminal error, or None for a clean stop.
        """
        return cls(should_continue=False, error=error)

    @classmethod
    def again(cls, error: BaseException, reset_attempt_to: int | None = None) -> RetryOutcome:
        """Return an outcome that requests another attempt.

        Args:
            error: The error of the failed attempt.
            reset_attempt_to: Optional attempt number to treat as
                attempt zero for the backoff.
        """
        return cls(should_continue=True, error=error, reset_attempt_to=reset_attempt_to)

    @property
    def is_retry(self) -> bool:
        """Whether the driver should pause and attempt again."""
        return self.should_continue and self.error is not None
