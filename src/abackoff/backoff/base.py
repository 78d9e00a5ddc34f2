r"""Abstract base class for backoff strategies."""

from __future__ import annotations

__all__ = ["BaseBackoffStrategy"]

from abc import ABC, abstractmethod


class BaseBackoffStrategy(ABC):
    """Abstract base class for backoff strategies.

    A backoff strategy determines how long to wait before retrying a
    failed operation based on the attempt number.

    A strategy instance belongs to a single retry sequence. Strategies
    may keep state between calls and are not safe for concurrent use.
    """

    @abstractmethod
    def pause(self, attempt: int) -> float:
        """Compute the pause to wait after a failed attempt.

        Args:
            attempt: The attempt that just failed (0-indexed), counted
                from the start of the retry sequence.

        Returns:
            The pause in seconds before the next attempt.
        """

    def reset(self, attempt: int = 0) -> None:  # noqa: B027
        """Treat ``attempt`` as the first attempt of a fresh sequence.

        Stateless strategies ignore this call.

        Args:
            attempt: The attempt number that becomes attempt zero.
        """
