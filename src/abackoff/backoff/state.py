r"""Mutable state tracked by a stateful backoff strategy."""

from __future__ import annotations

__all__ = ["BackoffState"]

from dataclasses import dataclass


@dataclass
class BackoffState:
    """State kept between two ``pause`` calls.

    Attributes:
        last_invocation_time: Clock reading of the last ``pause`` call,
            or ``None`` before the first call.
        last_pause: The pause in seconds returned by the last call.
        attempt_offset: The attempt number treated as attempt zero
            since the most recent reset.
    """

    last_invocation_time: float | None = None
    last_pause: float = 0.0
    attempt_offset: int = 0

    def idle_time(self, now: float) -> float | None:
        """Return the time elapsed since the last ``pause`` call.

        Args:
            now: The current clock reading.

        Returns:
            The elapsed time in seconds, or ``None`` if ``pause`` was
            never called.
        """
        if self.last_invocation_time is None:
            return None
        return now - self.last_invocation_time
