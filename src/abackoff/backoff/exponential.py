r"""Exponential backoff strategy with jitter and quiet-period reset."""

from __future__ import annotations

__all__ = ["ExponentialBackoff"]

import logging
import random
import time
from typing import TYPE_CHECKING

from abackoff.backoff.base import BaseBackoffStrategy
from abackoff.backoff.state import BackoffState
from abackoff.core.config import (
    DEFAULT_BASE_DELAY,
    DEFAULT_FACTOR,
    DEFAULT_JITTER,
    DEFAULT_MAX_DELAY,
    DEFAULT_RESET_AFTER,
)
from abackoff.core.validation import validate_backoff_params

if TYPE_CHECKING:
    from collections.abc import Callable

logger: logging.Logger = logging.getLogger(__name__)


class ExponentialBackoff(BaseBackoffStrategy):
    """Exponential backoff strategy with jitter.

    The unjittered pause starts at ``base_delay`` and is multiplied by
    ``factor`` once per attempt until it reaches ``max_delay``. The
    result is then scaled by ``1 + jitter * u`` where ``u`` is drawn
    uniformly from ``[-1, 1)``, and clamped at zero.

    The strategy forgets earlier failures after a quiet period: if the
    time since the previous ``pause`` call is at least
    ``reset_after + last_pause``, the current attempt is treated as
    attempt zero. The attempt passed to ``pause`` is absolute; the
    strategy keeps the offset of the latest reset itself.

    An instance is NOT safe for concurrent use because it keeps this
    state. Create one instance per retry sequence.

    Args:
        base_delay: The pause in seconds after the first failed attempt
            (default: 1.0). Must be > 0.
        max_delay: The upper bound in seconds of the unjittered pause
            (default: 180.0). Must be >= ``base_delay``.
        factor: The growth factor applied per attempt (default: 1.6).
            Must be > 1.
        jitter: The amplitude of the randomization (default: 0.2).
            Values outside ``[0, 1]`` are accepted and make the pause
            swing further around its nominal value.
        reset_after: The quiet period in seconds after which the attempt
            counter restarts (default: 3600.0). ``None`` disables it.
        rng: The random generator used for jitter. A new generator
            owned by the instance is created if omitted.
        clock: The monotonic clock used for reset detection
            (default: ``time.monotonic``).

    Example:
        ```pycon
        >>> from abackoff.backoff import ExponentialBackoff
        >>> backoff = ExponentialBackoff(base_delay=1.0, factor=2.0, jitter=0.0)
        >>> backoff.pause(0)
        1.0
        >>> backoff.pause(1)
        2.0
        >>> backoff.pause(3)
        8.0
        >>> backoff = ExponentialBackoff(base_delay=1.0, max_delay=5.0, factor=2.0, jitter=0.0)
        >>> backoff.pause(10)
        5.0

        ```
    """

    def __init__(
        self,
        base_delay: float = DEFAULT_BASE_DELAY,
        max_delay: float = DEFAULT_MAX_DELAY,
        factor: float = DEFAULT_FACTOR,
        jitter: float = DEFAULT_JITTER,
        reset_after: float | None = DEFAULT_RESET_AFTER,
        rng: random.Random | None = None,
        clock: Callable[[], float] | None = None,
    ) -> None:
        validate_backoff_params(
            base_delay=base_delay,
            max_delay=max_delay,
            factor=factor,
            jitter=jitter,
            reset_after=reset_after,
        )
        self.base_delay = base_delay
        self.max_delay = max_delay
        self.factor = factor
        self.jitter = jitter
        self.reset_after = reset_after
        self._rng = rng if rng is not None else random.Random()  # noqa: S311
        self._clock = clock if clock is not None else time.monotonic
        self._state = BackoffState()

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__qualname__}(base_delay={self.base_delay}, "
            f"max_delay={self.max_delay}, factor={self.factor}, jitter={self.jitter}, "
            f"reset_after={self.reset_after})"
        )

    @property
    def state(self) -> BackoffState:
        """The state recorded by the last ``pause`` call."""
        return self._state

    def calculate(self, attempt: int) -> float:
        """Calculate the unjittered pause for an effective attempt.

        This method does not read or update the strategy state.

        Args:
            attempt: The effective attempt number (0-indexed). Negative
                values are treated as 0.

        Returns:
            ``base_delay * factor ** attempt``, capped at ``max_delay``.
        """
        delay = self.base_delay
        while delay < self.max_delay and attempt > 0:
            delay *= self.factor
            attempt -= 1
        return min(delay, self.max_delay)

    def pause(self, attempt: int) -> float:
        now = self._clock()
        if self._is_quiet_period_over(now):
            logger.debug(
                f"Quiet period of {self.reset_after:.2f}s elapsed, "
                f"restarting backoff at attempt {attempt}"
            )
            self._state.attempt_offset = attempt

        effective_attempt = max(attempt - self._state.attempt_offset, 0)
        delay = self.calculate(effective_attempt)
        pause = max(delay * (1 + self.jitter * (2 * self._rng.random() - 1)), 0.0)
        logger.debug(
            f"Backoff pause for attempt {attempt} (effective {effective_attempt}): "
            f"{pause:.2f}s (base={delay:.2f}s)"
        )

        self._state.last_pause = pause
        self._state.last_invocation_time = now
        return pause

    def reset(self, attempt: int = 0) -> None:
        self._state.attempt_offset = attempt

    def _is_quiet_period_over(self, now: float) -> bool:
        if self.reset_after is None:
            return False
        idle_time = self._state.idle_time(now)
        if idle_time is None:
            return False
        return idle_time >= self.reset_after + self._state.last_pause
