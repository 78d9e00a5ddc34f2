r"""Constant backoff strategy."""

from __future__ import annotations

__all__ = ["ConstantBackoff"]

import math

from abackoff.backoff.base import BaseBackoffStrategy


class ConstantBackoff(BaseBackoffStrategy):
    """Constant backoff strategy.

    Returns the same pause after every failed attempt. Useful for
    services with a known cooldown and for deterministic tests.

    Args:
        delay: The fixed pause in seconds (default: 1.0).

    Example:
        ```pycon
        >>> from abackoff.backoff import ConstantBackoff
        >>> backoff = ConstantBackoff(delay=2.5)
        >>> backoff.pause(0)
        2.5
        >>> backoff.pause(10)
        2.5

        ```
    """

    def __init__(self, delay: float = 1.0) -> None:
        if not math.isfinite(delay):
            msg = f"delay must be a finite number, got {delay}"
            raise ValueError(msg)
        if delay < 0:
            msg = f"delay must be non-negative, got {delay}"
            raise ValueError(msg)

        self.delay = delay

    def __repr__(self) -> str:
        return f"{self.__class__.__qualname__}(delay={self.delay})"

    def pause(self, attempt: int) -> float:  # noqa: ARG002
        return self.delay
