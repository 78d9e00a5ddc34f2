r"""Parameter validation utilities for backoff strategies and retry
drivers.

This module provides validation functions that reject configuration
misuse at construction time with a descriptive error.
"""

from __future__ import annotations

__all__ = ["validate_backoff_params", "validate_timeout"]

import math


def validate_timeout(timeout: float) -> None:
    """Validate a retry timeout.

    Args:
        timeout: Maximum seconds a retry sequence may take.
            Must be > 0.

    Raises:
        ValueError: If timeout is <= 0.

    Example:
        ```pycon
        >>> from abackoff.core.validation import validate_timeout
        >>> validate_timeout(10.0)
        >>> validate_timeout(0)  # doctest: +SKIP
        Traceback (most recent call last):
        ...
        ValueError: timeout must be > 0, got 0

        ```
    """
    if timeout <= 0:
        msg = f"timeout must be > 0, got {timeout}"
        raise ValueError(msg)


def validate_backoff_params(
    base_delay: float,
    max_delay: float,
    factor: float,
    jitter: float = 0.0,
    reset_after: float | None = None,
) -> None:
    """Validate exponential backoff parameters.

    Args:
        base_delay: The pause after the first failed attempt.
            Must be a finite number > 0.
        max_delay: The cap on the unjittered pause.
            Must be a finite number >= base_delay.
        factor: The growth factor per attempt. Must be a finite number
            > 1, a smaller factor would never grow the pause.
        jitter: The randomization amplitude. Must be a finite number.
        reset_after: The quiet period before the attempt counter
            restarts. Must be > 0 if provided.

    Raises:
        ValueError: If any parameter is outside its valid range.

    Example:
        ```pycon
        >>> from abackoff.core import validate_backoff_params
        >>> validate_backoff_params(base_delay=1.0, max_delay=180.0, factor=1.6)
        >>> validate_backoff_params(base_delay=1.0, max_delay=180.0, factor=1.0)  # doctest: +SKIP

        ```
    """
    for name, value in (("base_delay", base_delay), ("max_delay", max_delay), ("factor", factor)):
        if not math.isfinite(value):
            msg = f"{name} must be a finite number, got {value}"
            raise ValueError(msg)
    if base_delay <= 0:
        msg = f"base_delay must be > 0, got {base_delay}"
        raise ValueError(msg)
    if max_delay < base_delay:
        msg = f"max_delay must be >= base_delay ({base_delay}), got {max_delay}"
        raise ValueError(msg)
    if factor <= 1:
        msg = f"factor must be > 1, got {factor}"
        raise ValueError(msg)
    if not math.isfinite(jitter):
        msg = f"jitter must be a finite number, got {jitter}"
        raise ValueError(msg)
    if reset_after is not None and (math.isnan(reset_after) or reset_after <= 0):
        msg = f"reset_after must be > 0, got {reset_after}"
        raise ValueError(msg)
