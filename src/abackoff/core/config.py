r"""Configuration dataclass and defaults for backoff strategies.

This module provides the default backoff parameters and a
dataclass-based configuration object that builds a fresh strategy for
each retry sequence. There is no shared default strategy instance.
"""

from __future__ import annotations

__all__ = [
    "DEFAULT_BASE_DELAY",
    "DEFAULT_FACTOR",
    "DEFAULT_JITTER",
    "DEFAULT_MAX_DELAY",
    "DEFAULT_RESET_AFTER",
    "BackoffConfig",
]

from dataclasses import asdict, dataclass, replace
from typing import TYPE_CHECKING, Any

from abackoff.core.validation import validate_backoff_params

if TYPE_CHECKING:
    import random
    from collections.abc import Callable

    from abackoff.backoff.exponential import ExponentialBackoff


# Pause in seconds after the first failed attempt
DEFAULT_BASE_DELAY = 1.0

# Upper bound in seconds of the unjittered pause
DEFAULT_MAX_DELAY = 180.0

# Growth factor per attempt
# With the defaults the pauses are 1s, 1.6s, 2.56s, 4.096s, ...
DEFAULT_FACTOR = 1.6

# Pauses are randomized by +/- 20%
DEFAULT_JITTER = 0.2

# Quiet period in seconds after which the attempt counter restarts
DEFAULT_RESET_AFTER = 3600.0


@dataclass
class BackoffConfig:
    """Configuration for exponential backoff.

    The configuration is a plain value: it holds no state and can be
    shared freely. Call ``build`` to get a new strategy instance for each
    retry sequence.

    Args:
        base_delay: The pause after the first failed attempt. Must be > 0.
        max_delay: The cap on the unjittered pause. Must be >= base_delay.
        factor: The growth factor per attempt. Must be > 1.
        jitter: The randomization amplitude.
        reset_after: The quiet period before the attempt counter restarts,
            or ``None`` to disable it. Must be > 0 if provided.

    Example:
        ```pycon
        >>> from abackoff.core.config import BackoffConfig
        >>> config = BackoffConfig()
        >>> config.factor
        1.6
        >>> config = BackoffConfig(base_delay=2.0, max_delay=300.0)
        >>> config.max_delay
        300.0
        >>> merged = config.merge(jitter=0.0)
        >>> merged.jitter
        0.0
        >>> config.jitter  # Original unchanged
        0.2

        ```
    """

    base_delay: float = DEFAULT_BASE_DELAY
    max_delay: float = DEFAULT_MAX_DELAY
    factor: float = DEFAULT_FACTOR
    jitter: float = DEFAULT_JITTER
    reset_after: float | None = DEFAULT_RESET_AFTER

    def __post_init__(self) -> None:
        validate_backoff_params(
            base_delay=self.base_delay,
            max_delay=self.max_delay,
            factor=self.factor,
            jitter=self.jitter,
            reset_after=self.reset_after,
        )

    def merge(self, **overrides: Any) -> BackoffConfig:
        """Create a new config with specified parameters overridden.

        Only non-None override values are applied, so ``reset_after``
        cannot be disabled through this method.

        Args:
            **overrides: Keyword arguments for parameters to override.

        Returns:
            A new validated BackoffConfig instance.
        """
        filtered_overrides = {k: v for k, v in overrides.items() if v is not None}
        return replace(self, **filtered_overrides)

    def to_dict(self) -> dict[str, Any]:
        """Convert configuration to dictionary format.

        Returns:
            Dictionary with the backoff parameters, suitable as keyword
            arguments for ``ExponentialBackoff``.
        """
        return asdict(self)

    def build(
        self,
        rng: random.Random | None = None,
        clock: Callable[[], float] | None = None,
    ) -> ExponentialBackoff:
        """Create a new strategy from this configuration.

        Args:
            rng: Optional random generator for jitter. Pass a seeded
                generator to get a reproducible pause sequence.
            clock: Optional monotonic clock for reset detection.

        Returns:
            A new ExponentialBackoff with its own state.

        Example:
            ```pycon
            >>> import random
            >>> from abackoff.core.config import BackoffConfig
            >>> config = BackoffConfig(jitter=0.0)
            >>> backoff = config.build(rng=random.Random(42))
            >>> backoff.pause(0)
            1.0

            ```
        """
        from abackoff.backoff.exponential import ExponentialBackoff  # noqa: PLC0415

        return ExponentialBackoff(**self.to_dict(), rng=rng, clock=clock)
