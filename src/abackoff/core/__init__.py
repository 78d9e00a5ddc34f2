r"""Configuration defaults and parameter validation shared by the
backoff strategies and the retry drivers."""

from __future__ import annotations

__all__ = [
    "DEFAULT_BASE_DELAY",
    "DEFAULT_FACTOR",
    "DEFAULT_JITTER",
    "DEFAULT_MAX_DELAY",
    "DEFAULT_RESET_AFTER",
    "BackoffConfig",
    "validate_backoff_params",
    "validate_timeout",
]

from abackoff.core.config import (
    DEFAULT_BASE_DELAY,
    DEFAULT_FACTOR,
    DEFAULT_JITTER,
    DEFAULT_MAX_DELAY,
    DEFAULT_RESET_AFTER,
    BackoffConfig,
)
from abackoff.core.validation import validate_backoff_params, validate_timeout
