r"""Backoff strategies for computing retry pauses.

This package provides the strategy interface consumed by the retry
drivers, the stateful exponential strategy with jitter and quiet-period
reset, and a constant strategy for fixed cooldowns.
"""

from __future__ import annotations

__all__ = [
    "BackoffState",
    "BaseBackoffStrategy",
    "ConstantBackoff",
    "ExponentialBackoff",
]

from abackoff.backoff.base import BaseBackoffStrategy
from abackoff.backoff.constant import ConstantBackoff
from abackoff.backoff.exponential import ExponentialBackoff
from abackoff.backoff.state import BackoffState
