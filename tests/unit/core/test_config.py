r"""Unit tests for BackoffConfig dataclass.

This file contains tests for the BackoffConfig dataclass in
core/config.py.
"""

from __future__ import annotations

import random

import pytest
from coola.equality import objects_are_equal

from abackoff.backoff import ExponentialBackoff
from abackoff.core import (
    DEFAULT_BASE_DELAY,
    DEFAULT_FACTOR,
    DEFAULT_JITTER,
    DEFAULT_MAX_DELAY,
    DEFAULT_RESET_AFTER,
    BackoffConfig,
)
from tests.helpers import FakeClock

###################################
#     Tests for BackoffConfig     #
###################################


def test_backoff_config_defaults() -> None:
    """Test that BackoffConfig uses correct default values."""
    config = BackoffConfig()

    assert config.base_delay == DEFAULT_BASE_DELAY
    assert config.max_delay == DEFAULT_MAX_DELAY
    assert config.factor == DEFAULT_FACTOR
    assert config.jitter == DEFAULT_JITTER
    assert config.reset_after == DEFAULT_RESET_AFTER


def test_backoff_config_reset_after_disabled() -> None:
    """Test that reset_after can be disabled."""
    assert BackoffConfig(reset_after=None).reset_after is None


@pytest.mark.parametrize(
    ("kwargs", "message"),
    [
        ({"base_delay": 0.0}, r"base_delay must be > 0"),
        ({"max_delay": 0.5}, r"max_delay must be >= base_delay"),
        ({"factor": 1.0}, r"factor must be > 1"),
        ({"reset_after": -1.0}, r"reset_after must be > 0"),
        ({"factor": float("nan")}, r"factor must be a finite number"),
        ({"max_delay": float("inf")}, r"max_delay must be a finite number"),
    ],
)
def test_backoff_config_validation(kwargs: dict, message: str) -> None:
    """Test that invalid parameters raise ValueError."""
    with pytest.raises(ValueError, match=message):
        BackoffConfig(**kwargs)


def test_backoff_config_merge() -> None:
    """Test that merge overrides parameters in a new config."""
    config = BackoffConfig(base_delay=2.0)
    merged = config.merge(max_delay=300.0, jitter=0.0)

    assert merged is not config
    assert merged.base_delay == 2.0
    assert merged.max_delay == 300.0
    assert merged.jitter == 0.0
    assert config.max_delay == DEFAULT_MAX_DELAY
    assert config.jitter == DEFAULT_JITTER


def test_backoff_config_merge_ignores_none() -> None:
    """Test that merge ignores None overrides."""
    config = BackoffConfig(factor=2.0)
    assert config.merge(factor=None, reset_after=None) == config


def test_backoff_config_merge_validates() -> None:
    """Test that merge validates the new config."""
    with pytest.raises(ValueError, match=r"factor must be > 1"):
        BackoffConfig().merge(factor=0.5)


def test_backoff_config_to_dict() -> None:
    """Test BackoffConfig conversion to dictionary."""
    assert objects_are_equal(
        BackoffConfig(base_delay=0.5, jitter=0.1).to_dict(),
        {
            "base_delay": 0.5,
            "max_delay": 180.0,
            "factor": 1.6,
            "jitter": 0.1,
            "reset_after": 3600.0,
        },
    )


def test_backoff_config_build() -> None:
    """Test that build creates a configured ExponentialBackoff."""
    backoff = BackoffConfig(base_delay=2.0, max_delay=60.0, factor=2.0, jitter=0.1).build()

    assert isinstance(backoff, ExponentialBackoff)
    assert backoff.base_delay == 2.0
    assert backoff.max_delay == 60.0
    assert backoff.factor == 2.0
    assert backoff.jitter == 0.1
    assert backoff.reset_after == DEFAULT_RESET_AFTER


def test_backoff_config_build_returns_new_instances() -> None:
    """Test that build returns a new strategy on each call."""
    config = BackoffConfig()
    assert config.build() is not config.build()


def test_backoff_config_build_with_clock() -> None:
    """Test that build passes the clock to the strategy."""
    clock = FakeClock(start=5.0)
    backoff = BackoffConfig(jitter=0.0).build(clock=clock)
    backoff.pause(0)
    assert backoff.state.last_invocation_time == 5.0


def test_backoff_config_build_same_seed_same_pauses() -> None:
    """Test that identical seeds produce identical pauses."""
    config = BackoffConfig()
    backoff1 = config.build(rng=random.Random(3))
    backoff2 = config.build(rng=random.Random(3))
    assert [backoff1.pause(a) for a in range(10)] == [backoff2.pause(a) for a in range(10)]


def test_backoff_config_build_default_pauses() -> None:
    """Test the pauses of the default configuration without jitter."""
    backoff = BackoffConfig(jitter=0.0).build()
    assert [backoff.pause(a) for a in range(6)] == pytest.approx(
        [1.0, 1.6, 2.56, 4.096, 6.5536, 10.48576]
    )
