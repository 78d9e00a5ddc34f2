r"""Unit tests for parameter validation."""

from __future__ import annotations

import pytest

from abackoff.core import validate_backoff_params, validate_timeout

#############################################
#     Tests for validate_backoff_params     #
#############################################


def test_validate_backoff_params_valid() -> None:
    """Test validation with valid parameters."""
    validate_backoff_params(base_delay=1.0, max_delay=180.0, factor=1.6)


def test_validate_backoff_params_valid_with_all_params() -> None:
    """Test validation with all parameters set."""
    validate_backoff_params(
        base_delay=0.5, max_delay=0.5, factor=2.0, jitter=0.2, reset_after=3600.0
    )


@pytest.mark.parametrize("jitter", [0.0, 1.0, 1.5, -0.3])
def test_validate_backoff_params_jitter_outside_unit_range_accepted(jitter: float) -> None:
    """Test that a finite jitter outside [0, 1] is accepted."""
    validate_backoff_params(base_delay=1.0, max_delay=2.0, factor=1.6, jitter=jitter)


@pytest.mark.parametrize("base_delay", [0.0, -0.1])
def test_validate_backoff_params_invalid_base_delay(base_delay: float) -> None:
    """Test that a non-positive base_delay raises ValueError."""
    with pytest.raises(ValueError, match=r"base_delay must be > 0"):
        validate_backoff_params(base_delay=base_delay, max_delay=10.0, factor=1.6)


def test_validate_backoff_params_max_delay_below_base_delay() -> None:
    """Test that max_delay below base_delay raises ValueError."""
    with pytest.raises(ValueError, match=r"max_delay must be >= base_delay"):
        validate_backoff_params(base_delay=2.0, max_delay=1.0, factor=1.6)


@pytest.mark.parametrize("factor", [1.0, 0.9, 0.0, -2.0])
def test_validate_backoff_params_invalid_factor(factor: float) -> None:
    """Test that a factor <= 1 raises ValueError."""
    with pytest.raises(ValueError, match=r"factor must be > 1"):
        validate_backoff_params(base_delay=1.0, max_delay=10.0, factor=factor)


@pytest.mark.parametrize("jitter", [float("nan"), float("inf"), float("-inf")])
def test_validate_backoff_params_invalid_jitter(jitter: float) -> None:
    """Test that a non-finite jitter raises ValueError."""
    with pytest.raises(ValueError, match=r"jitter must be a finite number"):
        validate_backoff_params(base_delay=1.0, max_delay=10.0, factor=1.6, jitter=jitter)


@pytest.mark.parametrize("reset_after", [0.0, -60.0, float("nan")])
def test_validate_backoff_params_invalid_reset_after(reset_after: float) -> None:
    """Test that an invalid reset_after raises ValueError."""
    with pytest.raises(ValueError, match=r"reset_after must be > 0"):
        validate_backoff_params(
            base_delay=1.0, max_delay=10.0, factor=1.6, reset_after=reset_after
        )


@pytest.mark.parametrize(
    ("kwargs", "name"),
    [
        ({"base_delay": float("nan"), "max_delay": 10.0, "factor": 1.6}, "base_delay"),
        ({"base_delay": float("inf"), "max_delay": float("inf"), "factor": 1.6}, "base_delay"),
        ({"base_delay": 1.0, "max_delay": float("nan"), "factor": 1.6}, "max_delay"),
        ({"base_delay": 1e308, "max_delay": float("inf"), "factor": 1.6}, "max_delay"),
        ({"base_delay": 1.0, "max_delay": 10.0, "factor": float("nan")}, "factor"),
        ({"base_delay": 1.0, "max_delay": 10.0, "factor": float("inf")}, "factor"),
    ],
)
def test_validate_backoff_params_non_finite(kwargs: dict, name: str) -> None:
    """Test that non-finite delays and factors are rejected."""
    with pytest.raises(ValueError, match=rf"{name} must be a finite number"):
        validate_backoff_params(**kwargs)


######################################
#     Tests for validate_timeout     #
######################################


@pytest.mark.parametrize("timeout", [0.001, 1, 30.0])
def test_validate_timeout_valid(timeout: float) -> None:
    """Test validation with a valid timeout."""
    validate_timeout(timeout)


@pytest.mark.parametrize("timeout", [0, 0.0, -1.0])
def test_validate_timeout_invalid(timeout: float) -> None:
    """Test that a non-positive timeout raises ValueError."""
    with pytest.raises(ValueError, match=r"timeout must be > 0"):
        validate_timeout(timeout)
