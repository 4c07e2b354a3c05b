"""Tests for the exponential-decay target ratio."""

import inspect

import pytest
from liquidity_model.config.schema import LiquidityModelParams
from liquidity_model.model.ratio import target_ratio_bp, target_ratio_for


# Reference parameter set: b = 5%, f = 0.1, e = 0.05
PARAMS = dict(min_ratio_bp=500, tvl_factor_bp=1000, tvl_exponent_bp=500)


def test_zero_tvl_is_full_reserve():
    """Test that a zero-size vault holds exactly 100%."""
    assert target_ratio_bp(0, **PARAMS) == 10_000
    assert target_ratio_bp(0, min_ratio_bp=5000, tvl_factor_bp=100, tvl_exponent_bp=50) == 10_000


def test_reference_value():
    """Test the ratio at $1M against a hand-computed reference."""
    ratio = target_ratio_bp(1_000_000, **PARAMS)

    expected = 500 + 9500 * (1 + 1_000_000 * 0.1) ** -0.05
    assert ratio == pytest.approx(expected, rel=1e-9)
    # 500 + 9500 * exp(-0.05 * ln(100001))
    assert ratio == pytest.approx(5842.24, abs=0.01)


def test_negative_tvl_clamped_to_zero():
    """Test that negative TVL is sanitized to zero instead of raising.

    Real vaults cannot be negative; clamping is an input-sanitization choice,
    not a property of the model.
    """
    assert target_ratio_bp(-1_000, **PARAMS) == 10_000


def test_strictly_decreasing_in_tvl():
    """Test that the ratio decreases as the vault grows."""
    tvls = [0, 1e3, 1e4, 1e5, 1e6, 1e7, 1e8, 1e9]
    ratios = [target_ratio_bp(t, **PARAMS) for t in tvls]

    for earlier, later in zip(ratios, ratios[1:]):
        assert later < earlier


def test_increasing_in_min_ratio():
    """Test that a higher floor raises the target at a fixed TVL."""
    low_floor = target_ratio_bp(1e7, min_ratio_bp=300, tvl_factor_bp=1000, tvl_exponent_bp=500)
    high_floor = target_ratio_bp(1e7, min_ratio_bp=900, tvl_factor_bp=1000, tvl_exponent_bp=500)
    assert high_floor > low_floor


def test_converges_to_floor():
    """Test that the distance to the floor shrinks towards zero as TVL grows."""
    steep = dict(min_ratio_bp=500, tvl_factor_bp=1000, tvl_exponent_bp=5000)
    tvls = [1e3, 1e6, 1e9, 1e12, 1e15, 1e20]
    gaps = [target_ratio_bp(t, **steep) - 500 for t in tvls]

    for earlier, later in zip(gaps, gaps[1:]):
        assert 0 < later < earlier
    assert gaps[-1] < 1e-3


def test_stays_within_floor_and_full_reserve():
    """Test that the ratio stays between the floor and 100%."""
    for tvl in (1.0, 1e4, 1e8, 1e12):
        ratio = target_ratio_bp(tvl, **PARAMS)
        assert 500 <= ratio <= 10_000


def test_pure_function():
    """Test that repeated calls give bit-identical results."""
    assert target_ratio_bp(123_456.78, **PARAMS) == target_ratio_bp(123_456.78, **PARAMS)


def test_non_positive_factor_or_exponent_raises():
    """Test that non-positive curve parameters are hard errors."""
    with pytest.raises(ValueError, match="tvl_factor_bp must be positive"):
        target_ratio_bp(1e6, min_ratio_bp=500, tvl_factor_bp=0, tvl_exponent_bp=500)

    with pytest.raises(ValueError, match="tvl_exponent_bp must be positive"):
        target_ratio_bp(1e6, min_ratio_bp=500, tvl_factor_bp=1000, tvl_exponent_bp=-50)


def test_min_ratio_out_of_range_raises():
    """Test that a floor outside [0, 10000] is rejected."""
    with pytest.raises(ValueError, match="min_ratio_bp must be within"):
        target_ratio_bp(1e6, min_ratio_bp=10_001, tvl_factor_bp=1000, tvl_exponent_bp=500)


def test_target_ratio_for_params():
    """Test the convenience wrapper over a parameter object."""
    params = LiquidityModelParams()
    assert target_ratio_for(params, 1_000_000) == target_ratio_bp(1_000_000, **PARAMS)


def test_target_ratio_for_annotated_with_params_type():
    """Test that the wrapper declares the parameter object type."""
    annotation = inspect.signature(target_ratio_for).parameters["params"].annotation
    assert annotation == "LiquidityModelParams"
