"""Tests for point-in-time evaluation."""

import pytest
from liquidity_model.config.schema import LiquidityModelParams
from liquidity_model.engine.evaluation import evaluate
from liquidity_model.model.triggers import RebalanceAction


def test_evaluate_zero_tvl():
    """Test the readout for a zero-size vault."""
    result = evaluate(LiquidityModelParams(), 0)

    assert result.target == 10_000
    assert result.low == pytest.approx(8000)
    assert result.high == pytest.approx(12_000)
    assert result.action is None


def test_evaluate_reference_tvl():
    """Test the readout at $1M with 20% offsets."""
    result = evaluate(LiquidityModelParams(), 1_000_000)

    expected = 500 + 9500 * (1 + 1_000_000 * 0.1) ** -0.05
    assert result.tvl == 1_000_000
    assert result.target == pytest.approx(expected, rel=1e-6)
    assert result.low == pytest.approx(expected * 0.8, rel=1e-6)
    assert result.high == pytest.approx(expected * 1.2, rel=1e-6)


def test_evaluate_negative_tvl_clamped():
    """Test that negative TVL evaluates as a zero-size vault."""
    result = evaluate(LiquidityModelParams(), -50)
    assert result.tvl == 0.0
    assert result.target == 10_000


def test_evaluate_rebalance_action():
    """Test classification of an observed buffer ratio."""
    params = LiquidityModelParams()
    target = evaluate(params, 1_000_000).target

    assert evaluate(params, 1_000_000, current_ratio_bp=target).action == RebalanceAction.HOLD
    assert evaluate(params, 1_000_000, current_ratio_bp=target * 0.5).action == RebalanceAction.UNWIND
    assert evaluate(params, 1_000_000, current_ratio_bp=target * 1.5).action == RebalanceAction.DEPLOY


def test_evaluate_injected_ratio_function():
    """Test that the readout uses the ratio model it is given."""
    def flat_ratio(tvl, min_ratio_bp, tvl_factor_bp, tvl_exponent_bp):
        return 5000.0

    result = evaluate(LiquidityModelParams(), 1_000_000, ratio_fn=flat_ratio)

    assert result.target == 5000.0
    assert result.low == pytest.approx(4000.0)
    assert result.high == pytest.approx(6000.0)
