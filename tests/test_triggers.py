"""Tests for rebalancing trigger thresholds."""

import pytest
from liquidity_model.model.triggers import (
    RebalanceAction,
    TriggerThresholds,
    liquidity_triggers,
    rebalance_action,
)


def test_triggers_at_full_reserve():
    """Test triggers around a 100% target with 20% offsets."""
    triggers = liquidity_triggers(10_000, 2000, 2000)
    assert triggers.low_trigger == pytest.approx(8000)
    assert triggers.high_trigger == pytest.approx(12_000)


def test_triggers_reference_value():
    """Test triggers scale the target by (1 - o_l) and (1 + o_h)."""
    target = 5842.24
    triggers = liquidity_triggers(target, 2000, 2000)
    assert triggers.low_trigger == pytest.approx(target * 0.8, rel=1e-12)
    assert triggers.high_trigger == pytest.approx(target * 1.2, rel=1e-12)


def test_triggers_bracket_target():
    """Test low <= target <= high for valid offsets."""
    for target in (0.0, 250.0, 5000.0, 10_000.0):
        for low_offset in (0, 100, 2500, 5000, 9999):
            for high_offset in (0, 100, 5000):
                triggers = liquidity_triggers(target, low_offset, high_offset)
                assert 0 <= triggers.low_trigger <= target <= triggers.high_trigger


def test_high_trigger_may_exceed_full_reserve():
    """Test that the high trigger has no implicit 100% ceiling."""
    triggers = liquidity_triggers(10_000, 0, 5000)
    assert triggers.high_trigger == pytest.approx(15_000)
    assert triggers.low_trigger == 10_000


def test_rebalance_action():
    """Test the action signaled on each side of the band."""
    thresholds = TriggerThresholds(low_trigger=4000, high_trigger=6000)

    assert rebalance_action(3999, thresholds) == RebalanceAction.UNWIND
    assert rebalance_action(5000, thresholds) == RebalanceAction.HOLD
    assert rebalance_action(6001, thresholds) == RebalanceAction.DEPLOY


def test_rebalance_action_on_trigger_holds():
    """Test that a ratio exactly on a trigger stays inside the band."""
    thresholds = TriggerThresholds(low_trigger=4000, high_trigger=6000)

    assert rebalance_action(4000, thresholds) == RebalanceAction.HOLD
    assert rebalance_action(6000, thresholds) == RebalanceAction.HOLD
