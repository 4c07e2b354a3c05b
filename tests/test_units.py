"""Tests for basis-point unit conversions."""

import pytest
from liquidity_model.units import BPS, bp_to_fraction, bp_to_percent, fraction_to_bp


def test_bps_scale():
    """Test that one unit is 10000 basis points."""
    assert BPS == 10_000


def test_bp_fraction_conversions():
    """Test conversion between basis points and fractions."""
    assert bp_to_fraction(500) == 0.05
    assert bp_to_fraction(BPS) == 1.0
    assert fraction_to_bp(0.05) == pytest.approx(500)
    assert fraction_to_bp(1.0) == BPS


def test_bp_to_percent():
    """Test percent conversion used by display code."""
    assert bp_to_percent(500) == 5.0
    assert bp_to_percent(12_000) == 120.0
