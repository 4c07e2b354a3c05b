"""Tests for CLI artifact writers."""

import json

import pandas as pd
from liquidity_model.config.schema import LiquidityModelParams
from liquidity_model.engine.evaluation import evaluate
from liquidity_model.engine.sampler import curve_to_frame, sample_curve
from liquidity_model.report.artifacts import write_artifacts


def test_write_artifacts(tmp_path):
    """Test that the curve CSV and summary JSON are written."""
    params = LiquidityModelParams()
    frame = curve_to_frame(sample_curve(params, max_tvl=1e9, point_count=20, logarithmic=True))
    evaluation = evaluate(params, 1_000_000, current_ratio_bp=100)

    paths = write_artifacts(frame, evaluation, params, tmp_path / "out")

    curve = pd.read_csv(paths["curve"])
    assert list(curve.columns) == ["tvl", "low", "target", "high"]
    assert len(curve) == 20

    with open(paths["summary"]) as f:
        summary = json.load(f)
    assert summary["params"]["minRatioBp"] == 500
    assert summary["curve_points"] == 20
    assert summary["evaluation"]["tvl"] == 1_000_000
    assert summary["evaluation"]["action"] == "unwind"
