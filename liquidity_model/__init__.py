"""Liquidity buffer model.

Computes a vault's target liquidity reserve ratio from its TVL, derives the
rebalancing triggers around it, and samples both across a TVL domain.
"""

from liquidity_model.config.schema import (
    DEFAULT_LIQUIDITY_MODEL_PARAMS,
    VALIDATION_BOUNDS,
    LiquidityModelParams,
    validate_params,
)
from liquidity_model.engine.evaluation import LiquidityEvaluation, evaluate
from liquidity_model.engine.sampler import CurvePoint, curve_to_frame, sample_curve
from liquidity_model.model import (
    RebalanceAction,
    TriggerThresholds,
    liquidity_triggers,
    rebalance_action,
    target_ratio_bp,
)
from liquidity_model.units import BPS

__all__ = [
    "BPS",
    "DEFAULT_LIQUIDITY_MODEL_PARAMS",
    "VALIDATION_BOUNDS",
    "CurvePoint",
    "LiquidityEvaluation",
    "LiquidityModelParams",
    "RebalanceAction",
    "TriggerThresholds",
    "curve_to_frame",
    "evaluate",
    "liquidity_triggers",
    "rebalance_action",
    "sample_curve",
    "target_ratio_bp",
    "validate_params",
]
