"""Point-in-time evaluation for a single simulated vault size."""

from dataclasses import dataclass

from liquidity_model.config.schema import LiquidityModelParams
from liquidity_model.model.interfaces import RatioFunction
from liquidity_model.model.ratio import target_ratio_bp
from liquidity_model.model.triggers import (
    RebalanceAction,
    liquidity_triggers,
    rebalance_action,
)


@dataclass(frozen=True)
class LiquidityEvaluation:
    """Target ratio and triggers at one TVL.

    Attributes:
        tvl: Evaluated vault size (USD), after clamping negatives to zero
        target: Target ratio (bp)
        low: Low trigger (bp)
        high: High trigger (bp)
        action: Rebalance action for the observed ratio, if one was given
    """

    tvl: float
    target: float
    low: float
    high: float
    action: RebalanceAction | None = None


def evaluate(
    params: LiquidityModelParams,
    tvl: float,
    current_ratio_bp: float | None = None,
    ratio_fn: RatioFunction = target_ratio_bp,
) -> LiquidityEvaluation:
    """Evaluate the target ratio and trigger thresholds at a TVL.

    Args:
        params: Validated liquidity model parameters
        tvl: Simulated vault size (USD); negative values are treated as zero
        current_ratio_bp: Observed buffer ratio (bp) to classify, optional
        ratio_fn: Ratio model implementing RatioFunction

    Returns:
        LiquidityEvaluation for the TVL
    """
    tvl = max(tvl, 0.0)
    target = ratio_fn(
        tvl,
        params.min_ratio_bp,
        params.tvl_factor_bp,
        params.tvl_exponent_bp,
    )
    triggers = liquidity_triggers(target, params.low_offset_bp, params.high_offset_bp)

    action = None
    if current_ratio_bp is not None:
        action = rebalance_action(current_ratio_bp, triggers)

    return LiquidityEvaluation(
        tvl=tvl,
        target=target,
        low=triggers.low_trigger,
        high=triggers.high_trigger,
        action=action,
    )
