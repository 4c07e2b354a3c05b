"""Rebalancing trigger thresholds.

The low and high triggers form a hysteresis band around the target ratio:
    t_l = r * (1 - o_l)
    t_h = r * (1 + o_h)
Deposits and withdrawals that keep the buffer inside the band net out without
touching deployed positions; only crossing a trigger signals a rebalance.
"""

from dataclasses import dataclass
from enum import Enum

from liquidity_model.units import BasisPoints, bp_to_fraction


@dataclass(frozen=True)
class TriggerThresholds:
    """Low and high rebalancing thresholds.

    Attributes:
        low_trigger: Ratio below which LP positions are unwound (bp)
        high_trigger: Ratio above which excess liquidity is deployed (bp)
    """

    low_trigger: BasisPoints
    high_trigger: BasisPoints


class RebalanceAction(str, Enum):
    """Action signaled by comparing the current ratio to the triggers."""

    UNWIND = "unwind"  # Restore the buffer from LP positions
    DEPLOY = "deploy"  # Move excess buffer into LP positions
    HOLD = "hold"


def liquidity_triggers(
    target_ratio_bp: float,
    low_offset_bp: float,
    high_offset_bp: float,
) -> TriggerThresholds:
    """Derive the trigger thresholds around a target ratio.

    No clamping is applied. Validated parameters keep ``low_offset_bp`` below
    10000, so the low trigger stays non-negative. The high trigger is a
    decision boundary, not a physical ratio, and may exceed 10000 bp.

    Args:
        target_ratio_bp: Target ratio (bp)
        low_offset_bp: Fractional offset below the target (bp)
        high_offset_bp: Fractional offset above the target (bp)

    Returns:
        TriggerThresholds with low and high triggers in bp
    """
    return TriggerThresholds(
        low_trigger=BasisPoints(target_ratio_bp * (1 - bp_to_fraction(low_offset_bp))),
        high_trigger=BasisPoints(target_ratio_bp * (1 + bp_to_fraction(high_offset_bp))),
    )


def rebalance_action(current_ratio_bp: float, thresholds: TriggerThresholds) -> RebalanceAction:
    """Decide which rebalancing action a current buffer ratio calls for.

    A ratio sitting exactly on a trigger is still inside the band.

    Args:
        current_ratio_bp: Observed liquid buffer as a share of TVL (bp)
        thresholds: Triggers derived from the target ratio

    Returns:
        UNWIND below the low trigger, DEPLOY above the high trigger, else HOLD
    """
    if current_ratio_bp < thresholds.low_trigger:
        return RebalanceAction.UNWIND
    if current_ratio_bp > thresholds.high_trigger:
        return RebalanceAction.DEPLOY
    return RebalanceAction.HOLD
