"""Exponential-decay target liquidity ratio.

Implements the reserve ratio model:
    r = b + (1 - b) * (1 + T * f)^(-e)
where b is the floor ratio, T the vault TVL in USD, f the TVL factor and e
the decay exponent. A zero-size vault holds a full reserve (r = 1) and the
ratio decays towards b as the vault grows.
"""

from typing import TYPE_CHECKING

from liquidity_model.units import BPS, BasisPoints, bp_to_fraction, fraction_to_bp

if TYPE_CHECKING:
    from liquidity_model.config.schema import LiquidityModelParams


def target_ratio_bp(
    tvl: float,
    min_ratio_bp: float,
    tvl_factor_bp: float,
    tvl_exponent_bp: float,
) -> BasisPoints:
    """Compute the target liquidity ratio for a vault size.

    Negative TVL is treated as zero. Real vaults cannot hold negative value,
    so this is input sanitization rather than a statement about the model.

    Args:
        tvl: Vault total value locked (USD)
        min_ratio_bp: Asymptotic floor ratio (bp), in [0, 10000]
        tvl_factor_bp: TVL scaling sensitivity (bp), must be > 0
        tvl_exponent_bp: Decay exponent (bp), must be > 0

    Returns:
        Target ratio in basis points; fractional values are kept

    Raises:
        ValueError: If the floor is outside [0, 10000] or the factor or
            exponent is not positive
    """
    if not 0 <= min_ratio_bp <= BPS:
        raise ValueError(f"min_ratio_bp must be within [0, {BPS}], got {min_ratio_bp}")
    if tvl_factor_bp <= 0:
        raise ValueError(f"tvl_factor_bp must be positive, got {tvl_factor_bp}")
    if tvl_exponent_bp <= 0:
        raise ValueError(f"tvl_exponent_bp must be positive, got {tvl_exponent_bp}")

    tvl = max(tvl, 0.0)
    if tvl == 0:
        return BasisPoints(float(BPS))

    floor = bp_to_fraction(min_ratio_bp)
    factor = bp_to_fraction(tvl_factor_bp)
    exponent = bp_to_fraction(tvl_exponent_bp)

    ratio = floor + (1 - floor) * (1 + tvl * factor) ** (-exponent)
    return fraction_to_bp(ratio)


def target_ratio_for(params: "LiquidityModelParams", tvl: float) -> BasisPoints:
    """Compute the target ratio from a LiquidityModelParams value."""
    return target_ratio_bp(
        tvl,
        params.min_ratio_bp,
        params.tvl_factor_bp,
        params.tvl_exponent_bp,
    )
