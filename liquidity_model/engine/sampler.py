"""Curve sampling over a TVL domain.

Drives the ratio model and the trigger calculator across a TVL sweep to build
the dataset behind the ratio/trigger chart. Sampling is a pure function of
its inputs; nothing is cached between calls.
"""

import math
from dataclasses import dataclass

import numpy as np
import pandas as pd
import structlog

from liquidity_model.config.schema import LiquidityModelParams
from liquidity_model.model.interfaces import RatioFunction
from liquidity_model.model.ratio import target_ratio_bp
from liquidity_model.model.triggers import liquidity_triggers

logger = structlog.get_logger()

# Lower end of a log-spaced domain when none is given ($1K)
DEFAULT_LOG_FLOOR_TVL = 1_000.0

# Orders of magnitude a default log floor sits below a small max_tvl
LOG_FLOOR_DECADES = 3

CURVE_COLUMNS = ["tvl", "low", "target", "high"]


@dataclass(frozen=True)
class CurvePoint:
    """One evaluated sample of the ratio/trigger curves.

    Attributes:
        tvl: Sampled vault size (USD)
        low: Low trigger (bp)
        target: Target ratio (bp)
        high: High trigger (bp)
    """

    tvl: float
    low: float
    target: float
    high: float


def sample_tvl_domain(
    max_tvl: float,
    point_count: int,
    logarithmic: bool,
    min_tvl: float | None = None,
) -> np.ndarray:
    """Build the ordered TVL sample points.

    Log-spaced samples keep the curve shape visible across orders of
    magnitude. The first and last samples equal the domain bounds exactly.

    Args:
        max_tvl: Domain end (USD), must be positive and finite
        point_count: Number of samples, must be >= 2
        logarithmic: Space samples evenly in log-space instead of linearly
        min_tvl: Domain start; defaults to $1K (or max_tvl / 1000 when that is
            smaller) for log spacing and 0 otherwise

    Returns:
        Strictly increasing array of length point_count

    Raises:
        ValueError: If the request would not produce a well-formed domain
    """
    if point_count < 2:
        raise ValueError(f"point_count must be >= 2, got {point_count}")
    if not math.isfinite(max_tvl) or max_tvl <= 0:
        raise ValueError(f"max_tvl must be positive and finite, got {max_tvl}")

    if min_tvl is None:
        if logarithmic:
            # Small domains get a floor below max_tvl instead of the $1K default
            min_tvl = min(DEFAULT_LOG_FLOOR_TVL, max_tvl / 10**LOG_FLOOR_DECADES)
        else:
            min_tvl = 0.0

    if logarithmic and min_tvl <= 0:
        raise ValueError(f"min_tvl must be positive for log spacing, got {min_tvl}")
    if min_tvl < 0:
        raise ValueError(f"min_tvl must be non-negative, got {min_tvl}")
    if min_tvl >= max_tvl:
        raise ValueError(f"min_tvl ({min_tvl}) must be below max_tvl ({max_tvl})")

    if logarithmic:
        tvls = np.geomspace(min_tvl, max_tvl, point_count)
    else:
        tvls = np.linspace(min_tvl, max_tvl, point_count)

    # Pin endpoints against floating point drift
    tvls[0] = min_tvl
    tvls[-1] = max_tvl
    return tvls


def sample_curve(
    params: LiquidityModelParams,
    max_tvl: float,
    point_count: int,
    logarithmic: bool,
    min_tvl: float | None = None,
    ratio_fn: RatioFunction = target_ratio_bp,
) -> list[CurvePoint]:
    """Sample the target ratio and trigger curves across a TVL domain.

    Args:
        params: Validated liquidity model parameters
        max_tvl: Domain end (USD)
        point_count: Number of samples, must be >= 2
        logarithmic: Space samples evenly in log-space instead of linearly
        min_tvl: Domain start; defaults to $1K (or max_tvl / 1000 when that is
            smaller) for log spacing and 0 otherwise
        ratio_fn: Ratio model implementing RatioFunction

    Returns:
        List of point_count CurvePoints ordered by increasing TVL

    Raises:
        ValueError: If point_count < 2, max_tvl is not positive, or the
            domain bounds are inconsistent
    """
    tvls = sample_tvl_domain(max_tvl, point_count, logarithmic, min_tvl)

    points = []
    for tvl in tvls.tolist():
        target = ratio_fn(
            tvl,
            params.min_ratio_bp,
            params.tvl_factor_bp,
            params.tvl_exponent_bp,
        )
        triggers = liquidity_triggers(target, params.low_offset_bp, params.high_offset_bp)
        points.append(CurvePoint(
            tvl=tvl,
            low=triggers.low_trigger,
            target=target,
            high=triggers.high_trigger,
        ))

    logger.debug(
        "curve_sampled",
        points=len(points),
        min_tvl=points[0].tvl,
        max_tvl=points[-1].tvl,
        logarithmic=logarithmic,
    )
    return points


def curve_to_frame(points: list[CurvePoint]) -> pd.DataFrame:
    """Convert curve samples to a DataFrame with columns tvl, low, target, high."""
    return pd.DataFrame(
        [(p.tvl, p.low, p.target, p.high) for p in points],
        columns=CURVE_COLUMNS,
    )
