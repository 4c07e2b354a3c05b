"""Basis-point unit handling.

Every ratio-like quantity in the model is carried in basis points
(1 bp = 1/10000). Formulas that need a 0-1 fraction convert through
``bp_to_fraction`` and convert back through ``fraction_to_bp``; nothing
else in the package scales by 10000 directly.
"""

from typing import Final, NewType

# Scale factor between a fraction and basis points
BPS: Final[int] = 10_000

BasisPoints = NewType("BasisPoints", float)


def bp_to_fraction(bp: float) -> float:
    """Convert basis points to a dimensionless fraction (500 bp -> 0.05)."""
    return bp / BPS


def fraction_to_bp(fraction: float) -> BasisPoints:
    """Convert a dimensionless fraction to basis points (0.05 -> 500 bp)."""
    return BasisPoints(fraction * BPS)


def bp_to_percent(bp: float) -> float:
    """Convert basis points to percent (500 bp -> 5.0).

    Only used by display code; the model itself never works in percent.
    """
    return bp / 100
