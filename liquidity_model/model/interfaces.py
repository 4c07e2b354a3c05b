"""Protocol definitions for ratio models.

This module defines the interface every target-ratio model implements, so the
curve sampler can be driven by any registered model.
"""

from typing import Protocol


class RatioFunction(Protocol):
    """Protocol for target liquidity ratio models.

    A ratio model maps a vault TVL and the curve-shaping parameters to a
    target reserve ratio in basis points.
    """

    def __call__(
        self,
        tvl: float,
        min_ratio_bp: float,
        tvl_factor_bp: float,
        tvl_exponent_bp: float,
    ) -> float:
        """Compute the target ratio.

        Args:
            tvl: Vault total value locked (USD)
            min_ratio_bp: Asymptotic floor ratio (bp)
            tvl_factor_bp: TVL scaling sensitivity (bp)
            tvl_exponent_bp: Decay exponent (bp)

        Returns:
            Target ratio in basis points
        """
        ...
