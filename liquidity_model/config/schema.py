"""Pydantic configuration schemas.

Defines the liquidity model parameter set, its per-field validation bounds,
and the file-level configuration that wraps it.

Out-of-range parameter values are clamped to their bounds rather than
rejected: the editing surface is a set of continuous sliders, where the only
meaningful correction is to pin a value to the nearest edge.
"""

import math
import numbers
from dataclasses import dataclass
from typing import Any, Mapping

import structlog
from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator

from liquidity_model.model import MODEL_REGISTRY

logger = structlog.get_logger()

# Upper limit of the simulated vault size shown on the dashboard (USD)
MAX_SIMULATION_TVL = 1_000_000_000.0

# Reset value for the simulated vault size (USD)
DEFAULT_SIMULATION_TVL = 1_000_000.0


@dataclass(frozen=True)
class FieldBounds:
    """Inclusive bounds of a single basis-point parameter.

    Attributes:
        min: Smallest accepted value (bp)
        max: Largest accepted value (bp)
    """

    min: int
    max: int

    def __post_init__(self):
        """Validate bound ordering."""
        if self.min > self.max:
            raise ValueError(f"min must not exceed max, got [{self.min}, {self.max}]")

    def clamp(self, value: float) -> int:
        """Pin a value into [min, max] and round it to a whole basis point."""
        return int(round(min(max(value, self.min), self.max)))


# Realistic institutional ranges. Factor and exponent stay strictly positive so
# the ratio curve is always decreasing; offsets stay below 10000 so the low
# trigger can never reach zero or go negative.
VALIDATION_BOUNDS: dict[str, FieldBounds] = {
    "min_ratio_bp": FieldBounds(min=100, max=5_000),
    "tvl_factor_bp": FieldBounds(min=100, max=10_000),
    "tvl_exponent_bp": FieldBounds(min=50, max=5_000),
    "low_offset_bp": FieldBounds(min=0, max=5_000),
    "high_offset_bp": FieldBounds(min=0, max=5_000),
}


class LiquidityModelParams(BaseModel):
    """Immutable liquidity model configuration.

    All fields are integer basis points. Field names are snake_case; the
    camelCase names used by front-end state (``minRatioBp`` etc.) are
    accepted as aliases.

    Attributes:
        min_ratio_bp: Asymptotic floor of the target ratio as TVL grows
        tvl_factor_bp: Linear TVL scaling sensitivity in the decay term
        tvl_exponent_bp: Decay exponent (500 bp = 0.05)
        low_offset_bp: Fraction below target for the low trigger
        high_offset_bp: Fraction above target for the high trigger
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="forbid")

    min_ratio_bp: int = Field(default=500, alias="minRatioBp", description="Floor ratio (bp)")
    tvl_factor_bp: int = Field(default=1_000, alias="tvlFactorBp", description="TVL factor (bp)")
    tvl_exponent_bp: int = Field(default=500, alias="tvlExponentBp", description="Decay exponent (bp)")
    low_offset_bp: int = Field(default=2_000, alias="lowOffsetBp", description="Low trigger offset (bp)")
    high_offset_bp: int = Field(default=2_000, alias="highOffsetBp", description="High trigger offset (bp)")

    @field_validator(*VALIDATION_BOUNDS, mode="before")
    @classmethod
    def clamp_to_bounds(cls, value: Any, info: ValidationInfo) -> Any:
        """Clamp numeric input into the field's bounds.

        NaN has no nearest bound, so it falls back to the field default.
        Non-numeric input is passed through untouched so pydantic reports it
        as a type error.
        """
        if isinstance(value, str):
            try:
                value = float(value)
            except ValueError:
                return value
        if isinstance(value, bool) or not isinstance(value, numbers.Real):
            return value

        if math.isnan(value):
            default = cls.model_fields[info.field_name].default
            logger.debug("param_nan_defaulted", field=info.field_name, default=default)
            return default

        bounds = VALIDATION_BOUNDS[info.field_name]
        clamped = bounds.clamp(value)
        if clamped != value:
            logger.debug(
                "param_clamped",
                field=info.field_name,
                value=value,
                clamped=clamped,
            )
        return clamped

    def with_updates(self, **changes: Any) -> "LiquidityModelParams":
        """Return a new parameter set with some or all fields replaced.

        Replacement values go through the same clamping as construction.

        Args:
            **changes: Field values keyed by field name or camelCase alias

        Returns:
            New validated LiquidityModelParams

        Raises:
            ValueError: If a key does not name a parameter
        """
        names = _field_names_by_key()
        unknown = sorted(key for key in changes if key not in names)
        if unknown:
            raise ValueError(
                f"Unknown liquidity model parameter(s): {', '.join(unknown)}. "
                f"Available: {', '.join(VALIDATION_BOUNDS)}"
            )

        merged = self.model_dump()
        for key, value in changes.items():
            merged[names[key]] = value
        return LiquidityModelParams(**merged)


def _field_names_by_key() -> dict[str, str]:
    """Map both field names and aliases to field names."""
    names = {}
    for name, field in LiquidityModelParams.model_fields.items():
        names[name] = name
        if field.alias:
            names[field.alias] = name
    return names


DEFAULT_LIQUIDITY_MODEL_PARAMS = LiquidityModelParams()


def validate_params(params: LiquidityModelParams | Mapping[str, Any]) -> LiquidityModelParams:
    """Clamp every field of a parameter set into its bounds.

    Never fails on out-of-range values. A mapping may use field names or
    camelCase aliases; missing fields take their defaults.

    Args:
        params: Existing parameter object or raw mapping

    Returns:
        Validated LiquidityModelParams

    Raises:
        pydantic.ValidationError: If a value is not numeric or a key is unknown
    """
    if isinstance(params, LiquidityModelParams):
        params = params.model_dump()
    return LiquidityModelParams.model_validate(dict(params))


class SimulationDefaults(BaseModel):
    """Point-in-time evaluation and chart sampling defaults.

    Attributes:
        tvl: Simulated vault size (USD), clamped to [0, MAX_SIMULATION_TVL]
        max_tvl: Upper end of the sampled TVL domain (USD)
        min_tvl: Lower end of the sampled domain; None picks the axis default
        point_count: Number of curve samples
        logarithmic: Space samples evenly in log-space instead of linearly
    """

    tvl: float = Field(default=DEFAULT_SIMULATION_TVL, description="Simulated TVL (USD)")
    max_tvl: float = Field(default=MAX_SIMULATION_TVL, gt=0, description="Chart domain end (USD)")
    min_tvl: float | None = Field(default=None, ge=0, description="Chart domain start (USD)")
    point_count: int = Field(default=100, ge=2, description="Curve samples (must be >= 2)")
    logarithmic: bool = Field(default=True, description="Log-spaced sampling")

    @field_validator("tvl")
    @classmethod
    def clamp_tvl(cls, tvl: float) -> float:
        """Pin the simulated TVL into the displayable range."""
        return min(max(tvl, 0.0), MAX_SIMULATION_TVL)


class ModelConfig(BaseModel):
    """Top-level liquidity model configuration.

    Attributes:
        model: Name of the ratio model to use
        params: Liquidity model parameters
        simulation: Evaluation and sampling defaults
    """

    model: str = Field(default="exponential_decay", description="Ratio model name")
    params: LiquidityModelParams = Field(default_factory=LiquidityModelParams)
    simulation: SimulationDefaults = Field(default_factory=SimulationDefaults)

    @field_validator("model")
    @classmethod
    def validate_model_name(cls, model: str) -> str:
        """Ensure the model name is registered."""
        if model not in MODEL_REGISTRY:
            available = ", ".join(MODEL_REGISTRY)
            raise ValueError(f"Unknown model '{model}'. Available models: {available}")
        return model
