"""Parameter schema, configuration loading and runtime settings."""

from liquidity_model.config.schema import (
    DEFAULT_LIQUIDITY_MODEL_PARAMS,
    VALIDATION_BOUNDS,
    FieldBounds,
    LiquidityModelParams,
    ModelConfig,
    SimulationDefaults,
    validate_params,
)

__all__ = [
    "DEFAULT_LIQUIDITY_MODEL_PARAMS",
    "VALIDATION_BOUNDS",
    "FieldBounds",
    "LiquidityModelParams",
    "ModelConfig",
    "SimulationDefaults",
    "validate_params",
]
