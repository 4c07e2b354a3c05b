"""Target ratio models and trigger thresholds."""

from liquidity_model.model.interfaces import RatioFunction
from liquidity_model.model.ratio import target_ratio_bp, target_ratio_for
from liquidity_model.model.triggers import (
    RebalanceAction,
    TriggerThresholds,
    liquidity_triggers,
    rebalance_action,
)

# Model registry for string-based lookup
MODEL_REGISTRY: dict[str, RatioFunction] = {
    "exponential_decay": target_ratio_bp,
}


def get_model(model_name: str) -> RatioFunction:
    """Get a ratio model by name.

    Args:
        model_name: Name of the model (e.g., "exponential_decay")

    Returns:
        Ratio function from registry

    Raises:
        ValueError: If model name not found in registry
    """
    if model_name not in MODEL_REGISTRY:
        available = ", ".join(MODEL_REGISTRY.keys())
        raise ValueError(
            f"Unknown model '{model_name}'. Available models: {available}"
        )
    return MODEL_REGISTRY[model_name]


__all__ = [
    "MODEL_REGISTRY",
    "RatioFunction",
    "RebalanceAction",
    "TriggerThresholds",
    "get_model",
    "liquidity_triggers",
    "rebalance_action",
    "target_ratio_bp",
    "target_ratio_for",
]
