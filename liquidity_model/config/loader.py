"""Configuration file loading and parsing.

Loads and validates YAML configuration files using Pydantic schemas.
"""

import yaml
import structlog
from pathlib import Path
from liquidity_model.config.schema import ModelConfig

logger = structlog.get_logger()


def load_config(config_path: str | Path) -> ModelConfig:
    """Load and validate liquidity model configuration from YAML file.

    Parameter values outside their bounds are clamped, not rejected. An
    empty file yields the default configuration.

    Args:
        config_path: Path to YAML configuration file

    Returns:
        Validated ModelConfig object

    Raises:
        FileNotFoundError: If config file doesn't exist
        yaml.YAMLError: If YAML is malformed
        pydantic.ValidationError: If config doesn't match schema
    """
    config_path = Path(config_path)

    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(config_path, "r") as f:
        raw_config = yaml.safe_load(f) or {}

    config = ModelConfig(**raw_config)
    logger.info("config_loaded", path=str(config_path), model=config.model)
    return config
