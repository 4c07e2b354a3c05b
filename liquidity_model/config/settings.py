"""Runtime settings using Pydantic Settings.

Values come from environment variables or a local ``.env`` file. Model
parameters are not settings; they live in the YAML model configuration.
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class LoggingSettings(BaseSettings):
    """Log output configuration."""

    level: str = Field(default="INFO", alias="LIQUIDITY_LOG_LEVEL")
    json_output: bool = Field(default=False, alias="LIQUIDITY_LOG_JSON")

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")


class ChartSettings(BaseSettings):
    """Curve sampling and simulation defaults for the dashboard and CLI."""

    max_tvl: float = Field(default=1_000_000_000.0, gt=0, alias="CHART_MAX_TVL")
    min_tvl: float = Field(default=1_000.0, gt=0, alias="CHART_MIN_TVL")
    point_count: int = Field(default=100, ge=2, alias="CHART_POINT_COUNT")
    logarithmic: bool = Field(default=True, alias="CHART_LOGARITHMIC")
    simulation_tvl: float = Field(default=1_000_000.0, ge=0, alias="SIMULATION_TVL")

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")


class Settings(BaseSettings):
    """Master settings aggregator."""

    config_path: str = Field(default="config.yaml", alias="LIQUIDITY_CONFIG_PATH")
    logging: LoggingSettings = Field(default_factory=LoggingSettings)
    chart: ChartSettings = Field(default_factory=ChartSettings)

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")


# Global settings instance
settings = Settings()
