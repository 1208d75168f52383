import json
from functools import lru_cache
from pathlib import Path
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from fxexchange.models.rates import ExchangeRateConfiguration

_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


class Settings(BaseSettings):
    """Application settings loaded from environment with defaults.

    Environment variable mapping follows pydantic-settings rules (e.g. DEBUG, LOG_LEVEL,
    EXCHANGE_RATES__LOAD_FROM_CONFIG, EXCHANGE_RATES__CURRENCIES as a JSON list).
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False,
        env_nested_delimiter="__",
        extra="ignore",
    )

    # Basic app metadata
    app_name: str = "FX Exchange"
    debug: bool = False
    version: str = "0.1.0"

    # Logging goes to stderr; keep it quiet by default so prompts stay readable
    log_level: str = "WARNING"

    # Parse and render amounts with the user's numeric locale (LC_NUMERIC)
    use_system_locale: bool = True

    # Rate table source
    exchange_rates: ExchangeRateConfiguration = Field(
        default_factory=ExchangeRateConfiguration
    )

    def init_post_load(self) -> None:
        """Normalize and validate derived fields."""
        self.log_level = self.log_level.upper()
        if self.log_level not in _LOG_LEVELS:
            raise ValueError(
                f"Unsupported log_level '{self.log_level}'. Allowed: {sorted(_LOG_LEVELS)}"
            )


@lru_cache
def get_settings() -> Settings:
    settings = Settings()
    settings.init_post_load()
    return settings


def load_settings(config_path: Optional[Path] = None) -> Settings:
    """Build a fresh Settings instance, layering a JSON file over the environment.

    Values present in the file win over environment variables.
    """
    if config_path is None:
        return get_settings()
    data = json.loads(Path(config_path).read_text(encoding="utf-8"))
    if not isinstance(data, dict):
        raise ValueError(f"{config_path}: top level must be a JSON object")
    settings = Settings(**data)
    settings.init_post_load()
    return settings
