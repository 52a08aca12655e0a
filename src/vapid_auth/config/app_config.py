"""Application configuration from YAML file."""
import logging
import os
from functools import lru_cache
from typing import Optional

import yaml
from pydantic import BaseModel, Field

logger = logging.getLogger(__name__)


class AppConfig(BaseModel):
    """Application configuration from config.yaml."""

    vapid_token_ttl_seconds: int = Field(
        default=12 * 60 * 60,
        ge=1,
        le=24 * 60 * 60,
        description="Lifetime of generated VAPID tokens in seconds"
    )

    @classmethod
    def from_yaml(cls, config_path: Optional[str] = None) -> "AppConfig":
        """
        Load application configuration from YAML file.

        Args:
            config_path: Path to config.yaml file. If None, uses CONFIG_PATH env var
                        or defaults to ./config.yaml

        Returns:
            AppConfig instance
        """
        if config_path is None:
            config_path = os.getenv("CONFIG_PATH", "config.yaml")

        # If file doesn't exist, return default config
        if not os.path.exists(config_path):
            return cls()

        try:
            with open(config_path, 'r') as f:
                config_data = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError) as e:
            logger.warning("Could not read %s, using defaults: %s", config_path, e)
            return cls()

        ttl = config_data.get("VAPID_TOKEN_TTL_SECONDS", 12 * 60 * 60)

        return cls(vapid_token_ttl_seconds=ttl)


@lru_cache()
def get_app_config() -> AppConfig:
    """
    Get cached application configuration.

    Returns:
        AppConfig instance
    """
    return AppConfig.from_yaml()
