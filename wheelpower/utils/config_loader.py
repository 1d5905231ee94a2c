"""
Configuration loader for the content data-access layer
"""

import os
import yaml
from pathlib import Path
from typing import Any, Dict, Literal, Optional
from dotenv import load_dotenv
from pydantic import BaseModel, Field, ValidationError, field_validator
import logging

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path(__file__).parent.parent.parent / "config" / "content_service.yml"
DEFAULT_BASE_URL = "https://directus-production-2cc1.up.railway.app"

# Environment variable -> config field
ENV_OVERRIDES = {
    "DIRECTUS_URL": "base_url",
    "DIRECTUS_TIMEOUT_SECONDS": "timeout_seconds",
    "DIRECTUS_SETTINGS_COLLECTION": "settings_collection",
    "INTEGRATIONS_MODE": "integrations_mode",
    "CONTENT_MOCK_DATA_DIR": "mock_data_dir",
    "CONTENT_MOCK_OUTPUT_DIR": "mock_output_dir",
}


class ContentServiceConfig(BaseModel):
    """Directus content service configuration"""

    base_url: str = DEFAULT_BASE_URL
    timeout_seconds: Optional[float] = Field(default=15.0, gt=0)
    settings_collection: Literal["settings", "site_settings"] = "settings"
    integrations_mode: Literal["real", "mock"] = "real"
    mock_data_dir: str = "data/content"
    mock_output_dir: str = "data/submissions"

    @field_validator("base_url")
    @classmethod
    def _strip_trailing_slash(cls, value: str) -> str:
        value = value.strip().rstrip("/")
        if not value:
            raise ValueError("base_url must not be empty")
        return value

    @field_validator("integrations_mode", mode="before")
    @classmethod
    def _normalize_mode(cls, value: Any) -> Any:
        if isinstance(value, str):
            value = value.strip().lower()
            if value in {"live"}:
                return "real"
            if value in {"test", "local"}:
                return "mock"
        return value


def _env_overrides() -> Dict[str, Any]:
    overrides: Dict[str, Any] = {}
    for env_name, field_name in ENV_OVERRIDES.items():
        raw = os.getenv(env_name)
        if raw is None or not raw.strip():
            continue
        overrides[field_name] = raw.strip()
    return overrides


def load_content_config(config_path: Optional[Path] = None) -> ContentServiceConfig:
    """
    Load and validate content service configuration

    Values come from the YAML file first, then from environment variables
    (a ``.env`` file is honoured).

    Args:
        config_path: Path to config file. Defaults to config/content_service.yml

    Returns:
        Validated ContentServiceConfig object

    Raises:
        FileNotFoundError: If an explicitly given config file doesn't exist
        ValidationError: If config doesn't match schema
    """
    load_dotenv()

    config_data: Dict[str, Any] = {}
    path = Path(config_path) if config_path is not None else DEFAULT_CONFIG_PATH

    if path.exists():
        with open(path, "r", encoding="utf-8") as f:
            loaded = yaml.safe_load(f) or {}
        config_data.update(loaded.get("content_service", loaded))
    elif config_path is not None:
        raise FileNotFoundError(f"Config file not found: {path}")
    else:
        logger.debug(f"No config file at {path}, using defaults")

    config_data.update(_env_overrides())

    try:
        config = ContentServiceConfig(**config_data)
        logger.debug(f"Loaded content service config: base_url={config.base_url} mode={config.integrations_mode}")
        return config
    except ValidationError as e:
        logger.error(f"Config validation failed: {e}")
        raise
