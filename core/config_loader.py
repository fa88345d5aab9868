import yaml
import os
import logging
from typing import Optional
from pydantic import BaseModel, Field

logger = logging.getLogger(__name__)


class LlmConfig(BaseModel):
    base_url: Optional[str] = None
    api_key: Optional[str] = None
    model: str = "gpt-4o-mini"
    temperature: float = 0.8
    timeout_seconds: float = 120.0  # The scan prompt is long; the model needs time
    niche_count: int = Field(default=8, ge=1, le=25)
    max_retries: int = Field(default=4, ge=1)


class ScoringConfig(BaseModel):
    """
    Configuration for the ranking engine and the dashboard's starting state.
    """
    # Multiplier applied to trend before weighting (1.0 = raw signed float)
    trend_scale: float = 1.0
    default_goal: str = "balanced"
    default_filter_preset: str = "all"


class StorageConfig(BaseModel):
    """Key-value storage for the weight vector."""
    url: str = "sqlite:///niche_scout.db"
    # Bump the version suffix when the stored weight shape changes
    weights_key: str = "niche_weights_v2"


class WebConfig(BaseModel):
    host: str = "0.0.0.0"
    port: int = 8080


class AppConfig(BaseModel):
    llm: LlmConfig = Field(default_factory=LlmConfig)
    scoring: ScoringConfig = Field(default_factory=ScoringConfig)
    storage: StorageConfig = Field(default_factory=StorageConfig)
    web: WebConfig = Field(default_factory=WebConfig)


def _apply_env_overrides(data: dict) -> dict:
    """Apply environment variable overrides on top of the YAML values."""
    overrides = [
        ("OPENAI_API_KEY", "llm", "api_key", str),
        ("LLM_BASE_URL", "llm", "base_url", str),
        ("LLM_MODEL", "llm", "model", str),
        ("DATABASE_URL", "storage", "url", str),
        ("WEB_HOST", "web", "host", str),
        ("WEB_PORT", "web", "port", int),
    ]
    for env_name, section, key, cast in overrides:
        value = os.environ.get(env_name)
        if value:
            if section not in data or data[section] is None:
                data[section] = {}
            data[section][key] = cast(value)
    return data


def load_config(config_path: str = "config.yaml") -> AppConfig:
    # If not found at relative path (e.g. running from a subdirectory), try the project root
    if not os.path.exists(config_path):
        base_dir = os.path.dirname(os.path.abspath(__file__))
        config_path = os.path.join(base_dir, "..", "config.yaml")

    data = {}
    if os.path.exists(config_path):
        with open(config_path, "r") as f:
            data = yaml.safe_load(f) or {}
    else:
        logger.info("No config.yaml found, using defaults")

    return AppConfig(**_apply_env_overrides(data))
