"""
Configuration loader for the contracts API
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Literal, Optional

import yaml
from pydantic import BaseModel, Field, ValidationError

logger = logging.getLogger(__name__)


class ApiConfig(BaseModel):
    """HTTP surface configuration"""

    title: str = "Contracts API"
    prefix: str = "/api/v1"
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"


class DatabaseConfig(BaseModel):
    """Persistence configuration. An empty url selects the in-memory store."""

    url: str = ""
    pool_size: int = Field(default=5, ge=1, le=100)
    max_overflow: int = Field(default=10, ge=0, le=100)
    create_tables: bool = True


class AppConfig(BaseModel):
    api: ApiConfig = Field(default_factory=ApiConfig)
    database: DatabaseConfig = Field(default_factory=DatabaseConfig)


def default_config_path() -> Path:
    return Path(__file__).parent.parent.parent.parent / "config" / "app_config.yml"


def load_app_config(config_path: Optional[Path] = None) -> AppConfig:
    """
    Load and validate application configuration from YAML file

    Args:
        config_path: Path to config file. Defaults to config/app_config.yml

    Returns:
        Validated AppConfig; DATABASE_URL, when set, overrides database.url

    Raises:
        ValidationError: If config doesn't match schema
    """
    if config_path is None:
        config_path = Path(os.getenv("APP_CONFIG_PATH") or default_config_path())

    data = {}
    if config_path.exists():
        with open(config_path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    else:
        logger.info("Config file not found at %s; using defaults", config_path)

    try:
        cfg = AppConfig(**data)
    except ValidationError as e:
        logger.error("App config validation failed: %s", e)
        raise

    db_url = os.getenv("DATABASE_URL")
    if db_url:
        cfg.database.url = db_url
    logger.info("Successfully loaded app config from %s", config_path)
    return cfg
