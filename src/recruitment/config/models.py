"""
Pydantic configuration models with YAML loading and environment overrides.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Dict, Literal, Optional

import yaml
from pydantic import BaseModel, ConfigDict, Field

from recruitment.infrastructure.stores.sqlalchemy_db import get_db_url


class DatabaseConfig(BaseModel):
    url: Optional[str] = None  # falls back to get_db_url() resolution
    echo: bool = False
    pool_pre_ping: bool = True
    auto_create_schema: bool = True

    def resolved_url(self) -> str:
        return self.url or get_db_url()


class LoggingConfig(BaseModel):
    model_config = ConfigDict(validate_assignment=True)

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    file: Optional[str] = None
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class SecurityConfig(BaseModel):
    password_hash_iterations: int = Field(default=260_000, gt=0)


class AppConfig(BaseModel):
    database: DatabaseConfig = Field(default_factory=DatabaseConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    security: SecurityConfig = Field(default_factory=SecurityConfig)
    raw: Dict[str, Any] = Field(default_factory=dict)

    @classmethod
    def from_yaml(cls, path: str | Path) -> "AppConfig":
        file_path = Path(path).expanduser()
        if not file_path.exists():
            raise FileNotFoundError(f"Config file not found: {file_path}")
        data = yaml.safe_load(file_path.read_text(encoding="utf-8")) or {}
        return cls(**data, raw=data)

    def apply_environment(self) -> "AppConfig":
        """Environment variables win over file values."""
        db_url = os.getenv("RECRUITMENT_DB_URL")
        if db_url:
            self.database.url = db_url
        level = os.getenv("RECRUITMENT_LOG_LEVEL")
        if level:
            self.logging.level = level.strip().upper()
        log_file = os.getenv("RECRUITMENT_LOG_FILE")
        if log_file:
            self.logging.file = log_file
        return self


def load_config(path: Optional[str | Path] = None) -> AppConfig:
    """Load config from ``path`` (or RECRUITMENT_CONFIG) when given, then apply env overrides."""
    path = path or os.getenv("RECRUITMENT_CONFIG")
    config = AppConfig.from_yaml(path) if path else AppConfig()
    return config.apply_environment()
