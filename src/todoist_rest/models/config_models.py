"""Configuration models for todoist_rest."""

from __future__ import annotations

import logging

from pydantic import BaseModel, Field, field_validator


class APIConfig(BaseModel):
    """API configuration."""

    endpoint: str = Field(default="https://beta.todoist.com/API/v8")
    timeout: float = Field(default=30.0, gt=0)


class LoggingConfig(BaseModel):
    """Log file configuration."""

    level: str = Field(default="INFO")
    file_name: str = Field(default="todoist_rest.log")
    max_bytes: int = Field(default=5 * 1024 * 1024, gt=0)  # 5 MB
    backup_count: int = Field(default=3, ge=0)

    @field_validator("level")
    @classmethod
    def validate_level(cls, v: str) -> str:
        """Normalise the level name and reject unknown ones."""
        level = v.strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"unknown log level: {v}")
        return level


class AppConfig(BaseModel):
    """Main todoist_rest configuration"""

    api: APIConfig = Field(default_factory=APIConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
