"""Settings for repository location resolution."""
from __future__ import annotations

import logging
from typing import List

from pydantic import field_validator
from pydantic_settings import BaseSettings

# Schemes a repository URL may use; anything else is not treated as a URL
DEFAULT_URL_SCHEMES = ["http", "https", "ftp", "file", "jar"]


class LocationSettings(BaseSettings):
    """Location resolution settings."""

    url_schemes: List[str] = DEFAULT_URL_SCHEMES
    hosted_git_host: str = "github.com"
    log_level: str = "INFO"

    class Config:
        """Pydantic config."""

        env_prefix = "RL_"

    @field_validator("url_schemes")
    @classmethod
    def _lowercase_schemes(cls, value: List[str]) -> List[str]:
        if not value:
            raise ValueError("at least one URL scheme is required")
        return [scheme.lower() for scheme in value]

    @field_validator("hosted_git_host")
    @classmethod
    def _strip_host(cls, value: str) -> str:
        value = value.strip().strip("/")
        if not value:
            raise ValueError("hosted_git_host must not be empty")
        return value

    @field_validator("log_level")
    @classmethod
    def _check_log_level(cls, value: str) -> str:
        level = value.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"unknown log level: {value}")
        return level
