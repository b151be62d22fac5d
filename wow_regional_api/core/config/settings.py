"""
Client Settings

Immutable configuration for the regional API client using Pydantic.
"""

import logging
from pathlib import Path
from typing import Optional, Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class ClientSettings(BaseSettings):
    """Paths, URL templates and cache constants for the client."""

    # File locations
    config_dir: Path = Field(
        default=Path("cfg"),
        description="Directory holding the credentials and region files"
    )
    api_config_file: str = Field(
        default="api.conf.json",
        description="Credentials file name inside config_dir"
    )
    region_file: str = Field(
        default="regions.json",
        description="Region data file name inside config_dir"
    )
    characters_dir: Path = Field(
        default=Path("characters"),
        description="Root directory of the character cache"
    )
    icons_dir: Path = Field(
        default=Path("icons"),
        description="Root directory of downloaded icons"
    )

    # Authentication
    auth_mode: Optional[Literal["key", "oauth"]] = Field(
        default=None,
        description="Pin the credential mode instead of detecting it"
    )

    # Remote endpoints
    key_api_url: str = Field(
        default="https://{region}.api.battle.net/wow/{endpoint}?locale={locale}&apikey={credential}",
        description="API URL template for static key mode"
    )
    oauth_api_url: str = Field(
        default="https://{region}.api.blizzard.com/wow/{endpoint}?locale={locale}&access_token={credential}",
        description="API URL template for OAuth mode"
    )
    token_url: str = Field(
        default="https://{region}.battle.net/oauth/token",
        description="OAuth token endpoint template"
    )
    icon_url: str = Field(
        default="https://render-{region}.worldofwarcraft.com/icons/{size}/{icon_id}.jpg",
        description="Icon CDN template"
    )
    locale: str = Field(
        default="en_GB",
        description="API locale"
    )

    # Caching
    cache_time: int = Field(
        default=86400,  # 24 hours
        description="Character cache freshness window in seconds"
    )
    default_icon_size: int = Field(
        default=36,
        description="Icon size used when none is given"
    )
    character_fields: str = Field(
        default="professions,reputation",
        description="Extra fields requested with character profiles"
    )

    # Transport
    timeout: float = Field(
        default=30.0,
        description="HTTP timeout in seconds"
    )

    log_level: str = Field(
        default="INFO",
        description="Log level used by setup_logging"
    )

    model_config = SettingsConfigDict(
        env_prefix="WOW_API_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        frozen=True
    )

    @field_validator("cache_time", "default_icon_size")
    @classmethod
    def validate_positive(cls, v):
        """Reject zero or negative durations and sizes."""
        if v <= 0:
            raise ValueError(f"Must be positive, got {v}")
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v):
        """Validate log level name."""
        level = v.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Invalid log level: {v}")
        return level

    @property
    def api_config_path(self) -> Path:
        """Full path of the credentials file."""
        return self.config_dir / self.api_config_file

    @property
    def region_path(self) -> Path:
        """Full path of the region data file."""
        return self.config_dir / self.region_file

    def api_url_for(self, mode: str) -> str:
        """Get the API URL template for a credential mode."""
        if mode == "oauth":
            return self.oauth_api_url
        return self.key_api_url
