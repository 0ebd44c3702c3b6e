"""
Configuration settings for the YouTube to MP3 converter.
"""

import os
from dotenv import load_dotenv
from pydantic import BaseModel, field_validator

from ytmp3.utils.error_handling import ConfigurationError


# Ensure environment variables are loaded
load_dotenv()


class ApiSettings(BaseModel):
    """Credentials for the RapidAPI conversion endpoint."""

    api_key: str
    api_host: str

    model_config = {"frozen": True}

    @field_validator("api_key", "api_host")
    def not_blank(cls, v):
        if not v or not v.strip():
            raise ValueError("must not be blank")
        return v.strip()

    @property
    def endpoint(self) -> str:
        """URL of the conversion endpoint."""
        return f"https://{self.api_host}/dl"

    @classmethod
    def from_env(cls) -> "ApiSettings":
        """
        Build settings from RAPIDAPI_KEY and RAPIDAPI_HOST.

        Raises:
            ConfigurationError: if either variable is missing or blank
        """
        api_key = os.getenv("RAPIDAPI_KEY", "")
        api_host = os.getenv("RAPIDAPI_HOST", "")

        missing = [
            name for name, value in (("RAPIDAPI_KEY", api_key), ("RAPIDAPI_HOST", api_host))
            if not value.strip()
        ]
        if missing:
            raise ConfigurationError(f"Missing configuration: {', '.join(missing)}")

        return cls(api_key=api_key, api_host=api_host)


class Config:
    """Base configuration class."""

    # Application info
    APP_NAME = "YouTube to MP3"
    APP_VERSION = "0.1.0"
    APP_TAGLINE = "Transform any YouTube video into high-quality MP3 audio"

    @classmethod
    def api_settings(cls) -> ApiSettings:
        """Get the API credentials, failing fast when they are absent."""
        return ApiSettings.from_env()


class DevelopmentConfig(Config):
    """Development configuration."""

    LOG_LEVEL = "DEBUG"


class ProductionConfig(Config):
    """Production configuration."""

    LOG_LEVEL = "INFO"


def get_config():
    """Get the appropriate configuration based on environment."""
    env = os.getenv("ENVIRONMENT", "development").lower()
    if env == "production":
        return ProductionConfig
    return DevelopmentConfig


config = get_config()
