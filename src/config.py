# ABOUTME: Runtime settings for the weather notifier panel.
# ABOUTME: Reads the single WEATHER_API_KEY credential from the environment (or a .env file).

import os

from dotenv import load_dotenv
from pydantic import BaseModel

from src.weather_service import CURRENT_URL, RELAY_URL, SEARCH_URL

API_KEY_ENV_VAR = "WEATHER_API_KEY"


class ConfigurationError(RuntimeError):
    """Raised when a required setting is missing."""


class Settings(BaseModel):
    """Panel settings. Only the API key comes from the environment."""

    api_key: str
    default_location: str = "Bellandur, Bengaluru"
    target_country: str = "India"
    refresh_interval: float = 60.0
    http_timeout: float = 10.0
    current_url: str = CURRENT_URL
    search_url: str = SEARCH_URL
    relay_url: str = RELAY_URL


def load_settings() -> Settings:
    """Build Settings from the environment, loading .env first if present."""
    load_dotenv()
    api_key = os.environ.get(API_KEY_ENV_VAR, "").strip()
    if not api_key:
        raise ConfigurationError(f"{API_KEY_ENV_VAR} is not set")
    return Settings(api_key=api_key)
