"""Application configuration."""
import os

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

SEARXNG_URL_ENV = "SEARXNG_URL"
DEFAULT_SEARXNG_URL = "http://localhost:8080"


def get_var(key: str, fallback: str) -> str:
    """Value of env var `key` if set (even to ""), else `fallback`."""
    return os.environ.get(key, fallback)


class Settings(BaseSettings):
    """App settings from env (exact name SEARXNG_URL) or a .env file."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore", case_sensitive=True)

    searxng_url: str = Field(default=DEFAULT_SEARXNG_URL, validation_alias=SEARXNG_URL_ENV)
