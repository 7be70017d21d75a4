"""Configuration management using pydantic-settings."""

from functools import lru_cache

from pydantic import Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict

DRIVER_NAME = "arango-python-client"
DRIVER_VERSION = "0.1.0"


class ArangoSettings(BaseSettings):
    """Connection settings loaded from ``ARANGO_*`` environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="ARANGO_",
        case_sensitive=False,
        extra="ignore",
    )

    alias: str = Field(default="default", description="Name the connection is registered under")
    hostname: str = Field(default="localhost", description="Server hostname")
    port: int = Field(default=8529, ge=1, le=65535, description="Server port")
    is_secured: bool = Field(default=False, description="Use https instead of http")
    database_name: str | None = Field(default=None, description="Database to address, if any")
    username: str = Field(default="", description="Basic auth username")
    password: SecretStr = Field(default=SecretStr(""), description="Basic auth password")
    use_web_proxy: bool = Field(default=False, description="Honour proxy environment variables")


@lru_cache
def get_settings() -> ArangoSettings:
    """Get the settings instance."""
    return ArangoSettings()


def user_agent() -> str:
    return f"{DRIVER_NAME}/{DRIVER_VERSION}"
