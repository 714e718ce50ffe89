# ABOUTME: Application configuration using Pydantic Settings for environment variables
# ABOUTME: Provides type-safe access to source endpoints, output location and logging config

from pathlib import Path
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Config(BaseSettings):
    """Application configuration with environment variable support."""

    model_config = SettingsConfigDict(
        env_prefix="DOG_BREEDS_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",  # Ignore unknown environment variables
    )

    # Knowledge sources
    wikipedia_api_url: str = Field(
        default="https://en.wikipedia.org/w/api.php", description="MediaWiki API used for the breed list and redirects"
    )
    wikidata_sparql_url: str = Field(
        default="https://query.wikidata.org/sparql", description="Wikidata SPARQL endpoint for origins and images"
    )
    breed_list_page: str = Field(default="List_of_dog_breeds", description="Wikipedia page holding the breed list")
    user_agent: str = Field(
        default="dog-breeds-updater/1.0 (https://github.com/chrisvogt/dog-breeds)",
        description="User-Agent sent to Wikimedia services",
    )
    request_timeout: float = Field(default=30.0, gt=0, description="HTTP timeout in seconds for the default client")
    redirect_batch_size: int = Field(
        default=50, ge=1, le=50, description="Titles per redirect lookup (MediaWiki allows at most 50)"
    )

    # Dataset location
    output_path: Path | None = Field(default=None, description="Dataset path (defaults to the packaged dataset)")

    # Logging Configuration
    log_mode: Literal["interactive", "production"] = Field(default="interactive", description="Logging output mode")

    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="INFO", description="Logging verbosity level"
    )

    log_file: Path | None = Field(default=None, description="Custom log file path (overrides default)")


# Global config instance - lazy loaded when first accessed
_config_instance: Config | None = None


def get_config() -> Config:
    """Get the global configuration instance.

    Creates the config on first access, subsequent calls return the same instance.

    Returns:
        Config: The application configuration instance
    """
    global _config_instance
    if _config_instance is None:
        _config_instance = Config()
    return _config_instance


def reload_config() -> Config:
    """Reload configuration from environment variables.

    Useful for testing or when environment variables change at runtime.

    Returns:
        Config: A fresh configuration instance
    """
    global _config_instance
    _config_instance = Config()
    return _config_instance
