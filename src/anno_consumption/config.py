# ABOUTME: Application configuration using Pydantic Settings for environment variables
# ABOUTME: Provides type-safe access to wiki URLs, residence categories, file paths and logging config

from pathlib import Path
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_CATEGORIES: tuple[str, ...] = (
    "Farmer",
    "Worker",
    "Artisan",
    "Engineer",
    "Investor",
    "Scholar",
    "Jornalero",
    "Explorer",
    "Technician",
    "Shepherd",
    "Elder",
)


class Config(BaseSettings):
    """Application configuration with environment variable support."""

    model_config = SettingsConfigDict(
        env_prefix="ANNO_CONSUMPTION_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",  # Ignore unknown environment variables
    )

    # Wiki Configuration
    wiki_base_url: str = Field(default="https://anno1800.fandom.com", description="Base URL of the Anno 1800 wiki")
    residence_page_template: str = Field(
        default="/wiki/{category}_Residence", description="Path template for a residence category page"
    )
    categories: tuple[str, ...] = Field(
        default=DEFAULT_CATEGORIES, description="Residence categories, fetched and classified in this order"
    )
    user_agent: str = Field(default="anno-consumption/0.1", description="User-Agent header sent to the wiki")

    # File Configuration
    temp_dir: Path = Field(default=Path("./temp"), description="Working directory for cache and output")
    data_dir: Path = Field(default=Path("./temp/data"), description="Directory holding the page cache")
    cache_file_name: str = Field(default="data.txt", description="Delimited cache file name")
    labeled_cache_file_name: str = Field(default="data.json", description="Labeled (JSON) cache file name")
    output_file_name: str = Field(default="consumption.txt", description="Parsed row dump file name")
    cache_format: Literal["delimited", "labeled"] = Field(
        default="delimited", description="On-disk cache layout"
    )
    cache_delimiter: str = Field(default="|", description="Separator between fragments in the delimited cache")

    # Pipeline behaviour
    fail_fast: bool = Field(default=False, description="Abort the whole run on the first category fetch failure")

    # Logging Configuration
    log_mode: Literal["interactive", "production"] = Field(default="interactive", description="Logging output mode")

    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="INFO", description="Logging verbosity level"
    )

    log_file: Path | None = Field(default=None, description="Custom log file path (overrides default)")

    @property
    def cache_path(self) -> Path:
        """Path of the cache file for the configured cache format."""
        name = self.labeled_cache_file_name if self.cache_format == "labeled" else self.cache_file_name
        return self.data_dir / name

    @property
    def output_path(self) -> Path:
        return self.temp_dir / self.output_file_name

    def residence_url(self, category: str) -> str:
        """Build the wiki URL of a residence category page."""
        return self.wiki_base_url.rstrip("/") + self.residence_page_template.format(category=category)


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
