"""Centralized configuration for code-search-pro using Pydantic Settings."""

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Strictly typed configuration loaded from ``CODE_SEARCH_*`` environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="CODE_SEARCH_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        validate_default=True,
        extra="ignore",
    )

    data_path: Path = Field(default=Path("problems-data.json"), description="Problem dataset JSON file")

    # Query bounds used when the caller does not pass one
    max_results: int = Field(default=20, ge=1, description="Default maximum number of search results")
    max_suggestions: int = Field(default=8, ge=1, description="Default maximum number of autocomplete suggestions")
    autocomplete_min_chars: int = Field(
        default=2,
        ge=1,
        description="Minimum query length before the CLI asks the engine for suggestions",
    )

    # Logging
    log_level: str = Field(default="info", description="Logging level")
    log_json: bool = Field(default=False, description="Emit structured JSON log lines")

    def should_autocomplete(self, query: str) -> bool:
        """Check if a partial query is long enough to be worth suggesting for."""
        return len(query) >= self.autocomplete_min_chars
