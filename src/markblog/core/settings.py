"""Application settings and configuration.

This module defines all configuration options for markblog.
Settings are loaded from environment variables with sensible defaults.
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables.

    Settings can be overridden via environment variables or .env files.
    """

    # Application metadata
    app_name: str = Field(default="markblog", alias="APP_NAME")
    app_version: str = Field(default="0.1.0", alias="APP_VERSION")
    debug: bool = Field(default=False, alias="DEBUG")

    # Database configuration
    database_url: str = Field(default="sqlite:///./blog.db", alias="DATABASE_URL")
    sql_debug: bool = Field(default=False, alias="SQL_DEBUG")
    log_row_count: bool = Field(default=True, alias="LOG_ROW_COUNT")

    # Server binding
    host: str = Field(default="127.0.0.1", alias="HOST")
    port: int = Field(default=8000, alias="PORT")
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")

    # Demo content inserted at startup (one placeholder post per user)
    seed_users: list[str] = Field(default=["Mark", "Markerpen"], alias="SEED_USERS")

    # Rendering and form handling
    html_escape: bool = Field(default=True, alias="HTML_ESCAPE")
    strict_form_content_type: bool = Field(
        default=False,
        alias="STRICT_FORM_CONTENT_TYPE",
    )

    model_config = SettingsConfigDict(
        env_file=".env",
        validate_assignment=True,
        extra="ignore",
    )

    @property
    def is_memory_database(self) -> bool:
        """Return True when the configured URL points at an in-memory SQLite database."""
        return self.database_url in {"sqlite://", "sqlite:///:memory:"}


settings = Settings()
