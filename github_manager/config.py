# =============================================================================
# GitHub Manager - Settings
# =============================================================================
"""
Pydantic Settings configuration for the GitHub manager.

Loads the access token, API location and request timeout from environment
variables (or a `.env` file) with validation and type safety.
"""

import logging
from functools import lru_cache
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    GitHub manager settings loaded from environment variables.

    Attributes:
        github_token: GitHub personal access token.
        github_api_base_url: GitHub API base URL.
        github_api_version: Value of the X-GitHub-Api-Version header.
        github_request_timeout: Request timeout in seconds.
        github_user_agent: User-Agent header sent with every request.
        log_level: Logging level used by `configure_logging`.
    """

    github_token: str = Field(
        default="",
        description="GitHub personal access token",
    )
    github_api_base_url: str = Field(
        default="https://api.github.com",
        description="GitHub API base URL",
    )
    github_api_version: str = Field(
        default="2022-11-28",
        description="GitHub REST API version header",
    )
    github_request_timeout: float = Field(
        default=30.0,
        description="Request timeout in seconds",
    )
    github_user_agent: str = Field(
        default="github-manager/0.1.0",
        description="User-Agent header value",
    )
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO",
        description="Logging level",
    )

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("github_request_timeout")
    @classmethod
    def validate_timeout(cls, v: float) -> float:
        """
        Validate that the request timeout is positive.

        Args:
            v: The timeout value.

        Returns:
            The validated timeout.

        Raises:
            ValueError: If the timeout is zero or negative.
        """
        if v <= 0:
            raise ValueError("github_request_timeout must be greater than zero")
        return v

    @field_validator("github_api_base_url")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        """Remove the trailing slash so paths can be appended verbatim."""
        return v.rstrip("/")


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Returns:
        Settings instance with loaded configuration.
    """
    return Settings()


def configure_logging(level: str | None = None) -> None:
    """
    Configure root logging for scripts using the library.

    Args:
        level: Logging level name. Defaults to the configured `log_level`.
    """
    logging.basicConfig(
        level=level or get_settings().log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
