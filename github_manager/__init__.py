# =============================================================================
# GitHub Manager - Package
# =============================================================================
"""
Client library for GitHub's REST API.

Provides one manager per resource area, including:
- Check runs and check suites
- Packages and package versions
- Actions artifacts
- Rate limit status
"""

from .client import (
    GitHubApiError,
    GitHubAuthenticationError,
    GitHubClient,
    GitHubForbiddenError,
    GitHubNotFoundError,
    GitHubRateLimitError,
    GitHubUnexpectedStatusError,
    GitHubValidationError,
)
from .config import Settings, configure_logging, get_settings
from .formats import ReturnFormat
from .manager import GitHubManager

__version__ = "0.1.0"

__all__ = [
    "GitHubApiError",
    "GitHubAuthenticationError",
    "GitHubClient",
    "GitHubForbiddenError",
    "GitHubManager",
    "GitHubNotFoundError",
    "GitHubRateLimitError",
    "GitHubUnexpectedStatusError",
    "GitHubValidationError",
    "ReturnFormat",
    "Settings",
    "configure_logging",
    "get_settings",
]
