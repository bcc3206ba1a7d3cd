# =============================================================================
# GitHub Manager - Facade
# =============================================================================
"""
Entry point grouping every resource manager behind one client.

Example:
    >>> with GitHubManager(token="ghp_xxx") as github:
    ...     run = github.check_runs.get_check_run("acme", "widgets", 42)
    ...     github.packages.delete_package("npm", "left-pad", org="acme")
"""

import logging
from typing import Any, Optional

import httpx

from .client import GitHubClient
from .config import Settings, get_settings
from .managers import (
    GitHubArtifactsManager,
    GitHubCheckRunsManager,
    GitHubCheckSuitesManager,
    GitHubPackagesManager,
    GitHubRateLimitManager,
)

logger = logging.getLogger(__name__)


class GitHubManager:
    """
    GitHub REST API facade.

    All managers share a single GitHubClient, so credentials and timeout
    are configured once and stay read-only afterwards.

    Attributes:
        client: The shared GitHubClient.
    """

    def __init__(
        self,
        token: Optional[str] = None,
        *,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        api_version: Optional[str] = None,
        transport: Optional[httpx.BaseTransport] = None,
        settings: Optional[Settings] = None,
    ) -> None:
        """
        Initialize the facade.

        Arguments left as None fall back to the loaded settings.

        Args:
            token: GitHub personal access token.
            base_url: GitHub API base URL (override for GitHub Enterprise).
            timeout: Request timeout in seconds.
            api_version: X-GitHub-Api-Version header value.
            transport: Optional httpx transport (used by tests).
            settings: Settings to read defaults from.
        """
        settings = settings or get_settings()
        self.client = GitHubClient(
            token=token if token is not None else settings.github_token,
            base_url=base_url or settings.github_api_base_url,
            timeout=timeout or settings.github_request_timeout,
            api_version=api_version or settings.github_api_version,
            user_agent=settings.github_user_agent,
            transport=transport,
        )
        if not self.client.token:
            logger.warning("No GitHub token configured, using anonymous access")

        self._check_runs = GitHubCheckRunsManager(self.client)
        self._check_suites = GitHubCheckSuitesManager(self.client)
        self._packages = GitHubPackagesManager(self.client)
        self._artifacts = GitHubArtifactsManager(self.client)
        self._rate_limit = GitHubRateLimitManager(self.client)

    def close(self) -> None:
        """Close the underlying HTTP client."""
        self.client.close()

    def __enter__(self) -> "GitHubManager":
        """Context manager entry."""
        return self

    def __exit__(self, *args: Any) -> None:
        """Context manager exit."""
        self.close()

    # -------------------------------------------------------------------------
    # Managers
    # -------------------------------------------------------------------------

    @property
    def check_runs(self) -> GitHubCheckRunsManager:
        """Check run endpoints."""
        return self._check_runs

    @property
    def check_suites(self) -> GitHubCheckSuitesManager:
        """Check suite endpoints."""
        return self._check_suites

    @property
    def packages(self) -> GitHubPackagesManager:
        """Package and package version endpoints."""
        return self._packages

    @property
    def artifacts(self) -> GitHubArtifactsManager:
        """Actions artifact endpoints."""
        return self._artifacts

    @property
    def rate_limit(self) -> GitHubRateLimitManager:
        """Rate limit endpoint."""
        return self._rate_limit
