# =============================================================================
# GitHub Manager - Managers Package
# =============================================================================
"""
Resource managers, one per GitHub API area.
"""

from .artifacts import GitHubArtifactsManager
from .base import BaseManager, resource_id
from .check_runs import GitHubCheckRunsManager
from .check_suites import GitHubCheckSuitesManager
from .packages import GitHubPackagesManager
from .rate_limit import GitHubRateLimitManager

__all__ = [
    "BaseManager",
    "resource_id",
    "GitHubArtifactsManager",
    "GitHubCheckRunsManager",
    "GitHubCheckSuitesManager",
    "GitHubPackagesManager",
    "GitHubRateLimitManager",
]
