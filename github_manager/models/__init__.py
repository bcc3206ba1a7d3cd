# =============================================================================
# GitHub Manager - Models Package
# =============================================================================
"""
Pydantic models for GitHub API data structures.

This package exports the typed records returned by the managers when the
`MODEL` return format is selected.
"""

from .artifacts import Artifact, ArtifactsList, ArtifactWorkflowRun
from .checks import (
    AnnotationLevel,
    AutoTriggerCheck,
    CheckConclusion,
    CheckRun,
    CheckRunAction,
    CheckRunAnnotation,
    CheckRunFilter,
    CheckRunImage,
    CheckRunOutput,
    CheckRunsList,
    CheckStatus,
    CheckSuite,
    CheckSuiteConclusion,
    CheckSuitePreferences,
    CheckSuitesList,
)
from .common import GitHubApp, PullRequestReference, Repository, User
from .packages import (
    Package,
    PackageType,
    PackageVersion,
    PackageVersionMetadata,
    PackageVersionState,
    PackageVisibility,
)
from .rate_limit import RateLimit, RateOverview

__all__ = [
    # Common
    "User",
    "Repository",
    "GitHubApp",
    "PullRequestReference",
    # Checks
    "CheckStatus",
    "CheckConclusion",
    "CheckSuiteConclusion",
    "AnnotationLevel",
    "CheckRunFilter",
    "CheckRunAnnotation",
    "CheckRunImage",
    "CheckRunAction",
    "CheckRunOutput",
    "CheckRun",
    "CheckRunsList",
    "CheckSuite",
    "CheckSuitesList",
    "AutoTriggerCheck",
    "CheckSuitePreferences",
    # Packages
    "PackageType",
    "PackageVisibility",
    "PackageVersionState",
    "Package",
    "PackageVersion",
    "PackageVersionMetadata",
    # Artifacts
    "Artifact",
    "ArtifactsList",
    "ArtifactWorkflowRun",
    # Rate limit
    "RateLimit",
    "RateOverview",
]
